"""Cache-aside client for the content query API.

Every query is keyed by its text plus its serialized parameters. A fresh
cache entry short-circuits the network entirely; otherwise the remote
endpoint is asked once and whatever comes back, live data or the canned
fallback for the query's category, is cached for the TTL window. Upstream
failures therefore cost at most one request per key per window.
"""

import asyncio
import json
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..logging_config import get_logger
from ..models.outcome import FallbackResult, FetchOutcome, LiveResult
from .cache import CacheStore
from .fallback_data import fallback_for


logger = get_logger("tools.content_client")

_REQUEST_HEADERS = {"Cache-Control": "public, max-age=300"}


def _with_string_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _with_string_keys(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_with_string_keys(item) for item in value]
    return value


def serialize_params(params: Optional[Mapping[str, Any]]) -> str:
    return json.dumps(
        _with_string_keys(dict(params or {})),
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def cache_key(query: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Derive the cache key for a query.

    Parameter sets that serialize identically share a key.
    """
    return f"{query}-{serialize_params(params)}"


class ContentClient:
    """Fetch content through an owned cache, degrading to fallback data.

    ``fetch`` never raises for transport problems: network errors, non-2xx
    statuses and unparseable bodies all resolve to the fallback payload.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        ttl: Optional[timedelta] = None,
        cache: Optional[CacheStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        default_category: Optional[str] = None,
        coalesce: Optional[bool] = None,
    ) -> None:
        self.base_url = base_url or settings.content_api_url
        self.ttl = ttl if ttl is not None else timedelta(seconds=settings.cache_ttl_seconds)
        self.cache = cache if cache is not None else CacheStore()
        self.default_category = default_category or settings.default_category
        self.coalesce = settings.coalesce_requests if coalesce is None else coalesce

        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient()
        self._inflight: Dict[str, "asyncio.Task[FetchOutcome]"] = {}

    async def __aenter__(self) -> "ContentClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def fetch(self, query: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        outcome = await self.fetch_outcome(query, params)
        return outcome.payload

    async def fetch_outcome(
        self, query: str, params: Optional[Mapping[str, Any]] = None
    ) -> FetchOutcome:
        try:
            key = cache_key(query, params)
        except (TypeError, ValueError, RecursionError) as exc:
            # Without a key there is nothing to cache; answer from the fallback table.
            return self._fallback(query, params, exc)

        entry = self.cache.get_fresh(key, self.ttl)
        if entry is not None:
            logger.debug(
                "content_fetch_cache_hit",
                query=_preview(query),
                fallback=entry.data.is_fallback,
            )
            return entry.data

        if not self.coalesce:
            return await self._load(key, query, params)

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._load(key, query, params))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug("content_fetch_coalesced", query=_preview(query))
        # A cancelled caller must not cancel the load other callers wait on.
        return await asyncio.shield(task)

    def _forget(self, key: str, task: "asyncio.Task[FetchOutcome]") -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    async def _load(
        self, key: str, query: str, params: Optional[Mapping[str, Any]]
    ) -> FetchOutcome:
        outcome: FetchOutcome
        try:
            payload = await self._request(query, params)
        except Exception as exc:
            outcome = self._fallback(query, params, exc)
        else:
            logger.info("content_fetch_live", query=_preview(query))
            outcome = LiveResult(payload=payload)

        self.cache.put(key, outcome)
        return outcome

    def _fallback(
        self, query: str, params: Optional[Mapping[str, Any]], exc: Exception
    ) -> FallbackResult:
        category = self._category_from(params)
        logger.warning(
            "content_fetch_fallback",
            query=_preview(query),
            category=category,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return FallbackResult(
            payload=fallback_for(category),
            category=category,
            reason=f"{type(exc).__name__}: {exc}",
        )

    async def _request(self, query: str, params: Optional[Mapping[str, Any]]) -> Any:
        request_params = {"query": query}
        if params is not None:
            request_params["params"] = serialize_params(params)

        response = await self._http.get(
            self.base_url,
            params=request_params,
            headers=_REQUEST_HEADERS,
        )
        response.raise_for_status()
        return response.json()

    def _category_from(self, params: Optional[Mapping[str, Any]]) -> str:
        if isinstance(params, Mapping) and "category" in params:
            category = params["category"]
            if isinstance(category, str) and category:
                return category
        return self.default_category


def _preview(query: str) -> str:
    return " ".join(query.split())[:80]
