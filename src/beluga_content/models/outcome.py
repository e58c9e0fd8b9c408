"""Tagged results for content fetches and article page assembly.

The content client always hands its callers a payload, but internally it
keeps track of whether that payload came from the live API or from the
canned fallback table. Page assembly likewise distinguishes a missing
article from a page that could not be built at all, and leaves it to the
HTTP layer to decide whether both look the same to a reader.
"""

from typing import Any, List, Literal, Union

from pydantic import BaseModel

from .article import Article


class LiveResult(BaseModel):
    kind: Literal["live"] = "live"
    payload: Any = None

    @property
    def is_fallback(self) -> bool:
        return False


class FallbackResult(BaseModel):
    kind: Literal["fallback"] = "fallback"
    payload: Any = None
    category: str
    reason: str

    @property
    def is_fallback(self) -> bool:
        return True


FetchOutcome = Union[LiveResult, FallbackResult]


class ArticlePage(BaseModel):
    kind: Literal["found"] = "found"
    article: Article
    related: List[Article] = []


class PageNotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"
    slug: str


class PageFailed(BaseModel):
    kind: Literal["failed"] = "failed"
    slug: str
    reason: str


PageOutcome = Union[ArticlePage, PageNotFound, PageFailed]
