"""Article lookups on top of the content client.

Payloads are whatever the client returns, live or fallback, so the
helpers here accept a list, a single document or nothing at all and turn
them into ``Article`` models.
"""

from typing import Any, List, Optional

from pydantic import ValidationError

from ..logging_config import get_logger
from ..models.article import Article
from ..tools.content_client import ContentClient
from .images import generate_article_thumbnail_url
from .queries import ALL_ARTICLES, ARTICLE_BY_SLUG, ARTICLE_SLUGS, ARTICLES_BY_CATEGORY


logger = get_logger("core.articles")


def parse_articles(payload: Any) -> List[Article]:
    """Validate a list payload, skipping items that are not articles."""

    if payload is None:
        return []
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        logger.warning("unexpected_articles_payload", payload_type=type(payload).__name__)
        return []

    articles: List[Article] = []
    for item in payload:
        try:
            articles.append(Article.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "article_skipped_invalid",
                article_id=item.get("_id") if isinstance(item, dict) else None,
                error=str(exc),
            )
    return articles


def _slug_of(item: Any) -> Optional[str]:
    if not isinstance(item, dict):
        return None
    slug = item.get("slug")
    if isinstance(slug, dict):
        slug = slug.get("current")
    return slug or None


async def get_all_articles(client: ContentClient) -> List[Article]:
    payload = await client.fetch(ALL_ARTICLES)
    return parse_articles(payload)


async def get_articles_by_category(client: ContentClient, category: str) -> List[Article]:
    payload = await client.fetch(ARTICLES_BY_CATEGORY, {"category": category})
    return parse_articles(payload)


async def get_article_by_slug(client: ContentClient, slug: str) -> Optional[Article]:
    """Return the article for ``slug`` or None when there is none.

    The live API answers a by-slug query with one document (or null); the
    fallback table answers with a whole list, in which case the matching
    entry is picked out.
    """

    payload = await client.fetch(ARTICLE_BY_SLUG, {"slug": slug})
    if payload is None:
        return None
    if isinstance(payload, list):
        for item in payload:
            if _slug_of(item) == slug:
                return Article.model_validate(item)
        return None
    return Article.model_validate(payload)


async def list_article_slugs(client: ContentClient) -> List[str]:
    """Slugs of every article, used to pre-build article pages.

    Never raises: a failure here should only mean fewer prebuilt pages.
    """

    try:
        payload = await client.fetch(ARTICLE_SLUGS)
        if not isinstance(payload, list):
            return []
        return [slug for slug in (_slug_of(item) for item in payload) if slug]
    except Exception as exc:
        logger.error("list_article_slugs_error", error=str(exc))
        return []


def add_image_urls(articles: List[Article]) -> List[Article]:
    return [
        article.model_copy(update={"image_url": generate_article_thumbnail_url(article.image)})
        for article in articles
    ]
