from typing import List, Optional

from ..config import settings
from ..logging_config import get_logger
from ..models.article import Article
from ..models.outcome import ArticlePage, PageFailed, PageNotFound, PageOutcome
from ..tools.content_client import ContentClient
from .articles import add_image_urls, get_all_articles, get_article_by_slug


logger = get_logger("core.page_assembly")


def select_related(article: Article, candidates: List[Article], limit: int) -> List[Article]:
    """Other articles from the same category, in payload order."""
    if article.category is None:
        return []
    return [
        candidate
        for candidate in candidates
        if candidate.id != article.id and candidate.category == article.category
    ][:limit]


async def assemble_article_page(
    client: ContentClient,
    slug: str,
    related_limit: Optional[int] = None,
) -> PageOutcome:
    """Build the article detail view for ``slug``.

    Returns ``PageNotFound`` when no article has this slug and
    ``PageFailed`` when anything goes wrong while building the page; the
    two are kept apart so callers can decide how to present them.
    """

    slug = (slug or "").strip()
    if not slug:
        return PageNotFound(slug=slug)

    limit = settings.related_articles_limit if related_limit is None else related_limit

    try:
        article = await get_article_by_slug(client, slug)
        if article is None:
            logger.info("article_not_found", slug=slug)
            return PageNotFound(slug=slug)

        [article_with_image] = add_image_urls([article])

        all_articles = await get_all_articles(client)
        related = add_image_urls(select_related(article, all_articles, limit))
    except Exception as exc:
        logger.error("article_page_failed", slug=slug, error=str(exc), exc_info=True)
        return PageFailed(slug=slug, reason=f"{type(exc).__name__}: {exc}")

    logger.info(
        "article_page_assembled",
        slug=slug,
        article_id=article.id,
        related_count=len(related),
    )
    return ArticlePage(article=article_with_image, related=related)
