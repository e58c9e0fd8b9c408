from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel

from ..config import settings
from ..core.articles import (
    add_image_urls,
    get_all_articles,
    get_articles_by_category,
    list_article_slugs,
)
from ..core.page_assembly import assemble_article_page
from ..logging_config import get_logger
from ..models.article import Article
from ..models.outcome import ArticlePage, PageFailed, PageOutcome
from ..tools.content_client import ContentClient


logger = get_logger("api.server")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    client = ContentClient()
    app.state.content_client = client
    logger.info(
        "content_client_started",
        base_url=client.base_url,
        ttl_seconds=client.ttl.total_seconds(),
        coalesce=client.coalesce,
    )
    try:
        yield
    finally:
        await client.aclose()
        logger.info("content_client_closed")


app = FastAPI(
    title="Beluga Content API",
    description="Cached article content with fallback data for the Beluga crypto academy",
    version="1.0.0",
    lifespan=lifespan,
)


def get_content_client(request: Request) -> ContentClient:
    return request.app.state.content_client


# ============================================================================
# Response Models
# ============================================================================


class ArticleListResponse(BaseModel):
    articles: List[Article]
    count: int
    category: Optional[str] = None


class ArticlePageResponse(BaseModel):
    """Article detail view: the article plus related reading."""

    article: Article
    related: List[Article]


class SlugListResponse(BaseModel):
    slugs: List[str]
    count: int


# ============================================================================
# Health and Status Endpoints
# ============================================================================


@app.get("/health")
def health(client: ContentClient = Depends(get_content_client)) -> dict:
    return {"status": "ok", "cache_entries": len(client.cache)}


# ============================================================================
# Article Endpoints
# ============================================================================


@app.get("/articles", response_model=ArticleListResponse, response_model_by_alias=False)
async def list_articles(
    category: Optional[str] = None,
    client: ContentClient = Depends(get_content_client),
) -> ArticleListResponse:
    logger.info("list_articles_request", category=category)
    if category:
        articles = await get_articles_by_category(client, category)
    else:
        articles = await get_all_articles(client)

    articles = add_image_urls(articles)
    logger.info("list_articles_response", category=category, count=len(articles))
    return ArticleListResponse(articles=articles, count=len(articles), category=category)


@app.get("/articles/slugs", response_model=SlugListResponse)
async def article_slugs(client: ContentClient = Depends(get_content_client)) -> SlugListResponse:
    slugs = await list_article_slugs(client)
    return SlugListResponse(slugs=slugs, count=len(slugs))


def _page_response(outcome: PageOutcome) -> ArticlePageResponse:
    if isinstance(outcome, ArticlePage):
        return ArticlePageResponse(article=outcome.article, related=outcome.related)

    if isinstance(outcome, PageFailed):
        logger.warning("article_page_unavailable", slug=outcome.slug, reason=outcome.reason)
        if not settings.merge_page_failures:
            raise HTTPException(status_code=503, detail="Article is temporarily unavailable")

    raise HTTPException(status_code=404, detail="Article not found")


@app.get(
    "/academy/{slug}",
    response_model=ArticlePageResponse,
    response_model_by_alias=False,
)
async def academy_article(
    slug: str,
    client: ContentClient = Depends(get_content_client),
) -> ArticlePageResponse:
    logger.info("article_page_request", section="academy", slug=slug)
    outcome = await assemble_article_page(client, slug)
    return _page_response(outcome)


@app.get(
    "/crypto/{slug}",
    response_model=ArticlePageResponse,
    response_model_by_alias=False,
)
async def crypto_article(
    slug: str,
    client: ContentClient = Depends(get_content_client),
) -> ArticlePageResponse:
    logger.info("article_page_request", section="crypto", slug=slug)
    outcome = await assemble_article_page(client, slug)
    return _page_response(outcome)
