from .article import Article, CoinTag, SanityImage  # noqa: F401
from .outcome import (  # noqa: F401
    ArticlePage,
    FallbackResult,
    FetchOutcome,
    LiveResult,
    PageFailed,
    PageNotFound,
    PageOutcome,
)
