from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    content_api_url: str = "http://localhost:3000/api/sanity/query"
    cache_ttl_seconds: float = 300.0
    default_category: str = "academy"
    related_articles_limit: int = 6
    coalesce_requests: bool = True

    sanity_project_id: str = "qaofdbqx"
    sanity_dataset: str = "production"
    image_cdn_url: str = "https://cdn.sanity.io/images"

    # When true, a page that failed to assemble is shown as a plain 404.
    merge_page_failures: bool = True

    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
