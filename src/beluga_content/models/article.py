from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImageAssetRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str = Field(default="", alias="_ref")
    type: str = Field(default="reference", alias="_type")


class ImageHotspot(BaseModel):
    x: float
    y: float
    height: float = 1.0
    width: float = 1.0


class ImageCrop(BaseModel):
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0


class SanityImage(BaseModel):
    """Image field as stored by the CMS: an asset reference plus optional framing."""

    asset: Optional[ImageAssetRef] = None
    hotspot: Optional[ImageHotspot] = None
    crop: Optional[ImageCrop] = None


class CoinTag(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default="", alias="_id")
    name: str = ""
    symbol: str = ""
    logo: Optional[Any] = None
    category: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")
    link: Optional[str] = None


class Article(BaseModel):
    """An article document as returned by the content API.

    Only ``_id`` is required; everything else is optional because fallback
    payloads and partial projections carry fewer fields than full documents.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    title: str = ""
    slug: str = ""
    excerpt: Optional[str] = None
    content: Optional[Any] = None
    image: Optional[SanityImage] = None
    category: Optional[str] = None
    source: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    featured: bool = False
    level: List[str] = []
    topics: List[str] = []
    networks: List[str] = []
    coin_tags: List[CoinTag] = Field(default_factory=list, alias="coinTags")
    meta_title: Optional[str] = Field(default=None, alias="metaTitle")
    meta_description: Optional[str] = Field(default=None, alias="metaDescription")

    # Filled in by image resolution, never present on the wire.
    image_url: Optional[str] = None

    @field_validator("slug", mode="before")
    @classmethod
    def _flatten_slug(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, dict):
            return value.get("current") or ""
        return value

    @field_validator("level", "topics", "networks", mode="before")
    @classmethod
    def _as_list(cls, value: Any) -> List[str]:
        # The CMS stores these either as a single string or as an array.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"expected a string or a list, got {type(value).__name__}")
        return [item for item in value if item]

    @field_validator("coin_tags", mode="before")
    @classmethod
    def _drop_null_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"expected a list of coin tags, got {type(value).__name__}")
        return [tag for tag in value if tag]
