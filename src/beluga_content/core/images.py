"""Build CDN URLs for CMS image fields.

Asset references look like ``image-<assetId>-<width>x<height>-<format>``;
the CDN serves the asset by id and applies transformations from the query
string.
"""

from typing import Dict, Literal, Optional
from urllib.parse import urlencode

from ..config import settings
from ..models.article import SanityImage

ImageFormat = Literal["webp", "jpg", "png", "avif"]
ImageFit = Literal["clip", "crop", "fill", "fillmax", "max", "scale", "min"]


def _asset_id(ref: str) -> str:
    return ref.replace("image-", "", 1).split("-")[0]


def _fmt_number(value: float) -> str:
    # Integral floats render without a trailing ".0", the way the CDN expects.
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_image_url(
    image: Optional[SanityImage],
    width: Optional[int] = 800,
    height: Optional[int] = None,
    fmt: Optional[ImageFormat] = "webp",
    quality: Optional[int] = 80,
    fit: Optional[ImageFit] = "crop",
) -> Optional[str]:
    """Return a transformed CDN URL for ``image``, or None if it has no asset."""

    if image is None or image.asset is None or not image.asset.ref:
        return None

    url = (
        f"{settings.image_cdn_url.rstrip('/')}/{settings.sanity_project_id}/"
        f"{settings.sanity_dataset}/{_asset_id(image.asset.ref)}"
    )

    params: list[tuple[str, str]] = []
    if width:
        params.append(("w", str(width)))
    if height:
        params.append(("h", str(height)))
    if fmt:
        params.append(("fm", fmt))
    if quality:
        params.append(("q", str(quality)))
    if fit:
        params.append(("fit", fit))

    if image.hotspot is not None:
        params.append(("fp-x", _fmt_number(image.hotspot.x)))
        params.append(("fp-y", _fmt_number(image.hotspot.y)))
        params.append(("fp-z", "1"))

    if image.crop is not None:
        crop = image.crop
        rect = ",".join(
            _fmt_number(v)
            for v in (crop.left, crop.top, crop.right - crop.left, crop.bottom - crop.top)
        )
        params.append(("rect", rect))

    if params:
        url = f"{url}?{urlencode(params)}"
    return url


def generate_responsive_image_urls(image: Optional[SanityImage]) -> Optional[Dict[str, Optional[str]]]:
    if image is None:
        return None
    return {
        "thumbnail": generate_image_url(image, width=300, height=200, fit="crop"),
        "small": generate_image_url(image, width=600, height=400, fit="crop"),
        "medium": generate_image_url(image, width=800, height=600, fit="crop"),
        "large": generate_image_url(image, width=1200, height=800, fit="crop"),
        "original": generate_image_url(image, fit="max"),
    }


def generate_article_thumbnail_url(image: Optional[SanityImage]) -> Optional[str]:
    """16:9 thumbnail used on article cards."""
    return generate_image_url(image, width=800, height=450, fmt="webp", quality=85, fit="crop")


def generate_hero_image_url(image: Optional[SanityImage]) -> Optional[str]:
    return generate_image_url(image, width=1200, height=600, fmt="webp", quality=90, fit="crop")
