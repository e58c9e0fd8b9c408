from src.beluga_content.core.images import (
    generate_article_thumbnail_url,
    generate_hero_image_url,
    generate_image_url,
    generate_responsive_image_urls,
)
from src.beluga_content.models.article import SanityImage


CDN_PREFIX = "https://cdn.sanity.io/images/qaofdbqx/production"


def _image(**extra) -> SanityImage:
    return SanityImage.model_validate(
        {"asset": {"_ref": "image-abc123def-1200x675-jpg", "_type": "reference"}, **extra}
    )


def test_generate_image_url_uses_asset_id_and_defaults() -> None:
    url = generate_image_url(_image())
    assert url == f"{CDN_PREFIX}/abc123def?w=800&fm=webp&q=80&fit=crop"


def test_generate_image_url_returns_none_without_asset() -> None:
    assert generate_image_url(None) is None
    assert generate_image_url(SanityImage()) is None
    assert generate_image_url(SanityImage.model_validate({"asset": {"_ref": ""}})) is None


def test_generate_image_url_includes_hotspot_and_crop() -> None:
    image = _image(
        hotspot={"x": 0.5, "y": 0.25, "height": 1, "width": 1},
        crop={"top": 0, "bottom": 0.25, "left": 0, "right": 0.5},
    )

    url = generate_image_url(image, width=600, height=400)

    assert url == (
        f"{CDN_PREFIX}/abc123def?w=600&h=400&fm=webp&q=80&fit=crop"
        "&fp-x=0.5&fp-y=0.25&fp-z=1&rect=0%2C0%2C0.5%2C0.25"
    )


def test_responsive_urls_cover_every_size() -> None:
    urls = generate_responsive_image_urls(_image())

    assert set(urls) == {"thumbnail", "small", "medium", "large", "original"}
    assert "w=300&h=200" in urls["thumbnail"]
    assert "w=1200&h=800" in urls["large"]
    assert urls["original"].endswith("fit=max")
    assert generate_responsive_image_urls(None) is None


def test_thumbnail_and_hero_presets() -> None:
    assert generate_article_thumbnail_url(_image()).endswith("?w=800&h=450&fm=webp&q=85&fit=crop")
    assert generate_hero_image_url(_image()).endswith("?w=1200&h=600&fm=webp&q=90&fit=crop")
