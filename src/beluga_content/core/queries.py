"""GROQ queries sent through the content client."""

ARTICLE_PROJECTION = """{
  _id, title, slug, excerpt, content, image, category, source, publishedAt,
  featured, level, topics, networks, metaTitle, metaDescription,
  coinTags[]->{ _id, name, symbol, logo, category, isActive, link }
}"""

ALL_ARTICLES = f"""*[_type == "article"] | order(publishedAt desc) {ARTICLE_PROJECTION}"""

ARTICLES_BY_CATEGORY = (
    f"""*[_type == "article" && category == $category] | order(publishedAt desc) {ARTICLE_PROJECTION}"""
)

ARTICLE_BY_SLUG = f"""*[_type == "article" && slug.current == $slug][0] {ARTICLE_PROJECTION}"""

ARTICLE_SLUGS = """*[_type == "article" && defined(slug.current)] { "slug": slug.current }"""
