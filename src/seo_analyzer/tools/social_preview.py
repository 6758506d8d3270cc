"""What a link to the page looks like when shared on social platforms."""

from dataclasses import asdict, dataclass, field

from bs4 import BeautifulSoup

from ..checks.meta import meta_content


# Tags a complete share card needs; differs from the Social category's OG set
PREVIEW_TAGS = [
    ("property", "og:title"),
    ("property", "og:description"),
    ("property", "og:image"),
    ("property", "og:url"),
    ("name", "twitter:card"),
]


@dataclass
class SocialPreview:
    url: str
    title: str
    description: str
    image: str
    site_name: str
    type: str
    og_url: str
    twitter_card: str
    twitter_title: str
    twitter_description: str
    twitter_image: str
    twitter_site: str
    favicon: str
    missing: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def social_preview(soup: BeautifulSoup, url: str) -> SocialPreview:
    """Resolve share card fields with their usual fallbacks.

    og:title falls back to <title>; twitter:* falls back to og:* and then to
    the plain title and meta description.
    """
    def og(prop: str) -> str:
        return meta_content(soup, property=prop)

    def named(name: str) -> str:
        return meta_content(soup, name=name)

    title_tag = soup.find("title")
    page_title = title_tag.get_text().strip() if title_tag else ""

    favicon = ""
    for rel in ("icon", "shortcut icon"):
        link = soup.select_one(f'link[rel="{rel}"]')
        if link and link.get("href"):
            favicon = link["href"]
            break

    return SocialPreview(
        url=url,
        title=og("og:title") or page_title,
        description=og("og:description") or named("description"),
        image=og("og:image"),
        site_name=og("og:site_name"),
        type=og("og:type"),
        og_url=og("og:url"),
        twitter_card=named("twitter:card"),
        twitter_title=named("twitter:title") or og("og:title") or page_title,
        twitter_description=named("twitter:description") or og("og:description") or named("description"),
        twitter_image=named("twitter:image") or og("og:image"),
        twitter_site=named("twitter:site"),
        favicon=favicon or "/favicon.ico",
        missing=[value for attr, value in PREVIEW_TAGS if not meta_content(soup, **{attr: value})],
    )
