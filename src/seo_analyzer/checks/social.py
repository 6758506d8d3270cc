"""Check Open Graph and Twitter Card tags."""

from bs4 import BeautifulSoup

from ..models import CategoryResult, Check, Status
from .meta import meta_content


OG_PROPERTIES = ["og:title", "og:description", "og:image", "og:url", "og:type"]
TWITTER_NAMES = ["twitter:card", "twitter:title", "twitter:description"]


def check_social(soup: BeautifulSoup) -> CategoryResult:
    """Check social sharing metadata."""
    checks: list[Check] = []

    og_tags = {prop: meta_content(soup, property=prop) for prop in OG_PROPERTIES}
    present_og = [k for k, v in og_tags.items() if v]

    if not present_og:
        checks.append(Check(
            name="Open Graph Tags",
            status=Status.FAIL,
            message="No Open Graph tags found, links shared on social media will look plain",
            recommendation="Add og:title, og:description, og:image, og:url, og:type meta tags",
        ))
    elif len(present_og) < 4:
        checks.append(Check(
            name="Open Graph Tags",
            status=Status.WARNING,
            message=f"Only {len(present_og)}/{len(OG_PROPERTIES)} Open Graph tags found",
            value=", ".join(present_og),
            recommendation="Add all recommended OG tags for best social sharing",
        ))
    else:
        checks.append(Check(
            name="Open Graph Tags",
            status=Status.PASS,
            message=f"{len(present_og)}/{len(OG_PROPERTIES)} Open Graph tags found, great for social sharing",
        ))

    # A share without an image is flagged even when the other tags are fine
    og_image = og_tags["og:image"]
    if og_image:
        checks.append(Check(
            name="OG Image",
            status=Status.PASS,
            message="Social sharing image is set",
            value=og_image[:100],
        ))
    else:
        checks.append(Check(
            name="OG Image",
            status=Status.FAIL,
            message="No social sharing image, links will show without preview image",
            recommendation="Add an og:image (recommended size: 1200x630 pixels)",
        ))

    twitter_present = sum(1 for name in TWITTER_NAMES if meta_content(soup, name=name))
    if twitter_present == 0:
        checks.append(Check(
            name="Twitter Card Tags",
            status=Status.WARNING,
            message="No Twitter Card tags found",
            recommendation="Add twitter:card, twitter:title, twitter:description",
        ))
    elif twitter_present >= 2:
        checks.append(Check(
            name="Twitter Card Tags",
            status=Status.PASS,
            message=f"{twitter_present}/{len(TWITTER_NAMES)} Twitter Card tags found",
        ))
    else:
        checks.append(Check(
            name="Twitter Card Tags",
            status=Status.WARNING,
            message=f"{twitter_present}/{len(TWITTER_NAMES)} Twitter Card tags found",
            recommendation="Add the missing twitter:card, twitter:title or twitter:description tags",
        ))

    return CategoryResult(name="Social Media", icon="📱", checks=checks)
