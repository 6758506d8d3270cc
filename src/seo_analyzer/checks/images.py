"""Check image accessibility and loading hints."""

from bs4 import BeautifulSoup, Tag

from ..models import CategoryResult, Check, Status


MAX_LISTED_SOURCES = 5


def image_source(img: Tag) -> str:
    return img.get("src") or img.get("data-src") or "unknown"


def lacks_dimensions(img: Tag) -> bool:
    """True for raster images without both width and height attributes.

    SVG and inline data: images are ignored.
    """
    src = img.get("src") or ""
    if not src or "svg" in src or src.startswith("data:"):
        return False
    return not img.get("width") or not img.get("height")


def check_images(soup: BeautifulSoup) -> CategoryResult:
    """Check alt text, explicit dimensions and lazy loading of <img> elements."""
    checks: list[Check] = []
    images = soup.find_all("img")

    if not images:
        checks.append(Check(
            name="Images Found",
            status=Status.WARNING,
            message="No images found on the page",
            recommendation="Consider adding relevant images to improve engagement",
        ))
        return CategoryResult(name="Images", icon="🖼️", checks=checks)

    checks.append(Check(
        name="Images Found",
        status=Status.PASS,
        message=f"{len(images)} image(s) found on the page",
    ))

    # A missing alt attribute is worse than alt=""
    missing_alt = [img for img in images if img.get("alt") is None]
    empty_alt = [img for img in images if img.get("alt") is not None and not img["alt"].strip()]

    if missing_alt:
        sources = [image_source(img) for img in missing_alt[:MAX_LISTED_SOURCES]]
        checks.append(Check(
            name="Missing Alt Text",
            status=Status.FAIL,
            message=f"{len(missing_alt)} image(s) have no alt attribute",
            value=", ".join(sources)[:200],
            recommendation="Add descriptive alt text to all images for accessibility and SEO",
        ))
    else:
        checks.append(Check(
            name="Alt Text",
            status=Status.PASS,
            message="All images have alt attributes",
        ))

    if empty_alt:
        checks.append(Check(
            name="Empty Alt Text",
            status=Status.WARNING,
            message=f"{len(empty_alt)} image(s) have empty alt text",
            recommendation="Add meaningful alt text unless the image is purely decorative",
        ))

    without_size = sum(1 for img in images if lacks_dimensions(img))
    if without_size:
        checks.append(Check(
            name="Image Dimensions",
            status=Status.WARNING,
            message=f"{without_size} image(s) missing explicit width/height",
            recommendation="Set width and height attributes to prevent layout shifts (CLS)",
        ))
    else:
        checks.append(Check(
            name="Image Dimensions",
            status=Status.PASS,
            message="All images have explicit dimensions",
        ))

    # Only worth flagging on pages with more than a handful of images
    lazy = len(soup.find_all("img", loading="lazy"))
    if len(images) > 3 and lazy == 0:
        checks.append(Check(
            name="Lazy Loading",
            status=Status.WARNING,
            message="No images use lazy loading",
            recommendation='Add loading="lazy" to below-the-fold images for faster page load',
        ))
    elif lazy > 0:
        checks.append(Check(
            name="Lazy Loading",
            status=Status.PASS,
            message=f"{lazy} image(s) use lazy loading",
        ))

    return CategoryResult(name="Images", icon="🖼️", checks=checks)
