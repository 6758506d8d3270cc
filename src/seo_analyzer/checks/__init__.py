"""Category checks for on-page SEO."""

from .meta import check_meta
from .headings import check_headings
from .images import check_images
from .links import check_links
from .content import check_content
from .technical import check_technical
from .social import check_social
from .security import check_security

__all__ = [
    "check_meta",
    "check_headings",
    "check_images",
    "check_links",
    "check_content",
    "check_technical",
    "check_social",
    "check_security",
]
