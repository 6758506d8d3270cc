"""seo-analyzer - On-page SEO audit with scored categories and actionable findings."""

__version__ = "1.0.0"

from .analyzer import analyze_site, build_report
from .fetch import normalize_url
from .models import AnalysisResult, CategoryResult, Check, Status

__all__ = [
    "__version__",
    "analyze_site",
    "build_report",
    "normalize_url",
    "AnalysisResult",
    "CategoryResult",
    "Check",
    "Status",
]
