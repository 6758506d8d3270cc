"""Data models for SEO analysis results."""

import math
from decimal import ROUND_HALF_UP, Decimal
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


CATEGORY_KEYS = (
    "meta",
    "headings",
    "images",
    "links",
    "content",
    "technical",
    "social",
    "security",
)


class Status(Enum):
    """Verdict of a single check."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


STATUS_WEIGHTS = {
    Status.PASS: 1.0,
    Status.WARNING: 0.5,
    Status.FAIL: 0.0,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)


def round_decimal(value: float, places: int) -> float:
    """Round to a number of decimal places, halves upward."""
    # Decimal(value) is the exact binary value, so only true ties round up
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def calculate_score(checks: list["Check"]) -> int:
    """Score a list of checks on a 0-100 scale.

    A pass is worth a full point, a warning half a point and a fail nothing.
    An empty list scores 100.
    """
    if not checks:
        return 100
    points = sum(STATUS_WEIGHTS[c.status] for c in checks)
    return round_half_up(points / len(checks) * 100)


@dataclass
class Check:
    """A single audit finding."""
    name: str
    status: Status
    message: str
    value: Optional[str] = None
    recommendation: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
        }
        if self.value is not None:
            data["value"] = self.value
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation
        return data


@dataclass
class CategoryResult:
    """Result of one audit category."""
    name: str
    icon: str
    checks: list[Check] = field(default_factory=list)

    @property
    def score(self) -> int:
        return calculate_score(self.checks)

    def count(self, status: Status) -> int:
        return sum(1 for c in self.checks if c.status == status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "score": self.score,
            "checks": [c.to_dict() for c in self.checks],
        }


@dataclass
class Summary:
    """Check counts across every category."""
    total_checks: int
    passed: int
    warnings: int
    failed: int
    critical_issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_checks": self.total_checks,
            "passed": self.passed,
            "warnings": self.warnings,
            "failed": self.failed,
            "critical_issues": list(self.critical_issues),
        }


@dataclass
class AnalysisResult:
    """Complete analysis result for a URL."""
    url: str
    final_url: str  # After redirects
    page_title: str
    categories: dict[str, CategoryResult]
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def checks(self) -> list[Check]:
        """Every check, in category order then in-category order."""
        return [check for category in self.categories.values() for check in category.checks]

    @property
    def score(self) -> int:
        if not self.categories:
            return 0
        total = sum(c.score for c in self.categories.values())
        return round_half_up(total / len(self.categories))

    @property
    def summary(self) -> Summary:
        checks = self.checks
        return Summary(
            total_checks=len(checks),
            passed=sum(1 for c in checks if c.status == Status.PASS),
            warnings=sum(1 for c in checks if c.status == Status.WARNING),
            failed=sum(1 for c in checks if c.status == Status.FAIL),
            critical_issues=[c.message for c in checks if c.status == Status.FAIL],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "final_url": self.final_url,
            "score": self.score,
            "page_title": self.page_title,
            "analyzed_at": self.analyzed_at.isoformat(),
            "categories": {key: category.to_dict() for key, category in self.categories.items()},
            "summary": self.summary.to_dict(),
        }
