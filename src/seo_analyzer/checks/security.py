"""Check transport security and security response headers."""

from ..models import CategoryResult, Check, Status


# (display name, what it protects against)
SECURITY_HEADERS = [
    ("X-Content-Type-Options", "Prevents MIME-type sniffing"),
    ("X-Frame-Options", "Prevents clickjacking attacks"),
    ("Strict-Transport-Security", "Forces HTTPS connections"),
    ("Content-Security-Policy", "Prevents XSS attacks"),
    ("X-XSS-Protection", "Legacy XSS filter"),
]


def check_security(url: str, headers: dict[str, str]) -> CategoryResult:
    """Check HTTPS and the presence of each security header.

    Always yields six checks: HTTPS plus one per header.
    """
    checks: list[Check] = []

    if url.startswith("https://"):
        checks.append(Check(
            name="HTTPS",
            status=Status.PASS,
            message="Site uses HTTPS, connection is secure",
        ))
    else:
        checks.append(Check(
            name="HTTPS",
            status=Status.FAIL,
            message="Site does NOT use HTTPS, Google penalizes insecure sites",
            recommendation="Switch to HTTPS immediately for security and SEO benefits",
        ))

    for name, importance in SECURITY_HEADERS:
        value = headers.get(name.lower(), "")
        if value:
            checks.append(Check(
                name=name,
                status=Status.PASS,
                message=f"{name} header is set",
                value=value,
            ))
        else:
            checks.append(Check(
                name=name,
                status=Status.WARNING,
                message=f"{name} header is missing ({importance})",
                recommendation=f"Send the {name} response header",
            ))

    return CategoryResult(name="Security", icon="🔒", checks=checks)
