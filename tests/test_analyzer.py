"""Tests for fetching, URL normalization and the full analysis."""

import socket

import httpx
import pytest

from seo_analyzer import analyzer
from seo_analyzer.analyzer import analyze_site, build_report
from seo_analyzer.config import Settings
from seo_analyzer.errors import FetchError, SiteNotFoundError, SiteTimeoutError
from seo_analyzer.fetch import (
    FetchedPage,
    ensure_scheme,
    fetch_page,
    is_dns_failure,
    normalize_url,
    resource_exists,
)
from seo_analyzer.models import CATEGORY_KEYS, Status

from .conftest import BASE_URL, good_page_html


SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=63072000",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


def site_handler(html: str, headers=None, sitemap: int = 200, robots: int = 200):
    """Answer the page, /sitemap.xml and /robots.txt."""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/sitemap.xml":
            return httpx.Response(sitemap, text="<urlset/>")
        if request.url.path == "/robots.txt":
            return httpx.Response(robots, text="User-agent: *")
        return httpx.Response(200, html=html, headers=headers or {})
    return handler


class TestNormalizeUrl:
    @pytest.mark.parametrize("raw, expected", [
        ("example.com", "https://example.com"),
        ("  example.com/  ", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("https://example.com/blog/", "https://example.com/blog"),
        ("https://example.com//", "https://example.com/"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_ensure_scheme_keeps_trailing_slash(self):
        assert ensure_scheme(" example.com/ ") == "https://example.com/"


class TestFetch:
    def test_fetch_page(self, mock_client, settings):
        client = mock_client(lambda r: httpx.Response(404, html="<p>gone</p>", headers={"X-Frame-Options": "DENY"}))
        page = fetch_page(BASE_URL, client, settings)
        assert page.status == 404
        assert page.html == "<p>gone</p>"
        assert page.headers["x-frame-options"] == "DENY"
        assert page.final_url.startswith(BASE_URL)
        assert page.elapsed_ms >= 0

    def test_timeout(self, mock_client, settings):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(SiteTimeoutError) as exc_info:
            fetch_page(BASE_URL, mock_client(handler), settings)
        assert exc_info.value.timeout == settings.timeout

    def test_dns_failure(self, mock_client, settings):
        def handler(request):
            raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

        with pytest.raises(SiteNotFoundError):
            fetch_page(BASE_URL, mock_client(handler), settings)

    def test_other_connect_error(self, mock_client, settings):
        def handler(request):
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            fetch_page(BASE_URL, mock_client(handler), settings)
        assert "Connection refused" in str(exc_info.value)

    def test_is_dns_failure_follows_cause(self):
        try:
            try:
                raise socket.gaierror(-2, "lookup failed")
            except socket.gaierror as e:
                raise httpx.ConnectError("connect failed") from e
        except httpx.ConnectError as e:
            assert is_dns_failure(e)

        assert not is_dns_failure(httpx.ConnectError("Connection refused"))

    @pytest.mark.parametrize("status, exists", [(200, True), (204, True), (301, False), (404, False), (500, False)])
    def test_resource_exists_statuses(self, mock_client, settings, status, exists):
        client = mock_client(lambda r: httpx.Response(status))
        assert resource_exists(f"{BASE_URL}/robots.txt", client, settings) is exists

    def test_resource_exists_swallows_errors(self, mock_client, settings):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        assert resource_exists(f"{BASE_URL}/sitemap.xml", mock_client(handler), settings) is False


class TestBuildReport:
    def test_all_categories_in_fixed_order(self):
        page = FetchedPage(html=good_page_html(), elapsed_ms=120, final_url=BASE_URL + "/")
        result = build_report(BASE_URL, page, True, True)
        assert list(result.categories) == list(CATEGORY_KEYS)

    def test_summary_invariants(self):
        page = FetchedPage(html="<html><body><h2>x</h2><img src='a.png'></body></html>", elapsed_ms=6000)
        result = build_report("http://example.com", page, False, False)
        summary = result.summary

        all_checks = [c for cat in result.categories.values() for c in cat.checks]
        assert summary.total_checks == len(all_checks)
        assert summary.passed + summary.warnings + summary.failed == summary.total_checks
        assert summary.critical_issues == [c.message for c in all_checks if c.status == Status.FAIL]
        assert len(summary.critical_issues) == summary.failed

    def test_overall_score_is_mean(self):
        page = FetchedPage(html=good_page_html(), elapsed_ms=120)
        result = build_report(BASE_URL, page, True, False)
        scores = [c.score for c in result.categories.values()]
        assert result.score == int(sum(scores) / 8 + 0.5)

    def test_empty_document_never_raises(self):
        result = build_report(BASE_URL, FetchedPage(html=""), False, False)
        assert len(result.categories) == 8
        assert result.page_title == BASE_URL
        assert result.final_url == BASE_URL

    def test_good_page_scores_high(self):
        page = FetchedPage(
            html=good_page_html(),
            headers={k.lower(): v for k, v in SECURE_HEADERS.items()},
            elapsed_ms=150,
        )
        result = build_report(BASE_URL, page, True, True)
        assert result.score == 100
        assert result.summary.failed == 0
        assert result.page_title == "Example Widgets - Handmade Widgets for Every Home"


class TestAnalyzeSite:
    def test_full_analysis(self, mock_client):
        client = mock_client(site_handler(good_page_html(), SECURE_HEADERS))
        result = analyze_site("example.com/", settings=Settings(), client=client)

        assert result.url == BASE_URL
        assert list(result.categories) == list(CATEGORY_KEYS)
        assert result.categories["security"].score == 100
        technical = result.categories["technical"]
        assert all(c.status == Status.PASS for c in technical.checks)

    def test_missing_crawl_files_warn(self, mock_client):
        client = mock_client(site_handler(good_page_html(), sitemap=404, robots=500))
        result = analyze_site(BASE_URL, settings=Settings(), client=client)

        checks = {c.name: c for c in result.categories["technical"].checks}
        assert checks["Sitemap.xml"].status == Status.WARNING
        assert checks["Robots.txt"].status == Status.WARNING

    def test_probe_failure_does_not_abort(self, mock_client):
        page_handler = site_handler(good_page_html())

        def handler(request):
            if request.url.path in ("/sitemap.xml", "/robots.txt"):
                raise httpx.ConnectError("Connection reset", request=request)
            return page_handler(request)

        result = analyze_site(BASE_URL, settings=Settings(), client=mock_client(handler))
        checks = {c.name: c for c in result.categories["technical"].checks}
        assert checks["Sitemap.xml"].status == Status.WARNING
        assert checks["Robots.txt"].status == Status.WARNING

    def test_probes_hit_site_root(self, mock_client):
        seen = []
        page_handler = site_handler(good_page_html())

        def handler(request):
            seen.append(str(request.url))
            return page_handler(request)

        analyze_site(f"{BASE_URL}/blog/post", settings=Settings(), client=mock_client(handler))
        assert f"{BASE_URL}/sitemap.xml" in seen
        assert f"{BASE_URL}/robots.txt" in seen

    def test_insecure_site(self, mock_client):
        client = mock_client(site_handler(good_page_html()))
        result = analyze_site("http://example.com", settings=Settings(), client=client)
        assert result.categories["security"].checks[0].status == Status.FAIL
        assert result.summary.critical_issues[-1].startswith("Site does NOT use HTTPS")

    def test_report_failure_becomes_fetch_error(self, mock_client, monkeypatch):
        def broken_report(*args):
            raise ValueError("unreadable markup")

        monkeypatch.setattr(analyzer, "build_report", broken_report)
        client = mock_client(site_handler(good_page_html()))

        with pytest.raises(FetchError) as exc_info:
            analyze_site(BASE_URL, settings=Settings(), client=client)
        assert str(exc_info.value) == f"Failed to analyze {BASE_URL}: unreadable markup"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_timeout_surfaces(self, mock_client):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SiteTimeoutError):
            analyze_site(BASE_URL, settings=Settings(), client=mock_client(handler))

    def test_unknown_host_surfaces(self, mock_client):
        def handler(request):
            raise httpx.ConnectError("getaddrinfo failed", request=request)

        with pytest.raises(SiteNotFoundError):
            analyze_site("no-such-host.invalid", settings=Settings(), client=mock_client(handler))
