"""
conftest.py - shared pytest fixtures

Pages are parsed from inline HTML and HTTP goes through httpx.MockTransport,
so no test touches the network.
"""

from typing import Callable

import httpx
import pytest
from bs4 import BeautifulSoup

from seo_analyzer.config import Settings
from seo_analyzer.text import parse_html


BASE_URL = "https://example.com"

GOOD_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Example Widgets - Handmade Widgets for Every Home</title>
  <meta name="description" content="{description}">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://example.com/">
  <link rel="icon" href="/favicon.png">
  <meta property="og:title" content="Example Widgets">
  <meta property="og:description" content="Handmade widgets">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:url" content="https://example.com/">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Example Widgets">
  <script type="application/ld+json">{{"@type": "Organization", "name": "Example"}}</script>
</head>
<body>
  <h1>Handmade Widgets</h1>
  <h2>Why widgets</h2>
  <h3>Durability</h3>
  <h2>Our range</h2>
  <p>{body}</p>
  <ul><li>Blue widgets</li><li>Red widgets</li></ul>
  <img src="/a.png" alt="A widget" width="100" height="100">
  <a href="/about">About us</a>
  <a href="https://partner.org/">Partner</a>
</body>
</html>
"""


def good_page_html() -> str:
    """A page that passes nearly every check."""
    return GOOD_PAGE.format(
        description="Handmade widgets built to last, shipped worldwide. Browse our range of blue, red "
                    "and green widgets and find the right one for your home.",
        body=" ".join(["Widgets are sturdy and useful for many household tasks."] * 40),
    )


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Parse an HTML string the same way the analyzer does."""
    return parse_html


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose requests are answered by ``handler``."""
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
