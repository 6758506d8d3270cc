"""Check amount and structure of readable content."""

from bs4 import BeautifulSoup

from ..models import CategoryResult, Check, Status, round_half_up
from ..text import NON_CONTENT_TAGS, body_text, split_words, without_tags


def text_to_html_ratio(text: str, soup: BeautifulSoup) -> int:
    """Visible text length as a percentage of the <html> element's inner markup."""
    root = soup.html or soup
    html_length = len(root.decode_contents())
    if html_length == 0:
        return 0
    return round_half_up(len(text) / html_length * 100)


def check_content(soup: BeautifulSoup) -> CategoryResult:
    """Check word count, text-to-HTML ratio, paragraphs and lists.

    Scripts, styles and noscript blocks are removed before measuring.
    """
    checks: list[Check] = []
    content_soup = without_tags(soup, NON_CONTENT_TAGS)

    text = body_text(content_soup)
    word_count = len(split_words(text))

    if word_count < 300:
        checks.append(Check(
            name="Word Count",
            status=Status.WARNING,
            message=f"Page has only {word_count} words and may be considered thin content",
            recommendation="Aim for at least 300+ words of quality content for better rankings",
        ))
    elif word_count < 1000:
        checks.append(Check(
            name="Word Count",
            status=Status.PASS,
            message=f"Page has {word_count} words, a decent content length",
        ))
    else:
        checks.append(Check(
            name="Word Count",
            status=Status.PASS,
            message=f"Page has {word_count} words, great content depth",
        ))

    ratio = text_to_html_ratio(text, content_soup)
    if ratio < 10:
        checks.append(Check(
            name="Text-to-HTML Ratio",
            status=Status.WARNING,
            message=f"Low text-to-HTML ratio ({ratio}%)",
            value=f"{ratio}%",
            recommendation="Increase text content relative to HTML code",
        ))
    else:
        checks.append(Check(
            name="Text-to-HTML Ratio",
            status=Status.PASS,
            message=f"Text-to-HTML ratio is {ratio}%",
            value=f"{ratio}%",
        ))

    paragraphs = len(content_soup.find_all("p"))
    if paragraphs:
        checks.append(Check(
            name="Paragraphs",
            status=Status.PASS,
            message=f"{paragraphs} paragraph(s) found",
        ))
    else:
        checks.append(Check(
            name="Paragraphs",
            status=Status.WARNING,
            message="No paragraph tags found, content may lack structure",
            recommendation="Wrap text content in <p> tags for proper structure",
        ))

    lists = len(content_soup.find_all(["ul", "ol"]))
    if lists:
        checks.append(Check(
            name="Lists",
            status=Status.PASS,
            message=f"{lists} list(s) found, good for readability",
        ))
    else:
        checks.append(Check(
            name="Lists",
            status=Status.WARNING,
            message="No lists found on the page",
            recommendation="Use bulleted or numbered lists for steps and key points",
        ))

    return CategoryResult(name="Content", icon="📝", checks=checks)
