"""Text extraction and lexical helpers shared by the checks and tools."""

import re
from collections import Counter
from typing import Iterable

from bs4 import BeautifulSoup


# Common English words excluded from single-word keyword counts
STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
    "was", "one", "our", "out", "has", "have", "had", "this", "that", "with",
    "from", "they", "been", "said", "each", "she", "which", "their", "will",
    "other", "about", "many", "then", "them", "these", "some", "would",
    "make", "like", "into", "could", "time", "very", "when", "come", "what",
    "your", "more", "also", "its", "than",
})

# Tags never counted as readable content
NON_CONTENT_TAGS = ("script", "style", "noscript")

# Page chrome dropped before keyword and readability analysis
BOILERPLATE_TAGS = NON_CONTENT_TAGS + ("nav", "footer", "header")

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_SILENT_ENDING_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")


def collapse_whitespace(text: str) -> str:
    """Squash runs of whitespace into single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def without_tags(soup: BeautifulSoup, tags: Iterable[str]) -> BeautifulSoup:
    """Return a copy of the document with the given tags removed.

    The shared document is never mutated so every check sees the same markup.
    """
    cleaned = parse_html(str(soup))
    for tag in cleaned.find_all(list(tags)):
        tag.decompose()
    return cleaned


def body_text(soup: BeautifulSoup) -> str:
    """Whitespace-collapsed text of <body>, or of the whole document if absent."""
    root = soup.body or soup
    return collapse_whitespace(root.get_text(" "))


def split_words(text: str, min_length: int = 1) -> list[str]:
    """Whitespace tokenization, keeping tokens of at least ``min_length`` chars."""
    return [w for w in text.split() if len(w) >= min_length]


def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation, dropping fragments of 5 chars or fewer."""
    return [s for s in _SENTENCE_END_RE.split(text) if len(s.strip()) > 5]


def count_syllables(word: str) -> int:
    """Estimate syllables in an English word.

    Counts vowel groups after dropping silent endings like ``-es``, ``-ed``
    and a trailing ``e``. Short words (3 letters or fewer) count as one.
    """
    word = re.sub(r"[^a-z]", "", word.lower())
    if len(word) <= 3:
        return 1
    word = _SILENT_ENDING_RE.sub("", word)
    word = re.sub(r"^y", "", word)
    groups = _VOWEL_GROUP_RE.findall(word)
    return len(groups) or 1


def count_ngrams(words: list[str], n: int, exclude: frozenset[str] = frozenset()) -> Counter:
    """Count contiguous n-word phrases, in first-seen order.

    ``exclude`` only applies to single words.
    """
    counts: Counter = Counter()
    for i in range(len(words) - n + 1):
        if n == 1 and words[i] in exclude:
            continue
        counts[" ".join(words[i:i + n])] += 1
    return counts


def parse_html(html: str) -> BeautifulSoup:
    """Parse a page with lxml."""
    return BeautifulSoup(html, "lxml")
