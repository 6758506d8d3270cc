"""Keyword and phrase frequency for the visible page text."""

from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from ..models import round_decimal
from ..text import BOILERPLATE_TAGS, STOP_WORDS, body_text, count_ngrams, split_words, without_tags


MIN_COUNT = 2
TOP_N = 30


@dataclass
class KeywordStat:
    keyword: str
    count: int
    density: float  # percent of total words


@dataclass
class KeywordReport:
    total_words: int
    unique_words: int
    one_word: list[KeywordStat] = field(default_factory=list)
    two_word: list[KeywordStat] = field(default_factory=list)
    three_word: list[KeywordStat] = field(default_factory=list)

    def to_dict(self) -> dict:
        def rows(stats: list[KeywordStat]) -> list[dict]:
            return [{"keyword": s.keyword, "count": s.count, "density": s.density} for s in stats]

        return {
            "total_words": self.total_words,
            "unique_words": self.unique_words,
            "one_word": rows(self.one_word),
            "two_word": rows(self.two_word),
            "three_word": rows(self.three_word),
        }


def top_keywords(counts: dict[str, int], total_words: int) -> list[KeywordStat]:
    """Entries seen at least twice, most frequent first, capped at TOP_N."""
    frequent = [(k, c) for k, c in counts.items() if c >= MIN_COUNT]
    # sorted() is stable, so ties keep first-seen order
    frequent = sorted(frequent, key=lambda item: item[1], reverse=True)[:TOP_N]
    return [
        KeywordStat(keyword=k, count=c, density=round_decimal(c / total_words * 100, 2))
        for k, c in frequent
    ]


def keyword_density(soup: BeautifulSoup) -> KeywordReport:
    """Count single words, two-word and three-word phrases.

    Navigation, header, footer and script content is ignored. Words of two
    characters or fewer are dropped; stop words are dropped from the
    single-word table only.
    """
    text = body_text(without_tags(soup, BOILERPLATE_TAGS)).lower()
    words = split_words(text, min_length=3)
    total = len(words)

    return KeywordReport(
        total_words=total,
        unique_words=len(set(words)),
        one_word=top_keywords(count_ngrams(words, 1, exclude=STOP_WORDS), total),
        two_word=top_keywords(count_ngrams(words, 2), total),
        three_word=top_keywords(count_ngrams(words, 3), total),
    )
