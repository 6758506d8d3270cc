"""Readability scores for the visible page text."""

from dataclasses import asdict, dataclass, field

from bs4 import BeautifulSoup

from ..models import round_decimal
from ..text import BOILERPLATE_TAGS, body_text, count_syllables, split_sentences, split_words, without_tags


# (minimum Flesch Reading Ease, label), checked top-down
READABILITY_LEVELS = [
    (80, "Very Easy"),
    (60, "Standard"),
    (40, "Fairly Difficult"),
    (20, "Difficult"),
]


@dataclass
class ReadabilityReport:
    total_words: int
    total_sentences: int
    total_syllables: int
    complex_words: int
    avg_sentence_length: float
    avg_syllables_per_word: float
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    gunning_fog_index: float
    readability_level: str
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def readability_level(ease: float) -> str:
    for threshold, label in READABILITY_LEVELS:
        if ease >= threshold:
            return label
    return "Very Difficult"


def score_text(text: str) -> ReadabilityReport:
    """Compute Flesch Reading Ease, Flesch-Kincaid Grade and Gunning Fog for text."""
    words = split_words(text)
    total_words = len(words)
    total_sentences = max(len(split_sentences(text)), 1)
    syllables = [count_syllables(w) for w in words]
    total_syllables = sum(syllables)
    complex_words = sum(1 for s in syllables if s >= 3)

    # Formulas use the rounded averages
    avg_sentence_length = round_decimal(total_words / total_sentences, 1)
    avg_syllables_per_word = round_decimal(total_syllables / max(total_words, 1), 2)
    complex_ratio = complex_words / max(total_words, 1)

    ease = round_decimal(206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word, 1)
    grade = round_decimal(0.39 * avg_sentence_length + 11.8 * avg_syllables_per_word - 15.59, 1)
    fog = round_decimal(0.4 * (avg_sentence_length + 100 * complex_ratio), 1)

    recommendations = []
    if avg_sentence_length > 20:
        recommendations.append("Shorten your sentences, aim for 15-20 words per sentence")
    if complex_ratio > 0.15:
        recommendations.append("Use simpler words, too many complex words reduce readability")
    if ease < 60:
        recommendations.append("Content is harder to read, simplify language for a wider audience")
    if total_words < 300:
        recommendations.append("Content is too short, aim for 300+ words for better SEO")

    return ReadabilityReport(
        total_words=total_words,
        total_sentences=total_sentences,
        total_syllables=total_syllables,
        complex_words=complex_words,
        avg_sentence_length=avg_sentence_length,
        avg_syllables_per_word=avg_syllables_per_word,
        flesch_reading_ease=ease,
        flesch_kincaid_grade=grade,
        gunning_fog_index=fog,
        readability_level=readability_level(ease),
        recommendations=recommendations,
    )


def readability(soup: BeautifulSoup) -> ReadabilityReport:
    """Score the page body, ignoring navigation, header, footer and scripts."""
    return score_text(body_text(without_tags(soup, BOILERPLATE_TAGS)))
