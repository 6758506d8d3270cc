"""Tests for lexical helpers."""

from seo_analyzer.text import (
    STOP_WORDS,
    body_text,
    collapse_whitespace,
    count_ngrams,
    count_syllables,
    parse_html,
    split_sentences,
    split_words,
    without_tags,
)


class TestCountSyllables:
    def test_short_words_are_one_syllable(self):
        assert count_syllables("the") == 1
        assert count_syllables("a") == 1
        assert count_syllables("") == 1

    def test_silent_e_is_dropped(self):
        assert count_syllables("make") == 1

    def test_ed_ending_is_dropped(self):
        assert count_syllables("played") == 1

    def test_vowel_groups(self):
        assert count_syllables("hello") == 2
        assert count_syllables("syllable") == 3

    def test_leading_y_is_not_a_vowel(self):
        assert count_syllables("yellow") == 2

    def test_punctuation_and_case_ignored(self):
        assert count_syllables("Hello!") == count_syllables("hello")

    def test_long_word_is_complex(self):
        assert count_syllables("communication") >= 3


class TestTokenizing:
    def test_collapse_whitespace(self):
        assert collapse_whitespace("  a \n\t b  ") == "a b"

    def test_split_words_min_length(self):
        assert split_words("a an the seo", min_length=3) == ["the", "seo"]

    def test_split_sentences_drops_short_fragments(self):
        text = "This is a sentence. Ok. Another sentence here!"
        assert split_sentences(text) == ["This is a sentence", " Another sentence here"]

    def test_count_ngrams_excludes_only_unigrams(self):
        words = ["the", "seo", "the", "seo"]
        assert count_ngrams(words, 1, exclude=STOP_WORDS) == {"seo": 2}
        assert count_ngrams(words, 2) == {"the seo": 2, "seo the": 1}

    def test_count_ngrams_keeps_first_seen_order(self):
        counts = count_ngrams(["b", "a", "b", "a"], 1)
        assert list(counts) == ["b", "a"]

    def test_stop_words_immutable(self):
        assert isinstance(STOP_WORDS, frozenset)


class TestDocumentText:
    def test_body_text_separates_elements(self):
        doc = parse_html("<body><p>one</p><p>two</p></body>")
        assert body_text(doc) == "one two"

    def test_without_tags_leaves_original_intact(self):
        doc = parse_html("<body><script>var x;</script><p>text</p></body>")
        cleaned = without_tags(doc, ["script"])
        assert cleaned.find("script") is None
        assert doc.find("script") is not None
        assert body_text(cleaned) == "text"
