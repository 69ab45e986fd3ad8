"""Tests for the naive and quote-aware sentence splitters."""

import pytest

from chunkwise.errors import ConfigurationError
from chunkwise.sentence_splitter import (
    default_sentence_splitter,
    get_sentence_splitter,
    smart_sentence_splitter,
)


class TestDefaultSentenceSplitter:

    def test_empty(self):
        assert default_sentence_splitter("") == []

    def test_drops_delimiters_and_keeps_whitespace(self):
        assert default_sentence_splitter("Hello world. How are you? Fine!") == [
            "Hello world",
            " How are you",
            " Fine",
        ]

    def test_runs_of_delimiters_collapse(self):
        assert default_sentence_splitter("Wait... what?! Really") == ["Wait", " what", " Really"]

    def test_blank_fragments_are_dropped(self):
        assert default_sentence_splitter("A.  . B.\n") == ["A", " B"]

    def test_splits_decimals_and_abbreviations(self):
        assert default_sentence_splitter("Pi is 3.14 says Dr. Smith") == ["Pi is 3", "14 says Dr", " Smith"]

    def test_text_without_delimiters(self):
        assert default_sentence_splitter("no punctuation here") == ["no punctuation here"]

    def test_repeatable(self):
        text = "One. Two! Three? Four"
        assert default_sentence_splitter(text) == default_sentence_splitter(text)


class TestSmartSentenceSplitter:

    def test_empty(self):
        assert smart_sentence_splitter("") == []

    def test_keeps_delimiters_and_trims(self):
        assert smart_sentence_splitter("Hello world. How are you? Fine!") == [
            "Hello world.",
            "How are you?",
            "Fine!",
        ]

    def test_no_split_inside_quotes(self):
        assert smart_sentence_splitter('He said "Stop! Go." Then left.') == [
            'He said "Stop! Go." Then left.'
        ]

    def test_split_after_closing_quote(self):
        assert smart_sentence_splitter('She asked "why?" He shrugged. OK') == [
            'She asked "why?" He shrugged.',
            "OK",
        ]

    def test_unmatched_quote_suppresses_later_breaks(self):
        text = 'First. He said "hi. Bye. End.'
        assert smart_sentence_splitter(text) == ["First.", 'He said "hi. Bye. End.']

    def test_leading_delimiter_stays_with_first_sentence(self):
        assert smart_sentence_splitter(". Hello. World") == [". Hello.", "World"]

    def test_trailing_whitespace_is_not_a_sentence(self):
        assert smart_sentence_splitter("A. B.   \n") == ["A.", "B."]

    def test_consecutive_delimiters(self):
        assert smart_sentence_splitter("Really?! Yes.") == ["Really?", "!", "Yes."]

    def test_repeatable(self):
        text = 'A "quoted. text" here. And more!'
        assert smart_sentence_splitter(text) == smart_sentence_splitter(text)


class TestGetSentenceSplitter:

    @pytest.mark.parametrize("name,expected", [
        ("default", default_sentence_splitter),
        ("smart", smart_sentence_splitter),
        (" SMART ", smart_sentence_splitter),
        ("", default_sentence_splitter),
    ])
    def test_lookup(self, name, expected):
        assert get_sentence_splitter(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Unknown sentence splitter"):
            get_sentence_splitter("spacy")
