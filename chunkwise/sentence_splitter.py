"""Sentence splitters: pure functions from text to an ordered list of sentences."""

import re
from typing import Callable, Dict, List

from chunkwise.errors import ConfigurationError

SentenceSplitter = Callable[[str], List[str]]

SENTENCE_DELIMITERS = ".!?"
_DELIMITER_PATTERN = re.compile(r"[.!?]+")


def default_sentence_splitter(text: str) -> List[str]:
    """
    Split on '.', '!' and '?', dropping the delimiters.

    Runs of delimiters collapse and blank fragments are discarded; whitespace
    inside a fragment is left as is. Abbreviations and decimals are split too.

    Args:
        text: Text to split.

    Returns:
        Sentence fragments in source order.
    """
    return [part for part in _DELIMITER_PATTERN.split(text) if part.strip()]


def smart_sentence_splitter(text: str) -> List[str]:
    """
    Split on '.', '!' and '?' outside double quotes, keeping the delimiter.

    Each '"' toggles the in-quote state, so an unbalanced quote disables
    splitting for the rest of the text. Sentences are stripped of surrounding
    whitespace.

    Args:
        text: Text to split.

    Returns:
        Sentences in source order.
    """
    sentences: List[str] = []
    current: List[str] = []
    in_quote = False

    for char in text:
        current.append(char)
        if char == '"':
            in_quote = not in_quote
        if char in SENTENCE_DELIMITERS and not in_quote:
            # a delimiter opening the text is not a sentence of its own
            if sentences or len(current) > 1:
                sentences.append("".join(current).strip())
                current = []

    remainder = "".join(current).strip()
    if remainder:
        sentences.append(remainder)
    return sentences


SENTENCE_SPLITTERS: Dict[str, SentenceSplitter] = {
    "default": default_sentence_splitter,
    "smart": smart_sentence_splitter,
}


def get_sentence_splitter(name: str) -> SentenceSplitter:
    """Look up a built-in splitter by name ("default" or "smart")."""
    key = (name or "default").strip().lower()
    try:
        return SENTENCE_SPLITTERS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown sentence splitter '{name}'. Choose one of: {', '.join(sorted(SENTENCE_SPLITTERS))}"
        ) from None
