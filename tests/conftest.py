"""Pytest configuration and fixtures for chunker tests."""

import pytest
from chunkwise.chunking import TextChunker
from chunkwise.token_counter import TikTokenCounter

CHUNKER_ENV_VARS = ("CHUNK_SIZE", "CHUNK_OVERLAP", "TOKEN_ENCODING", "SENTENCE_SPLITTER")


@pytest.fixture(autouse=True)
def clean_chunker_env(monkeypatch):
    """Keep chunker settings from the developer's shell or .env out of the tests."""
    for name in CHUNKER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_chunker():
    """Factory for chunkers using the whitespace counter and default splitter."""
    def _make(**settings):
        return TextChunker(**settings)
    return _make


@pytest.fixture
def four_token_sentences():
    """Six sentences of exactly four whitespace tokens each."""
    return "w w w w. " * 6


@pytest.fixture
def varied_text():
    """Sentences of varying length; returns (text, token count per sentence)."""
    lengths = [3, 7, 1, 12, 5, 5, 2, 9, 4, 4, 6, 15, 1, 3]
    text = ". ".join(" ".join(["word"] * n) for n in lengths) + "."
    return text, lengths


@pytest.fixture(scope="session")
def tiktoken_counter():
    """cl100k_base counter. tiktoken downloads the BPE file on first use."""
    try:
        return TikTokenCounter("cl100k_base")
    except Exception as e:
        pytest.skip(f"cl100k_base encoding not available (offline?): {e}")


@pytest.fixture(scope="function")
def text_file(tmp_path):
    """Write a UTF-8 text file and return its path."""
    def _write(content, name="document.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
