"""Sentence-aware, token-bounded text chunking for retrieval-augmented generation."""

from .errors import ConfigurationError
from .config import ChunkerConfig
from .token_counter import TokenCounter, WhitespaceTokenCounter, TikTokenCounter, get_token_counter
from .sentence_splitter import default_sentence_splitter, smart_sentence_splitter, get_sentence_splitter
from .chunking import TextChunker, chunk_text
from .models import Chunk, EmbeddedChunk, Document

__all__ = [
    "ConfigurationError",
    "ChunkerConfig",
    "TokenCounter",
    "WhitespaceTokenCounter",
    "TikTokenCounter",
    "get_token_counter",
    "default_sentence_splitter",
    "smart_sentence_splitter",
    "get_sentence_splitter",
    "TextChunker",
    "chunk_text",
    "Chunk",
    "EmbeddedChunk",
    "Document",
]
