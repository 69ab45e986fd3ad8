"""Data models for documents and chunks."""

from .document import Document
from .chunk import Chunk, EmbeddedChunk

__all__ = ["Document", "Chunk", "EmbeddedChunk"]
