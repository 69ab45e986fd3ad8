"""Chunk models for sentence-bounded text segments and their embeddings."""

from typing import Any, Dict, List
from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """A run of consecutive sentences selected from the source text for embedding."""

    text: str = Field(description="Covered sentences joined by a single space")
    token_size: int = Field(description="Token count of the covered sentences at finalization")
    start_sentence: int = Field(description="Index of the first covered sentence (inclusive)")
    end_sentence: int = Field(description="One past the index of the last covered sentence (exclusive)")

    @property
    def sentence_count(self) -> int:
        return self.end_sentence - self.start_sentence

    def metadata(self) -> Dict[str, int]:
        """Position and size fields attached to the chunk's vector downstream."""
        return {
            "token_size": self.token_size,
            "start_sentence": self.start_sentence,
            "end_sentence": self.end_sentence,
        }


class EmbeddedChunk(BaseModel):
    """Chunk text together with its vector(s) and position metadata."""

    text: str = Field(description="Original chunk text that was embedded")
    embeddings: Dict[str, List[float]] = Field(
        default_factory=dict,
        description="Vectors keyed by embedding name; 'default' holds the primary vector",
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="token_size, start_sentence, end_sentence, chunk_index and document metadata",
    )
