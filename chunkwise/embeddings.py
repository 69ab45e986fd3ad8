"""Embedding utilities for chunk text. Vectors are tagged with the chunk's position metadata."""

import os
from typing import Any, Dict, List, NamedTuple, Optional, Sequence
from chunkwise.models.chunk import Chunk, EmbeddedChunk

# OpenAI (when OPENAI_API_KEY is set)
OPENAI_EMBEDDING_MODEL = "text-embedding-3-small"
OPENAI_EMBEDDING_DIMENSION = 1536

# Fallback: sentence-transformers (no API key)
SENTENCE_TRANSFORMERS_MODEL = "all-MiniLM-L6-v2"
SENTENCE_TRANSFORMERS_DIMENSION = 384

DEFAULT_EMBEDDING_NAME = "default"


class EmbeddingBackend(NamedTuple):
    """The loaded embedding client and the size of the vectors it returns."""

    kind: str  # "openai" or "sentence-transformers"
    client: Any
    dimension: int


_backend: Optional[EmbeddingBackend] = None


def _load_backend() -> EmbeddingBackend:
    """OpenAI when OPENAI_API_KEY is set, otherwise a local sentence-transformers model."""
    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if api_key:
        try:
            from openai import OpenAI
        except ImportError:
            raise ImportError(
                "openai is required for OpenAI embeddings. Install with: uv add openai"
            )
        return EmbeddingBackend("openai", OpenAI(api_key=api_key), OPENAI_EMBEDDING_DIMENSION)
    try:
        from sentence_transformers import SentenceTransformer
    except ImportError:
        raise ImportError(
            "sentence-transformers is required when OPENAI_API_KEY is not set. "
            "Install with: uv add sentence-transformers"
        )
    return EmbeddingBackend(
        "sentence-transformers",
        SentenceTransformer(SENTENCE_TRANSFORMERS_MODEL),
        SENTENCE_TRANSFORMERS_DIMENSION,
    )


def get_backend() -> EmbeddingBackend:
    """Return the active backend, loading it on first use."""
    global _backend
    if _backend is None:
        _backend = _load_backend()
    return _backend


def reset_embedder() -> None:
    """Forget the cached backend so the next call re-reads the environment."""
    global _backend
    _backend = None


def get_embedding_dimension() -> int:
    return get_backend().dimension


def embed_text(text: str) -> List[float]:
    """
    Embed a string.

    Blank text is not sent to the backend; it gets a zero vector of the
    backend's dimension.
    """
    backend = get_backend()
    if not text or not text.strip():
        return [0.0] * backend.dimension
    if backend.kind == "openai":
        resp = backend.client.embeddings.create(input=text.strip(), model=OPENAI_EMBEDDING_MODEL)
        return list(resp.data[0].embedding)
    return backend.client.encode(text.strip(), convert_to_numpy=True).tolist()


def embed_chunk(chunk: Chunk) -> List[float]:
    """Embed a chunk (its text content) for vector search."""
    return embed_text(chunk.text)


def embed_chunks(
    chunks: Sequence[Chunk],
    metadata: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> List[EmbeddedChunk]:
    """
    Embed chunks in order and attach their position metadata.

    Args:
        chunks: Chunks as returned by TextChunker.chunk.
        metadata: Extra fields (e.g. document file_path) copied onto every result.
        verbose: Print progress for each chunk.

    Returns:
        One EmbeddedChunk per input chunk, vector stored under "default".

    Raises:
        ImportError: If the selected backend library is not installed.
        RuntimeError: If the backend fails on a chunk; the backend error is chained.
    """
    backend = get_backend()
    embedded: List[EmbeddedChunk] = []
    if verbose:
        print(f"Processing {len(chunks)} chunks for embedding ({backend.kind})")

    for i, chunk in enumerate(chunks):
        try:
            vector = embed_chunk(chunk)
        except Exception as e:
            raise RuntimeError(f"error embedding chunk {i + 1}: {e}") from e

        embedded.append(
            EmbeddedChunk(
                text=chunk.text,
                embeddings={DEFAULT_EMBEDDING_NAME: vector},
                metadata={**(metadata or {}), **chunk.metadata(), "chunk_index": i},
            )
        )
        if verbose:
            print(f"✓ Embedded chunk {i + 1}/{len(chunks)} (dimension: {len(vector)})")

    return embedded
