"""Helper assertions for chunk sequences."""

from typing import List, Sequence, Tuple
from chunkwise.models.chunk import Chunk


def ranges(chunks: Sequence[Chunk]) -> List[Tuple[int, int]]:
    """Sentence ranges of the chunks as (start, end) pairs."""
    return [(c.start_sentence, c.end_sentence) for c in chunks]


def check_coverage(chunks: Sequence[Chunk], sentence_count: int) -> None:
    """
    Assert the chunk ranges cover [0, sentence_count) without gaps.

    Args:
        chunks: Chunks returned by the chunker
        sentence_count: Number of sentences the splitter produced
    """
    assert chunks, "Non-empty input should produce at least one chunk"
    assert chunks[0].start_sentence == 0, "First chunk should start at sentence 0"
    assert chunks[-1].end_sentence == sentence_count, "Last chunk should end at the final sentence"

    for chunk in chunks:
        assert chunk.end_sentence > chunk.start_sentence, f"Empty range in {chunk}"

    for prev, nxt in zip(chunks, chunks[1:]):
        assert nxt.start_sentence <= prev.end_sentence, f"Gap between {ranges([prev, nxt])}"


def check_monotonic(chunks: Sequence[Chunk]) -> None:
    """Assert start and end sentence indices never decrease and ranges never repeat."""
    for prev, nxt in zip(chunks, chunks[1:]):
        assert nxt.start_sentence >= prev.start_sentence, "start_sentence decreased"
        assert nxt.end_sentence > prev.end_sentence, "end_sentence did not advance"
