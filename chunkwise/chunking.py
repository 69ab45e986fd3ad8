"""Split document text into token-bounded, overlapping, sentence-aligned chunks."""

from typing import Any, Callable, List, Optional, Sequence

from chunkwise.config import ChunkerConfig
from chunkwise.models.chunk import Chunk


class TextChunker:
    """Greedy sentence packer with token-based overlap between neighbouring chunks.

    Sentences are added to the current chunk until the next one would push it
    past ``chunk_size`` tokens. The finished chunk is emitted and the next one
    is seeded with trailing sentences of the finished chunk worth at least
    ``chunk_overlap`` tokens. A sentence that opens a chunk is always accepted,
    so a single oversized sentence becomes a chunk of its own.

    The instance holds configuration only; ``chunk`` keeps its state in locals
    and can be called concurrently when the counter and splitter are reentrant.
    """

    def __init__(self, config: Optional[ChunkerConfig] = None, **settings: Any):
        """
        Initialize the chunker.

        Args:
            config: Prepared configuration. Defaults to ChunkerConfig().
            **settings: chunk_size, chunk_overlap, token_counter, sentence_splitter;
                override the matching fields of ``config``.

        Raises:
            ConfigurationError: If any setting is invalid.
        """
        settings = {k: v for k, v in settings.items() if v is not None}
        if config is None:
            config = ChunkerConfig.build(**settings)
        elif settings:
            config = ChunkerConfig.build(**{**dict(config), **settings})
        self.config = config

    @property
    def chunk_size(self) -> int:
        return self.config.chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self.config.chunk_overlap

    def split_sentences(self, text: str) -> List[str]:
        return list(self.config.sentence_splitter(text))

    def chunk(self, text: str, on_chunk: Optional[Callable[[Chunk], None]] = None) -> List[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Text to chunk.
            on_chunk: Optional callback invoked with each chunk as it is finalized.

        Returns:
            Chunks ordered by start_sentence. Empty when the text has no sentences.
        """
        return self.chunk_sentences(self.split_sentences(text), on_chunk=on_chunk)

    def chunk_sentences(
        self,
        sentences: Sequence[str],
        on_chunk: Optional[Callable[[Chunk], None]] = None,
    ) -> List[Chunk]:
        """Pack an already split sentence sequence into chunks."""
        count = self.config.token_counter.count
        chunks: List[Chunk] = []

        def emit(chunk: Chunk) -> None:
            chunks.append(chunk)
            if on_chunk is not None:
                on_chunk(chunk)

        start = 0
        end = 0
        token_count = 0

        for i, sentence in enumerate(sentences):
            sentence_tokens = count(sentence)

            if token_count + sentence_tokens > self.chunk_size and token_count > 0:
                emit(self._make_chunk(sentences, start, end, token_count))

                walked = self._overlap_sentence_count(sentences, start, end)
                start = max(start, end - walked)
                end = i + 1
                token_count = sum(count(s) for s in sentences[start:end])
            else:
                if token_count == 0:
                    start = i
                end = i + 1
                token_count += sentence_tokens

        if token_count > 0:
            emit(self._make_chunk(sentences, start, end, token_count))

        return chunks

    def _overlap_sentence_count(self, sentences: Sequence[str], start: int, end: int) -> int:
        """Number of trailing sentences of [start, end) holding at least chunk_overlap tokens."""
        count = self.config.token_counter.count
        overlap_tokens = 0
        walked = 0
        index = end - 1
        while index >= start and overlap_tokens < self.chunk_overlap:
            overlap_tokens += count(sentences[index])
            walked += 1
            index -= 1
        return walked

    @staticmethod
    def _make_chunk(sentences: Sequence[str], start: int, end: int, token_count: int) -> Chunk:
        return Chunk(
            text=" ".join(sentences[start:end]),
            token_size=token_count,
            start_sentence=start,
            end_sentence=end,
        )

    def __repr__(self) -> str:
        return (
            f"TextChunker(chunk_size={self.chunk_size}, chunk_overlap={self.chunk_overlap}, "
            f"token_counter={self.config.token_counter!r})"
        )


def chunk_text(
    text: str,
    chunk_size: int = 200,
    chunk_overlap: int = 50,
    token_counter: Any = None,
    sentence_splitter: Any = None,
) -> List[Chunk]:
    """
    Split text into overlapping sentence-aligned chunks with a one-off chunker.

    Args:
        text: Full document text.
        chunk_size: Target token budget per chunk.
        chunk_overlap: Target token overlap between consecutive chunks.
        token_counter: Counter object or tiktoken encoding name. Defaults to whitespace words.
        sentence_splitter: Splitter callable or "default" / "smart".

    Returns:
        List of Chunk ordered by start_sentence.
    """
    chunker = TextChunker(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        token_counter=token_counter,
        sentence_splitter=sentence_splitter,
    )
    return chunker.chunk(text)
