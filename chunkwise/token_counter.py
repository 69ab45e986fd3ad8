"""Token counters used by the chunker to measure sentences and chunks."""

from typing import Optional, Protocol, runtime_checkable

import tiktoken

from chunkwise.errors import ConfigurationError

DEFAULT_ENCODING = "cl100k_base"


@runtime_checkable
class TokenCounter(Protocol):
    """Anything with a pure ``count(text) -> int`` method."""

    def count(self, text: str) -> int:
        ...


class WhitespaceTokenCounter:
    """Approximates tokens as whitespace-separated words. No external calls."""

    def count(self, text: str) -> int:
        return len(text.split())

    def __repr__(self) -> str:
        return "WhitespaceTokenCounter()"


class TikTokenCounter:
    """Exact BPE token counts using an OpenAI tiktoken encoding.

    Common encodings:
        - "cl100k_base" (GPT-4, GPT-3.5)
        - "o200k_base" (GPT-4o)
        - "p50k_base" (GPT-3)
        - "r50k_base" (Codex)
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        """
        Load the encoding.

        Args:
            encoding: tiktoken encoding name.

        Raises:
            ConfigurationError: If tiktoken does not recognize the encoding name.
        """
        try:
            self._encoding = tiktoken.get_encoding(encoding)
        except ValueError as e:
            raise ConfigurationError(f"Unknown token encoding '{encoding}': {e}") from e
        self.encoding_name = encoding

    @classmethod
    def for_model(cls, model_name: str) -> "TikTokenCounter":
        """Build a counter from a model name (e.g. "gpt-4o") instead of an encoding name."""
        try:
            encoding = tiktoken.encoding_for_model(model_name)
        except KeyError as e:
            raise ConfigurationError(f"No token encoding known for model '{model_name}'") from e
        return cls(encoding.name)

    def count(self, text: str) -> int:
        # Special-token text such as "<|endoftext|>" is counted as plain text
        return len(self._encoding.encode(text, disallowed_special=()))

    def __repr__(self) -> str:
        return f"TikTokenCounter(encoding={self.encoding_name!r})"


def get_token_counter(encoding: Optional[str] = None) -> TokenCounter:
    """Whitespace counter when no encoding is named, otherwise a tiktoken counter."""
    if encoding is None or not encoding.strip():
        return WhitespaceTokenCounter()
    return TikTokenCounter(encoding.strip())
