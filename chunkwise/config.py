"""Chunker configuration: immutable settings shared by every chunk() call."""

import os
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from chunkwise.errors import ConfigurationError
from chunkwise.sentence_splitter import default_sentence_splitter, get_sentence_splitter
from chunkwise.token_counter import TokenCounter, WhitespaceTokenCounter, get_token_counter

DEFAULT_CHUNK_SIZE = 200
DEFAULT_CHUNK_OVERLAP = 50


class ChunkerConfig(BaseModel):
    """Settings for a TextChunker.

    ``token_counter`` also accepts a tiktoken encoding name and
    ``sentence_splitter`` also accepts a built-in splitter name ("default",
    "smart"); both are resolved when the config is built. Any rejected
    setting raises ConfigurationError.
    """

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, description="Target token budget per chunk")
    chunk_overlap: int = Field(
        default=DEFAULT_CHUNK_OVERLAP,
        description="Target token overlap between consecutive chunks; <= 0 disables overlap",
    )
    token_counter: Any = Field(default_factory=WhitespaceTokenCounter, description="Object with count(text) -> int")
    sentence_splitter: Any = Field(default=default_sentence_splitter, description="Callable text -> list of sentences")

    model_config = {"frozen": True, "extra": "forbid", "arbitrary_types_allowed": True}

    @field_validator("token_counter", mode="before")
    @classmethod
    def _resolve_token_counter(cls, value: Any) -> Any:
        if value is None:
            return WhitespaceTokenCounter()
        if isinstance(value, str):
            return get_token_counter(value)
        if not isinstance(value, TokenCounter):
            raise ValueError(f"token_counter must define count(text) -> int, got {type(value).__name__}")
        return value

    @field_validator("sentence_splitter", mode="before")
    @classmethod
    def _resolve_sentence_splitter(cls, value: Any) -> Any:
        if value is None:
            return default_sentence_splitter
        if isinstance(value, str):
            return get_sentence_splitter(value)
        if not callable(value):
            raise ValueError(f"sentence_splitter must be callable, got {type(value).__name__}")
        return value

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid chunker configuration: {e}") from e

    @classmethod
    def build(cls, **settings: Any) -> "ChunkerConfig":
        """Construct a config from the settings that are not None."""
        return cls(**{k: v for k, v in settings.items() if v is not None})

    @classmethod
    def from_env(cls, **overrides: Any) -> "ChunkerConfig":
        """
        Build a config from environment variables.

        Reads CHUNK_SIZE, CHUNK_OVERLAP, TOKEN_ENCODING (blank means the
        whitespace counter) and SENTENCE_SPLITTER. Keyword overrides that are
        not None take precedence over the environment.

        Raises:
            ConfigurationError: If a value cannot be parsed or is rejected.
        """
        settings = {
            "chunk_size": _int_from_env("CHUNK_SIZE"),
            "chunk_overlap": _int_from_env("CHUNK_OVERLAP"),
            "token_counter": os.getenv("TOKEN_ENCODING") or None,
            "sentence_splitter": os.getenv("SENTENCE_SPLITTER") or None,
        }
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**settings)


def _int_from_env(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'") from None
