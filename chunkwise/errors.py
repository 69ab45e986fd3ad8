"""Exceptions raised while configuring chunkers and token counters."""


class ConfigurationError(ValueError):
    """Raised at construction time when a chunker setting cannot be honored.

    Examples are an encoding name tiktoken does not know, an unknown sentence
    splitter name, or a non-positive chunk size. There is no fallback: the
    caller has to change the configuration.
    """
