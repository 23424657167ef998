"""Exceptions raised while rendering prompts."""

from typing import Iterable


class PromptError(Exception):
    """Base class for xmlprompt errors."""


class MissingPromptValuesError(PromptError, KeyError):
    """Raised in strict mode when the value bag lacks referenced keys."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required variables: {', '.join(self.missing)}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class SerializationDepthError(PromptError, ValueError):
    """Raised when a value nests deeper than the configured limit."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"Value nests deeper than {max_depth} levels (cyclic reference?)"
        )
