"""Package-specific exception types."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """Raised when `slugify` receives input that is not a string.

    Args:
        value: The offending input value.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"slugify: input must be a string, got {type(self.value).__name__}"
