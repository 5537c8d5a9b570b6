"""Exception classes for Undermark.

The conversion core never raises: every input string is valid and ambiguous
markup is resolved to literal text. These exceptions cover the edges around
it (invalid configuration, hand-built tag sequences handed to the renderer).
"""

from __future__ import annotations


class UndermarkError(Exception):
    """Base exception for all Undermark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(UndermarkError):
    """Invalid configuration value."""

    pass


class RenderError(UndermarkError):
    """Error during HTML rendering.

    Raised when the renderer meets a tag whose kind and role cannot be
    rendered together, e.g. a link marked as an opener.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize render error with an optional tag position.

        Args:
            message: Error description
            index: Position of the offending tag in the sequence (optional)
        """
        self.message = message
        self.index = index

        location = f"tag {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")
