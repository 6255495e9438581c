from __future__ import annotations


class RuntimeFrameworkError(ValueError):
    """Base class for errors raised while building or parsing runtime frameworks."""


class InvalidArgumentError(RuntimeFrameworkError):
    """A required argument is missing or a version breaks a validity rule."""


class FrameworkFormatError(RuntimeFrameworkError):
    """Textual input could not be parsed."""
