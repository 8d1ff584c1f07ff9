"""Exception taxonomy for chat-component.

Every error raised by this package derives from ``ChatComponentError``, which
itself subclasses ``ValueError`` so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations

__all__ = [
    "ChatComponentError",
    "DecodeError",
    "EncodeError",
    "InvalidHexFormatError",
    "InvalidIdentifierError",
    "UnknownColorError",
]


class ChatComponentError(ValueError):
    """Base class for all chat-component errors."""


class UnknownColorError(ChatComponentError):
    """A color name that is not one of the sixteen named defaults."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown color name: {name!r}")


class InvalidHexFormatError(ChatComponentError):
    """A ``#``-prefixed color that is not exactly six hex digits."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid hex color {value!r}, expected '#RRGGBB'")


class InvalidIdentifierError(ChatComponentError):
    """A resource identifier that is not of the form ``namespace:path``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid resource identifier: {value!r}")


class DecodeError(ChatComponentError):
    """Malformed wire input.

    Attributes:
        reason: Short fixed description of what went wrong, e.g.
            ``"missing discriminant"`` or ``"invalid type for field"``.
        path:   JSON Pointer (RFC 6901) to the offending value. Empty string
                for the document root.
    """

    def __init__(self, reason: str, path: str = "") -> None:
        self.reason = reason
        self.path = path
        location = path or "/"
        super().__init__(f"{reason} at {location}")


class EncodeError(ChatComponentError):
    """A component tree that cannot be written within the codec's limits.

    Attributes:
        reason: Short fixed description, e.g. ``"maximum nesting depth exceeded"``.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
