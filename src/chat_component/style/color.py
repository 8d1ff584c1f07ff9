"""Color model: the sixteen named defaults plus explicit RGB values.

A ``Color`` is either a ``NamedColor`` member or a ``HexColor``. On the wire a
named color is its lowercase name (``"dark_aqua"``) and an RGB color is a
``#rrggbb`` string; the leading ``#`` is what tells them apart on decode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto

from chat_component.errors import InvalidHexFormatError, UnknownColorError

__all__ = ["Color", "HexColor", "NamedColor", "parse_color"]

_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6})")


class NamedColor(StrEnum):
    """The sixteen legacy chat colors.

    StrEnum values are the lowercased member names, which are exactly the
    wire strings (``NamedColor.LIGHT_PURPLE == "light_purple"``).
    """

    BLACK = auto()
    DARK_BLUE = auto()
    DARK_GREEN = auto()
    DARK_AQUA = auto()
    DARK_RED = auto()
    DARK_PURPLE = auto()
    GOLD = auto()
    GRAY = auto()
    DARK_GRAY = auto()
    BLUE = auto()
    GREEN = auto()
    AQUA = auto()
    RED = auto()
    LIGHT_PURPLE = auto()
    YELLOW = auto()
    WHITE = auto()

    @classmethod
    def from_name(cls, name: str) -> NamedColor:
        """Look up a named color, ignoring case.

        Raises:
            UnknownColorError: If ``name`` is not one of the sixteen names.
        """
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownColorError(name) from None

    def to_wire_string(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class HexColor:
    """An explicit 24-bit RGB color.

    Attributes:
        r: Red channel in [0, 255].
        g: Green channel in [0, 255].
        b: Blue channel in [0, 255].
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                msg = f"{channel} must be in [0, 255], got {value}"
                raise ValueError(msg)

    @classmethod
    def from_hex(cls, value: str) -> HexColor:
        """Parse a ``#RRGGBB`` string (either case).

        Raises:
            InvalidHexFormatError: If ``value`` is not ``#`` followed by
                exactly six hex digits.
        """
        match = _HEX_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidHexFormatError(value)
        number = int(match.group(1), 16)
        return cls((number >> 16) & 0xFF, (number >> 8) & 0xFF, number & 0xFF)

    @classmethod
    def from_rgb(cls, rgb: tuple[int, int, int]) -> HexColor:
        return cls(*rgb)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_wire_string(self) -> str:
        """Return the canonical lowercase ``#rrggbb`` form."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color = NamedColor | HexColor


def parse_color(value: str) -> Color:
    """Parse a wire color string into a ``NamedColor`` or ``HexColor``.

    A leading ``#`` selects the hex form; anything else is looked up as a
    name, case-insensitively.

    Raises:
        InvalidHexFormatError: For a malformed ``#`` string.
        UnknownColorError: For a name outside the sixteen defaults.
    """
    if value.startswith("#"):
        return HexColor.from_hex(value)
    return NamedColor.from_name(value)
