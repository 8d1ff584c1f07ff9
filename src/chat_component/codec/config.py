"""CodecConfig and HoverKey for encoder/decoder configuration.

CodecConfig is a frozen (immutable) dataclass. HoverKey selects which key
the encoder writes a hover payload under; the decoder reads either.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class HoverKey(StrEnum):
    """Key holding the hover payload inside ``hoverEvent``.

    - CONTENTS: ``{"action": ..., "contents": ...}`` (current format).
    - VALUE:    ``{"action": ..., "value": ...}`` (legacy format).
    """

    CONTENTS = auto()
    VALUE = auto()


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec settings.

    Attributes:
        hover_key: Key the encoder emits hover payloads under.
        max_depth: Deepest component nesting the codec accepts (>= 1). The
            decoder rejects deeper input with a DecodeError and the encoder
            rejects deeper trees with an EncodeError.
    """

    hover_key: HoverKey = HoverKey.CONTENTS
    max_depth: int = 128

    def __post_init__(self) -> None:
        if not isinstance(self.hover_key, HoverKey):
            msg = f"hover_key must be a HoverKey, got {self.hover_key!r}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
