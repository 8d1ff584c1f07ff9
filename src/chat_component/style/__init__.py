"""Style subpackage: the formatting model shared by every component.

Re-exports:
- Style: the tri-state formatting record (plus the ``extra`` child list)
- NamedColor / HexColor / Color / parse_color: color representation
- Identifier: namespaced resource location used for fonts
- ClickEvent / ClickAction, HoverEvent / HoverAction: interaction payloads
"""

from chat_component.style.color import Color, HexColor, NamedColor, parse_color
from chat_component.style.events import ClickAction, ClickEvent, HoverAction, HoverEvent
from chat_component.style.identifier import Identifier
from chat_component.style.style import FLAG_FIELDS, Style

__all__ = [
    "FLAG_FIELDS",
    "ClickAction",
    "ClickEvent",
    "Color",
    "HexColor",
    "HoverAction",
    "HoverEvent",
    "Identifier",
    "NamedColor",
    "Style",
    "parse_color",
]
