"""Chat component - Minecraft's styled text tree and its JSON wire format."""

from __future__ import annotations

from chat_component.api import decode, dumps, encode, loads, to_plain_text
from chat_component.codec import CodecConfig, ComponentDecoder, ComponentEncoder, HoverKey
from chat_component.errors import (
    ChatComponentError,
    DecodeError,
    EncodeError,
    InvalidHexFormatError,
    InvalidIdentifierError,
    UnknownColorError,
)
from chat_component.style import (
    ClickAction,
    ClickEvent,
    Color,
    HexColor,
    HoverAction,
    HoverEvent,
    Identifier,
    NamedColor,
    Style,
    parse_color,
)
from chat_component.tree import (
    Component,
    KeybindComponent,
    NbtComponent,
    NbtSource,
    NbtSourceKind,
    ScoreComponent,
    SelectorComponent,
    TextComponent,
    TranslatableComponent,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChatComponentError",
    "ClickAction",
    "ClickEvent",
    "CodecConfig",
    "Color",
    "Component",
    "ComponentDecoder",
    "ComponentEncoder",
    "DecodeError",
    "EncodeError",
    "HexColor",
    "HoverAction",
    "HoverEvent",
    "HoverKey",
    "Identifier",
    "InvalidHexFormatError",
    "InvalidIdentifierError",
    "KeybindComponent",
    "NamedColor",
    "NbtComponent",
    "NbtSource",
    "NbtSourceKind",
    "ScoreComponent",
    "SelectorComponent",
    "Style",
    "TextComponent",
    "TranslatableComponent",
    "UnknownColorError",
    "decode",
    "dumps",
    "encode",
    "loads",
    "parse_color",
    "to_plain_text",
]
