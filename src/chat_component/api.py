"""Public API functions for chat-component.

This module provides the user-facing functions: encode, decode, dumps, loads
and to_plain_text. Each call creates a fresh encoder or decoder so no state
is shared between calls.
"""

from __future__ import annotations

import json
from typing import Any

from chat_component.codec.config import CodecConfig
from chat_component.codec.decoder import ComponentDecoder, JsonValue
from chat_component.codec.encoder import ComponentEncoder
from chat_component.errors import DecodeError
from chat_component.tree.components import (
    Component,
    KeybindComponent,
    NbtComponent,
    ScoreComponent,
    SelectorComponent,
    TextComponent,
    TranslatableComponent,
)

__all__ = ["decode", "dumps", "encode", "loads", "to_plain_text"]


def encode(component: Component, config: CodecConfig | None = None) -> dict[str, Any]:
    """Encode a component tree into its canonical JSON object.

    Args:
        component: Root of the tree to encode.
        config:    Codec settings. Defaults to ``CodecConfig()`` when None.

    Returns:
        A dict containing only the fields that are set.
    """
    return ComponentEncoder(config or CodecConfig()).encode(component)


def decode(value: JsonValue, config: CodecConfig | None = None) -> Component:
    """Decode a parsed JSON value (string, array or object) into a component.

    Args:
        value:  Parsed JSON.
        config: Codec settings. Defaults to ``CodecConfig()`` when None.

    Returns:
        The decoded component tree.

    Raises:
        DecodeError: If the value is not a valid component encoding.
    """
    return ComponentDecoder(config or CodecConfig()).decode(value)


def dumps(component: Component, config: CodecConfig | None = None) -> str:
    """Encode a component tree straight to a compact JSON string."""
    return json.dumps(
        encode(component, config), ensure_ascii=False, separators=(",", ":")
    )


def loads(text: str | bytes, config: CodecConfig | None = None) -> Component:
    """Parse a JSON document and decode it into a component.

    Raises:
        DecodeError: If the text is not valid JSON (reason ``"invalid json"``)
            or not a valid component encoding.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError("invalid json") from exc
    return decode(value, config)


def to_plain_text(component: Component) -> str:
    """Flatten a tree to unstyled text, depth-first, left to right.

    Only what is known without a game context is rendered: translation keys,
    keybind names, selector patterns and NBT paths stand in for the values a
    client would look up. A score renders its literal ``value`` if set.
    """
    if isinstance(component, TextComponent):
        head = component.text
    elif isinstance(component, TranslatableComponent):
        head = component.key
    elif isinstance(component, ScoreComponent):
        head = component.value or ""
    elif isinstance(component, SelectorComponent):
        head = component.pattern
    elif isinstance(component, KeybindComponent):
        head = component.keybind
    elif isinstance(component, NbtComponent):
        head = component.path
    else:
        raise TypeError(f"Unsupported component type: {type(component)!r}")
    return head + "".join(to_plain_text(child) for child in component.style.extra)
