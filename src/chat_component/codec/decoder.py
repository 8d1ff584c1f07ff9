"""ComponentDecoder: converts a JSON value into a component tree.

Accepts every legal input shape:

1. A bare string is a ``TextComponent`` with that text and default style.
2. An array becomes a ``TextComponent`` with empty text whose ``extra`` holds
   each element, decoded independently.
3. An object is dispatched on the first discriminant key present, checked in
   the order ``text``, ``translate``, ``score``, ``selector``, ``keybind``,
   ``nbt``.

Keys that are not recognized are ignored so newer wire additions do not
break older readers. Recognized keys with the wrong JSON type are errors.

Errors carry a JSON Pointer (RFC 6901) to the offending value, built the same
way during traversal: root is ``""`` and each level appends ``/{key_or_index}``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from chat_component.codec.config import CodecConfig
from chat_component.errors import ChatComponentError, DecodeError
from chat_component.style.color import parse_color
from chat_component.style.events import ClickAction, ClickEvent, HoverAction, HoverEvent
from chat_component.style.identifier import Identifier
from chat_component.style.style import FLAG_FIELDS, Style
from chat_component.tree.components import (
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

__all__ = ["DISCRIMINANTS", "ComponentDecoder", "JsonValue"]

logger = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# Priority order: the first key present decides the variant
DISCRIMINANTS: tuple[str, ...] = ("text", "translate", "score", "selector", "keybind", "nbt")

MISSING_DISCRIMINANT = "missing discriminant"
INVALID_TYPE = "invalid type for field"
INVALID_VALUE = "invalid value for field"
MALFORMED_OBJECT = "malformed nested object"
UNSUPPORTED_TYPE = "unsupported json type"
UNKNOWN_ACTION = "unknown action"
TOO_DEEP = "maximum nesting depth exceeded"

_STYLE_KEYS = frozenset(
    (*FLAG_FIELDS, "color", "font", "insertion", "clickEvent", "hoverEvent", "extra")
)

_VARIANT_KEYS: dict[str, frozenset[str]] = {
    "text": frozenset(("text",)),
    "translate": frozenset(("translate", "with")),
    "score": frozenset(("score",)),
    "selector": frozenset(("selector", "separator")),
    "keybind": frozenset(("keybind",)),
    "nbt": frozenset(("nbt", "block", "entity", "storage", "interpret", "separator")),
}


def _expect(value: Any, expected: type | tuple[type, ...], path: str) -> None:
    """Raise DecodeError unless ``value`` is an instance of ``expected``.

    ``bool`` is rejected wherever ``int`` is expected, because bool subclasses
    int in Python but ``true`` is not a number in JSON.
    """
    allowed = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in allowed:
        raise DecodeError(INVALID_TYPE, path)
    if not isinstance(value, allowed):
        raise DecodeError(INVALID_TYPE, path)


@dataclass
class ComponentDecoder:
    """Converts any legal wire value into a ``Component``.

    Example::
        decoder = ComponentDecoder()
        decoder.decode({"text": "hi", "bold": True})
        # TextComponent(text="hi", style=Style(bold=True, ...))
        decoder.decode(["a", "b"])
        # TextComponent(text="", style=Style(extra=[TextComponent("a"), TextComponent("b")]))
    """

    config: CodecConfig = field(default_factory=CodecConfig)

    def decode(self, value: JsonValue) -> Component:
        """Decode a JSON value (string, array or object) into a component.

        Args:
            value: Parsed JSON, e.g. the result of ``json.loads``.

        Returns:
            The decoded component tree.

        Raises:
            DecodeError: If the value is not a valid component encoding.
        """
        try:
            return self._decode(value, "", 1)
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise DecodeError(TOO_DEEP) from None

    def _decode(self, value: Any, path: str, depth: int) -> Component:
        if depth > self.config.max_depth:
            raise DecodeError(TOO_DEEP, path)

        if isinstance(value, str):
            return TextComponent(value)

        if isinstance(value, list):
            root = TextComponent("")
            root.style.extra = self._decode_list(value, path, depth)
            return root

        if isinstance(value, dict):
            return self._decode_object(value, path, depth)

        raise DecodeError(UNSUPPORTED_TYPE, path)

    def _decode_list(self, values: Any, path: str, depth: int) -> list[Component]:
        _expect(values, list, path)
        return [
            self._decode(item, f"{path}/{idx}", depth + 1)
            for idx, item in enumerate(values)
        ]

    def _decode_object(self, obj: dict[str, Any], path: str, depth: int) -> Component:
        kind = next((key for key in DISCRIMINANTS if key in obj), None)
        if kind is None:
            raise DecodeError(MISSING_DISCRIMINANT, path)

        component = self._decode_variant(kind, obj, path, depth)
        self._decode_style(obj, component.style, path, depth)

        for key in obj.keys() - _VARIANT_KEYS[kind] - _STYLE_KEYS:
            logger.debug("Ignoring unrecognized key %r at %s", key, path or "/")

        return component

    def _decode_variant(
        self, kind: str, obj: dict[str, Any], path: str, depth: int
    ) -> Component:
        """Build the bare variant (default style) selected by ``kind``."""
        if kind == "text":
            _expect(obj["text"], str, f"{path}/text")
            return TextComponent(obj["text"])

        if kind == "translate":
            _expect(obj["translate"], str, f"{path}/translate")
            args = []
            if "with" in obj:
                args = self._decode_list(obj["with"], f"{path}/with", depth)
            return TranslatableComponent(obj["translate"], args)

        if kind == "score":
            return self._decode_score(obj["score"], f"{path}/score")

        if kind == "selector":
            _expect(obj["selector"], str, f"{path}/selector")
            return SelectorComponent(
                obj["selector"], self._decode_separator(obj, path, depth)
            )

        if kind == "keybind":
            _expect(obj["keybind"], str, f"{path}/keybind")
            return KeybindComponent(obj["keybind"])

        _expect(obj["nbt"], str, f"{path}/nbt")
        interpret = obj.get("interpret")
        if "interpret" in obj:
            _expect(interpret, bool, f"{path}/interpret")
        return NbtComponent(
            obj["nbt"],
            self._decode_nbt_source(obj, path),
            interpret,
            self._decode_separator(obj, path, depth),
        )

    def _decode_score(self, score: Any, path: str) -> ScoreComponent:
        _expect(score, dict, path)
        if "name" not in score or "objective" not in score:
            raise DecodeError(MALFORMED_OBJECT, path)
        for key in ("name", "objective"):
            _expect(score[key], str, f"{path}/{key}")
        value = score.get("value")
        if "value" in score:
            _expect(value, str, f"{path}/value")
        return ScoreComponent(score["name"], score["objective"], value)

    def _decode_nbt_source(self, obj: dict[str, Any], path: str) -> NbtSource:
        for kind in NbtSourceKind:
            if kind in obj:
                _expect(obj[kind], str, f"{path}/{kind}")
                return NbtSource(kind, obj[kind])
        raise DecodeError(MALFORMED_OBJECT, path)

    def _decode_separator(
        self, obj: dict[str, Any], path: str, depth: int
    ) -> Component | None:
        if "separator" not in obj:
            return None
        return self._decode(obj["separator"], f"{path}/separator", depth + 1)

    def _decode_style(
        self, obj: dict[str, Any], style: Style, path: str, depth: int
    ) -> None:
        """Populate ``style`` from the recognized style keys of ``obj``."""
        for name in FLAG_FIELDS:
            if name in obj:
                _expect(obj[name], bool, f"{path}/{name}")
                setattr(style, name, obj[name])

        if "color" in obj:
            key_path = f"{path}/color"
            _expect(obj["color"], str, key_path)
            try:
                style.color = parse_color(obj["color"])
            except ChatComponentError as exc:
                raise DecodeError(INVALID_VALUE, key_path) from exc

        if "font" in obj:
            key_path = f"{path}/font"
            _expect(obj["font"], str, key_path)
            try:
                style.font = Identifier.parse(obj["font"])
            except ChatComponentError as exc:
                raise DecodeError(INVALID_VALUE, key_path) from exc

        if "insertion" in obj:
            _expect(obj["insertion"], str, f"{path}/insertion")
            style.insertion = obj["insertion"]

        if "clickEvent" in obj:
            style.click_event = self._decode_click(obj["clickEvent"], f"{path}/clickEvent")

        if "hoverEvent" in obj:
            style.hover_event = self._decode_hover(
                obj["hoverEvent"], f"{path}/hoverEvent", depth
            )

        if "extra" in obj:
            style.extra = self._decode_list(obj["extra"], f"{path}/extra", depth)

    def _decode_click(self, event: Any, path: str) -> ClickEvent:
        _expect(event, dict, path)
        if "action" not in event or "value" not in event:
            raise DecodeError(MALFORMED_OBJECT, path)
        _expect(event["action"], str, f"{path}/action")
        try:
            action = ClickAction(event["action"])
        except ValueError:
            raise DecodeError(UNKNOWN_ACTION, f"{path}/action") from None

        value = event["value"]
        value_path = f"{path}/value"
        if action is ClickAction.CHANGE_PAGE:
            # Older writers send the page number as a string
            if isinstance(value, str) and value.isascii() and value.isdigit():
                value = int(value)
            _expect(value, int, value_path)
        else:
            _expect(value, str, value_path)
        return ClickEvent(action, value)

    def _decode_hover(self, event: Any, path: str, depth: int) -> HoverEvent:
        _expect(event, dict, path)
        if "action" not in event:
            raise DecodeError(MALFORMED_OBJECT, path)
        _expect(event["action"], str, f"{path}/action")
        try:
            action = HoverAction(event["action"])
        except ValueError:
            raise DecodeError(UNKNOWN_ACTION, f"{path}/action") from None

        # "contents" is the current key, "value" the legacy one
        payload_key = next((key for key in ("contents", "value") if key in event), None)
        if payload_key is None:
            raise DecodeError(MALFORMED_OBJECT, path)
        payload = event[payload_key]

        if action is HoverAction.SHOW_TEXT:
            payload = self._decode(payload, f"{path}/{payload_key}", depth + 1)
        else:
            _expect(payload, (str, dict), f"{path}/{payload_key}")
        return HoverEvent(action, payload)
