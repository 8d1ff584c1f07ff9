"""ComponentEncoder: converts a component tree into its canonical JSON value.

The output is always the object form, never the string or array shorthand.
Only keys for fields that are actually set are emitted: an unset flag is
absent, an explicit ``False`` is written as ``false``, and an empty ``extra``
or ``with`` list is left out.

Key order is fixed (discriminant keys first, then style keys, then
``extra``) so that serialized output is deterministic.

Nesting depth is counted the same way the decoder counts it: the root is 1
and every child, argument, separator or hover text adds one. A tree deeper
than ``CodecConfig.max_depth`` is refused, since its encoding would not
decode back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chat_component.codec.config import CodecConfig
from chat_component.errors import EncodeError
from chat_component.style.events import ClickEvent, HoverAction, HoverEvent
from chat_component.style.style import FLAG_FIELDS, Style
from chat_component.tree.components import (
    Component,
    KeybindComponent,
    NbtComponent,
    ScoreComponent,
    SelectorComponent,
    TextComponent,
    TranslatableComponent,
)

__all__ = ["ComponentEncoder"]

TOO_DEEP = "maximum nesting depth exceeded"


@dataclass
class ComponentEncoder:
    """Converts a ``Component`` into a JSON-compatible ``dict``.

    Example::
        encoder = ComponentEncoder()
        hi = TextComponent("hi")
        hi.style.bold = True
        encoder.encode(hi)
        # {"text": "hi", "bold": True}
    """

    config: CodecConfig = field(default_factory=CodecConfig)

    def encode(self, component: Component) -> dict[str, Any]:
        """Encode a component and all of its descendants.

        Args:
            component: Any of the six component variants.

        Returns:
            A dict ready for ``json.dumps``.

        Raises:
            TypeError: If ``component`` is not a component variant.
            EncodeError: If the tree is nested deeper than ``config.max_depth``.
        """
        try:
            return self._encode(component, 1)
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise EncodeError(TOO_DEEP) from None

    def _encode(self, component: Component, depth: int) -> dict[str, Any]:
        if depth > self.config.max_depth:
            raise EncodeError(TOO_DEEP)

        if isinstance(component, TextComponent):
            out: dict[str, Any] = {"text": component.text}
        elif isinstance(component, TranslatableComponent):
            out = {"translate": component.key}
            if component.with_:
                out["with"] = [self._encode(arg, depth + 1) for arg in component.with_]
        elif isinstance(component, ScoreComponent):
            score = {"name": component.name, "objective": component.objective}
            if component.value is not None:
                score["value"] = component.value
            out = {"score": score}
        elif isinstance(component, SelectorComponent):
            out = {"selector": component.pattern}
            if component.separator is not None:
                out["separator"] = self._encode(component.separator, depth + 1)
        elif isinstance(component, KeybindComponent):
            out = {"keybind": component.keybind}
        elif isinstance(component, NbtComponent):
            out = {
                "nbt": component.path,
                str(component.source.kind): component.source.target,
            }
            if component.interpret is not None:
                out["interpret"] = component.interpret
            if component.separator is not None:
                out["separator"] = self._encode(component.separator, depth + 1)
        else:
            raise TypeError(f"Unsupported component type: {type(component)!r}")

        self._encode_style(component.style, out, depth)
        return out

    def _encode_style(self, style: Style, out: dict[str, Any], depth: int) -> None:
        """Write every set field of ``style`` into ``out``."""
        for name in FLAG_FIELDS:
            value = getattr(style, name)
            if value is not None:
                out[name] = value
        if style.color is not None:
            out["color"] = style.color.to_wire_string()
        if style.font is not None:
            out["font"] = str(style.font)
        if style.insertion is not None:
            out["insertion"] = style.insertion
        if style.click_event is not None:
            out["clickEvent"] = self._encode_click(style.click_event)
        if style.hover_event is not None:
            out["hoverEvent"] = self._encode_hover(style.hover_event, depth)
        if style.extra:
            out["extra"] = [self._encode(child, depth + 1) for child in style.extra]

    def _encode_click(self, event: ClickEvent) -> dict[str, Any]:
        return {"action": str(event.action), "value": event.value}

    def _encode_hover(self, event: HoverEvent, depth: int) -> dict[str, Any]:
        if event.action is HoverAction.SHOW_TEXT:
            payload = self._encode(event.value, depth + 1)
        else:
            payload = event.value
        return {"action": str(event.action), str(self.config.hover_key): payload}
