"""Tests for the component variant dataclasses.

Verifies:
- Constructors take only the variant's required fields and start with an empty Style
- append() preserves insertion order and chains
- clone() yields an independent, equal subtree
- Structural equality covers variant type, payload, style and children
- Free-form strings are accepted without validation
"""

from __future__ import annotations

import pytest

from chat_component.style.color import NamedColor
from chat_component.style.events import HoverEvent
from chat_component.style.style import Style
from chat_component.tree.components import (
    COMPONENT_TYPES,
    KeybindComponent,
    NbtComponent,
    NbtSource,
    NbtSourceKind,
    ScoreComponent,
    SelectorComponent,
    TextComponent,
    TranslatableComponent,
)


class TestConstruction:
    def test_text_defaults(self) -> None:
        comp = TextComponent("hello")
        assert comp.text == "hello"
        assert comp.style == Style()

    def test_translatable_defaults(self) -> None:
        comp = TranslatableComponent("chat.type.text")
        assert comp.key == "chat.type.text"
        assert comp.with_ == []

    def test_score_defaults(self) -> None:
        comp = ScoreComponent("@p", "kills")
        assert (comp.name, comp.objective, comp.value) == ("@p", "kills", None)

    def test_selector_defaults(self) -> None:
        comp = SelectorComponent("@a[team=red]")
        assert comp.separator is None

    def test_keybind(self) -> None:
        assert KeybindComponent("key.jump").keybind == "key.jump"

    def test_nbt_defaults(self) -> None:
        comp = NbtComponent("Inventory[0]", NbtSource.entity("@s"))
        assert comp.source == NbtSource(NbtSourceKind.ENTITY, "@s")
        assert comp.interpret is None
        assert comp.separator is None

    def test_nbt_source_constructors(self) -> None:
        assert NbtSource.block("~ ~ ~").kind is NbtSourceKind.BLOCK
        assert NbtSource.storage("mymod:data").kind is NbtSourceKind.STORAGE

    @pytest.mark.parametrize("value", ["", "@@@[[[", "not a path {", "§cred"])
    def test_free_form_strings_not_validated(self, value: str) -> None:
        SelectorComponent(value)
        NbtComponent(value, NbtSource.block(value))
        TranslatableComponent(value)
        TextComponent(value)

    def test_component_types_tuple(self) -> None:
        assert len(COMPONENT_TYPES) == 6


class TestTreeEditing:
    def test_append_preserves_order(self) -> None:
        root = TextComponent("")
        root.append(TextComponent("a")).append(TextComponent("b")).append(TextComponent("a"))
        assert [child.text for child in root.extra] == ["a", "b", "a"]

    def test_extra_is_style_extra(self) -> None:
        root = TextComponent("")
        root.append(KeybindComponent("key.jump"))
        assert root.extra is root.style.extra

    def test_direct_style_mutation(self) -> None:
        comp = TextComponent("hi")
        comp.style.bold = True
        comp.style.color = NamedColor.RED
        assert comp.style.bold is True
        assert comp.style.color is NamedColor.RED

    def test_clone_is_independent(self) -> None:
        root = TextComponent("root")
        root.style.hover_event = HoverEvent.show_text(TextComponent("tip"))
        root.append(TextComponent("child"))

        copy = root.clone()
        assert copy == root
        copy.extra[0].style.bold = True
        copy.style.hover_event.value.text = "changed"
        assert root.extra[0].style.bold is None
        assert root.style.hover_event.value.text == "tip"


class TestEquality:
    def test_same_payload_different_variant(self) -> None:
        assert TextComponent("key.jump") != KeybindComponent("key.jump")

    def test_style_participates(self) -> None:
        a, b = TextComponent("x"), TextComponent("x")
        b.style.italic = False
        assert a != b

    def test_children_participate(self) -> None:
        a, b = TextComponent("x"), TextComponent("x")
        a.append(TextComponent("y"))
        assert a != b
        b.append(TextComponent("y"))
        assert a == b

    def test_translatable_args_participate(self) -> None:
        a = TranslatableComponent("k", [TextComponent("1")])
        b = TranslatableComponent("k", [TextComponent("2")])
        assert a != b

    def test_selector_separator_participates(self) -> None:
        assert SelectorComponent("@a", TextComponent(", ")) != SelectorComponent("@a")
