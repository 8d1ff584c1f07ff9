"""Tests for the Identifier resource location."""

from __future__ import annotations

import pytest

from chat_component.errors import InvalidIdentifierError
from chat_component.style.identifier import Identifier


class TestIdentifierParse:
    def test_full_form(self) -> None:
        ident = Identifier.parse("mymod:fancy")
        assert ident.namespace == "mymod"
        assert ident.path == "fancy"

    def test_bare_path_uses_default_namespace(self) -> None:
        assert Identifier.parse("uniform") == Identifier("minecraft", "uniform")

    def test_custom_default_namespace(self) -> None:
        assert Identifier.parse("alt", default_namespace="mymod") == Identifier("mymod", "alt")

    def test_bare_and_full_forms_are_equal(self) -> None:
        assert Identifier.parse("uniform") == Identifier.parse("minecraft:uniform")

    def test_path_may_contain_slashes(self) -> None:
        assert Identifier.parse("minecraft:include/space").path == "include/space"

    def test_empty_namespace_uses_default(self) -> None:
        """":foo" is read as "minecraft:foo", as the game does."""
        assert Identifier.parse(":foo") == Identifier("minecraft", "foo")

    @pytest.mark.parametrize("value", ["a:b:c", "namespace:", "", ":"])
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            Identifier.parse(value)

    def test_rejects_bad_default_namespace(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            Identifier.parse("path", default_namespace="a:b")


class TestIdentifierStr:
    def test_str_is_full_form(self) -> None:
        assert str(Identifier.parse("uniform")) == "minecraft:uniform"
        assert str(Identifier("mymod", "fancy")) == "mymod:fancy"


class TestIdentifierConstruction:
    """Direct construction is validated like parse(), so every instance round-trips."""

    @pytest.mark.parametrize(
        ("namespace", "path"),
        [("", "x"), ("a:b", "c"), ("minecraft", ""), ("minecraft", "a:b")],
    )
    def test_rejects_invalid_halves(self, namespace: str, path: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            Identifier(namespace, path)

    def test_str_parses_back(self) -> None:
        ident = Identifier("mymod", "fonts/fancy")
        assert Identifier.parse(str(ident)) == ident
