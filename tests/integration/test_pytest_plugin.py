"""Integration tests for the chat-component pytest plugin.

These tests verify that the assert_component_roundtrip fixture is
auto-discovered via the pytest11 entry point and behaves correctly.

NOTE: These tests require chat-component to be installed (even in editable
mode via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from chat_component import CodecConfig, HoverEvent, HoverKey, NamedColor, TextComponent


def test_fixture_passes_plain_component(assert_component_roundtrip: Any) -> None:
    assert_component_roundtrip(TextComponent("hi"))


def test_fixture_checks_expected_encoding(assert_component_roundtrip: Any) -> None:
    comp = TextComponent("hi")
    comp.style.color = NamedColor.GOLD
    assert_component_roundtrip(comp, expected={"text": "hi", "color": "gold"})


def test_fixture_reports_encoding_mismatch(assert_component_roundtrip: Any) -> None:
    with pytest.raises(AssertionError, match="encoding mismatch"):
        assert_component_roundtrip(TextComponent("hi"), expected={"text": "bye"})


def test_fixture_forwards_config(assert_component_roundtrip: Any) -> None:
    comp = TextComponent("hi")
    comp.style.hover_event = HoverEvent.show_text(TextComponent("tip"))
    assert_component_roundtrip(
        comp,
        expected={"text": "hi", "hoverEvent": {"action": "show_text", "value": {"text": "tip"}}},
        config=CodecConfig(hover_key=HoverKey.VALUE),
    )


def test_fixture_returns_callable(assert_component_roundtrip: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_component_roundtrip)


def test_plugin_discovery() -> None:
    """Verify assert_component_roundtrip appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).parent.parent.parent),
    )
    assert "assert_component_roundtrip" in result.stdout
