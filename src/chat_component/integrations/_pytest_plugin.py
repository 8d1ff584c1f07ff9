"""pytest plugin for chat-component.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from chat_component import CodecConfig, Component, decode, encode


@pytest.fixture(scope="session")
def assert_component_roundtrip() -> Any:
    """Fixture that returns a callable round-trip asserter.

    The fixture is session-scoped because the returned callable is stateless
    (encode() and decode() build a fresh encoder/decoder per call).

    Usage in tests::

        def test_greeting(assert_component_roundtrip):
            hi = TextComponent("hi")
            hi.style.bold = False
            assert_component_roundtrip(hi, expected={"text": "hi", "bold": False})

    Returns:
        A callable ``_assert(component, expected=None, config=None) -> None``
        that raises ``AssertionError`` when ``decode(encode(component))`` is
        not equal to ``component``, or when ``expected`` is given and the
        encoded form differs from it.
    """

    def _assert(
        component: Component,
        expected: dict[str, Any] | None = None,
        config: CodecConfig | None = None,
    ) -> None:
        """Assert that a component survives an encode/decode round trip.

        Args:
            component: The component tree under test.
            expected:  Optional exact JSON object the encoding must equal.
            config:    Optional CodecConfig for both directions.

        Raises:
            AssertionError: With the encoded and decoded values in the message.
        """
        encoded = encode(component, config)
        if expected is not None and encoded != expected:
            raise AssertionError(
                f"Component encoding mismatch\n"
                f"  encoded:  {encoded}\n"
                f"  expected: {expected}"
            )
        decoded = decode(encoded, config)
        if decoded != component:
            raise AssertionError(
                f"Component did not survive round trip\n"
                f"  original: {component}\n"
                f"  encoded:  {encoded}\n"
                f"  decoded:  {decoded}"
            )

    return _assert
