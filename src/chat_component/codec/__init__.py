"""Codec subpackage: component tree <-> JSON value.

Encoding and decoding are deliberately separate classes: the decoder accepts
the string and array shorthand forms, the encoder only ever writes the
canonical object form.
"""

from chat_component.codec.config import CodecConfig, HoverKey
from chat_component.codec.decoder import DISCRIMINANTS, ComponentDecoder, JsonValue
from chat_component.codec.encoder import ComponentEncoder

__all__ = [
    "DISCRIMINANTS",
    "CodecConfig",
    "ComponentDecoder",
    "ComponentEncoder",
    "HoverKey",
    "JsonValue",
]
