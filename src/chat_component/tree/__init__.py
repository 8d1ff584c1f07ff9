"""Tree subpackage: the component variants.

Re-exports the six variant dataclasses, the ``Component`` union alias and
the NBT source types.
"""

from chat_component.tree.components import (
    COMPONENT_TYPES,
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

__all__ = [
    "COMPONENT_TYPES",
    "Component",
    "KeybindComponent",
    "NbtComponent",
    "NbtSource",
    "NbtSourceKind",
    "ScoreComponent",
    "SelectorComponent",
    "TextComponent",
    "TranslatableComponent",
]
