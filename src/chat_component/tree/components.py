"""Component variants: the closed set of node kinds in a chat-text tree.

``Component`` is a union of six dataclasses. Each carries its own payload
fields plus a ``Style`` (which owns the ``extra`` children). Trees are plain
nested values: a child belongs to exactly one parent and there are no back
references, so a tree is acyclic as long as children are built before they
are attached.

Example::

    hi = TextComponent("hi")
    hi.style.bold = True
    hi.style.color = NamedColor.RED
    bye = TextComponent("bye")
    bye.style.bold = False
    hi.append(bye)
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Self

from chat_component.style.style import Style

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


class _TreeOps:
    """Child-list helpers shared by all variants."""

    __slots__ = ()

    style: Style

    @property
    def extra(self) -> list[Component]:
        return self.style.extra

    def append(self, child: Component) -> Self:
        """Append ``child`` to ``extra`` and return ``self`` for chaining."""
        self.style.extra.append(child)
        return self

    def clone(self) -> Self:
        """Return an independent deep copy of this subtree."""
        return copy.deepcopy(self)


@dataclass(slots=True)
class TextComponent(_TreeOps):
    """Literal text."""

    text: str
    style: Style = field(default_factory=Style)


@dataclass(slots=True)
class TranslatableComponent(_TreeOps):
    """A translation key rendered in the client's language.

    Attributes:
        key:   Translation key, e.g. ``"chat.type.text"``.
        with_: Substitution arguments (wire key ``with``), in order.
    """

    key: str
    with_: list[Component] = field(default_factory=list)
    style: Style = field(default_factory=Style)


@dataclass(slots=True)
class ScoreComponent(_TreeOps):
    """A scoreboard value.

    Attributes:
        name:      Score holder name or selector.
        objective: Scoreboard objective name.
        value:     Optional literal that replaces the looked-up value.
    """

    name: str
    objective: str
    value: str | None = None
    style: Style = field(default_factory=Style)


@dataclass(slots=True)
class SelectorComponent(_TreeOps):
    """Names of the entities matched by an entity selector.

    Attributes:
        pattern:   Selector text, e.g. ``"@a[team=red]"``. Not validated.
        separator: Placed between names when several entities match.
    """

    pattern: str
    separator: Component | None = None
    style: Style = field(default_factory=Style)


@dataclass(slots=True)
class KeybindComponent(_TreeOps):
    """The key currently bound to a control, e.g. ``"key.jump"``."""

    keybind: str
    style: Style = field(default_factory=Style)


class NbtSourceKind(StrEnum):
    """Where an NBT path is resolved. Values double as the wire keys."""

    BLOCK = auto()
    ENTITY = auto()
    STORAGE = auto()


@dataclass(slots=True)
class NbtSource:
    """Tagged NBT source.

    Attributes:
        kind:   Block coordinates, entity selector or command storage.
        target: Coordinates (``"~ ~-1 ~"``), selector, or storage identifier.
    """

    kind: NbtSourceKind
    target: str

    @classmethod
    def block(cls, position: str) -> NbtSource:
        return cls(NbtSourceKind.BLOCK, position)

    @classmethod
    def entity(cls, selector: str) -> NbtSource:
        return cls(NbtSourceKind.ENTITY, selector)

    @classmethod
    def storage(cls, identifier: str) -> NbtSource:
        return cls(NbtSourceKind.STORAGE, identifier)


@dataclass(slots=True)
class NbtComponent(_TreeOps):
    """Data read from NBT at render time.

    Attributes:
        path:      NBT path. Not validated.
        source:    Block, entity or storage to read from.
        interpret: When true the value is itself parsed as a component.
        separator: Placed between values when the path matches several.
    """

    path: str
    source: NbtSource
    interpret: bool | None = None
    separator: Component | None = None
    style: Style = field(default_factory=Style)


Component = (
    TextComponent
    | TranslatableComponent
    | ScoreComponent
    | SelectorComponent
    | KeybindComponent
    | NbtComponent
)

COMPONENT_TYPES: tuple[type, ...] = (
    TextComponent,
    TranslatableComponent,
    ScoreComponent,
    SelectorComponent,
    KeybindComponent,
    NbtComponent,
)
