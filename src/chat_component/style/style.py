"""Style: the formatting record shared by every component variant.

Every field is optional and starts unset. The five formatting flags are
tri-state (``None`` / ``True`` / ``False``): ``None`` means "inherit from the
parent at render time" and is omitted from the wire form, while ``False`` is
an explicit override and is emitted. No inheritance is resolved here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chat_component.style.color import Color, NamedColor
from chat_component.style.events import ClickEvent, HoverEvent
from chat_component.style.identifier import Identifier

if TYPE_CHECKING:
    from chat_component.tree.components import Component

__all__ = ["FLAG_FIELDS", "Style"]

# Wire key == attribute name for all five flags
FLAG_FIELDS: tuple[str, ...] = (
    "bold",
    "italic",
    "underlined",
    "strikethrough",
    "obfuscated",
)


@dataclass(slots=True)
class Style:
    """Optional formatting attributes plus the ordered child list.

    Attributes:
        bold, italic, underlined, strikethrough, obfuscated:
            Tri-state flags. ``None`` is unset.
        color:       Named or RGB color.
        font:        Font resource identifier.
        insertion:   Text inserted into the chat input on shift-click.
        click_event: Action run on click.
        hover_event: Tooltip shown on hover.
        extra:       Child components, rendered left to right after this
                     component's own content. Order is preserved as given.
    """

    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    color: Color | None = None
    font: Identifier | None = None
    insertion: str | None = None
    click_event: ClickEvent | None = None
    hover_event: HoverEvent | None = None
    extra: list[Component] = field(default_factory=list)

    def reset(self) -> None:
        """Explicitly turn off every flag and set the color to white."""
        for name in FLAG_FIELDS:
            setattr(self, name, False)
        self.color = NamedColor.WHITE

    def is_empty(self) -> bool:
        """True when no attribute is set and there are no children."""
        return self == Style()
