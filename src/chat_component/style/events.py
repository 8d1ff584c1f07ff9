"""Click and hover payloads attached to a Style.

Only the data is modeled here. Opening URLs, running commands and showing
tooltips is the client's business.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chat_component.tree.components import Component

__all__ = ["ClickAction", "ClickEvent", "HoverAction", "HoverEvent"]


class ClickAction(StrEnum):
    """What happens when the player clicks the text.

    Values are the lowercased member names, matching the wire ``action``.
    """

    OPEN_URL = auto()
    OPEN_FILE = auto()
    RUN_COMMAND = auto()
    SUGGEST_COMMAND = auto()
    CHANGE_PAGE = auto()
    COPY_TO_CLIPBOARD = auto()


class HoverAction(StrEnum):
    """What is shown when the player hovers over the text."""

    SHOW_TEXT = auto()
    SHOW_ITEM = auto()
    SHOW_ENTITY = auto()


@dataclass(slots=True)
class ClickEvent:
    """A click action and its payload.

    Attributes:
        action: The click action.
        value:  URL, command, file path or clipboard text; an ``int`` page
                number for ``CHANGE_PAGE``.
    """

    action: ClickAction
    value: str | int

    @classmethod
    def open_url(cls, url: str) -> ClickEvent:
        return cls(ClickAction.OPEN_URL, url)

    @classmethod
    def run_command(cls, command: str) -> ClickEvent:
        return cls(ClickAction.RUN_COMMAND, command)

    @classmethod
    def suggest_command(cls, command: str) -> ClickEvent:
        return cls(ClickAction.SUGGEST_COMMAND, command)

    @classmethod
    def change_page(cls, page: int) -> ClickEvent:
        return cls(ClickAction.CHANGE_PAGE, page)

    @classmethod
    def copy_to_clipboard(cls, text: str) -> ClickEvent:
        return cls(ClickAction.COPY_TO_CLIPBOARD, text)


@dataclass(slots=True)
class HoverEvent:
    """A hover action and its payload.

    Attributes:
        action: The hover action.
        value:  A ``Component`` for ``SHOW_TEXT``. For ``SHOW_ITEM`` and
                ``SHOW_ENTITY`` the raw JSON payload (a string or an object)
                is kept verbatim, since its schema belongs to the game's item
                and entity formats rather than to chat text.

    Raises:
        TypeError: On construction, if the payload type does not match the
            action.
    """

    action: HoverAction
    value: Component | str | dict[str, Any]

    def __post_init__(self) -> None:
        from chat_component.tree.components import COMPONENT_TYPES

        if self.action is HoverAction.SHOW_TEXT:
            if not isinstance(self.value, COMPONENT_TYPES):
                msg = f"show_text payload must be a component, got {type(self.value)!r}"
                raise TypeError(msg)
        elif not isinstance(self.value, (str, dict)):
            msg = f"{self.action} payload must be a str or dict, got {type(self.value)!r}"
            raise TypeError(msg)

    @classmethod
    def show_text(cls, component: Component) -> HoverEvent:
        return cls(HoverAction.SHOW_TEXT, component)

    @classmethod
    def show_item(cls, item: str | dict[str, Any]) -> HoverEvent:
        return cls(HoverAction.SHOW_ITEM, item)

    @classmethod
    def show_entity(cls, entity: str | dict[str, Any]) -> HoverEvent:
        return cls(HoverAction.SHOW_ENTITY, entity)
