"""Content types produced by quick-capture classification."""

from __future__ import annotations

from enum import StrEnum

# Older call sites name the task container "todoList".
_ALIASES: dict[str, str] = {
    "todolist": "task",
    "todo_list": "task",
    "todo-list": "task",
    "todo": "task",
}


class ContentType(StrEnum):
    """The three mutually exclusive capture categories."""

    TASK = "task"
    LIST = "list"
    NOTE = "note"

    @classmethod
    def parse(cls, value: str) -> ContentType:
        """Resolve a user-supplied type name, accepting legacy aliases.

        Raises:
            ValueError: If *value* names no known content type.
        """
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(repr(member.value) for member in cls)
            msg = f"Unknown content type {value!r}; expected one of {choices}"
            raise ValueError(msg) from None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[ContentType, str] = {
    ContentType.TASK: "Todo List",
    ContentType.LIST: "List",
    ContentType.NOTE: "Note",
}
