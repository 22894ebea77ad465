"""Field groups keyed by storage prefix."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .fields import FieldDefinition

__all__ = ["Group", "GroupRegistry", "position_class"]


@dataclass(frozen=True)
class Group:
    """Ordered fields sharing a storage key prefix.

    Declaration order is significant: it drives column order when rows are
    rebuilt and the first/last markers used for styling.
    """

    prefix: str
    fields: tuple[FieldDefinition, ...] = ()

    def key(self, field: FieldDefinition) -> str:
        return f"{self.prefix}{field.name}"

    def keys(self) -> list[str]:
        return [self.key(field) for field in self.fields]

    def field_for_key(self, key: str) -> FieldDefinition | None:
        for field in self.fields:
            if self.key(field) == key:
                return field
        return None

    @property
    def names(self) -> list[str]:
        return [field.name for field in self.fields]


class GroupRegistry:
    """Store field groups by prefix, preserving declaration order.

    Grouping fields under a prefix that already exists appends to that group.
    """

    def __init__(self):
        self._groups: dict[str, Group] = {}

    def group_fields(self, prefix: str, *fields: FieldDefinition) -> Group:
        if not isinstance(prefix, str):
            raise TypeError("prefix must be a string")
        for field in fields:
            if not isinstance(field, FieldDefinition):
                raise TypeError("fields must be FieldDefinition instances")

        existing = self.get(prefix) or Group(prefix=prefix)
        names = set(existing.names)
        for field in fields:
            if field.name in names:
                raise ValueError(f"Field '{field.name}' is already grouped under '{prefix}'")
            names.add(field.name)

        group = Group(prefix=prefix, fields=existing.fields + tuple(fields))
        self._groups[prefix] = group
        return group

    def get(self, prefix: str) -> Group | None:
        return self._groups.get(prefix)

    def all(self) -> list[Group]:
        return list(self._groups.values())

    def keys(self) -> list[str]:
        """Return every storage key across all groups."""
        return [key for group in self._groups.values() for key in group.keys()]

    def field_for_key(self, key: str) -> FieldDefinition | None:
        for group in self._groups.values():
            field = group.field_for_key(key)
            if field is not None:
                return field
        return None

    def __iter__(self) -> Iterator[Group]:
        return iter(self.all())


def position_class(index: int, count: int) -> str:
    """CSS markers for the first and last input of a row."""
    classes = []
    if index == 0:
        classes.append("first-field")
    if index == count - 1:
        classes.append("last-field")
    return " ".join(classes)
