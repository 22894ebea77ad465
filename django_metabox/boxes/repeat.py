from __future__ import annotations

import logging
from dataclasses import dataclass

from django_metabox.boxes.base import BaseMetaBox
from django_metabox.conf import settings
from django_metabox.fields import FieldDefinition
from django_metabox.groups import Group, position_class
from django_metabox.submission import parse_repeat_submission
from django_metabox.transpose import Columns, to_rows

log = logging.getLogger(__name__)

__all__ = ["Cell", "RenderedRow", "RenderedTable", "RepeatMetaBox"]


@dataclass(frozen=True)
class Cell:
    name: str
    value: str
    placeholder: str
    css_class: str


@dataclass(frozen=True)
class RenderedRow:
    index: str
    cells: tuple[Cell, ...]


@dataclass(frozen=True)
class RenderedTable:
    prefix: str
    template: RenderedRow
    rows: tuple[RenderedRow, ...]


class RepeatMetaBox(BaseMetaBox):
    """Groups of fields repeated as user-editable rows.

    Each field of a group is stored as one list of values under
    ``prefix + name``; the list index is the row. Rows are rendered numbered
    from 1, plus one blank template row whose inputs carry the
    ``METABOX_ROW_PLACEHOLDER`` index. The browser clones the template to
    add rows and renumbers rows after every add, remove or move.
    """

    template_name = "django_metabox/repeat_box.html"

    @property
    def placeholder(self) -> str:
        return settings.METABOX_ROW_PLACEHOLDER

    def input_name(self, group: Group, field: FieldDefinition, index) -> str:
        return f"{self.id}[{group.key(field)}][{index}]"

    # ---------------- Rendering ----------------
    def get_data(self, record, group: Group) -> Columns:
        """Read the stored column lists of ``group``, skipping empty ones."""
        data: Columns = {}
        for field in group.fields:
            stored = self.store.get(record, group.key(field))
            if not stored:
                continue
            if not isinstance(stored, list):
                stored = [stored]
            data[field.name] = ["" if value is None else str(value) for value in stored]
        return data

    def _row(self, group: Group, index, values: dict) -> RenderedRow:
        count = len(group.fields)
        return RenderedRow(
            index=str(index),
            cells=tuple(
                Cell(
                    name=self.input_name(group, field, index),
                    value=values.get(field.name, ""),
                    placeholder=field.placeholder,
                    css_class=position_class(position, count),
                )
                for position, field in enumerate(group.fields)
            ),
        )

    def build_table(self, record, group: Group) -> RenderedTable:
        rows = to_rows(self.get_data(record, group))
        return RenderedTable(
            prefix=group.prefix,
            template=self._row(group, self.placeholder, {}),
            rows=tuple(self._row(group, index, row) for index, row in enumerate(rows, start=1)),
        )

    def get_tables(self, record) -> list[RenderedTable]:
        return [self.build_table(record, group) for group in self.groups]

    def get_context(self, request, record):
        return {"tables": self.get_tables(record)}

    # ---------------- Saving ----------------
    def save(self, request, record):
        if not self.gate.allows(request, record):
            return
        submission = parse_repeat_submission(request.POST, self.id)
        if submission is None:
            log.debug("Nothing submitted for %s", self.id)
            return

        known = self.groups.keys()
        for key in known:
            if key not in submission:
                continue
            field = self.groups.field_for_key(key)
            values = [field.clean(value) for value in submission[key]]
            # Kept or dropped as a whole column: empty cells stay in place.
            if any(values):
                self.store.set(record, key, values)
            else:
                self.store.delete(record, key)

        unknown = set(submission).difference(known)
        if unknown:
            log.debug("Ignoring unknown keys for %s: %s", self.id, sorted(unknown))
