"""Conversion between the stored and the editable shape of repeated groups.

Stored data is column-oriented: one list of values per field, the list index
being the row number::

    {"street": ["Main St", "2nd Ave"], "city": ["Town", ""]}

The edit form works on rows::

    [{"street": "Main St", "city": "Town"}, {"street": "2nd Ave", "city": ""}]
"""
from __future__ import annotations

from typing import Mapping, Sequence

__all__ = ["Columns", "Rows", "to_rows", "to_columns"]

Columns = dict[str, list[str]]
Rows = list[dict[str, str]]


def to_rows(columns: Mapping[str, Sequence[str]]) -> Rows:
    """Transpose column lists into rows.

    Lists of unequal length are accepted: a row exists as soon as any field
    has a value at that index, and fields with shorter lists are simply
    absent from the later rows. No row is dropped here, even an empty one.
    """

    rows: Rows = []
    for name, values in columns.items():
        for index, value in enumerate(values):
            while len(rows) <= index:
                rows.append({})
            rows[index][name] = value
    return rows


def to_columns(rows: Sequence[Mapping[str, str]]) -> Columns:
    """Transpose rows back into column lists of equal length.

    Field order follows first appearance across rows. A field missing from a
    row contributes an empty string at that position.
    """

    names: list[str] = []
    for row in rows:
        for name in row:
            if name not in names:
                names.append(name)
    return {name: [row.get(name, "") for row in rows] for name in names}
