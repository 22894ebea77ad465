"""Parsing of repeated-group form submissions.

Repeated inputs are named ``owner[key][index]``::

    links[link_label][1]=Docs&links[link_url][1]=https://...&links[link_label][2]=...

and are grouped per key into value lists in submission order, which is the
row order shown in the browser. Only purely numeric indices are data rows;
the template placeholder (``_row``) and any other index is ignored.
"""
from __future__ import annotations

import logging
import re
from typing import Mapping

log = logging.getLogger(__name__)

__all__ = ["parse_repeat_submission"]

_INPUT_NAME = re.compile(r"^(?P<owner>[^\[\]]+)\[(?P<key>[^\[\]]+)\]\[(?P<index>[^\[\]]*)\]$")
_ROW_INDEX = re.compile(r"[0-9]+")


def _lists(data: Mapping):
    if hasattr(data, "lists"):
        return data.lists()
    return ((name, value if isinstance(value, list) else [value]) for name, value in data.items())


def parse_repeat_submission(data: Mapping, owner: str) -> dict[str, list[str]] | None:
    """Return ``{key: [value, ...]}`` for inputs submitted under ``owner``.

    Returns ``None`` when nothing was submitted under ``owner``. When the
    same index is submitted twice for a key, the later value wins and keeps
    the position of the first.
    """

    found = False
    columns: dict[str, dict[int, str]] = {}
    for name, values in _lists(data):
        match = _INPUT_NAME.match(name)
        if match is None or match["owner"] != owner:
            continue
        found = True
        index = match["index"]
        if not _ROW_INDEX.fullmatch(index):
            log.debug("Ignoring %s: %r is not a row index", name, index)
            continue
        if not values:
            continue
        columns.setdefault(match["key"], {})[int(index)] = values[-1]

    if not found:
        return None
    return {key: list(rows.values()) for key, rows in columns.items()}
