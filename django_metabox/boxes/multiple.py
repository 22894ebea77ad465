from __future__ import annotations

from django_metabox.boxes.base import BaseMetaBox
from django_metabox.forms import MetaBoxForm


class MultipleMetaBox(BaseMetaBox):
    """Fixed groups of fields, one row per group.

    Each field is stored under ``prefix + name``.
    """

    template_name = "django_metabox/fields_box.html"
    default_rows = 5

    def get_context(self, request, record):
        rows = [[(group.key(field), field) for field in group.fields] for group in self.groups]
        values = {key: self.store.get(record, key) for row in rows for key, _ in row}
        form = MetaBoxForm(
            rows=rows,
            values=values,
            default_rows=self.default_rows,
            grouped=True,
        )
        return {"form": form, "box_class": "metabox-multiple"}

    def save(self, request, record):
        if not self.gate.allows(request, record):
            return
        for group in self.groups:
            for field in group.fields:
                self._save_scalar(request, record, group.key(field), field)
