from __future__ import annotations

from django_metabox.boxes.base import BaseMetaBox
from django_metabox.forms import MetaBoxForm


class SimpleMetaBox(BaseMetaBox):
    """Flat list of fields, each stored under its own name."""

    template_name = "django_metabox/fields_box.html"
    default_rows = 10

    def get_context(self, request, record):
        values = {field.name: self.store.get(record, field.name) for field in self.fields}
        form = MetaBoxForm(
            rows=[[(field.name, field)] for field in self.fields],
            values=values,
            default_rows=self.default_rows,
        )
        return {"form": form, "box_class": "metabox-simple"}

    def save(self, request, record):
        if not self.gate.allows(request, record):
            return
        for field in self.fields:
            self._save_scalar(request, record, field.name, field)
