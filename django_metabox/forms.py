from __future__ import annotations

from typing import Iterable, Sequence

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Div, Field, Layout, Row
from django import forms
from django.utils import dateformat
from django.utils.dateparse import parse_date

from django_metabox.conf import settings
from django_metabox.fields import DateField, EditorField, FieldDefinition
from django_metabox.groups import position_class

__all__ = ["display_value", "formfield_for", "MetaBoxForm"]


def display_value(field: FieldDefinition, value) -> str:
    """Return the stored ``value`` as shown in the edit form.

    Dates stored as ``YYYY-MM-DD`` are shown with
    ``METABOX_DATE_DISPLAY_FORMAT``; anything unparseable is shown as stored.
    """

    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(item) for item in value)
    value = str(value)
    if isinstance(field, DateField) and value:
        try:
            parsed = parse_date(value)
        except ValueError:
            parsed = None
        if parsed is not None:
            return dateformat.format(parsed, settings.METABOX_DATE_DISPLAY_FORMAT)
    return value


def formfield_for(field: FieldDefinition, *, default_rows: int) -> forms.Field:
    attrs = {"class": "large-text", "placeholder": field.placeholder}
    if field.is_media:
        attrs["data-media"] = "true"
    if field.multiline:
        attrs["rows"] = field.rows or default_rows
        if isinstance(field, EditorField):
            attrs["class"] += " metabox-editor"
        widget = forms.Textarea(attrs=attrs)
    else:
        widget = forms.TextInput(attrs=attrs)
        widget.input_type = field.input_type
    return forms.CharField(
        label=field.verbose_label,
        required=False,
        strip=False,
        widget=widget,
    )


class MetaBoxForm(forms.Form):
    """Unbound form used to render flat and grouped meta fields.

    ``rows`` is a sequence of rows, each a sequence of ``(key, field)``
    pairs. A single-entry row per field gives the flat layout; one row per
    group gives the grouped layout.
    """

    def __init__(
        self,
        *args,
        rows: Sequence[Sequence[tuple[str, FieldDefinition]]] = (),
        values: dict | None = None,
        default_rows: int = 10,
        grouped: bool = False,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        values = values or {}
        for row in rows:
            for key, field in row:
                self.fields[key] = formfield_for(field, default_rows=default_rows)
                self.initial[key] = display_value(field, values.get(key))

        self.helper = FormHelper()
        self.helper.form_tag = False  # outer form tag is in template
        if grouped:
            self.helper.layout = Layout(*self._grouped_rows(rows))
        else:
            self.helper.layout = Layout(
                *[Div(Field(key), css_class="metabox-field") for row in rows for key, _ in row]
            )

    @staticmethod
    def _grouped_rows(rows) -> Iterable[Row]:
        for index, row in enumerate(rows):
            parity = "even-row" if index % 2 == 0 else "odd-row"
            yield Row(
                *[
                    Column(Field(key, css_class=position_class(pos, len(row))), css_class="col")
                    for pos, (key, _) in enumerate(row)
                ],
                css_class=f"form-field {parity}",
            )
