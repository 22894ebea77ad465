"""Field definitions: one frozen dataclass per field kind.

Each kind carries only the options it accepts, so a typo in an option name
fails when the meta box is configured rather than when it is rendered::

    make_field("textarea", "summary", rows=4)       # TextareaField
    make_field("text", "subtitle", rows=4)          # TypeError
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from django.utils.text import capfirst

from .sanitizers import sanitize_html, sanitize_text, sanitize_textarea

__all__ = [
    "FieldDefinition",
    "TextField",
    "NumberField",
    "UrlField",
    "EmailField",
    "TelField",
    "DateField",
    "TextareaField",
    "EditorField",
    "FIELD_TYPES",
    "make_field",
]

_VALID_NAME = re.compile(r"^[^\s\[\]]+$")

# Placeholder words that turn an input into a media picker on the client.
MEDIA_KEYWORDS = ("image", "avatar", "icon")


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    placeholder: str = ""
    label: str = ""

    type: ClassVar[str] = "text"
    input_type: ClassVar[str] = "text"
    multiline: ClassVar[bool] = False
    sanitizer: ClassVar[Callable[[object], str]] = staticmethod(sanitize_text)

    def __post_init__(self):
        if not isinstance(self.name, str) or not _VALID_NAME.match(self.name):
            raise ValueError(f"Invalid field name {self.name!r} for {self.type} field")
        if not isinstance(self.placeholder, str):
            raise TypeError(f"placeholder for field '{self.name}' must be a string")
        if not isinstance(self.label, str):
            raise TypeError(f"label for field '{self.name}' must be a string")

    @property
    def verbose_label(self) -> str:
        return self.label or capfirst(self.name.replace("_", " ").strip())

    @property
    def is_media(self) -> bool:
        placeholder = self.placeholder.lower()
        return any(word in placeholder for word in MEDIA_KEYWORDS)

    def clean(self, value) -> str:
        return self.sanitizer(value)


@dataclass(frozen=True)
class TextField(FieldDefinition):
    pass


@dataclass(frozen=True)
class NumberField(FieldDefinition):
    type: ClassVar[str] = "number"
    input_type: ClassVar[str] = "number"


@dataclass(frozen=True)
class UrlField(FieldDefinition):
    type: ClassVar[str] = "url"
    input_type: ClassVar[str] = "url"


@dataclass(frozen=True)
class EmailField(FieldDefinition):
    type: ClassVar[str] = "email"
    input_type: ClassVar[str] = "email"


@dataclass(frozen=True)
class TelField(FieldDefinition):
    type: ClassVar[str] = "tel"
    input_type: ClassVar[str] = "tel"


@dataclass(frozen=True)
class DateField(FieldDefinition):
    """Stored as ``YYYY-MM-DD``, displayed using ``METABOX_DATE_DISPLAY_FORMAT``.

    Submitted values are stored as typed; no conversion back to the storage
    format happens on save.
    """

    type: ClassVar[str] = "date"
    input_type: ClassVar[str] = "date"


@dataclass(frozen=True)
class TextareaField(FieldDefinition):
    # None defers to the meta box default.
    rows: Optional[int] = None

    type: ClassVar[str] = "textarea"
    multiline: ClassVar[bool] = True
    sanitizer: ClassVar[Callable[[object], str]] = staticmethod(sanitize_textarea)

    def __post_init__(self):
        super().__post_init__()
        if self.rows is not None and (
            isinstance(self.rows, bool) or not isinstance(self.rows, int) or self.rows < 1
        ):
            raise ValueError(f"rows for field '{self.name}' must be a positive integer")


@dataclass(frozen=True)
class EditorField(TextareaField):
    type: ClassVar[str] = "editor"
    sanitizer: ClassVar[Callable[[object], str]] = staticmethod(sanitize_html)


FIELD_TYPES: dict[str, type[FieldDefinition]] = {
    cls.type: cls
    for cls in (
        TextField,
        NumberField,
        UrlField,
        EmailField,
        TelField,
        DateField,
        TextareaField,
        EditorField,
    )
}


def make_field(type: str, name: str, **options) -> FieldDefinition:
    """Build the field definition registered for ``type``.

    Raises ``ValueError`` for an unknown type and ``TypeError`` for an option
    the field kind does not accept.
    """

    try:
        cls = FIELD_TYPES[type]
    except KeyError:
        raise ValueError(
            f"Unknown field type '{type}'. Expected one of: {', '.join(sorted(FIELD_TYPES))}"
        ) from None
    return cls(name=name, **options)
