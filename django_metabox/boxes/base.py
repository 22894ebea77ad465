from __future__ import annotations

from abc import ABC, abstractmethod

from django import forms
from django.template.loader import render_to_string
from django.utils.html import format_html

from django_metabox.conf import settings
from django_metabox.fields import FieldDefinition, make_field
from django_metabox.groups import Group, GroupRegistry
from django_metabox.security import SecurityGate
from django_metabox.storage import MetaStore, get_store

__all__ = ["BaseMetaBox"]


class BaseMetaBox(ABC):
    """Base interface for meta boxes.

    A meta box is a titled set of fields rendered on a record's edit page and
    saved back to the meta store. Subclasses provide the template context via
    :meth:`get_context` and the save logic via :meth:`save`; :meth:`render`
    combines the context with :attr:`template_name`.

    Boxes are plain objects: the host registers them explicitly (see
    :mod:`django_metabox.registry`) and calls ``render``/``save`` itself.
    """

    template_name = ""
    # Textarea height when the field does not set ``rows``.
    default_rows = 10

    def __init__(self, title: str, id: str, *, store: MetaStore | None = None):
        if not id or any(char in id for char in "[] "):
            raise ValueError(f"Invalid meta box id {id!r}")
        self.title = title
        self.id = id
        self.nonce_key = f"{id}_nonce"
        self.action_key = f"save-{id}"
        self.capability = settings.METABOX_CAPABILITY
        self.enables = list(settings.METABOX_DEFAULT_ENABLES)
        self.fields: list[FieldDefinition] = []
        self.groups = GroupRegistry()
        self._store = store

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id!r}>"

    # ---------------- Configuration ----------------
    def set_enables(self, *enables) -> None:
        """Limit the box to record pks, model names/labels or slugs."""
        self.enables = list(enables)

    def set_capability(self, capability: str) -> None:
        """Permission required to save, e.g. ``"pages.change_page"``."""
        self.capability = capability

    def add_field(self, type: str, name: str, **options) -> FieldDefinition:
        field = make_field(type, name, **options)
        self.fields.append(field)
        return field

    def group_fields(self, prefix: str, *fields: FieldDefinition) -> Group:
        return self.groups.group_fields(prefix, *fields)

    @property
    def store(self) -> MetaStore:
        if self._store is None:
            self._store = get_store()
        return self._store

    @property
    def gate(self) -> SecurityGate:
        return SecurityGate(self.nonce_key, self.action_key, self.capability)

    @property
    def media(self) -> forms.Media:
        return forms.Media(
            js=["django_metabox/js/field-repeater.js"],
            css={"all": ["django_metabox/css/field-meta.css"]},
        )

    def is_enabled_for(self, record) -> bool:
        opts = record._meta
        candidates = {str(record.pk), opts.model_name, opts.label_lower}
        slug = getattr(record, "slug", None)
        if slug:
            candidates.add(str(slug))
        return bool(candidates & {str(entry) for entry in self.enables})

    # ---------------- Rendering ----------------
    def make_token(self, user) -> str:
        return self.gate.token_for(user)

    def token_input(self, request) -> str:
        return format_html(
            '<input type="hidden" name="{}" value="{}">',
            self.nonce_key,
            self.make_token(getattr(request, "user", None)),
        )

    @abstractmethod
    def get_context(self, request, record) -> dict:
        """Return the template context for ``record``."""

    def render(self, request, record) -> str:
        context = {
            "box": self,
            "record": record,
            "token_input": self.token_input(request),
        }
        context.update(self.get_context(request, record) or {})
        return render_to_string(self.template_name, context, request=request)

    # ---------------- Saving ----------------
    @abstractmethod
    def save(self, request, record) -> None:
        """Persist submitted values for ``record``; a no-op when not allowed."""

    def _save_scalar(self, request, record, key: str, field: FieldDefinition) -> None:
        if key not in request.POST:
            return
        value = field.clean(request.POST.get(key))
        if value != "":
            self.store.set(record, key, value)
        else:
            self.store.delete(record, key)
