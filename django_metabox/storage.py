"""Key-value stores holding meta values per ``(record, key)``.

A stored value is either a string or a list of strings. ``get`` returns
``None`` when nothing is stored under the key.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .conf import settings

log = logging.getLogger(__name__)

__all__ = ["MetaStore", "ModelMetaStore", "MemoryMetaStore", "get_store", "record_key"]


def record_key(record) -> tuple[str, str]:
    """Identify ``record`` by model label and primary key."""
    return record._meta.label_lower, str(record.pk)


class MetaStore(ABC):
    @abstractmethod
    def get(self, record, key: str) -> Any:
        """Return the value stored under ``key`` for ``record`` or ``None``."""

    @abstractmethod
    def set(self, record, key: str, value) -> None:
        """Create or replace the value stored under ``key`` for ``record``."""

    @abstractmethod
    def delete(self, record, key: str) -> None:
        """Remove ``key`` for ``record``; missing keys are ignored."""


class ModelMetaStore(MetaStore):
    """Store backed by the :class:`~django_metabox.models.MetaValue` table."""

    def _queryset(self, record):
        from .models import MetaValue

        return MetaValue.objects.for_record(record)

    def get(self, record, key):
        entry = self._queryset(record).filter(meta_key=key).only("meta_value").first()
        return entry.meta_value if entry is not None else None

    def set(self, record, key, value):
        from django.contrib.contenttypes.models import ContentType

        from .models import MetaValue

        MetaValue.objects.update_or_create(
            content_type=ContentType.objects.get_for_model(record),
            object_id=str(record.pk),
            meta_key=key,
            defaults={"meta_value": value},
        )
        log.debug("Stored meta %s for %s", key, record_key(record))

    def delete(self, record, key):
        deleted, _ = self._queryset(record).filter(meta_key=key).delete()
        if deleted:
            log.debug("Deleted meta %s for %s", key, record_key(record))


class MemoryMetaStore(MetaStore):
    """Dictionary-backed store, mainly useful for tests."""

    def __init__(self, initial: dict | None = None):
        self.data: dict[tuple[tuple[str, str], str], Any] = dict(initial or {})

    def get(self, record, key):
        return self.data.get((record_key(record), key))

    def set(self, record, key, value):
        self.data[(record_key(record), key)] = list(value) if isinstance(value, list) else value

    def delete(self, record, key):
        self.data.pop((record_key(record), key), None)

    def keys_for(self, record) -> list[str]:
        rkey = record_key(record)
        return [key for (owner, key) in self.data if owner == rkey]


def get_store() -> MetaStore:
    """Instantiate the store configured by ``METABOX_STORE``."""

    path = settings.METABOX_STORE
    try:
        store_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"METABOX_STORE '{path}' could not be imported") from exc
    store = store_class()
    if not isinstance(store, MetaStore):
        raise ImproperlyConfigured(f"METABOX_STORE '{path}' is not a MetaStore")
    return store
