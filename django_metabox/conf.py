"""Runtime access to django-metabox configuration.

Every ``METABOX_*`` key below can be overridden in the host's Django
settings:

``METABOX_STORE``
    Dotted path of the :class:`~django_metabox.storage.MetaStore` to use.
``METABOX_CAPABILITY``
    Permission a user needs to save a box, unless the box sets its own.
``METABOX_STAFF_BYPASS``
    Whether staff users skip capability checks (superusers always do).
``METABOX_TOKEN_MAX_AGE``
    Lifetime of save tokens, in seconds.
``METABOX_ROW_PLACEHOLDER``
    Index used by the template row of repeated groups.
``METABOX_DATE_DISPLAY_FORMAT``
    Django date format used to show stored ``YYYY-MM-DD`` dates.
``METABOX_DEFAULT_ENABLES``
    Model names, labels, slugs or pks a new box is enabled for.
``METABOX_MODULES``
    ``"module"`` or ``"module:callable"`` entries loaded on app start.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "MetaboxSettings", "DEFAULTS"]

DEFAULTS: dict[str, Any] = {
    "METABOX_STORE": "django_metabox.storage.ModelMetaStore",
    "METABOX_CAPABILITY": "django_metabox.change_metavalue",
    "METABOX_STAFF_BYPASS": True,
    "METABOX_TOKEN_MAX_AGE": 60 * 60 * 24,
    "METABOX_ROW_PLACEHOLDER": "_row",
    "METABOX_DATE_DISPLAY_FORMAT": "d-m-Y",
    "METABOX_DEFAULT_ENABLES": ("post", "page"),
    "METABOX_MODULES": [],
}


@dataclass
class MetaboxSettings:
    """Read ``METABOX_*`` keys from Django settings, falling back to defaults.

    Values are looked up on every access so ``override_settings`` applies.
    """

    defaults: dict[str, Any] = field(default_factory=lambda: dict(DEFAULTS))

    def __getattr__(self, attr: str) -> Any:
        defaults = self.__dict__.get("defaults", {})
        if attr not in defaults:
            raise AttributeError(f"Unknown django-metabox setting '{attr}'")
        return getattr(django_settings, attr, defaults[attr])


settings = MetaboxSettings()
