import logging
from importlib import import_module

from django.apps import AppConfig

log = logging.getLogger(__name__)


class DjangoMetaboxConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "django_metabox"
    verbose_name = "Meta Boxes"

    def ready(self):
        from .conf import settings
        from .registry import metabox_registry

        # Entries are "module" (imported for its side effects) or
        # "module:callable" (called with the registry).
        for entry in settings.METABOX_MODULES:
            try:
                module_path, callable_name = entry.split(":", 1)
            except ValueError:
                import_module(entry)
            else:
                module = import_module(module_path)
                registrar = getattr(module, callable_name)
                registrar(metabox_registry)
            log.info("Loaded meta boxes from %s", entry)
