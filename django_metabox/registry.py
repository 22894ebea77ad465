"""Central registry for meta boxes."""

from .boxes.base import BaseMetaBox


class MetaBoxRegistry:
    """Store meta boxes by identifier.

    The registry keeps boxes in registration order and prevents duplicate
    registrations. Hosts look boxes up by identifier or ask for the boxes
    enabled on a given record.
    """

    def __init__(self):
        self._boxes = {}

    def register(self, box):
        """Register ``box`` under its ``id``.

        Raises ``ValueError`` if a box with the same id is already present
        or ``TypeError`` if ``box`` is not a ``BaseMetaBox``.
        """

        if not isinstance(box, BaseMetaBox):
            raise TypeError("box must subclass BaseMetaBox")
        if box.id in self._boxes:
            raise ValueError(f"Meta box '{box.id}' is already registered")
        self._boxes[box.id] = box
        return box

    def unregister(self, box_id):
        self._boxes.pop(box_id, None)

    def get(self, box_id):
        """Return the box registered under ``box_id`` if any."""

        return self._boxes.get(box_id)

    def all(self):
        """Return a copy of the internal mapping of ids to boxes."""

        return dict(self._boxes)

    def for_record(self, record):
        """Return the boxes enabled for ``record`` in registration order."""

        return [box for box in self._boxes.values() if box.is_enabled_for(record)]

    def clear(self):
        self._boxes.clear()


# Global registry instance used throughout the project.
metabox_registry = MetaBoxRegistry()


__all__ = ["MetaBoxRegistry", "metabox_registry"]
