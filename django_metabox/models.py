from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models


class MetaValueQuerySet(models.QuerySet):
    def for_record(self, record):
        return self.filter(
            content_type=ContentType.objects.get_for_model(record),
            object_id=str(record.pk),
        )


class MetaValue(models.Model):
    """A single meta entry attached to any model instance.

    ``meta_value`` holds a string for flat fields and a list of strings for
    repeated groups.
    """

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.CharField(max_length=64)
    record = GenericForeignKey("content_type", "object_id")
    meta_key = models.CharField(max_length=255)
    meta_value = models.JSONField(default=str, blank=True)

    objects = MetaValueQuerySet.as_manager()

    class Meta:
        verbose_name = "Meta Value"
        verbose_name_plural = "Meta Values"
        constraints = [
            models.UniqueConstraint(
                fields=["content_type", "object_id", "meta_key"],
                name="unique_meta_key_per_record",
            )
        ]
        indexes = [models.Index(fields=["content_type", "object_id"], name="metabox_record_idx")]

    def __str__(self):
        return f"{self.content_type_id}:{self.object_id} {self.meta_key}"
