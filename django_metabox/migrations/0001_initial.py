import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
    ]

    operations = [
        migrations.CreateModel(
            name="MetaValue",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("object_id", models.CharField(max_length=64)),
                ("meta_key", models.CharField(max_length=255)),
                ("meta_value", models.JSONField(blank=True, default=str)),
                (
                    "content_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        to="contenttypes.contenttype",
                    ),
                ),
            ],
            options={
                "verbose_name": "Meta Value",
                "verbose_name_plural": "Meta Values",
                "indexes": [models.Index(fields=["content_type", "object_id"], name="metabox_record_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("content_type", "object_id", "meta_key"),
                        name="unique_meta_key_per_record",
                    )
                ],
            },
        ),
    ]
