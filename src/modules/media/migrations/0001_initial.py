import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Media",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                (
                    "cover_url",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "cover_public_id",
                    models.CharField(blank=True, default="", max_length=255),
                ),
            ],
            options={
                "db_table": "media",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="LongVideo",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("category", models.CharField(blank=True, default="", max_length=100)),
                ("price", models.FloatField(default=0)),
                ("discount", models.FloatField(default=0)),
                ("sizes", models.JSONField(blank=True, default=list)),
                ("cover_urls", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "long_videos",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["category"], name="long_videos_category_idx"),
                ],
            },
        ),
    ]
