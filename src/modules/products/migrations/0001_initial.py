import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                ("title", models.CharField(blank=True, default="", max_length=255)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("type", models.CharField(blank=True, default="", max_length=100)),
                (
                    "availability",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                (
                    "price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=12, null=True
                    ),
                ),
                ("image", models.JSONField(blank=True, default=list)),
                ("beds", models.PositiveSmallIntegerField(blank=True, null=True)),
                (
                    "baths",
                    models.DecimalField(
                        blank=True, decimal_places=1, max_digits=4, null=True
                    ),
                ),
                ("sqft", models.PositiveIntegerField(blank=True, null=True)),
                ("amenities", models.JSONField(blank=True, default=list)),
                ("video_url", models.URLField(blank=True, default="", max_length=500)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["type"], name="products_type_idx"),
                ],
            },
        ),
    ]
