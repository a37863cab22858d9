import decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number", models.CharField(max_length=20, unique=True)),
                (
                    "room_type",
                    models.CharField(
                        choices=[
                            ("standard", "Standard"),
                            ("double", "Double"),
                            ("triple", "Triple"),
                            ("matrimonial", "Matrimonial"),
                            ("suite", "Suite"),
                        ],
                        default="standard",
                        max_length=20,
                    ),
                ),
                (
                    "nightly_rate",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(decimal.Decimal("0.01"))],
                    ),
                ),
                (
                    "capacity",
                    models.PositiveSmallIntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("maintenance", "Under maintenance")],
                        default="available",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Room",
                "verbose_name_plural": "Rooms",
                "ordering": ["number"],
                "indexes": [models.Index(fields=["status"], name="rooms_room_status_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(nightly_rate__gt=0), name="room_positive_rate"),
                    models.CheckConstraint(condition=models.Q(capacity__gt=0), name="room_positive_capacity"),
                ],
            },
        ),
    ]
