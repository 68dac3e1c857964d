import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models

import reference.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Commodity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "commodities",
            },
        ),
        migrations.CreateModel(
            name="Region",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Variety",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("growing_window_start", models.CharField(blank=True, max_length=3)),
                ("growing_window_end", models.CharField(blank=True, max_length=3)),
                ("days_to_harvest", models.PositiveIntegerField(default=0)),
                ("bed_size", models.CharField(blank=True, max_length=20)),
                ("spacing", models.CharField(blank=True, max_length=20)),
                (
                    "plant_type",
                    models.CharField(
                        choices=[("Direct Seed", "Direct Seed"), ("Transplant", "Transplant"), ("Both", "Both")],
                        default="Transplant",
                        max_length=20,
                    ),
                ),
                ("ideal_stand", models.PositiveIntegerField(default=0)),
                ("market_types", models.JSONField(blank=True, default=list)),
                ("budget_yield_per_acre", models.JSONField(blank=True, default=dict)),
                ("preferences", models.JSONField(blank=True, default=dict)),
                (
                    "commodity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="varieties",
                        to="reference.commodity",
                    ),
                ),
            ],
            options={
                "ordering": ["commodity__name", "id"],
                "verbose_name_plural": "varieties",
            },
        ),
        migrations.CreateModel(
            name="Ranch",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                (
                    "region",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ranches",
                        to="reference.region",
                    ),
                ),
            ],
            options={
                "ordering": ["region_id", "id"],
                "verbose_name_plural": "ranches",
            },
        ),
        migrations.CreateModel(
            name="Lot",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "number",
                    models.CharField(max_length=20, validators=[reference.models.validate_lot_number]),
                ),
                (
                    "acres",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=8,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.01")),
                            django.core.validators.MaxValueValidator(Decimal("1000")),
                        ],
                    ),
                ),
                ("soil_type", models.CharField(blank=True, max_length=50)),
                ("microclimate", models.CharField(blank=True, max_length=50)),
                ("last_crop", models.CharField(blank=True, max_length=100)),
                ("last_plant_date", models.DateField(blank=True, null=True)),
                (
                    "ranch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="lots",
                        to="reference.ranch",
                    ),
                ),
            ],
            options={
                "ordering": ["ranch__region__id", "ranch__id", "id"],
            },
        ),
    ]
