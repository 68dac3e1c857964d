import django.db.models.deletion
from django.db import migrations, models

import planning.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("orders", "0001_initial"),
        ("reference", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Planting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "code",
                    models.CharField(default=planning.models.new_planting_code, max_length=100, unique=True),
                ),
                ("crop", models.CharField(max_length=100)),
                ("variety", models.CharField(blank=True, max_length=100)),
                ("customer", models.CharField(blank=True, max_length=100)),
                (
                    "market_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("Fresh Cut", "Fresh Cut"),
                            ("Bulk", "Bulk"),
                            ("Processing", "Processing"),
                            ("Organic", "Organic"),
                            ("Baby Leaf", "Baby Leaf"),
                        ],
                        max_length=20,
                    ),
                ),
                ("acres", models.DecimalField(decimal_places=2, max_digits=8)),
                ("plant_date", models.DateField(blank=True, null=True)),
                ("harvest_date", models.DateField(blank=True, null=True)),
                ("budgeted_days_to_harvest", models.PositiveIntegerField(blank=True, null=True)),
                ("budgeted_harvest_date", models.DateField(blank=True, null=True)),
                (
                    "budget_yield_per_acre",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True),
                ),
                (
                    "volume_ordered",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True),
                ),
                ("total_yield", models.IntegerField(blank=True, null=True)),
                ("bed_size", models.CharField(blank=True, max_length=20)),
                ("spacing", models.CharField(blank=True, max_length=20)),
                ("ideal_stand_per_acre", models.PositiveIntegerField(blank=True, null=True)),
                ("original_order_id", models.CharField(blank=True, max_length=50)),
                ("parent_code", models.CharField(blank=True, db_index=True, max_length=100)),
                ("split_sequence", models.PositiveIntegerField(default=0)),
                ("split_at", models.DateTimeField(blank=True, null=True)),
                ("sublot", models.CharField(blank=True, max_length=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "lot",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="plantings",
                        to="reference.lot",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="plantings",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "ordering": ["plant_date", "code"],
            },
        ),
    ]
