import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("reference", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer", models.CharField(max_length=100)),
                (
                    "volume",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                    ),
                ),
                (
                    "market_type",
                    models.CharField(
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
                ("delivery_date", models.DateField()),
                ("is_weekly", models.BooleanField(default=False)),
                (
                    "commodity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to="reference.commodity",
                    ),
                ),
            ],
            options={
                "ordering": ["delivery_date", "customer"],
            },
        ),
    ]
