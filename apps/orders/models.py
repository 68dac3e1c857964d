"""orders/models.py"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from core.constants import MarketType
from reference.models import Commodity


class Order(models.Model):
    customer = models.CharField(max_length=100)
    commodity = models.ForeignKey(Commodity, on_delete=models.PROTECT, related_name="orders")
    volume = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0.01"))]
    )
    market_type = models.CharField(max_length=20, choices=MarketType.choices)
    delivery_date = models.DateField()
    is_weekly = models.BooleanField(default=False)

    class Meta:
        ordering = ["delivery_date", "customer"]

    def __str__(self):
        return f"{self.customer}: {self.volume} {self.commodity.name} ({self.market_type})"

    @property
    def reference(self):
        return f"ORD-{self.id}"
