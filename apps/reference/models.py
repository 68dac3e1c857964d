"""reference/models.py data models for the crop catalog and land."""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.constants import (
    MAX_ACRES_PER_LOT,
    MAX_LOT_NUMBER_LENGTH,
    MAX_LOTS_PER_RANCH,
    MAX_RANCHES_PER_REGION,
    PlantType,
)


class Commodity(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "commodities"

    def __str__(self):
        return self.name

    def suitable_variety(self, market_type):
        """First variety (by id) that can fill an order for this market type."""
        for variety in self.varieties.order_by("id"):
            if variety.supports(market_type):
                return variety
        return None


class Variety(models.Model):
    commodity = models.ForeignKey(Commodity, on_delete=models.CASCADE, related_name="varieties")
    name = models.CharField(max_length=100)
    growing_window_start = models.CharField(max_length=3, blank=True)  # "Mar"
    growing_window_end = models.CharField(max_length=3, blank=True)
    days_to_harvest = models.PositiveIntegerField(default=0)
    bed_size = models.CharField(max_length=20, blank=True)
    spacing = models.CharField(max_length=20, blank=True)
    plant_type = models.CharField(
        max_length=20, choices=PlantType.choices, default=PlantType.TRANSPLANT
    )
    ideal_stand = models.PositiveIntegerField(default=0)

    # ["Fresh Cut", "Bulk"]
    market_types = models.JSONField(default=list, blank=True)
    # {"Fresh Cut": 1200, "Bulk": 0}
    budget_yield_per_acre = models.JSONField(default=dict, blank=True)
    # {"Jan": 0, ..., "Dec": 0}
    preferences = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ["commodity__name", "id"]
        verbose_name_plural = "varieties"

    def __str__(self):
        return f"{self.commodity.name} / {self.name}"

    def yield_for(self, market_type):
        return Decimal(str(self.budget_yield_per_acre.get(market_type) or 0))

    def supports(self, market_type):
        return market_type in (self.market_types or []) and self.yield_for(market_type) > 0

    def duplicate(self):
        return Variety.objects.create(
            commodity=self.commodity,
            name=f"{self.name} (Copy)",
            growing_window_start=self.growing_window_start,
            growing_window_end=self.growing_window_end,
            days_to_harvest=self.days_to_harvest,
            bed_size=self.bed_size,
            spacing=self.spacing,
            plant_type=self.plant_type,
            ideal_stand=self.ideal_stand,
            market_types=list(self.market_types),
            budget_yield_per_acre=dict(self.budget_yield_per_acre),
            preferences=dict(self.preferences),
        )


class Region(models.Model):
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name

    @property
    def total_acres(self):
        return sum((lot.acres for ranch in self.ranches.all() for lot in ranch.lots.all()), Decimal("0"))


class Ranch(models.Model):
    region = models.ForeignKey(Region, on_delete=models.CASCADE, related_name="ranches")
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ["region_id", "id"]
        verbose_name_plural = "ranches"

    def __str__(self):
        return f"{self.region.name} > {self.name}"

    def clean(self):
        if self.pk is None and self.region_id is not None:
            if self.region.ranches.count() >= MAX_RANCHES_PER_REGION:
                raise ValidationError(
                    f"A region can hold at most {MAX_RANCHES_PER_REGION} ranches."
                )

    @property
    def total_acres(self):
        return sum((lot.acres for lot in self.lots.all()), Decimal("0"))


def validate_lot_number(value):
    if not value.strip():
        raise ValidationError("Lot number is required.")
    if len(value) > MAX_LOT_NUMBER_LENGTH:
        raise ValidationError(f"Lot number must be {MAX_LOT_NUMBER_LENGTH} characters or fewer.")


class Lot(models.Model):
    ranch = models.ForeignKey(Ranch, on_delete=models.CASCADE, related_name="lots")
    number = models.CharField(max_length=MAX_LOT_NUMBER_LENGTH, validators=[validate_lot_number])
    acres = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal("0.01")),
            MaxValueValidator(Decimal(MAX_ACRES_PER_LOT)),
        ],
    )
    soil_type = models.CharField(max_length=50, blank=True)
    microclimate = models.CharField(max_length=50, blank=True)
    last_crop = models.CharField(max_length=100, blank=True)
    last_plant_date = models.DateField(null=True, blank=True)

    class Meta:
        ordering = ["ranch__region__id", "ranch__id", "id"]

    def __str__(self):
        return self.location

    def clean(self):
        if self.pk is None and self.ranch_id is not None:
            if self.ranch.lots.count() >= MAX_LOTS_PER_RANCH:
                raise ValidationError(f"A ranch can hold at most {MAX_LOTS_PER_RANCH} lots.")

    def validate_unique(self, exclude=None):
        super().validate_unique(exclude=exclude)
        if self.ranch_id is None:
            return
        clash = Lot.objects.filter(ranch_id=self.ranch_id, number=self.number).exclude(pk=self.pk)
        if clash.exists():
            raise ValidationError(
                {
                    "number": f'Lot number "{self.number}" already exists in this ranch. '
                    "Please choose a different lot number."
                }
            )

    @property
    def unique_lot_id(self):
        return f"{self.ranch.region_id}-{self.ranch_id}-{self.id}"

    @property
    def location(self):
        return f"{self.ranch.region.name} > {self.ranch.name} > Lot {self.number}"
