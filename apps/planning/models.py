"""planning/models.py"""

import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone

from core.constants import MarketType, yield_unit
from core.utils import calculate_total_yield, round_acres, round_to, to_decimal
from reference.models import Lot


def new_planting_code():
    return f"planting_{uuid.uuid4().hex[:12]}"


class Planting(models.Model):
    code = models.CharField(max_length=100, unique=True, default=new_planting_code)

    crop = models.CharField(max_length=100)
    variety = models.CharField(max_length=100, blank=True)
    customer = models.CharField(max_length=100, blank=True)
    market_type = models.CharField(max_length=20, choices=MarketType.choices, blank=True)

    acres = models.DecimalField(max_digits=8, decimal_places=2)
    plant_date = models.DateField(null=True, blank=True)  # wet date
    harvest_date = models.DateField(null=True, blank=True)

    # Budget snapshot taken from the variety at generation time
    budgeted_days_to_harvest = models.PositiveIntegerField(null=True, blank=True)
    budgeted_harvest_date = models.DateField(null=True, blank=True)
    budget_yield_per_acre = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True
    )
    volume_ordered = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    total_yield = models.IntegerField(null=True, blank=True)
    bed_size = models.CharField(max_length=20, blank=True)
    spacing = models.CharField(max_length=20, blank=True)
    ideal_stand_per_acre = models.PositiveIntegerField(null=True, blank=True)

    order = models.ForeignKey(
        "orders.Order", on_delete=models.SET_NULL, null=True, blank=True, related_name="plantings"
    )
    original_order_id = models.CharField(max_length=50, blank=True)  # "ORD-3", "ORD-3-W2"

    # Split bookkeeping: fragments share the code of the planting they came from
    parent_code = models.CharField(max_length=100, blank=True, db_index=True)
    split_sequence = models.PositiveIntegerField(default=0)
    split_at = models.DateTimeField(null=True, blank=True)

    lot = models.ForeignKey(
        Lot, on_delete=models.SET_NULL, null=True, blank=True, related_name="plantings"
    )
    sublot = models.CharField(max_length=1, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["plant_date", "code"]

    def __str__(self):
        return f"{self.crop} {self.variety} ({self.acres} ac)".replace("  ", " ")

    @property
    def assigned(self):
        return self.lot_id is not None

    @property
    def is_split(self):
        return bool(self.parent_code)

    @property
    def wet_date(self):
        return self.plant_date

    @property
    def unique_lot_id(self):
        return self.lot.unique_lot_id if self.lot_id else ""

    @property
    def display_lot_id(self):
        if not self.lot_id:
            return ""
        if self.sublot:
            return f"{self.lot.location}-{self.sublot}"
        return self.lot.location

    @property
    def region_name(self):
        return self.lot.ranch.region.name if self.lot_id else ""

    @property
    def ranch_name(self):
        return self.lot.ranch.name if self.lot_id else ""

    @property
    def lot_number(self):
        return self.lot.number if self.lot_id else ""

    @property
    def yield_unit(self):
        return yield_unit(self.market_type)

    @property
    def split_info(self):
        if not self.parent_code:
            return ""
        return f"Split from Planting {self.parent_code} (Sequence: {self.split_sequence})"

    def recalculate_yield(self):
        self.total_yield = calculate_total_yield(self.acres, self.budget_yield_per_acre or 0)

    def assign_to(self, lot, sublot):
        self.lot = lot
        self.sublot = sublot or ""

    def unassign(self):
        self.lot = None
        self.sublot = ""

    def copy(self, **overrides):
        """Unsaved copy of this planting with a fresh primary key."""
        skip = {"id", "created_at", "updated_at"}
        values = {
            f.attname: getattr(self, f.attname) for f in self._meta.concrete_fields if f.name not in skip
        }
        values.update(overrides)
        return Planting(**values)

    def split(self, max_acres, family=None):
        """Split off `max_acres` for assignment and keep the rest unassigned.

        Returns ``(assigned_portion, remainder)``, both unsaved and unassigned.
        ``family`` is the set of existing fragments to number after; when
        omitted the database is asked.
        """
        max_acres = round_acres(max_acres)
        parent = self.parent_code or self.code

        if family is None:
            family = Planting.objects.filter(parent_code=parent)
        sequences = [p.split_sequence for p in family if p.parent_code == parent]
        sequences.append(self.split_sequence or 0)
        first = max(sequences) + 1

        remaining = round_acres(to_decimal(self.acres) - max_acres)
        ratio = max_acres / to_decimal(self.acres) if self.acres else Decimal("0")
        volume = self.volume_ordered
        assigned_volume = round_to(to_decimal(volume) * ratio, 0) if volume is not None else None
        remaining_volume = to_decimal(volume) - assigned_volume if volume is not None else None

        stamp = timezone.now()
        common = {
            "parent_code": parent,
            "split_at": stamp,
            "lot_id": None,
            "sublot": "",
        }

        assigned_portion = self.copy(
            code=f"{parent}_split_{first}",
            acres=max_acres,
            volume_ordered=assigned_volume,
            split_sequence=first,
            **common,
        )
        assigned_portion.recalculate_yield()

        remainder = self.copy(
            code=f"{parent}_split_{first + 1}",
            acres=remaining,
            volume_ordered=remaining_volume,
            split_sequence=first + 1,
            **common,
        )
        remainder.recalculate_yield()

        return assigned_portion, remainder
