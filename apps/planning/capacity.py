"""planning/capacity.py

Acre accounting for lots. Every function takes an optional ``plantings``
iterable so the optimizer can work against an in-memory plan; when it is
omitted the saved plantings are used.
"""

from decimal import Decimal
from string import ascii_uppercase

from core.utils import round_acres, to_decimal

ZERO = Decimal("0.00")


def empty_capacity():
    return {
        "total_acres": ZERO,
        "used_acres": ZERO,
        "available_acres": ZERO,
        "planting_count": 0,
        "plantings": [],
    }


def plantings_in_lot(lot, plantings=None):
    if plantings is None:
        return list(lot.plantings.all())
    return [p for p in plantings if p.lot_id is not None and p.lot_id == lot.id]


def lot_capacity(lot, plantings=None):
    if lot is None or lot.pk is None:
        return empty_capacity()

    in_lot = plantings_in_lot(lot, plantings)
    total = to_decimal(lot.acres)
    used = sum((to_decimal(p.acres) for p in in_lot), ZERO)
    available = max(ZERO, total - used)

    return {
        "total_acres": total,
        "used_acres": round_acres(used),
        "available_acres": round_acres(available),
        "planting_count": len(in_lot),
        "plantings": in_lot,
    }


def next_sublot(lot, plantings=None):
    """First letter A-Z not already used in the lot. Wraps to A when full."""
    if lot is None or lot.pk is None:
        return "A"
    used = {p.sublot for p in plantings_in_lot(lot, plantings) if p.sublot}
    for letter in ascii_uppercase:
        if letter not in used:
            return letter
    return "A"


def can_fit(acres, lot, plantings=None):
    return to_decimal(acres) <= lot_capacity(lot, plantings)["available_acres"]


def fit_check(acres, lot, plantings=None):
    acres = to_decimal(acres)
    available = lot_capacity(lot, plantings)["available_acres"]
    fits = acres <= available
    return {
        "can_fit": fits,
        "available_acres": available,
        "would_exceed_by": max(ZERO, round_acres(acres - available)),
        "will_require_split": not fits and available > 0,
    }
