"""planning/optimization.py

Lot scoring and bulk placement of unassigned plantings.

A lot's score for a planting is a capacity score plus smaller bonuses for
crop rotation, microclimate, soil and customer proximity. Lots with no room
score -1 and are never suggested.
"""

import copy
import logging
from datetime import date

from django.db import transaction

from core.constants import DEFAULT_ROTATION_DAYS
from core.models import RotationRule
from core.utils import round_acres, round_to, to_decimal
from reference.models import Lot

from .capacity import lot_capacity, next_sublot
from .models import Planting

logger = logging.getLogger(__name__)

CLIMATE_PREFERENCES = {
    "Romaine": ["Cool", "Moderate"],
    "Iceberg": ["Cool", "Moderate"],
    "Carrots": ["Cool", "Moderate", "Warm"],
    "Broccoli": ["Cool"],
    "Cauliflower": ["Cool"],
}

SOIL_PREFERENCES = {
    "Romaine": ["Sandy Loam", "Loam"],
    "Iceberg": ["Sandy Loam", "Loam"],
    "Carrots": ["Sandy Loam", "Sandy"],
    "Broccoli": ["Loam", "Clay Loam"],
    "Cauliflower": ["Loam", "Clay Loam"],
}

PERFECT = "perfect"
SPLIT = "split"


def load_rotation_rules():
    return RotationRule.objects.all().as_map()


def all_lots():
    return list(Lot.objects.select_related("ranch__region"))


def assigned_plantings():
    return list(Planting.objects.filter(lot__isnull=False))


def evaluate_crop_rotation(crop, lot, rules=None, on=None):
    if not lot.last_crop or not lot.last_plant_date:
        return 0
    if rules is None:
        rules = load_rotation_rules()

    on = on or date.today()
    days_since = (on - lot.last_plant_date).days
    conflicts, minimum_days = rules.get(crop, ([], DEFAULT_ROTATION_DAYS))

    if lot.last_crop in conflicts:
        minimum_days = minimum_days or DEFAULT_ROTATION_DAYS
        if days_since < minimum_days:
            return -50
        if days_since < minimum_days * 1.5:
            return -20
        return 5

    if lot.last_crop != crop:
        return min(20, days_since / 10)
    return 0


def evaluate_microclimate(planting, lot):
    preferred = CLIMATE_PREFERENCES.get(planting.crop, [])
    if lot.microclimate in preferred:
        return 15
    if not preferred:
        return 5
    return 0


def evaluate_soil(planting, lot):
    return 10 if lot.soil_type in SOIL_PREFERENCES.get(planting.crop, []) else 0


def evaluate_proximity(planting, lot, plantings):
    for p in plantings:
        if p is not planting and p.lot_id == lot.id and p.customer == planting.customer:
            return 5
    return 0


def score_lot(planting, lot, plantings=None, rules=None, capacity=None):
    if plantings is None:
        plantings = assigned_plantings()
    if capacity is None:
        capacity = lot_capacity(lot, plantings)

    acres = to_decimal(planting.acres)
    available = capacity["available_acres"]

    if available > 0 and available >= acres:
        utilization = (capacity["used_acres"] + acres) / capacity["total_acres"]
        if 0.85 <= utilization <= 1:
            score = 100
        elif utilization >= 0.7:
            score = 80
        elif utilization >= 0.5:
            score = 60
        else:
            score = 40
    elif available > 0:
        score = 30
    else:
        return -1

    score += evaluate_crop_rotation(planting.crop, lot, rules, on=planting.plant_date)
    score += evaluate_microclimate(planting, lot)
    score += evaluate_soil(planting, lot)
    score += evaluate_proximity(planting, lot, plantings)

    return max(0, round(float(score), 2))


def score_reasons(planting, lot, capacity, fit_type, rules=None):
    reasons = []
    if fit_type == PERFECT:
        reasons.append("Perfect fit for available space")
    else:
        reasons.append(f"Partial fit - {capacity['available_acres']} acres available")

    rotation = evaluate_crop_rotation(planting.crop, lot, rules, on=planting.plant_date)
    if rotation > 10:
        reasons.append("Excellent crop rotation timing")
    elif rotation < -10:
        reasons.append("⚠️ Recent rotation conflict")

    if evaluate_microclimate(planting, lot) > 10:
        reasons.append("Ideal microclimate match")
    if evaluate_soil(planting, lot) > 5:
        reasons.append("Good soil type compatibility")
    return reasons


def find_best_lots(planting, plantings=None, limit=3, lots=None, rules=None):
    """Rank lots with free acres for a planting, best first."""
    if plantings is None:
        plantings = assigned_plantings()
    if lots is None:
        lots = all_lots()
    if rules is None:
        rules = load_rotation_rules()

    suggestions = []
    for lot in lots:
        capacity = lot_capacity(lot, plantings)
        if capacity["available_acres"] <= 0:
            continue

        score = score_lot(planting, lot, plantings, rules, capacity=capacity)
        if score <= 0:
            continue

        fit_type = PERFECT if capacity["available_acres"] >= to_decimal(planting.acres) else SPLIT
        suggestions.append(
            {
                "lot_id": lot.unique_lot_id,
                "score": score,
                "reasons": score_reasons(planting, lot, capacity, fit_type, rules),
                "location": lot.location,
                "region": lot.ranch.region,
                "ranch": lot.ranch,
                "lot": lot,
                "capacity": capacity,
                "fit_type": fit_type,
            }
        )

    suggestions.sort(key=lambda s: s["score"], reverse=True)
    return suggestions[:limit]


def split_notification(original, assigned, remainder, lot):
    return {
        "planting_id": original.code,
        "crop": original.crop,
        "variety": original.variety,
        "original_acres": to_decimal(original.acres),
        "assigned_acres": to_decimal(assigned.acres),
        "remaining_acres": to_decimal(remainder.acres),
        "lot_location": lot.location,
    }


def optimize_all(plantings=None, lots=None, rules=None):
    """Place every unassigned planting on its best lot, largest first.

    Works on copies; nothing is saved. A planting that only partly fits its
    best lot is split and the remainder is left unassigned.
    """
    if plantings is None:
        plantings = Planting.objects.select_related("lot__ranch__region")
    if lots is None:
        lots = all_lots()
    if rules is None:
        rules = load_rotation_rules()

    working = [copy.copy(p) for p in plantings]
    queue = sorted(
        (p for p in working if not p.assigned), key=lambda p: to_decimal(p.acres), reverse=True
    )

    assignments = []
    for planting in queue:
        suggestions = find_best_lots(planting, working, limit=1, lots=lots, rules=rules)
        if not suggestions:
            continue

        best = suggestions[0]
        lot = best["lot"]
        original = copy.copy(planting)

        if best["fit_type"] == PERFECT:
            planting.assign_to(lot, next_sublot(lot, working))
            assignments.append(
                {
                    "type": "assign",
                    "original": original,
                    "assigned": planting,
                    "remainder": None,
                    "lot": lot,
                    "score": best["score"],
                }
            )
        elif best["capacity"]["available_acres"] > 0:
            portion, remainder = planting.split(best["capacity"]["available_acres"], family=working)
            portion.assign_to(lot, next_sublot(lot, working))
            working = [p for p in working if p is not planting] + [portion, remainder]
            assignments.append(
                {
                    "type": "split",
                    "original": original,
                    "assigned": portion,
                    "remainder": remainder,
                    "lot": lot,
                    "score": best["score"],
                }
            )

    logger.info(
        "Optimized %d of %d unassigned plantings (%d splits)",
        len(assignments),
        len(queue),
        sum(1 for a in assignments if a["type"] == "split"),
    )
    return assignments


@transaction.atomic
def apply_optimization(assignments):
    """Persist the result of optimize_all. Returns the split notifications."""
    notifications = []
    for a in assignments:
        if a["type"] == "assign":
            a["assigned"].save()
        else:
            Planting.objects.filter(pk=a["original"].pk).delete()
            a["assigned"].save()
            a["remainder"].save()
            notifications.append(
                split_notification(a["original"], a["assigned"], a["remainder"], a["lot"])
            )
    return notifications


def summarize(assignments):
    total = len(assignments)
    average = sum(a["score"] for a in assignments) / total if total else 0

    results = []
    for a in assignments:
        assigned = a["assigned"]
        lot = a["lot"]
        results.append(
            {
                "planting_id": a["original"].code,
                "crop": a["original"].crop,
                "variety": a["original"].variety,
                "acres": to_decimal(assigned.acres),
                "recommended_lot": {
                    "region_id": lot.ranch.region_id,
                    "ranch_id": lot.ranch_id,
                    "lot_id": lot.id,
                    "sublot": assigned.sublot,
                    "location": assigned.display_lot_id,
                },
                "score": a["score"],
                "reasons": [
                    f"Score: {a['score']}",
                    "Split required" if a["type"] == "split" else "Perfect fit",
                ],
            }
        )

    return {
        "assignments": results,
        "summary": {
            "total_plantings": total,
            "successful_assignments": total,
            "total_acres_optimized": round_acres(
                sum((to_decimal(a["assigned"].acres) for a in assignments), round_acres(0))
            ),
            "average_score": float(round_to(average, 2)),
        },
    }
