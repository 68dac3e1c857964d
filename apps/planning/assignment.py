"""planning/assignment.py

Placing plantings on lots by hand (drag and drop), including the automatic
split when a planting is bigger than the free acres of the target lot, and
putting split fragments back together.
"""

import logging
from collections import OrderedDict

from django.db import transaction

from core.utils import round_acres, to_decimal

from .capacity import fit_check, lot_capacity, next_sublot
from .models import Planting
from .optimization import split_notification

logger = logging.getLogger(__name__)


def _others_in_lot(planting, lot):
    # A planting being moved within its own lot must not count against itself
    return [p for p in lot.plantings.all() if p.pk != planting.pk]


def assign_planting_to_lot(planting, lot):
    """Assign, split-and-assign, or refuse. Returns a result dict."""
    others = _others_in_lot(planting, lot)
    fit = fit_check(planting.acres, lot, others)

    if fit["can_fit"]:
        planting.assign_to(lot, next_sublot(lot, others))
        planting.save()
        logger.info("Assigned %s to %s", planting.code, planting.display_lot_id)
        return {"success": True, "type": "assigned", "planting": planting}

    if fit["available_acres"] > 0:
        portion, remainder = planting.split(fit["available_acres"])
        portion.assign_to(lot, next_sublot(lot, others))
        with transaction.atomic():
            Planting.objects.filter(pk=planting.pk).delete()
            portion.save()
            remainder.save()
        logger.info(
            "Split %s: %s acres to %s, %s acres left unassigned",
            planting.code,
            portion.acres,
            lot.location,
            remainder.acres,
        )
        return {
            "success": True,
            "type": "split",
            "planting": portion,
            "remainder": remainder,
            "assigned_acres": portion.acres,
            "remaining_acres": remainder.acres,
            "notification": split_notification(planting, portion, remainder, lot),
        }

    capacity = lot_capacity(lot, others)
    return {
        "success": False,
        "type": "no_capacity",
        "message": (
            f"No available capacity ({capacity['used_acres']}/{capacity['total_acres']} acres used)"
        ),
    }


def unassign_planting(planting):
    if not planting.assigned:
        return {"success": False, "type": "not_found_or_unassigned"}
    planting.unassign()
    planting.save()
    return {"success": True, "type": "unassigned", "planting": planting}


@transaction.atomic
def recombine(parent_code):
    """Merge split fragments of one planting that share a location.

    Fragments in the same lot (or all unassigned ones) fold into the fragment
    with the lowest sequence. When a single unassigned fragment is all that is
    left of the family it takes back the parent's code.

    Returns one notification per merged group; empty when nothing changed.
    """
    fragments = list(
        Planting.objects.filter(parent_code=parent_code)
        .select_related("lot__ranch__region")
        .order_by("split_sequence", "id")
    )

    groups = OrderedDict()
    for fragment in fragments:
        groups.setdefault(fragment.lot_id, []).append(fragment)

    notifications = []
    for group in groups.values():
        if len(group) < 2:
            continue

        keep, rest = group[0], group[1:]
        keep.acres = round_acres(sum(to_decimal(p.acres) for p in group))
        volumes = [p.volume_ordered for p in group if p.volume_ordered is not None]
        keep.volume_ordered = sum(volumes) if volumes else None
        keep.recalculate_yield()
        Planting.objects.filter(pk__in=[p.pk for p in rest]).delete()
        keep.save()

        notifications.append(
            {
                "type": "recombine",
                "message": f"Recombined {len(group)} plantings of {parent_code}",
                "combined_plantings": [p.code for p in group],
                "new_planting_id": keep.code,
                "total_acres": keep.acres,
            }
        )

    remaining = list(Planting.objects.filter(parent_code=parent_code))
    if (
        len(remaining) == 1
        and not remaining[0].assigned
        and not Planting.objects.filter(code=parent_code).exists()
    ):
        survivor = remaining[0]
        old_code = survivor.code
        survivor.code = parent_code
        survivor.parent_code = ""
        survivor.split_sequence = 0
        survivor.split_at = None
        survivor.save()

        for note in notifications:
            if note["new_planting_id"] == old_code:
                note["new_planting_id"] = parent_code
                break
        else:
            notifications.append(
                {
                    "type": "recombine",
                    "message": f"Restored planting {parent_code}",
                    "combined_plantings": [old_code],
                    "new_planting_id": parent_code,
                    "total_acres": survivor.acres,
                }
            )

    if notifications:
        logger.info("Recombined split family %s", parent_code)
    return notifications
