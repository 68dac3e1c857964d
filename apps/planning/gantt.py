"""planning/gantt.py

Builds the lot-by-lot timeline shown on the Gantt page: one bar per planting
from plant date to harvest date across a twelve month window.
"""

import calendar
from datetime import date

from isoweek import Week

from core.constants import DEFAULT_UNIT_PRICE, FRESH_CUT_UNIT_PRICE, MarketType
from core.utils import days_between, round_acres, to_decimal

WINDOW_MONTHS = 12
MIN_BAR_WIDTH = 2
UNASSIGNED = "unassigned"

CROP_COLORS = {
    "Romaine": "#10b981",
    "Iceberg": "#3b82f6",
    "Carrots": "#f59e0b",
    "Spinach": "#8b5cf6",
    "Lettuce": "#10b981",
}
DEFAULT_COLOR = "#6b7280"


def crop_color(crop):
    return CROP_COLORS.get(crop, DEFAULT_COLOR)


def add_months(day, months):
    index = day.month - 1 + months
    year, month = day.year + index // 12, index % 12 + 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def month_start(day):
    return day.replace(day=1)


def month_end(day):
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def week_start(year, week):
    """Monday of an ISO week; used to jump the window by week number."""
    return Week(year, week).monday()


def month_week(day):
    """ISO (year, week) whose Monday falls inside the month of `day`."""
    seventh = day.replace(day=7)
    return tuple(seventh.isocalendar()[:2])


def window(start):
    first = month_start(start)
    last = month_end(add_months(first, WINDOW_MONTHS - 1))
    months = [add_months(first, i) for i in range(WINDOW_MONTHS)]
    return first, last, months


def matches(planting, crop="all", assigned="all", customer="all"):
    if crop != "all" and planting.crop != crop:
        return False
    if assigned == "assigned" and not planting.assigned:
        return False
    if assigned == "unassigned" and planting.assigned:
        return False
    if customer != "all" and planting.customer != customer:
        return False
    return bool(planting.plant_date and planting.harvest_date)


def timeline_entry(planting):
    if planting.assigned:
        location = planting.display_lot_id
        group_key = planting.unique_lot_id
    else:
        location = "Unassigned"
        group_key = UNASSIGNED

    return {
        "id": planting.code,
        "planting": planting,
        "start_date": planting.plant_date,
        "end_date": planting.harvest_date,
        "duration": days_between(planting.plant_date, planting.harvest_date),
        "crop": planting.crop,
        "variety": planting.variety,
        "acres": to_decimal(planting.acres),
        "customer": planting.customer,
        "location": location,
        "color": crop_color(planting.crop),
        "group_key": group_key,
    }


def bar_position(entry, view_start, view_end):
    """Left offset and width of a bar, in percent of the window."""
    total_days = (view_end - view_start).days
    start = min(total_days, max(0, (entry["start_date"] - view_start).days))
    end = min(total_days, max(start, (entry["end_date"] - view_start).days))
    left = start / total_days * 100
    width = max(MIN_BAR_WIDTH, (end - start) / total_days * 100)
    return {"left": round(left, 2), "width": round(width, 2)}


def group_entries(entries):
    groups = {}
    for entry in entries:
        group = groups.get(entry["group_key"])
        if group is None:
            group = groups[entry["group_key"]] = {
                "key": entry["group_key"],
                "display_name": entry["location"],
                "entries": [],
                "total_acres": to_decimal(0),
                "is_unassigned": entry["group_key"] == UNASSIGNED,
            }
        group["entries"].append(entry)
        group["total_acres"] += entry["acres"]

    for group in groups.values():
        group["entries"].sort(key=lambda e: e["start_date"])
        group["total_acres"] = round_acres(group["total_acres"])

    return sorted(groups.values(), key=lambda g: (g["is_unassigned"], g["display_name"]))


def timeline_stats(entries, groups):
    assigned = sum(1 for e in entries if e["planting"].assigned)
    value = 0
    for e in entries:
        price = FRESH_CUT_UNIT_PRICE if e["planting"].market_type == MarketType.FRESH_CUT else DEFAULT_UNIT_PRICE
        value += (e["planting"].total_yield or 0) * price

    return {
        "total_plantings": len(entries),
        "total_acres": round_acres(sum((e["acres"] for e in entries), to_decimal(0))),
        "assigned_count": assigned,
        "unassigned_count": len(entries) - assigned,
        "total_value": value,
        "total_lots": sum(1 for g in groups if not g["is_unassigned"]),
    }


def build_timeline(plantings, start=None, crop="all", assigned="all", customer="all"):
    plantings = list(plantings)
    view_start, view_end, months = window(start or date.today())

    entries = [
        timeline_entry(p) for p in plantings if matches(p, crop, assigned, customer)
    ]
    for entry in entries:
        entry.update(bar_position(entry, view_start, view_end))

    groups = group_entries(entries)

    return {
        "view_start": view_start,
        "view_end": view_end,
        "months": months,
        "groups": groups,
        "entries": entries,
        "stats": timeline_stats(entries, groups),
        "crops": sorted({p.crop for p in plantings}),
        "customers": sorted({p.customer for p in plantings if p.customer}),
        "previous_start": add_months(view_start, -1),
        "next_start": add_months(view_start, 1),
    }
