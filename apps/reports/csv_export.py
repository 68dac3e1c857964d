"""reports/csv_export.py"""

import csv

HEADERS = [
    "ID",
    "Crop",
    "Variety",
    "Acres",
    "Plant Date",
    "Harvest Date",
    "Market Type",
    "Customer",
    "Volume Ordered",
    "Total Yield",
    "Budget Yield/Acre",
    "Assigned",
    "Region",
    "Ranch",
    "Lot",
    "Sublot",
]


def _cell(value):
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def planting_row(p):
    return [
        _cell(v)
        for v in (
            p.code,
            p.crop,
            p.variety,
            p.acres,
            p.plant_date,
            p.harvest_date,
            p.market_type,
            p.customer,
            p.volume_ordered,
            p.total_yield,
            p.budget_yield_per_acre,
            "Yes" if p.assigned else "No",
            p.region_name,
            p.ranch_name,
            p.lot_number,
            p.sublot,
        )
    ]


def export_plantings_csv(plantings, stream):
    """Write plantings to `stream` as CSV with every field quoted."""
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL)
    writer.writerow(HEADERS)
    count = 0
    for p in plantings:
        writer.writerow(planting_row(p))
        count += 1
    return count
