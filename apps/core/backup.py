"""core/backup.py

Whole-database export and import as one JSON document::

    {"orders": [...], "commodities": [...], "landStructure": [...],
     "plantings": [...], "exportDate": "..."}

Keys are camelCase so backups written by the earlier browser-only planner
load unchanged. Ids in the document are only used to wire records together
on import; the database assigns fresh primary keys.
"""

import logging
from decimal import Decimal, InvalidOperation

from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from orders.models import Order
from planning.models import Planting, new_planting_code
from reference.models import Commodity, Lot, Ranch, Region, Variety

from .constants import PlantType
from .defaults import default_backup
from .utils import calculate_harvest_date

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("orders", "commodities", "landStructure")
DEFAULT_DAYS_TO_HARVEST = 60


# ── Export ──


def _iso(value):
    return value.isoformat() if value else None


def _number(value):
    if value is None:
        return None
    value = Decimal(value)
    return int(value) if value == value.to_integral_value() else float(value)


def export_commodities():
    return [
        {
            "id": c.id,
            "name": c.name,
            "varieties": [
                {
                    "id": v.id,
                    "name": v.name,
                    "growingWindow": {"start": v.growing_window_start, "end": v.growing_window_end},
                    "daysToHarvest": v.days_to_harvest,
                    "bedSize": v.bed_size,
                    "spacing": v.spacing,
                    "plantType": v.plant_type,
                    "idealStand": v.ideal_stand,
                    "marketTypes": list(v.market_types),
                    "budgetYieldPerAcre": dict(v.budget_yield_per_acre),
                    "preferences": dict(v.preferences),
                }
                for v in c.varieties.order_by("id")
            ],
        }
        for c in Commodity.objects.prefetch_related("varieties")
    ]


def export_land():
    return [
        {
            "id": region.id,
            "region": region.name,
            "ranches": [
                {
                    "id": ranch.id,
                    "name": ranch.name,
                    "lots": [
                        {
                            "id": lot.id,
                            "number": lot.number,
                            "acres": _number(lot.acres),
                            "soilType": lot.soil_type,
                            "lastCrop": lot.last_crop,
                            "lastPlantDate": _iso(lot.last_plant_date),
                            "microclimate": lot.microclimate,
                        }
                        for lot in ranch.lots.order_by("id")
                    ],
                }
                for ranch in region.ranches.order_by("id")
            ],
        }
        for region in Region.objects.prefetch_related("ranches__lots")
    ]


def export_orders():
    return [
        {
            "id": o.id,
            "customer": o.customer,
            "commodity": o.commodity.name,
            "volume": _number(o.volume),
            "marketType": o.market_type,
            "deliveryDate": _iso(o.delivery_date),
            "isWeekly": o.is_weekly,
        }
        for o in Order.objects.select_related("commodity")
    ]


def export_planting(p):
    data = {
        "id": p.code,
        "crop": p.crop,
        "variety": p.variety,
        "acres": _number(p.acres),
        "plantDate": _iso(p.plant_date),
        "harvestDate": _iso(p.harvest_date),
        "wetDate": _iso(p.plant_date),
        "marketType": p.market_type,
        "customer": p.customer,
        "volumeOrdered": _number(p.volume_ordered),
        "totalYield": p.total_yield,
        "budgetYieldPerAcre": _number(p.budget_yield_per_acre),
        "budgetedDaysToHarvest": p.budgeted_days_to_harvest,
        "budgetedHarvestDate": _iso(p.budgeted_harvest_date),
        "bedSize": p.bed_size,
        "spacing": p.spacing,
        "idealStandPerAcre": p.ideal_stand_per_acre,
        "originalOrderId": p.original_order_id,
        "assigned": p.assigned,
    }
    if p.parent_code:
        data.update(
            {
                "parentPlantingId": p.parent_code,
                "splitSequence": p.split_sequence,
                "splitTimestamp": _iso(p.split_at),
            }
        )
    if p.lot_id:
        data.update(
            {
                "assignedLot": {
                    "regionId": p.lot.ranch.region_id,
                    "ranchId": p.lot.ranch_id,
                    "lotId": p.lot_id,
                    "sublot": p.sublot,
                },
                "region": p.region_name,
                "ranch": p.ranch_name,
                "lot": p.lot_number,
                "sublot": p.sublot,
                "uniqueLotId": p.unique_lot_id,
                "displayLotId": p.display_lot_id,
            }
        )
    return data


def export_backup():
    plantings = Planting.objects.select_related("lot__ranch__region")
    return {
        "orders": export_orders(),
        "commodities": export_commodities(),
        "landStructure": export_land(),
        "plantings": [export_planting(p) for p in plantings],
        "exportDate": timezone.now().isoformat(),
    }


# ── Import ──


def _date(value):
    if not value:
        return None
    return parse_date(str(value)[:10])


def _decimal(value, default=None):
    if value is None or value == "":
        return default
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return default


def normalize_days_to_harvest(value):
    """Older backups stored days to harvest per market type."""
    if isinstance(value, dict):
        for days in value.values():
            if days and days > 0:
                return int(days)
        return DEFAULT_DAYS_TO_HARVEST
    if value is None:
        return DEFAULT_DAYS_TO_HARVEST
    return int(value)


def normalize_plant_type(value):
    lookup = {choice.lower(): choice for choice in PlantType.values}
    if not value:
        return PlantType.TRANSPLANT
    return lookup.get(str(value).lower(), value)


def import_commodities(rows):
    commodities = {}
    for row in rows:
        commodity = Commodity.objects.create(name=row["name"])
        commodities[commodity.name] = commodity
        for v in row.get("varieties", []):
            window = v.get("growingWindow") or {}
            Variety.objects.create(
                commodity=commodity,
                name=v.get("name", ""),
                growing_window_start=window.get("start", ""),
                growing_window_end=window.get("end", ""),
                days_to_harvest=normalize_days_to_harvest(v.get("daysToHarvest")),
                bed_size=v.get("bedSize", ""),
                spacing=v.get("spacing", ""),
                plant_type=normalize_plant_type(v.get("plantType")),
                ideal_stand=v.get("idealStand") or 0,
                market_types=v.get("marketTypes") or [],
                budget_yield_per_acre=v.get("budgetYieldPerAcre") or {},
                preferences=v.get("preferences") or {},
            )
    return commodities


def import_land(rows):
    """Returns {(region id, ranch id, lot id) from the file: Lot}."""
    lots = {}
    for r in rows:
        region = Region.objects.create(name=r.get("region") or r.get("name", ""))
        for ra in r.get("ranches", []):
            ranch = Ranch.objects.create(region=region, name=ra.get("name", ""))
            for lo in ra.get("lots", []):
                lot = Lot.objects.create(
                    ranch=ranch,
                    number=str(lo.get("number", "")),
                    acres=_decimal(lo.get("acres"), Decimal("0")),
                    soil_type=lo.get("soilType") or "",
                    microclimate=lo.get("microclimate") or "",
                    last_crop=lo.get("lastCrop") or "",
                    last_plant_date=_date(lo.get("lastPlantDate")),
                )
                lots[(r.get("id"), ra.get("id"), lo.get("id"))] = lot
    return lots


def import_orders(rows, commodities):
    orders = {}
    for row in rows:
        delivery_date = _date(row.get("deliveryDate"))
        if delivery_date is None:
            logger.warning("Skipping order %s without a delivery date", row.get("id"))
            continue
        name = row.get("commodity", "")
        commodity = commodities.get(name)
        if commodity is None:
            commodity = commodities[name] = Commodity.objects.create(name=name)
        order = Order.objects.create(
            customer=row.get("customer", ""),
            commodity=commodity,
            volume=_decimal(row.get("volume"), Decimal("0")),
            market_type=row.get("marketType", ""),
            delivery_date=delivery_date,
            is_weekly=bool(row.get("isWeekly")),
        )
        orders[str(row.get("id"))] = order
    return orders


def import_plantings(rows, lots, orders):
    for row in rows:
        original_order_id = row.get("originalOrderId") or ""
        order = None
        if original_order_id:
            # "ORD-3", "ORD-3-W2", or the bare order id "3"
            key = str(original_order_id).split("-W")[0]
            if key.startswith("ORD-"):
                key = key[len("ORD-"):]
            order = orders.get(key)

        lot, sublot = None, ""
        where = row.get("assignedLot")
        if where:
            lot = lots.get((where.get("regionId"), where.get("ranchId"), where.get("lotId")))
            sublot = (where.get("sublot") or "")[:1] if lot else ""

        plant_date = _date(row.get("plantDate") or row.get("wetDate"))
        harvest_date = _date(row.get("harvestDate"))
        days = row.get("budgetedDaysToHarvest")
        if harvest_date is None and plant_date and days:
            harvest_date = calculate_harvest_date(plant_date, int(days))

        split_at = row.get("splitTimestamp")
        Planting.objects.create(
            code=row.get("id") or new_planting_code(),
            crop=row.get("crop", ""),
            variety=row.get("variety") or "",
            customer=row.get("customer") or "",
            market_type=row.get("marketType") or "",
            acres=_decimal(row.get("acres"), Decimal("0")),
            plant_date=plant_date,
            harvest_date=harvest_date,
            budgeted_days_to_harvest=days,
            budgeted_harvest_date=_date(row.get("budgetedHarvestDate")),
            budget_yield_per_acre=_decimal(row.get("budgetYieldPerAcre")),
            volume_ordered=_decimal(row.get("volumeOrdered")),
            total_yield=row.get("totalYield"),
            bed_size=row.get("bedSize") or "",
            spacing=row.get("spacing") or "",
            ideal_stand_per_acre=row.get("idealStandPerAcre"),
            order=order,
            original_order_id=original_order_id,
            parent_code=row.get("parentPlantingId") or "",
            split_sequence=row.get("splitSequence") or 0,
            split_at=parse_datetime(split_at) if split_at else None,
            lot=lot,
            sublot=sublot,
        )


def validate_backup(data):
    if not isinstance(data, dict):
        raise ValueError("Invalid backup file format")
    for key in REQUIRED_KEYS:
        if not isinstance(data.get(key), list):
            raise ValueError("Invalid backup file format")


def delete_all():
    Planting.objects.all().delete()
    Order.objects.all().delete()
    Variety.objects.all().delete()
    Commodity.objects.all().delete()
    Lot.objects.all().delete()
    Ranch.objects.all().delete()
    Region.objects.all().delete()


@transaction.atomic
def import_backup(data):
    """Replace everything with the contents of a backup document."""
    validate_backup(data)

    delete_all()
    try:
        commodities = import_commodities(data["commodities"])
        lots = import_land(data["landStructure"])
        orders = import_orders(data["orders"], commodities)
        import_plantings(data.get("plantings") or [], lots, orders)
    except (KeyError, TypeError, AttributeError, IntegrityError) as e:
        logger.warning("Rejected backup with malformed rows: %r", e)
        raise ValueError("Invalid backup file format") from e

    counts = {
        "orders": len(orders),
        "commodities": len(data["commodities"]),
        "lots": len(lots),
        "plantings": len(data.get("plantings") or []),
    }
    logger.info("Imported backup: %s", counts)
    return counts


@transaction.atomic
def reset_data():
    delete_all()
    logger.info("All planning data deleted")


def seed_defaults():
    return import_backup(default_backup())
