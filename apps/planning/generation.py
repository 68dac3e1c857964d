"""planning/generation.py"""

import logging
from datetime import timedelta

from django.db import transaction

from core.utils import calculate_acres_needed, calculate_total_yield
from orders.models import Order

from .models import Planting

logger = logging.getLogger(__name__)

WEEKLY_REPEATS = 12


def planting_from_order(order, variety, delivery_date, original_order_id):
    """Unsaved planting that fills `order` with `variety` for one delivery."""
    yield_per_acre = variety.yield_for(order.market_type)
    acres = calculate_acres_needed(order.volume, yield_per_acre)
    plant_date = delivery_date - timedelta(days=variety.days_to_harvest)

    return Planting(
        crop=order.commodity.name,
        variety=variety.name,
        customer=order.customer,
        market_type=order.market_type,
        acres=acres,
        plant_date=plant_date,
        harvest_date=delivery_date,
        budgeted_days_to_harvest=variety.days_to_harvest,
        budgeted_harvest_date=delivery_date,
        budget_yield_per_acre=yield_per_acre,
        volume_ordered=order.volume,
        total_yield=calculate_total_yield(acres, yield_per_acre),
        bed_size=variety.bed_size,
        spacing=variety.spacing,
        ideal_stand_per_acre=variety.ideal_stand,
        order=order,
        original_order_id=original_order_id,
    )


def plantings_for_order(order):
    commodity = order.commodity
    variety = commodity.suitable_variety(order.market_type)
    if variety is None:
        logger.warning(
            "No suitable varieties found for %s with market type %s",
            commodity.name,
            order.market_type,
        )
        return []

    plantings = [planting_from_order(order, variety, order.delivery_date, order.reference)]
    if order.is_weekly:
        for week in range(1, WEEKLY_REPEATS):
            delivery = order.delivery_date + timedelta(weeks=week)
            plantings.append(
                planting_from_order(order, variety, delivery, f"{order.reference}-W{week + 1}")
            )
    return plantings


@transaction.atomic
def generate_plantings(orders=None):
    """Replace the plan with fresh, unassigned plantings built from orders."""
    if orders is None:
        orders = Order.objects.select_related("commodity")
    orders = list(orders)

    plantings = []
    for order in orders:
        plantings.extend(plantings_for_order(order))

    Planting.objects.all().delete()
    for planting in plantings:
        planting.save()

    logger.info("Generated %d plantings from %d orders", len(plantings), len(orders))
    return plantings
