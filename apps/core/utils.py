"""core/utils.py"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_decimal(value):
    if isinstance(value, Decimal):
        return value
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def round_to(value, decimals=2):
    """Round half up, the way growers expect acres and yields to round."""
    exp = Decimal(1).scaleb(-decimals)
    return to_decimal(value).quantize(exp, rounding=ROUND_HALF_UP)


def round_acres(value):
    return round_to(value, 2)


def calculate_total_yield(acres, yield_per_acre):
    return int(round_to(to_decimal(acres) * to_decimal(yield_per_acre), 0))


def calculate_acres_needed(volume, yield_per_acre):
    yield_per_acre = to_decimal(yield_per_acre)
    if yield_per_acre <= 0:
        return Decimal("0.00")
    return round_acres(to_decimal(volume) / yield_per_acre)


def calculate_percentage(part, total):
    total = to_decimal(total)
    if total == 0:
        return 0
    return int(round_to(to_decimal(part) / total * 100, 0))


def calculate_utilization_rate(used, total):
    return calculate_percentage(used, total)


def calculate_harvest_date(plant_date, days_to_harvest):
    return plant_date + timedelta(days=days_to_harvest)


def days_between(start, end):
    return abs((end - start).days)


def is_past_date(value, today=None):
    return value < (today or date.today())


def format_currency(value):
    value = round_to(value, 2)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"
