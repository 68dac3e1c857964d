"""core/constants.py"""

from django.db import models


class MarketType(models.TextChoices):
    FRESH_CUT = "Fresh Cut", "Fresh Cut"
    BULK = "Bulk", "Bulk"
    PROCESSING = "Processing", "Processing"
    ORGANIC = "Organic", "Organic"
    BABY_LEAF = "Baby Leaf", "Baby Leaf"


class PlantType(models.TextChoices):
    DIRECT_SEED = "Direct Seed", "Direct Seed"
    TRANSPLANT = "Transplant", "Transplant"
    BOTH = "Both", "Both"


SOIL_TYPES = [
    "Sandy Loam",
    "Clay Loam",
    "Silt Loam",
    "Sandy Clay",
    "Silty Clay",
    "Clay",
    "Loam",
    "Sandy",
]

MICROCLIMATES = ["Coastal", "Desert", "Mountain", "Valley", "Moderate", "Cool", "Warm", "Hot"]

BED_SIZES = ['38-2', '40"', '60"', '80"', "Bed-less"]

SPACING_OPTIONS = ['2"x2"', '4"x4"', '6"x6"', '8"x8"', '12"x12"', "Variable"]

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

MAX_ACRES_PER_LOT = 1000
MAX_LOTS_PER_RANCH = 50
MAX_RANCHES_PER_REGION = 20
MAX_LOT_NUMBER_LENGTH = 20

DEFAULT_ROTATION_DAYS = 90

# Seed values for core.RotationRule
DEFAULT_ROTATION_RULES = {
    "Lettuce": (["Lettuce", "Spinach"], 60),
    "Spinach": (["Lettuce", "Spinach"], 45),
    "Carrots": (["Carrots"], 90),
    "Broccoli": (["Broccoli", "Cauliflower", "Cabbage"], 120),
    "Cauliflower": (["Broccoli", "Cauliflower", "Cabbage"], 120),
    "Cabbage": (["Broccoli", "Cauliflower", "Cabbage"], 120),
}

# Price per yield unit used for timeline value estimates
FRESH_CUT_UNIT_PRICE = 12
DEFAULT_UNIT_PRICE = 0.5


def yield_unit(market_type):
    return "cartons" if market_type == MarketType.FRESH_CUT else "lbs"
