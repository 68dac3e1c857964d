"""
Test utilities and factories for creating test data
"""
import random
import string
from datetime import date, timedelta
from decimal import Decimal

from core.constants import MarketType, PlantType
from core.utils import calculate_total_yield
from orders.models import Order
from planning.models import Planting
from reference.models import Commodity, Lot, Ranch, Region, Variety


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=6):
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_commodity(name=None):
        return Commodity.objects.create(name=name or f'Crop_{TestDataFactory.random_string()}')

    @staticmethod
    def create_variety(commodity=None, name='Green Forest', days_to_harvest=60,
                       market_types=None, yields=None, **kwargs):
        """Create a variety; defaults to a Fresh Cut variety yielding 1200/acre"""
        if commodity is None:
            commodity = TestDataFactory.create_commodity('Romaine')
        if market_types is None:
            market_types = [MarketType.FRESH_CUT]
        if yields is None:
            yields = {MarketType.FRESH_CUT: 1200, MarketType.BULK: 0}
        defaults = {
            'growing_window_start': 'Mar',
            'growing_window_end': 'Nov',
            'bed_size': '38-2',
            'spacing': '12in',
            'plant_type': PlantType.TRANSPLANT,
            'ideal_stand': 30000,
        }
        defaults.update(kwargs)
        return Variety.objects.create(
            commodity=commodity,
            name=name,
            days_to_harvest=days_to_harvest,
            market_types=market_types,
            budget_yield_per_acre=yields,
            **defaults
        )

    @staticmethod
    def create_region(name='Salinas'):
        return Region.objects.create(name=name)

    @staticmethod
    def create_ranch(region=None, name='North Ranch'):
        if region is None:
            region = TestDataFactory.create_region()
        return Ranch.objects.create(region=region, name=name)

    @staticmethod
    def create_lot(ranch=None, number='1', acres='25.00', soil_type='Sandy Loam',
                   microclimate='Cool', last_crop='', last_plant_date=None):
        if ranch is None:
            ranch = TestDataFactory.create_ranch()
        return Lot.objects.create(
            ranch=ranch,
            number=number,
            acres=Decimal(acres),
            soil_type=soil_type,
            microclimate=microclimate,
            last_crop=last_crop,
            last_plant_date=last_plant_date,
        )

    @staticmethod
    def create_order(commodity=None, customer='Fresh Farms Co', volume='10000',
                     market_type=MarketType.FRESH_CUT, delivery_date=None, is_weekly=False):
        if commodity is None:
            commodity = TestDataFactory.create_commodity()
        return Order.objects.create(
            customer=customer,
            commodity=commodity,
            volume=Decimal(volume),
            market_type=market_type,
            delivery_date=delivery_date or date(2025, 9, 15),
            is_weekly=is_weekly,
        )

    @staticmethod
    def build_planting(acres='10.00', crop='Romaine', lot=None, sublot='', **kwargs):
        """Unsaved planting"""
        plant_date = kwargs.pop('plant_date', date(2025, 7, 17))
        yield_per_acre = Decimal(kwargs.pop('budget_yield_per_acre', '1200'))
        values = {
            'crop': crop,
            'variety': 'Green Forest',
            'customer': 'Fresh Farms Co',
            'market_type': MarketType.FRESH_CUT,
            'acres': Decimal(acres),
            'plant_date': plant_date,
            'harvest_date': plant_date + timedelta(days=60),
            'budget_yield_per_acre': yield_per_acre,
            'volume_ordered': Decimal(acres) * yield_per_acre,
            'total_yield': calculate_total_yield(acres, yield_per_acre),
            'lot': lot,
            'sublot': sublot,
        }
        values.update(kwargs)
        return Planting(**values)

    @staticmethod
    def create_planting(**kwargs):
        planting = TestDataFactory.build_planting(**kwargs)
        planting.save()
        return planting
