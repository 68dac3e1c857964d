"""
Tests for the commodity catalog and the region/ranch/lot hierarchy
"""
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.urls import reverse

from core.constants import MarketType
from core.test_utils import TestDataFactory
from planning.models import Planting
from reference.models import Commodity, Lot, Ranch, Variety


class VarietyTests(TestCase):
    def setUp(self):
        self.commodity = TestDataFactory.create_commodity("Romaine")

    def test_yield_for_missing_market_type_is_zero(self):
        variety = TestDataFactory.create_variety(self.commodity)
        self.assertEqual(variety.yield_for(MarketType.FRESH_CUT), Decimal("1200"))
        self.assertEqual(variety.yield_for(MarketType.ORGANIC), Decimal("0"))

    def test_supports_needs_market_type_and_yield(self):
        variety = TestDataFactory.create_variety(
            self.commodity,
            market_types=[MarketType.FRESH_CUT, MarketType.BULK],
            yields={MarketType.FRESH_CUT: 1100, MarketType.BULK: 0},
        )
        self.assertTrue(variety.supports(MarketType.FRESH_CUT))
        self.assertFalse(variety.supports(MarketType.BULK))
        self.assertFalse(variety.supports(MarketType.PROCESSING))

    def test_suitable_variety_is_first_by_id(self):
        TestDataFactory.create_variety(
            self.commodity, name="Bulk Only", market_types=[MarketType.BULK],
            yields={MarketType.BULK: 25000},
        )
        first = TestDataFactory.create_variety(self.commodity, name="Green Forest")
        TestDataFactory.create_variety(self.commodity, name="Parris Island Cos")

        self.assertEqual(self.commodity.suitable_variety(MarketType.FRESH_CUT), first)
        self.assertIsNone(self.commodity.suitable_variety(MarketType.ORGANIC))

    def test_duplicate(self):
        variety = TestDataFactory.create_variety(self.commodity, preferences={"Mar": 10})
        copy = variety.duplicate()
        self.assertNotEqual(copy.pk, variety.pk)
        self.assertEqual(copy.name, "Green Forest (Copy)")
        self.assertEqual(copy.budget_yield_per_acre, variety.budget_yield_per_acre)
        self.assertEqual(copy.preferences, {"Mar": 10})


class LotTests(TestCase):
    def setUp(self):
        self.ranch = TestDataFactory.create_ranch()

    def test_identifiers(self):
        lot = TestDataFactory.create_lot(self.ranch, number="3")
        region = self.ranch.region
        self.assertEqual(lot.unique_lot_id, f"{region.id}-{self.ranch.id}-{lot.id}")
        self.assertEqual(lot.location, "Salinas > North Ranch > Lot 3")

    def test_duplicate_number_in_ranch(self):
        TestDataFactory.create_lot(self.ranch, number="1")
        lot = Lot(ranch=self.ranch, number="1", acres=Decimal("10"))
        with self.assertRaises(ValidationError) as ctx:
            lot.full_clean()
        self.assertEqual(
            ctx.exception.message_dict["number"],
            ['Lot number "1" already exists in this ranch. Please choose a different lot number.'],
        )

    def test_same_number_in_other_ranch(self):
        TestDataFactory.create_lot(self.ranch, number="1")
        other = TestDataFactory.create_ranch(self.ranch.region, name="South Ranch")
        Lot(ranch=other, number="1", acres=Decimal("10")).full_clean()

    def test_lot_number_limits(self):
        for number in ["   ", "x" * 21]:
            with self.assertRaises(ValidationError):
                Lot(ranch=self.ranch, number=number, acres=Decimal("10")).full_clean()

    def test_acres_limits(self):
        for acres in ["0", "1000.01"]:
            with self.assertRaises(ValidationError):
                Lot(ranch=self.ranch, number="9", acres=Decimal(acres)).full_clean()
        Lot(ranch=self.ranch, number="9", acres=Decimal("1000")).full_clean()

    def test_ranch_lot_limit(self):
        Lot.objects.bulk_create(
            Lot(ranch=self.ranch, number=str(n), acres=Decimal("1")) for n in range(50)
        )
        with self.assertRaisesMessage(ValidationError, "A ranch can hold at most 50 lots."):
            Lot(ranch=self.ranch, number="51", acres=Decimal("1")).full_clean()

    def test_region_ranch_limit(self):
        region = self.ranch.region
        Ranch.objects.bulk_create(Ranch(region=region, name=f"Ranch {n}") for n in range(19))
        with self.assertRaisesMessage(ValidationError, "A region can hold at most 20 ranches."):
            Ranch(region=region, name="Extra").full_clean()
        # existing ranches can still be edited
        self.ranch.full_clean()

    def test_deleting_lot_unassigns_plantings(self):
        lot = TestDataFactory.create_lot(self.ranch)
        planting = TestDataFactory.create_planting(acres="10.00", lot=lot, sublot="A")

        lot.delete()

        planting.refresh_from_db()
        self.assertIsNone(planting.lot_id)
        self.assertEqual(planting.sublot, "")
        self.assertEqual(planting.acres, Decimal("10.00"))

    def test_deleting_region_unassigns_plantings(self):
        lot = TestDataFactory.create_lot(self.ranch)
        planting = TestDataFactory.create_planting(lot=lot, sublot="B")

        self.ranch.region.delete()

        planting.refresh_from_db()
        self.assertFalse(planting.assigned)
        self.assertEqual(planting.sublot, "")
        self.assertEqual(Planting.objects.count(), 1)


class ReferenceViewTests(TestCase):
    def test_commodity_list(self):
        TestDataFactory.create_variety()
        response = self.client.get(reverse("reference:commodity_list"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Green Forest")

    def test_create_variety_collects_yields(self):
        commodity = TestDataFactory.create_commodity("Iceberg")
        response = self.client.post(
            reverse("reference:variety_create", args=[commodity.pk]),
            {
                "name": "Great Lakes",
                "growing_window_start": "Apr",
                "growing_window_end": "Oct",
                "days_to_harvest": 65,
                "bed_size": "38-2",
                "spacing": "12in",
                "plant_type": "Transplant",
                "ideal_stand": 28000,
                "market_types": ["Fresh Cut"],
                "yield_fresh_cut": "1000",
            },
        )
        self.assertRedirects(response, reverse("reference:commodity_list"))
        variety = Variety.objects.get(name="Great Lakes")
        self.assertEqual(variety.commodity, commodity)
        self.assertEqual(variety.market_types, ["Fresh Cut"])
        self.assertEqual(variety.budget_yield_per_acre["Fresh Cut"], 1000)
        self.assertEqual(variety.budget_yield_per_acre["Bulk"], 0)

    def test_duplicate_view(self):
        variety = TestDataFactory.create_variety()
        response = self.client.post(reverse("reference:variety_duplicate", args=[variety.pk]))
        copy = Variety.objects.get(name="Green Forest (Copy)")
        self.assertRedirects(response, reverse("reference:variety_edit", args=[copy.pk]))

    def test_commodity_with_orders_is_protected(self):
        order = TestDataFactory.create_order()
        response = self.client.post(
            reverse("reference:commodity_delete", args=[order.commodity.pk])
        )
        self.assertRedirects(response, reverse("reference:commodity_list"))
        self.assertTrue(Commodity.objects.filter(pk=order.commodity.pk).exists())

    def test_lot_create_rejects_duplicate_number(self):
        ranch = TestDataFactory.create_ranch()
        TestDataFactory.create_lot(ranch, number="1")
        response = self.client.post(
            reverse("reference:lot_create", args=[ranch.pk]),
            {"number": "1", "acres": "10", "soil_type": "Loam", "microclimate": "Cool"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("already exists in this ranch", response.context["form"].errors["number"][0])
        self.assertEqual(ranch.lots.count(), 1)

    def test_lot_create(self):
        ranch = TestDataFactory.create_ranch()
        response = self.client.post(
            reverse("reference:lot_create", args=[ranch.pk]),
            {"number": "7", "acres": "12.5", "soil_type": "Loam", "microclimate": "Cool"},
        )
        self.assertRedirects(response, reverse("reference:land"))
        self.assertEqual(ranch.lots.get().acres, Decimal("12.50"))

    def test_land_page(self):
        TestDataFactory.create_lot()
        response = self.client.get(reverse("reference:land"))
        self.assertContains(response, "North Ranch")
