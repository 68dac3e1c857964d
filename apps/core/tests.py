"""
Tests for core: calculations, rotation rules, backup/restore and data views
"""
import json
from io import StringIO
from datetime import date
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from django.urls import reverse

from core.backup import (
    export_backup,
    import_backup,
    normalize_days_to_harvest,
    normalize_plant_type,
    reset_data,
    seed_defaults,
)
from core.models import RotationRule
from core.test_utils import TestDataFactory
from core.utils import (
    calculate_acres_needed,
    calculate_harvest_date,
    calculate_percentage,
    calculate_total_yield,
    days_between,
    format_currency,
    is_past_date,
    round_to,
)
from orders.models import Order
from planning.models import Planting
from reference.models import Commodity, Lot, Variety


class CalculationTests(TestCase):
    def test_total_yield_rounds_to_whole_units(self):
        self.assertEqual(calculate_total_yield(Decimal("8.33"), 1200), 9996)
        self.assertEqual(calculate_total_yield("2.5", "45000"), 112500)

    def test_acres_needed(self):
        self.assertEqual(calculate_acres_needed(10000, 1200), Decimal("8.33"))

    def test_acres_needed_without_yield_is_zero(self):
        self.assertEqual(calculate_acres_needed(10000, 0), Decimal("0.00"))
        self.assertEqual(calculate_acres_needed(10000, -5), Decimal("0.00"))

    def test_round_half_up(self):
        self.assertEqual(round_to(2.675, 2), Decimal("2.68"))
        self.assertEqual(round_to("0.5", 0), Decimal("1"))

    def test_percentage(self):
        self.assertEqual(calculate_percentage(1, 3), 33)
        self.assertEqual(calculate_percentage(5, 0), 0)

    def test_dates(self):
        self.assertEqual(calculate_harvest_date(date(2025, 7, 17), 60), date(2025, 9, 15))
        self.assertEqual(days_between(date(2025, 1, 10), date(2025, 1, 1)), 9)
        self.assertTrue(is_past_date(date(2025, 1, 1), today=date(2025, 1, 2)))
        self.assertFalse(is_past_date(date(2025, 1, 2), today=date(2025, 1, 2)))

    def test_format_currency(self):
        self.assertEqual(format_currency(1234.5), "$1,234.50")
        self.assertEqual(format_currency(-3), "-$3.00")


class RotationRuleTests(TestCase):
    def test_default_rules_are_seeded(self):
        self.assertEqual(RotationRule.objects.get(crop="Lettuce").minimum_rotation_days, 60)
        self.assertEqual(RotationRule.objects.count(), 6)

    def test_as_map(self):
        rules = RotationRule.objects.all().as_map()
        self.assertEqual(rules["Carrots"], (["Carrots"], 90))
        self.assertIn("Cabbage", rules["Broccoli"][0])


class BackupTests(TestCase):
    def test_seed_defaults(self):
        counts = seed_defaults()
        self.assertEqual(counts["commodities"], 3)
        self.assertEqual(Variety.objects.count(), 4)
        self.assertEqual(Lot.objects.count(), 7)
        self.assertEqual(Order.objects.count(), 6)
        self.assertTrue(Order.objects.filter(customer="Valley Produce", is_weekly=True).exists())

    def test_export_shape(self):
        seed_defaults()
        data = export_backup()
        self.assertEqual(
            set(data), {"orders", "commodities", "landStructure", "plantings", "exportDate"}
        )
        salinas = data["landStructure"][0]
        self.assertEqual(salinas["region"], "Salinas")
        self.assertEqual(salinas["ranches"][0]["lots"][0]["acres"], 25)
        self.assertEqual(data["orders"][0]["commodity"], "Iceberg")

    def test_import_rejects_missing_sections(self):
        with self.assertRaisesMessage(ValueError, "Invalid backup file format"):
            import_backup({"orders": [], "commodities": []})
        with self.assertRaisesMessage(ValueError, "Invalid backup file format"):
            import_backup([])

    def test_failed_import_keeps_existing_data(self):
        seed_defaults()
        with self.assertRaises(ValueError):
            import_backup({"orders": []})
        self.assertEqual(Commodity.objects.count(), 3)

    def test_legacy_variety_fields_are_normalized(self):
        self.assertEqual(normalize_days_to_harvest({"Fresh Cut": 0, "Bulk": 75}), 75)
        self.assertEqual(normalize_days_to_harvest({"Fresh Cut": 0}), 60)
        self.assertEqual(normalize_plant_type("direct seed"), "Direct Seed")
        self.assertEqual(normalize_plant_type("TRANSPLANT"), "Transplant")
        self.assertEqual(normalize_plant_type(None), "Transplant")

    def test_import_restores_assignments(self):
        lot = TestDataFactory.create_lot(acres="30.00")
        TestDataFactory.create_planting(code="planting_a", acres="10.00", lot=lot, sublot="A")
        TestDataFactory.create_planting(
            code="planting_b_split_2", acres="4.00", parent_code="planting_b", split_sequence=2
        )
        data = json.loads(json.dumps(export_backup()))

        import_backup(data)

        restored = Planting.objects.get(code="planting_a")
        self.assertEqual(restored.display_lot_id, "Salinas > North Ranch > Lot 1-A")
        self.assertEqual(restored.acres, Decimal("10.00"))
        fragment = Planting.objects.get(code="planting_b_split_2")
        self.assertEqual(fragment.parent_code, "planting_b")
        self.assertFalse(fragment.assigned)

    def test_plantings_link_to_orders_by_bare_or_prefixed_id(self):
        import_backup(
            {
                "orders": [
                    {
                        "id": 3,
                        "customer": "Valley Produce",
                        "commodity": "Romaine",
                        "volume": 1200,
                        "marketType": "Fresh Cut",
                        "deliveryDate": "2025-09-15",
                    }
                ],
                "commodities": [{"name": "Romaine", "varieties": []}],
                "landStructure": [],
                "plantings": [
                    {"id": "planting_bare", "crop": "Romaine", "acres": 1, "originalOrderId": "3"},
                    {"id": "planting_weekly", "crop": "Romaine", "acres": 1,
                     "originalOrderId": "ORD-3-W2"},
                ],
            }
        )

        order = Order.objects.get()
        self.assertEqual(Planting.objects.get(code="planting_bare").order, order)
        self.assertEqual(Planting.objects.get(code="planting_weekly").order, order)

    def test_malformed_rows_are_rejected(self):
        seed_defaults()
        for commodities in (
            [{"name": "Romaine"}, {"name": "Romaine"}],
            [{"varieties": []}],
            ["Romaine"],
        ):
            with self.assertRaisesMessage(ValueError, "Invalid backup file format"):
                import_backup({"orders": [], "commodities": commodities, "landStructure": []})
        self.assertEqual(Commodity.objects.count(), 3)

    def test_reset_data(self):
        seed_defaults()
        reset_data()
        self.assertFalse(Commodity.objects.exists())
        self.assertFalse(Lot.objects.exists())
        self.assertFalse(Order.objects.exists())


class CommandTests(TestCase):
    def test_seed_defaults_refuses_to_overwrite(self):
        call_command("seed_defaults", stdout=StringIO())
        self.assertEqual(Commodity.objects.count(), 3)
        with self.assertRaises(CommandError):
            call_command("seed_defaults")

    def test_reset_data_without_prompt(self):
        seed_defaults()
        call_command("reset_data", "--noinput", stdout=StringIO())
        self.assertFalse(Order.objects.exists())


class DataViewTests(TestCase):
    def test_dashboard_metrics(self):
        lot = TestDataFactory.create_lot(acres="25.00")
        TestDataFactory.create_planting(acres="10.00", lot=lot, sublot="A")
        TestDataFactory.create_planting(acres="5.00")

        response = self.client.get(reverse("core:dashboard"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["total_plantings"], 2)
        self.assertEqual(response.context["unassigned_plantings"], 1)
        self.assertEqual(response.context["utilization_rate"], 40)
        self.assertEqual(response.context["unassigned_count"], 1)
        self.assertEqual(len(response.context["late"]), 1)

    def test_backup_download(self):
        seed_defaults()
        response = self.client.get(reverse("core:backup"))
        self.assertEqual(response.status_code, 200)
        self.assertIn("attachment;", response["Content-Disposition"])
        self.assertEqual(len(json.loads(response.content)["orders"]), 6)

    def test_backup_upload(self):
        seed_defaults()
        payload = json.dumps(export_backup()).encode()
        reset_data()

        response = self.client.post(
            reverse("core:data"),
            {"backup_file": SimpleUploadedFile("backup.json", payload)},
        )

        self.assertRedirects(response, reverse("core:data"))
        self.assertEqual(Order.objects.count(), 6)

    def test_invalid_upload_reports_error(self):
        response = self.client.post(
            reverse("core:data"),
            {"backup_file": SimpleUploadedFile("backup.json", b'{"orders": []}')},
        )
        self.assertEqual(response.status_code, 200)
        messages = [str(m) for m in response.context["messages"]]
        self.assertIn("Error importing data: Invalid backup file format", messages)

    def test_upload_with_duplicate_commodities_reports_error(self):
        payload = json.dumps(
            {
                "orders": [],
                "commodities": [{"name": "Romaine"}, {"name": "Romaine"}],
                "landStructure": [],
            }
        ).encode()

        response = self.client.post(
            reverse("core:data"),
            {"backup_file": SimpleUploadedFile("backup.json", payload)},
        )

        self.assertEqual(response.status_code, 200)
        messages = [str(m) for m in response.context["messages"]]
        self.assertIn("Error importing data: Invalid backup file format", messages)
        self.assertFalse(Commodity.objects.exists())

    def test_reset_view(self):
        seed_defaults()
        response = self.client.post(reverse("core:reset"))
        self.assertRedirects(response, reverse("core:data"))
        self.assertFalse(Commodity.objects.exists())
