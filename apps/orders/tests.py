"""
Tests for order entry and CSV import
"""
from datetime import date
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse

from core.test_utils import TestDataFactory
from orders.csv_import import import_orders_csv
from orders.models import Order

HEADER = "customer,commodity,volume,market_type,delivery_date,is_weekly\n"


class OrderModelTests(TestCase):
    def test_reference(self):
        order = TestDataFactory.create_order()
        self.assertEqual(order.reference, f"ORD-{order.id}")

    def test_str(self):
        commodity = TestDataFactory.create_commodity("Romaine")
        order = TestDataFactory.create_order(commodity, volume="5000")
        order.refresh_from_db()
        self.assertEqual(str(order), "Fresh Farms Co: 5000.00 Romaine (Fresh Cut)")


class CSVImportTests(TestCase):
    def setUp(self):
        self.romaine = TestDataFactory.create_commodity("Romaine")

    def test_valid_rows(self):
        text = HEADER + (
            "Fresh Farms Co,Romaine,10000,Fresh Cut,2025-09-15,no\n"
            "Valley Produce,romaine,2500.5,Bulk,2025-10-01,Yes\n"
        )
        result = import_orders_csv(text)

        self.assertEqual(result["errors"], [])
        self.assertEqual(len(result["created"]), 2)
        weekly = Order.objects.get(customer="Valley Produce")
        self.assertTrue(weekly.is_weekly)
        self.assertEqual(weekly.commodity, self.romaine)
        self.assertEqual(weekly.volume, Decimal("2500.50"))
        self.assertEqual(weekly.delivery_date, date(2025, 10, 1))

    def test_bytes_with_bom(self):
        text = "\ufeff" + HEADER + "Fresh Farms Co,Romaine,100,Fresh Cut,2025-09-15,\n"
        result = import_orders_csv(text.encode("utf-8"))
        self.assertEqual(len(result["created"]), 1)
        self.assertFalse(result["created"][0].is_weekly)

    def test_bad_rows_are_reported_and_good_rows_kept(self):
        text = HEADER + (
            "Fresh Farms Co,Kale,100,Fresh Cut,2025-09-15,no\n"
            "Fresh Farms Co,Romaine,-5,Fresh Cut,2025-09-15,no\n"
            "Fresh Farms Co,Romaine,100,Fresh Cut,2025-09-15,no\n"
        )
        result = import_orders_csv(text)

        self.assertEqual(len(result["created"]), 1)
        self.assertEqual(result["errors"][0], (2, 'Unknown commodity "Kale"'))
        self.assertEqual(result["errors"][1][0], 3)
        self.assertIn("volume", result["errors"][1][1])
        self.assertEqual(Order.objects.count(), 1)

    def test_missing_columns(self):
        result = import_orders_csv("customer,commodity\nFresh Farms Co,Romaine\n")
        self.assertEqual(result["created"], [])
        self.assertEqual(result["errors"][0][0], 1)
        self.assertIn("volume", result["errors"][0][1])


class OrderViewTests(TestCase):
    def test_create_order(self):
        commodity = TestDataFactory.create_commodity("Iceberg")
        response = self.client.post(
            reverse("orders:order_create"),
            {
                "customer": "  Fresh Farms Co ",
                "commodity": commodity.pk,
                "volume": "8000",
                "market_type": "Fresh Cut",
                "delivery_date": "2025-08-01",
            },
        )
        self.assertRedirects(response, reverse("orders:order_list"))
        order = Order.objects.get()
        self.assertEqual(order.customer, "Fresh Farms Co")
        self.assertFalse(order.is_weekly)

    def test_blank_customer_is_rejected(self):
        commodity = TestDataFactory.create_commodity("Iceberg")
        response = self.client.post(
            reverse("orders:order_create"),
            {
                "customer": "   ",
                "commodity": commodity.pk,
                "volume": "8000",
                "market_type": "Fresh Cut",
                "delivery_date": "2025-08-01",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("customer", response.context["form"].errors)
        self.assertFalse(Order.objects.exists())

    def test_order_list(self):
        TestDataFactory.create_order(customer="Valley Produce")
        response = self.client.get(reverse("orders:order_list"))
        self.assertContains(response, "Valley Produce")

    def test_import_view(self):
        TestDataFactory.create_commodity("Romaine")
        upload = SimpleUploadedFile(
            "orders.csv",
            (HEADER + "Fresh Farms Co,Romaine,100,Fresh Cut,2025-09-15,no\n"
             "Fresh Farms Co,Kale,100,Fresh Cut,2025-09-15,no\n").encode("utf-8"),
            content_type="text/csv",
        )

        response = self.client.post(reverse("orders:order_import"), {"csv_file": upload}, follow=True)

        self.assertRedirects(response, reverse("orders:order_list"))
        self.assertEqual(Order.objects.count(), 1)
        messages = [str(m) for m in response.context["messages"]]
        self.assertIn("Imported 1 orders.", messages)
        self.assertIn('Row 3: Unknown commodity "Kale"', messages)
