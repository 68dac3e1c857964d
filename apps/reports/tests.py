"""
Tests for the planting CSV export
"""
import csv
import io

from django.test import TestCase
from django.urls import reverse

from core.test_utils import TestDataFactory
from planning.models import Planting
from reports.csv_export import HEADERS, export_plantings_csv


class CSVExportTests(TestCase):
    def setUp(self):
        lot = TestDataFactory.create_lot(number="7")
        TestDataFactory.create_planting(code="planting_a", acres="10.00", lot=lot, sublot="A")
        TestDataFactory.create_planting(code="planting_b", acres="5.00", crop="Carrots")

    def export(self):
        stream = io.StringIO()
        count = export_plantings_csv(
            Planting.objects.select_related("lot__ranch__region").order_by("code"), stream
        )
        return count, stream.getvalue()

    def test_every_field_is_quoted(self):
        count, text = self.export()
        self.assertEqual(count, 2)
        self.assertTrue(text.startswith('"ID","Crop","Variety","Acres"'))
        self.assertIn('"planting_b","Carrots"', text)

    def test_rows(self):
        _, text = self.export()
        rows = list(csv.DictReader(io.StringIO(text)))

        self.assertEqual(list(rows[0]), HEADERS)
        assigned, unassigned = rows
        self.assertEqual(assigned["Assigned"], "Yes")
        self.assertEqual(assigned["Region"], "Salinas")
        self.assertEqual(assigned["Ranch"], "North Ranch")
        self.assertEqual(assigned["Lot"], "7")
        self.assertEqual(assigned["Sublot"], "A")
        self.assertEqual(assigned["Plant Date"], "2025-07-17")
        self.assertEqual(assigned["Total Yield"], "12000")
        self.assertEqual(unassigned["Assigned"], "No")
        self.assertEqual(unassigned["Region"], "")

    def test_download(self):
        response = self.client.get(reverse("reports:export_csv"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/csv")
        self.assertRegex(
            response["Content-Disposition"],
            r'^attachment; filename="crop_plantings_\d{4}-\d{2}-\d{2}\.csv"$',
        )
        self.assertEqual(len(response.content.decode().strip().splitlines()), 3)
