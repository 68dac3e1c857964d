"""
Tests for planting capacity, scoring, assignment, generation and the timeline
"""
import json
from datetime import date, timedelta
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from core.constants import MarketType
from core.test_utils import TestDataFactory
from planning import gantt
from planning.assignment import assign_planting_to_lot, recombine, unassign_planting
from planning.capacity import fit_check, lot_capacity, next_sublot
from planning.generation import generate_plantings
from planning.models import Planting
from planning.optimization import (
    apply_optimization,
    evaluate_crop_rotation,
    evaluate_microclimate,
    find_best_lots,
    optimize_all,
    score_lot,
    score_reasons,
    summarize,
)


class CapacityTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")

    def test_lot_capacity(self):
        TestDataFactory.create_planting(acres="10.00", lot=self.lot, sublot="A")
        capacity = lot_capacity(self.lot)
        self.assertEqual(capacity["used_acres"], Decimal("10.00"))
        self.assertEqual(capacity["available_acres"], Decimal("15.00"))
        self.assertEqual(capacity["planting_count"], 1)

    def test_capacity_of_unsaved_lot_is_empty(self):
        capacity = lot_capacity(None)
        self.assertEqual(capacity["total_acres"], Decimal("0.00"))
        self.assertEqual(capacity["plantings"], [])

    def test_next_sublot(self):
        self.assertEqual(next_sublot(self.lot), "A")
        TestDataFactory.create_planting(acres="1.00", lot=self.lot, sublot="A")
        TestDataFactory.create_planting(acres="1.00", lot=self.lot, sublot="C")
        self.assertEqual(next_sublot(self.lot), "B")

    def test_next_sublot_wraps_when_all_letters_used(self):
        plantings = [
            TestDataFactory.build_planting(acres="0.50", lot=self.lot, sublot=chr(ord("A") + i))
            for i in range(26)
        ]
        self.assertEqual(next_sublot(self.lot, plantings), "A")

    def test_fit_check(self):
        TestDataFactory.create_planting(acres="20.00", lot=self.lot, sublot="A")
        fit = fit_check("10.00", self.lot)
        self.assertFalse(fit["can_fit"])
        self.assertEqual(fit["would_exceed_by"], Decimal("5.00"))
        self.assertTrue(fit["will_require_split"])

        fit = fit_check("5.00", self.lot)
        self.assertTrue(fit["can_fit"])
        self.assertEqual(fit["would_exceed_by"], Decimal("0.00"))


class SplitTests(TestCase):
    def test_split_keeps_acres_and_volume(self):
        planting = TestDataFactory.create_planting(code="planting_x", acres="10.00")
        self.assertEqual(planting.volume_ordered, Decimal("12000"))

        portion, remainder = planting.split(Decimal("4"))

        self.assertEqual(portion.code, "planting_x_split_1")
        self.assertEqual(remainder.code, "planting_x_split_2")
        self.assertEqual(portion.acres, Decimal("4.00"))
        self.assertEqual(remainder.acres, Decimal("6.00"))
        self.assertEqual(portion.volume_ordered, Decimal("4800"))
        self.assertEqual(remainder.volume_ordered, Decimal("7200"))
        self.assertEqual(portion.total_yield, 4800)
        self.assertEqual(remainder.parent_code, "planting_x")
        self.assertIsNone(portion.pk)
        self.assertFalse(portion.assigned)

    def test_resplit_continues_numbering(self):
        planting = TestDataFactory.create_planting(code="planting_x", acres="10.00")
        portion, remainder = planting.split(Decimal("4"))
        planting.delete()
        portion.save()
        remainder.save()

        again, rest = remainder.split(Decimal("2"))

        self.assertEqual(again.code, "planting_x_split_3")
        self.assertEqual(rest.code, "planting_x_split_4")
        self.assertEqual(rest.parent_code, "planting_x")
        self.assertEqual(rest.acres, Decimal("4.00"))


class RotationTests(TestCase):
    def setUp(self):
        self.planted = date(2025, 1, 1)
        self.lot = TestDataFactory.create_lot(last_crop="Lettuce", last_plant_date=self.planted)

    def rotation(self, crop, days):
        return evaluate_crop_rotation(crop, self.lot, on=self.planted + timedelta(days=days))

    def test_same_family_too_soon(self):
        self.assertEqual(self.rotation("Lettuce", 30), -50)

    def test_same_family_marginal(self):
        self.assertEqual(self.rotation("Lettuce", 80), -20)

    def test_same_family_rested(self):
        self.assertEqual(self.rotation("Lettuce", 100), 5)

    def test_different_crop_bonus_is_capped(self):
        self.assertEqual(self.rotation("Romaine", 300), 20)
        self.assertEqual(self.rotation("Romaine", 50), 5)

    def test_lot_without_history(self):
        lot = TestDataFactory.create_lot(self.lot.ranch, number="2")
        self.assertEqual(evaluate_crop_rotation("Lettuce", lot), 0)


class ScoringTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")

    def test_near_full_utilization(self):
        planting = TestDataFactory.build_planting(acres="22.00")
        self.assertEqual(score_lot(planting, self.lot, []), 125.0)

    def test_full_lot_is_never_a_candidate(self):
        full = TestDataFactory.build_planting(acres="25.00", lot=self.lot, sublot="A")
        planting = TestDataFactory.build_planting(acres="5.00")
        self.assertEqual(score_lot(planting, self.lot, [full]), -1)
        self.assertEqual(find_best_lots(planting, [full], lots=[self.lot]), [])

    def test_partial_fit(self):
        other = TestDataFactory.build_planting(
            acres="20.00", lot=self.lot, sublot="A", customer="Valley Produce"
        )
        planting = TestDataFactory.build_planting(acres="10.00")
        self.assertEqual(score_lot(planting, self.lot, [other]), 55.0)

    def test_same_customer_nearby(self):
        other = TestDataFactory.build_planting(acres="20.00", lot=self.lot, sublot="A")
        planting = TestDataFactory.build_planting(acres="10.00")
        self.assertEqual(score_lot(planting, self.lot, [other]), 60.0)

    def test_find_best_lots_orders_by_score(self):
        warm = TestDataFactory.create_lot(
            self.lot.ranch, number="2", acres="25.00", soil_type="Clay", microclimate="Hot"
        )
        planting = TestDataFactory.build_planting(acres="22.00")

        suggestions = find_best_lots(planting, [])

        self.assertEqual([s["lot"] for s in suggestions], [self.lot, warm])
        best = suggestions[0]
        self.assertEqual(best["fit_type"], "perfect")
        self.assertEqual(
            best["reasons"],
            [
                "Perfect fit for available space",
                "Ideal microclimate match",
                "Good soil type compatibility",
            ],
        )
        self.assertEqual(best["lot_id"], self.lot.unique_lot_id)

    def test_find_best_lots_limit(self):
        for number in ["2", "3", "4"]:
            TestDataFactory.create_lot(self.lot.ranch, number=number)
        planting = TestDataFactory.build_planting(acres="5.00")
        self.assertEqual(len(find_best_lots(planting, [])), 3)
        self.assertEqual(len(find_best_lots(planting, [], limit=1)), 1)

    def test_microclimate(self):
        hot = TestDataFactory.create_lot(self.lot.ranch, number="2", microclimate="Hot")
        romaine = TestDataFactory.build_planting(crop="Romaine")
        kale = TestDataFactory.build_planting(crop="Kale")

        self.assertEqual(evaluate_microclimate(romaine, self.lot), 15)
        self.assertEqual(evaluate_microclimate(romaine, hot), 0)
        self.assertEqual(evaluate_microclimate(kale, hot), 5)

    def test_rotation_reasons(self):
        self.lot.last_crop = "Lettuce"
        self.lot.last_plant_date = date(2025, 1, 1)
        capacity = lot_capacity(self.lot, [])

        conflict = TestDataFactory.build_planting(crop="Lettuce", plant_date=date(2025, 1, 31))
        reasons = score_reasons(conflict, self.lot, capacity, "perfect")
        self.assertIn("⚠️ Recent rotation conflict", reasons)
        self.assertNotIn("Excellent crop rotation timing", reasons)

        rotated = TestDataFactory.build_planting(crop="Romaine", plant_date=date(2025, 10, 28))
        reasons = score_reasons(rotated, self.lot, capacity, "perfect")
        self.assertIn("Excellent crop rotation timing", reasons)
        self.assertNotIn("⚠️ Recent rotation conflict", reasons)


class OptimizationTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")
        self.large = TestDataFactory.create_planting(code="planting_large", acres="20.00")
        self.small = TestDataFactory.create_planting(code="planting_small", acres="10.00")

    def test_optimize_all_assigns_largest_first(self):
        assignments = optimize_all()

        self.assertEqual([a["type"] for a in assignments], ["assign", "split"])
        self.assertEqual([a["score"] for a in assignments], [105.0, 60.0])
        self.assertEqual(assignments[0]["assigned"].sublot, "A")
        split = assignments[1]
        self.assertEqual(split["assigned"].acres, Decimal("5.00"))
        self.assertEqual(split["assigned"].sublot, "B")
        self.assertEqual(split["remainder"].acres, Decimal("5.00"))

    def test_optimize_all_does_not_save(self):
        optimize_all()
        self.assertFalse(Planting.objects.filter(lot__isnull=False).exists())

    def test_apply_optimization(self):
        assignments = optimize_all()
        notifications = apply_optimization(assignments)

        self.assertEqual(Planting.objects.count(), 3)
        self.assertFalse(Planting.objects.filter(code="planting_small").exists())
        self.assertEqual(lot_capacity(self.lot)["available_acres"], Decimal("0.00"))
        self.assertEqual(len(notifications), 1)
        self.assertEqual(notifications[0]["remaining_acres"], Decimal("5.00"))

        remainder = Planting.objects.get(code="planting_small_split_2")
        self.assertFalse(remainder.assigned)

    def test_summarize(self):
        result = summarize(optimize_all())
        summary = result["summary"]
        self.assertEqual(summary["successful_assignments"], 2)
        self.assertEqual(summary["total_acres_optimized"], Decimal("25.00"))
        self.assertEqual(summary["average_score"], 82.5)
        self.assertEqual(result["assignments"][1]["reasons"], ["Score: 60.0", "Split required"])


class AssignmentTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")

    def test_assign_when_it_fits(self):
        TestDataFactory.create_planting(acres="10.00", lot=self.lot, sublot="A")
        planting = TestDataFactory.create_planting(acres="10.00")

        result = assign_planting_to_lot(planting, self.lot)

        self.assertEqual(result["type"], "assigned")
        planting.refresh_from_db()
        self.assertEqual(planting.lot, self.lot)
        self.assertEqual(planting.sublot, "B")

    def test_assign_splits_when_too_big(self):
        TestDataFactory.create_planting(acres="20.00", lot=self.lot, sublot="A")
        planting = TestDataFactory.create_planting(code="planting_big", acres="10.00")

        result = assign_planting_to_lot(planting, self.lot)

        self.assertEqual(result["type"], "split")
        self.assertEqual(result["assigned_acres"], Decimal("5.00"))
        self.assertEqual(result["remaining_acres"], Decimal("5.00"))
        self.assertFalse(Planting.objects.filter(code="planting_big").exists())
        portion = Planting.objects.get(code="planting_big_split_1")
        self.assertEqual(portion.sublot, "B")
        self.assertFalse(Planting.objects.get(code="planting_big_split_2").assigned)
        self.assertEqual(result["notification"]["original_acres"], Decimal("10.00"))

    def test_full_lot_refuses(self):
        TestDataFactory.create_planting(acres="25.00", lot=self.lot, sublot="A")
        planting = TestDataFactory.create_planting(acres="5.00")

        result = assign_planting_to_lot(planting, self.lot)

        self.assertFalse(result["success"])
        self.assertEqual(result["type"], "no_capacity")
        self.assertEqual(result["message"], "No available capacity (25.00/25.00 acres used)")

    def test_move_within_lot_does_not_count_itself(self):
        planting = TestDataFactory.create_planting(acres="25.00", lot=self.lot, sublot="A")
        result = assign_planting_to_lot(planting, self.lot)
        self.assertEqual(result["type"], "assigned")

    def test_unassign(self):
        planting = TestDataFactory.create_planting(lot=self.lot, sublot="A")

        self.assertTrue(unassign_planting(planting)["success"])
        planting.refresh_from_db()
        self.assertFalse(planting.assigned)
        self.assertEqual(planting.sublot, "")

        result = unassign_planting(planting)
        self.assertFalse(result["success"])
        self.assertEqual(result["type"], "not_found_or_unassigned")


class RecombineTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")
        planting = TestDataFactory.create_planting(code="planting_x", acres="10.00")
        self.portion, self.remainder = planting.split(Decimal("4"))
        planting.delete()

    def test_unassigned_fragments_restore_the_original(self):
        self.portion.save()
        self.remainder.save()

        notifications = recombine("planting_x")

        self.assertEqual(len(notifications), 1)
        self.assertEqual(notifications[0]["new_planting_id"], "planting_x")
        self.assertEqual(notifications[0]["total_acres"], Decimal("10.00"))
        restored = Planting.objects.get()
        self.assertEqual(restored.code, "planting_x")
        self.assertEqual(restored.parent_code, "")
        self.assertEqual(restored.volume_ordered, Decimal("12000"))
        self.assertEqual(restored.total_yield, 12000)

    def test_fragments_in_different_places_stay_apart(self):
        self.portion.assign_to(self.lot, "A")
        self.portion.save()
        self.remainder.save()

        self.assertEqual(recombine("planting_x"), [])
        self.assertEqual(Planting.objects.count(), 2)

    def test_fragments_in_the_same_lot_merge(self):
        self.portion.assign_to(self.lot, "A")
        self.portion.save()
        self.remainder.assign_to(self.lot, "B")
        self.remainder.save()

        notifications = recombine("planting_x")

        self.assertEqual(len(notifications), 1)
        self.assertEqual(
            notifications[0]["combined_plantings"], ["planting_x_split_1", "planting_x_split_2"]
        )
        self.assertEqual(notifications[0]["new_planting_id"], "planting_x_split_1")
        merged = Planting.objects.get()
        self.assertEqual(merged.code, "planting_x_split_1")
        self.assertEqual(merged.acres, Decimal("10.00"))
        self.assertEqual(merged.lot, self.lot)
        self.assertEqual(merged.sublot, "A")
        self.assertEqual(merged.parent_code, "planting_x")


class GenerationTests(TestCase):
    def setUp(self):
        self.commodity = TestDataFactory.create_commodity("Romaine")
        TestDataFactory.create_variety(self.commodity, days_to_harvest=60)

    def test_planting_from_order(self):
        order = TestDataFactory.create_order(self.commodity, volume="10000")

        plantings = generate_plantings()

        self.assertEqual(len(plantings), 1)
        planting = Planting.objects.get()
        self.assertEqual(planting.acres, Decimal("8.33"))
        self.assertEqual(planting.plant_date, date(2025, 7, 17))
        self.assertEqual(planting.harvest_date, date(2025, 9, 15))
        self.assertEqual(planting.total_yield, 9996)
        self.assertEqual(planting.original_order_id, f"ORD-{order.id}")
        self.assertEqual(planting.variety, "Green Forest")
        self.assertFalse(planting.assigned)

    def test_weekly_order(self):
        order = TestDataFactory.create_order(self.commodity, is_weekly=True)

        generate_plantings()

        plantings = list(Planting.objects.order_by("harvest_date"))
        self.assertEqual(len(plantings), 12)
        self.assertEqual(plantings[-1].original_order_id, f"ORD-{order.id}-W12")
        self.assertEqual(plantings[-1].harvest_date, date(2025, 9, 15) + timedelta(weeks=11))

    def test_order_without_variety_is_skipped(self):
        TestDataFactory.create_order(self.commodity, market_type=MarketType.ORGANIC)
        with self.assertLogs("planning.generation", "WARNING") as logs:
            plantings = generate_plantings()
        self.assertEqual(plantings, [])
        self.assertIn("No suitable varieties found for Romaine", logs.output[0])

    def test_regeneration_replaces_plan(self):
        lot = TestDataFactory.create_lot()
        TestDataFactory.create_planting(code="planting_old", lot=lot, sublot="A")
        TestDataFactory.create_order(self.commodity)

        generate_plantings()

        self.assertFalse(Planting.objects.filter(code="planting_old").exists())
        self.assertEqual(Planting.objects.count(), 1)


class GanttTests(TestCase):
    def test_week_start(self):
        self.assertEqual(gantt.week_start(2025, 1), date(2024, 12, 30))

    def test_month_week_lands_in_the_same_month(self):
        day = date(2025, 1, 1)
        for _ in range(24):
            monday = gantt.week_start(*gantt.month_week(day))
            self.assertEqual((monday.year, monday.month), (day.year, day.month))
            day = gantt.add_months(day, 1)

    def test_window(self):
        first, last, months = gantt.window(date(2025, 7, 17))
        self.assertEqual(first, date(2025, 7, 1))
        self.assertEqual(last, date(2026, 6, 30))
        self.assertEqual(len(months), 12)
        self.assertEqual(months[-1], date(2026, 6, 1))

    def test_add_months_clamps_day(self):
        self.assertEqual(gantt.add_months(date(2025, 1, 31), 1), date(2025, 2, 28))
        self.assertEqual(gantt.add_months(date(2025, 1, 15), -1), date(2024, 12, 15))

    def test_bar_has_minimum_width(self):
        day = date(2025, 7, 1)
        position = gantt.bar_position(
            {"start_date": day, "end_date": day}, date(2025, 7, 1), date(2026, 6, 30)
        )
        self.assertEqual(position, {"left": 0.0, "width": gantt.MIN_BAR_WIDTH})

    def test_bar_is_clamped_to_window(self):
        view_start, view_end = date(2025, 7, 1), date(2026, 6, 30)

        late = gantt.bar_position(
            {"start_date": date(2026, 8, 1), "end_date": date(2026, 10, 1)}, view_start, view_end
        )
        self.assertEqual(late, {"left": 100.0, "width": gantt.MIN_BAR_WIDTH})

        early = gantt.bar_position(
            {"start_date": date(2025, 3, 1), "end_date": date(2025, 5, 1)}, view_start, view_end
        )
        self.assertEqual(early, {"left": 0.0, "width": gantt.MIN_BAR_WIDTH})

    def test_build_timeline(self):
        lot = TestDataFactory.create_lot()
        TestDataFactory.create_planting(acres="10.00", lot=lot, sublot="A")
        TestDataFactory.create_planting(
            acres="5.00", crop="Carrots", customer="Valley Produce", market_type=MarketType.BULK,
            budget_yield_per_acre="45000",
        )

        timeline = gantt.build_timeline(Planting.objects.all(), start=date(2025, 7, 1))

        groups = timeline["groups"]
        self.assertEqual([g["is_unassigned"] for g in groups], [False, True])
        self.assertEqual(groups[0]["display_name"], "Salinas > North Ranch > Lot 1-A")
        self.assertEqual(groups[1]["total_acres"], Decimal("5.00"))
        stats = timeline["stats"]
        self.assertEqual(stats["total_plantings"], 2)
        self.assertEqual(stats["total_acres"], Decimal("15.00"))
        self.assertEqual(stats["total_lots"], 1)
        self.assertEqual(stats["total_value"], 12000 * 12 + 225000 * 0.5)
        self.assertEqual(timeline["crops"], ["Carrots", "Romaine"])
        colors = {e["crop"]: e["color"] for e in timeline["entries"]}
        self.assertEqual(colors, {"Romaine": "#10b981", "Carrots": "#f59e0b"})

    def test_filters(self):
        lot = TestDataFactory.create_lot()
        TestDataFactory.create_planting(lot=lot, sublot="A")
        TestDataFactory.create_planting(crop="Carrots", customer="Valley Produce")
        undated = TestDataFactory.create_planting()
        Planting.objects.filter(pk=undated.pk).update(plant_date=None, harvest_date=None)
        plantings = list(Planting.objects.select_related("lot__ranch__region"))

        def count(**filters):
            return gantt.build_timeline(plantings, start=date(2025, 7, 1), **filters)["stats"]["total_plantings"]

        self.assertEqual(count(), 2)
        self.assertEqual(count(crop="Carrots"), 1)
        self.assertEqual(count(assigned="assigned"), 1)
        self.assertEqual(count(assigned="unassigned"), 1)
        self.assertEqual(count(customer="Valley Produce"), 1)


class PlanningViewTests(TestCase):
    def setUp(self):
        self.lot = TestDataFactory.create_lot(acres="25.00")
        self.planting = TestDataFactory.create_planting(code="planting_a", acres="10.00")

    def test_board(self):
        response = self.client.get(reverse("planning:board"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["unassigned"]), [self.planting])
        self.assertContains(response, "Salinas &gt; North Ranch &gt; Lot 1")

    def test_detail(self):
        response = self.client.get(reverse("planning:planting_detail", args=["planting_a"]))
        self.assertContains(response, "cartons")

    def test_suggestions(self):
        response = self.client.get(reverse("planning:suggestions", args=["planting_a"]))
        data = response.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["planting"]["id"], "planting_a")
        self.assertEqual(data["suggestions"][0]["lot_pk"], self.lot.pk)

    def test_suggestions_unknown_planting(self):
        response = self.client.get(reverse("planning:suggestions", args=["missing"]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "not_found")

    def test_preview(self):
        TestDataFactory.create_planting(acres="20.00", lot=self.lot, sublot="A")
        response = self.client.get(reverse("planning:preview", args=["planting_a", self.lot.pk]))
        data = response.json()
        self.assertFalse(data["can_fit"])
        self.assertTrue(data["will_require_split"])
        self.assertEqual(data["would_exceed_by"], "5.00")
        self.assertEqual(data["next_sublot"], "B")

    def test_preview_unknown_lot(self):
        response = self.client.get(reverse("planning:preview", args=["planting_a", 9999]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "location_not_found")

    def test_assign_and_unassign(self):
        response = self.client.post(
            reverse("planning:assign", args=["planting_a"]), {"lot": self.lot.pk}
        )
        self.assertEqual(response.json()["type"], "assigned")
        self.assertEqual(response["HX-Trigger"], "plantingAssigned")
        self.assertTrue(Planting.objects.get(code="planting_a").assigned)

        response = self.client.post(reverse("planning:unassign", args=["planting_a"]))
        self.assertEqual(response["HX-Trigger"], "plantingUnassigned")

        response = self.client.post(reverse("planning:unassign", args=["planting_a"]))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "not_found_or_unassigned")

    def test_assign_split(self):
        TestDataFactory.create_planting(acres="20.00", lot=self.lot, sublot="A")
        response = self.client.post(
            reverse("planning:assign", args=["planting_a"]), {"lot": self.lot.pk}
        )
        data = response.json()
        self.assertEqual(data["type"], "split")
        self.assertEqual(data["remainder"]["id"], "planting_a_split_2")
        self.assertEqual(response["HX-Trigger"], "plantingSplit")

    def test_assign_to_full_lot(self):
        TestDataFactory.create_planting(acres="25.00", lot=self.lot, sublot="A")
        response = self.client.post(
            reverse("planning:assign", args=["planting_a"]), {"lot": self.lot.pk}
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["type"], "no_capacity")

    def test_optimize_redirects(self):
        response = self.client.post(reverse("planning:optimize"))
        self.assertRedirects(response, reverse("planning:board"))
        self.assertTrue(Planting.objects.get(code="planting_a").assigned)

    def test_optimize_htmx(self):
        response = self.client.post(reverse("planning:optimize"), HTTP_HX_REQUEST="true")
        data = json.loads(response.content)
        self.assertEqual(data["summary"]["successful_assignments"], 1)
        self.assertEqual(response["HX-Trigger"], "plantingsOptimized")

    def test_generate_htmx(self):
        commodity = TestDataFactory.create_commodity("Romaine")
        TestDataFactory.create_variety(commodity)
        TestDataFactory.create_order(commodity)

        response = self.client.post(reverse("planning:generate"), HTTP_HX_REQUEST="true")

        self.assertEqual(response.json(), {"success": True, "generated": 1})
        self.assertFalse(Planting.objects.filter(code="planting_a").exists())

    def test_recombine(self):
        Planting.objects.all().delete()
        planting = TestDataFactory.create_planting(code="planting_x", acres="10.00")
        portion, remainder = planting.split(Decimal("4"))
        planting.delete()
        portion.save()
        remainder.save()

        response = self.client.post(
            reverse("planning:recombine", args=["planting_x"]), HTTP_HX_REQUEST="true"
        )

        self.assertTrue(response.json()["success"])
        self.assertTrue(Planting.objects.filter(code="planting_x").exists())

    def test_gantt(self):
        response = self.client.get(reverse("planning:gantt"))
        self.assertEqual(response.status_code, 200)

    def test_gantt_week(self):
        response = self.client.get(reverse("planning:gantt_week", args=[2025, 28]))
        self.assertEqual(response.context["view_start"], date(2025, 7, 1))
        self.assertEqual(response.context["stats"]["total_plantings"], 1)
        self.assertEqual(response.context["next_week"], (2025, 32))
