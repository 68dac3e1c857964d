"""planning/views.py"""

import logging
from datetime import date

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect
from django.views import View
from django.views.generic import DetailView, TemplateView

from reference.models import Lot

from . import gantt
from .assignment import assign_planting_to_lot, recombine, unassign_planting
from .capacity import fit_check, lot_capacity, next_sublot
from .generation import generate_plantings
from .models import Planting
from .optimization import (
    all_lots,
    apply_optimization,
    assigned_plantings,
    evaluate_crop_rotation,
    find_best_lots,
    load_rotation_rules,
    optimize_all,
    score_lot,
    summarize,
)

logger = logging.getLogger(__name__)


def _is_htmx(request):
    return bool(request.headers.get("HX-Request"))


def _planting_json(planting):
    return {
        "id": planting.code,
        "crop": planting.crop,
        "variety": planting.variety,
        "acres": planting.acres,
        "assigned": planting.assigned,
        "lot_id": planting.unique_lot_id,
        "sublot": planting.sublot,
        "location": planting.display_lot_id,
        "parent_id": planting.parent_code,
    }


def _suggestion_json(suggestion):
    capacity = suggestion["capacity"]
    return {
        "lot_id": suggestion["lot_id"],
        "lot_pk": suggestion["lot"].pk,
        "score": suggestion["score"],
        "reasons": suggestion["reasons"],
        "location": suggestion["location"],
        "fit_type": suggestion["fit_type"],
        "capacity": {
            "total_acres": capacity["total_acres"],
            "used_acres": capacity["used_acres"],
            "available_acres": capacity["available_acres"],
            "planting_count": capacity["planting_count"],
        },
    }


def _failure(kind, message, status=400):
    return JsonResponse({"success": False, "type": kind, "message": message}, status=status)


def _find_planting(code):
    return Planting.objects.select_related("lot__ranch__region").filter(code=code).first()


def _find_lot(pk):
    try:
        return Lot.objects.select_related("ranch__region").filter(pk=int(pk)).first()
    except (TypeError, ValueError):
        return None


class PlantingBoardView(TemplateView):
    """Unassigned plantings next to every lot and what it holds."""

    template_name = "planning/board.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)

        crop = self.request.GET.get("crop", "all")
        plantings = Planting.objects.select_related("lot__ranch__region")
        if crop != "all":
            plantings = plantings.filter(crop=crop)
        plantings = list(plantings)

        lots = []
        for lot in all_lots():
            capacity = lot_capacity(lot, plantings)
            lots.append({"lot": lot, "capacity": capacity})

        ctx.update(
            {
                "unassigned": [p for p in plantings if not p.assigned],
                "lots": lots,
                "crop": crop,
                "crops": Planting.objects.order_by("crop").values_list("crop", flat=True).distinct(),
            }
        )
        return ctx


class PlantingDetailView(DetailView):
    """HTMX partial: planting detail panel."""

    model = Planting
    slug_field = "code"
    slug_url_kwarg = "code"
    template_name = "planning/partials/planting_detail.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        p = self.object
        ctx["siblings"] = (
            Planting.objects.filter(parent_code=p.parent_code).exclude(pk=p.pk)
            if p.parent_code
            else []
        )
        if p.lot_id:
            rotation = evaluate_crop_rotation(p.crop, p.lot, on=p.plant_date)
            ctx["rotation_warning"] = rotation < -10
        return ctx


class SuggestionsView(View):
    """Drag start: the best lots for a planting."""

    def get(self, request, code):
        planting = _find_planting(code)
        if planting is None:
            return _failure("not_found", "Planting not found", status=404)

        others = [p for p in assigned_plantings() if p.pk != planting.pk]
        suggestions = find_best_lots(planting, others, limit=settings.FARMPLAN_SUGGESTION_LIMIT)
        return JsonResponse(
            {
                "success": True,
                "planting": _planting_json(planting),
                "suggestions": [_suggestion_json(s) for s in suggestions],
            }
        )


class PreviewView(View):
    """Drag over a lot: would the planting fit, and how well."""

    def get(self, request, code, lot_id):
        planting = _find_planting(code)
        if planting is None:
            return _failure("not_found", "Planting not found", status=404)
        lot = _find_lot(lot_id)
        if lot is None:
            return _failure("location_not_found", "Location not found", status=404)

        others = [p for p in assigned_plantings() if p.pk != planting.pk]
        rules = load_rotation_rules()
        fit = fit_check(planting.acres, lot, others)
        rotation = evaluate_crop_rotation(planting.crop, lot, rules, on=planting.plant_date)

        fit.update(
            {
                "success": True,
                "lot_id": lot.unique_lot_id,
                "location": lot.location,
                "next_sublot": next_sublot(lot, others),
                "score": score_lot(planting, lot, others, rules),
                "rotation_warning": rotation < -10,
            }
        )
        return JsonResponse(fit)


class AssignView(View):
    """Drop on a lot."""

    def post(self, request, code):
        planting = _find_planting(code)
        if planting is None:
            return _failure("not_found", "Planting not found", status=404)
        lot = _find_lot(request.POST.get("lot"))
        if lot is None:
            return _failure("location_not_found", "Location not found", status=404)

        result = assign_planting_to_lot(planting, lot)
        if not result["success"]:
            logger.info("Could not assign %s to %s: %s", planting.code, lot.location, result["message"])
            return _failure(result["type"], result["message"], status=409)

        body = {"success": True, "type": result["type"], "planting": _planting_json(result["planting"])}
        if result["type"] == "split":
            note = result["notification"]
            body["remainder"] = _planting_json(result["remainder"])
            body["notification"] = note
            messages.info(
                request,
                f"{note['crop']} {note['variety']} split: {note['assigned_acres']} of "
                f"{note['original_acres']} acres assigned to {note['lot_location']}, "
                f"{note['remaining_acres']} acres left unassigned.",
            )

        response = JsonResponse(body)
        response["HX-Trigger"] = "plantingSplit" if result["type"] == "split" else "plantingAssigned"
        return response


class UnassignView(View):
    """Drop on the unassigned column."""

    def post(self, request, code):
        planting = _find_planting(code)
        if planting is None:
            return _failure("not_found_or_unassigned", "Planting not found", status=404)

        result = unassign_planting(planting)
        if not result["success"]:
            return _failure(result["type"], "Planting is not assigned")

        response = JsonResponse(
            {"success": True, "type": "unassigned", "planting": _planting_json(planting)}
        )
        response["HX-Trigger"] = "plantingUnassigned"
        return response


class OptimizeView(View):
    def post(self, request):
        assignments = optimize_all()
        notifications = apply_optimization(assignments)
        result = summarize(assignments)
        summary = result["summary"]

        if _is_htmx(request):
            result["splits"] = notifications
            response = JsonResponse(result)
            response["HX-Trigger"] = "plantingsOptimized"
            return response

        messages.success(
            request,
            f"Optimized {summary['successful_assignments']} plantings "
            f"({summary['total_acres_optimized']} acres, average score {summary['average_score']}).",
        )
        for note in notifications:
            messages.info(
                request,
                f"{note['crop']} split: {note['assigned_acres']} acres to "
                f"{note['lot_location']}, {note['remaining_acres']} acres unassigned.",
            )
        return redirect("planning:board")


class GenerateView(View):
    def post(self, request):
        plantings = generate_plantings()
        if _is_htmx(request):
            response = JsonResponse({"success": True, "generated": len(plantings)})
            response["HX-Trigger"] = "plantingsGenerated"
            return response

        messages.success(request, f"Generated {len(plantings)} plantings from orders.")
        return redirect("planning:board")


class RecombineView(View):
    def post(self, request, parent_code):
        notifications = recombine(parent_code)
        if _is_htmx(request):
            response = JsonResponse({"success": bool(notifications), "recombined": notifications})
            if notifications:
                response["HX-Trigger"] = "plantingsRecombined"
            return response

        if not notifications:
            messages.warning(request, f"Nothing to recombine for {parent_code}.")
        for note in notifications:
            messages.success(request, f"{note['message']}: {note['total_acres']} acres.")
        return redirect("planning:board")


class GanttView(TemplateView):
    template_name = "planning/gantt.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)

        year, week = kwargs.get("year"), kwargs.get("week")
        if year and week:
            start = gantt.week_start(year, week)
        else:
            start = date.today()

        params = self.request.GET
        filters = {
            "crop": params.get("crop", "all"),
            "assigned": params.get("assigned", "all"),
            "customer": params.get("customer", "all"),
        }

        plantings = Planting.objects.select_related("lot__ranch__region")
        timeline = gantt.build_timeline(plantings, start=start, **filters)

        ctx.update(timeline)
        ctx["filters"] = filters
        ctx["previous_week"] = gantt.month_week(timeline["previous_start"])
        ctx["next_week"] = gantt.month_week(timeline["next_start"])
        return ctx
