"""core/views.py"""

import json
import logging

from django import forms
from django.contrib import messages
from django.db.models import Count, Sum
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils import timezone
from django.views import View
from django.views.generic import FormView, TemplateView

from planning.models import Planting
from reference.models import Lot

from .backup import export_backup, import_backup, reset_data, seed_defaults
from .utils import calculate_utilization_rate, is_past_date, round_acres

logger = logging.getLogger(__name__)


def planning_metrics():
    totals = Planting.objects.aggregate(count=Count("id"), acres=Sum("acres"))
    assigned = Planting.objects.filter(lot__isnull=False).aggregate(
        count=Count("id"), acres=Sum("acres")
    )
    lot_acres = Lot.objects.aggregate(total=Sum("acres"))["total"] or 0

    return {
        "total_plantings": totals["count"],
        "total_acres": round_acres(totals["acres"] or 0),
        "assigned_plantings": assigned["count"],
        "unassigned_plantings": totals["count"] - assigned["count"],
        "assigned_acres": round_acres(assigned["acres"] or 0),
        "total_lot_acres": round_acres(lot_acres),
        "utilization_rate": calculate_utilization_rate(assigned["acres"] or 0, lot_acres),
    }


class DashboardView(TemplateView):
    template_name = "core/dashboard.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx.update(planning_metrics())

        # ── By crop ──
        ctx["crops"] = (
            Planting.objects.values("crop")
            .annotate(count=Count("id"), acres=Sum("acres"))
            .order_by("crop")
        )

        # ── Next plantings ──
        ctx["upcoming"] = Planting.objects.filter(
            plant_date__gte=timezone.localdate()
        ).select_related("lot__ranch__region")[:10]

        # ── Unassigned and already past their wet date ──
        today = timezone.localdate()
        ctx["late"] = [
            p
            for p in Planting.objects.filter(lot__isnull=True, plant_date__isnull=False)
            if is_past_date(p.plant_date, today=today)
        ]
        return ctx


class BackupUploadForm(forms.Form):
    backup_file = forms.FileField(label="Backup file (.json)")


class DataView(FormView):
    """Backup download, restore and reset."""

    template_name = "core/data.html"
    form_class = BackupUploadForm

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx.update(planning_metrics())
        return ctx

    def form_valid(self, form):
        upload = form.cleaned_data["backup_file"]
        try:
            data = json.loads(upload.read().decode("utf-8"))
            counts = import_backup(data)
        except (UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
            logger.warning("Backup import failed: %s", e)
            messages.error(self.request, f"Error importing data: {e}")
            return self.form_invalid(form)

        messages.success(
            self.request,
            f"Data imported successfully: {counts['orders']} orders, "
            f"{counts['commodities']} commodities, {counts['plantings']} plantings.",
        )
        return redirect("core:data")


class BackupDownloadView(View):
    def get(self, request):
        response = JsonResponse(export_backup(), json_dumps_params={"indent": 2})
        filename = f"crop-planning-backup-{timezone.localdate().isoformat()}.json"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response


class ResetDataView(View):
    def post(self, request):
        reset_data()
        messages.success(request, "All data has been cleared.")
        return redirect("core:data")


class SeedDefaultsView(View):
    def post(self, request):
        seed_defaults()
        messages.success(request, "Default commodities, land and orders loaded.")
        return redirect("core:data")
