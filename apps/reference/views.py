"""reference/views.py"""

import logging

from django.contrib import messages
from django.db.models import ProtectedError
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from .forms import LotForm, VarietyForm
from .models import Commodity, Lot, Ranch, Region, Variety

logger = logging.getLogger(__name__)

FORM_TEMPLATE = "reference/form.html"
DELETE_TEMPLATE = "reference/confirm_delete.html"


# ── Catalog ──


class CommodityListView(ListView):
    model = Commodity
    template_name = "reference/commodity_list.html"
    context_object_name = "commodities"

    def get_queryset(self):
        return Commodity.objects.prefetch_related("varieties")


class CommodityCreateView(CreateView):
    model = Commodity
    fields = ["name"]
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:commodity_list")


class CommodityDeleteView(DeleteView):
    model = Commodity
    template_name = DELETE_TEMPLATE
    success_url = reverse_lazy("reference:commodity_list")

    def form_valid(self, form):
        try:
            return super().form_valid(form)
        except ProtectedError:
            messages.error(
                self.request, f"{self.object.name} still has orders and cannot be deleted."
            )
            return redirect(self.success_url)


class VarietyCreateView(CreateView):
    model = Variety
    form_class = VarietyForm
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:commodity_list")

    def dispatch(self, request, *args, **kwargs):
        self.commodity = get_object_or_404(Commodity, pk=kwargs["commodity_id"])
        return super().dispatch(request, *args, **kwargs)

    def form_valid(self, form):
        form.instance.commodity = self.commodity
        messages.success(self.request, f"Added {form.instance.name} to {self.commodity.name}.")
        return super().form_valid(form)


class VarietyUpdateView(UpdateView):
    model = Variety
    form_class = VarietyForm
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:commodity_list")


class VarietyDeleteView(DeleteView):
    model = Variety
    template_name = DELETE_TEMPLATE
    success_url = reverse_lazy("reference:commodity_list")


class VarietyDuplicateView(View):
    def post(self, request, pk):
        variety = get_object_or_404(Variety, pk=pk)
        copy = variety.duplicate()
        messages.success(request, f"Created {copy.name}.")
        return redirect("reference:variety_edit", pk=copy.pk)


# ── Land ──


class LandView(ListView):
    """Every region with its ranches and lots."""

    model = Region
    template_name = "reference/land.html"
    context_object_name = "regions"

    def get_queryset(self):
        return Region.objects.prefetch_related("ranches__lots")


class RegionCreateView(CreateView):
    model = Region
    fields = ["name"]
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")


class RegionUpdateView(UpdateView):
    model = Region
    fields = ["name"]
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")


class RegionDeleteView(DeleteView):
    model = Region
    template_name = DELETE_TEMPLATE
    success_url = reverse_lazy("reference:land")


class RanchCreateView(CreateView):
    model = Ranch
    fields = ["name"]
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")

    def dispatch(self, request, *args, **kwargs):
        self.region = get_object_or_404(Region, pk=kwargs["region_id"])
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = Ranch(region=self.region)
        return kwargs


class RanchUpdateView(UpdateView):
    model = Ranch
    fields = ["name"]
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")


class RanchDeleteView(DeleteView):
    model = Ranch
    template_name = DELETE_TEMPLATE
    success_url = reverse_lazy("reference:land")


class LotCreateView(CreateView):
    model = Lot
    form_class = LotForm
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")

    def dispatch(self, request, *args, **kwargs):
        self.ranch = get_object_or_404(Ranch, pk=kwargs["ranch_id"])
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        # The ranch must be on the instance before validation for the
        # per-ranch lot number check.
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = Lot(ranch=self.ranch)
        return kwargs


class LotUpdateView(UpdateView):
    model = Lot
    form_class = LotForm
    template_name = FORM_TEMPLATE
    success_url = reverse_lazy("reference:land")


class LotDeleteView(DeleteView):
    model = Lot
    template_name = DELETE_TEMPLATE
    success_url = reverse_lazy("reference:land")

    def form_valid(self, form):
        count = self.object.plantings.count()
        if count:
            messages.info(self.request, f"{count} plantings moved back to unassigned.")
        return super().form_valid(form)
