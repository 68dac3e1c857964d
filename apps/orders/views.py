"""orders/views.py"""

import io

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import CreateView, DeleteView, FormView, ListView, UpdateView

from .csv_import import import_orders_csv
from .forms import OrderForm, OrderImportForm
from .models import Order


class OrderListView(ListView):
    model = Order
    template_name = "orders/order_list.html"
    context_object_name = "orders"

    def get_queryset(self):
        return Order.objects.select_related("commodity")


class OrderCreateView(CreateView):
    model = Order
    form_class = OrderForm
    template_name = "orders/order_form.html"
    success_url = reverse_lazy("orders:order_list")

    def form_valid(self, form):
        messages.success(self.request, f"Order for {form.instance.customer} added.")
        return super().form_valid(form)


class OrderUpdateView(UpdateView):
    model = Order
    form_class = OrderForm
    template_name = "orders/order_form.html"
    success_url = reverse_lazy("orders:order_list")


class OrderDeleteView(DeleteView):
    model = Order
    template_name = "orders/order_confirm_delete.html"
    success_url = reverse_lazy("orders:order_list")


class OrderImportView(FormView):
    template_name = "orders/order_import.html"
    form_class = OrderImportForm

    def form_valid(self, form):
        upload = form.cleaned_data["csv_file"]
        try:
            text = upload.read().decode("utf-8-sig")
        except UnicodeDecodeError:
            messages.error(self.request, "The file is not UTF-8 encoded CSV.")
            return self.form_invalid(form)

        result = import_orders_csv(io.StringIO(text))

        if result["created"]:
            messages.success(self.request, f"Imported {len(result['created'])} orders.")
        for row, error in result["errors"]:
            messages.error(self.request, f"Row {row}: {error}")
        return redirect("orders:order_list")
