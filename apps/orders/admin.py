"""orders/admin.py"""

from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["reference", "customer", "commodity", "volume", "market_type", "delivery_date", "is_weekly"]
    list_filter = ["commodity", "market_type", "is_weekly"]
    search_fields = ["customer", "commodity__name"]
    date_hierarchy = "delivery_date"
