"""planning/admin.py"""

from django.contrib import admin
from .models import Planting


@admin.register(Planting)
class PlantingAdmin(admin.ModelAdmin):
    list_display = [
        "code",
        "crop",
        "variety",
        "customer",
        "acres",
        "plant_date",
        "harvest_date",
        "location",
        "split_sequence",
    ]
    list_filter = ["crop", "market_type", "lot__ranch__region"]
    search_fields = ["code", "crop", "variety", "customer", "parent_code", "original_order_id"]
    raw_id_fields = ["order", "lot"]
    readonly_fields = ["created_at", "updated_at", "split_at"]

    fieldsets = (
        (
            "Crop & Customer",
            {"fields": ("code", "crop", "variety", "customer", "market_type", "order", "original_order_id")},
        ),
        (
            "Plan",
            {
                "fields": (
                    "acres",
                    "plant_date",
                    "harvest_date",
                    "budgeted_days_to_harvest",
                    "budgeted_harvest_date",
                    "budget_yield_per_acre",
                    "volume_ordered",
                    "total_yield",
                )
            },
        ),
        ("Variety", {"fields": ("bed_size", "spacing", "ideal_stand_per_acre")}),
        ("Location", {"fields": ("lot", "sublot")}),
        ("Split", {"fields": ("parent_code", "split_sequence", "split_at")}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )

    def location(self, obj):
        return obj.display_lot_id or "Unassigned"

    location.short_description = "Location"
