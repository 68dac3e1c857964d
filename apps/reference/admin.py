"""reference/admin.py"""

from django.contrib import admin
from .models import Commodity, Variety, Region, Ranch, Lot


class VarietyInline(admin.TabularInline):
    model = Variety
    extra = 0
    fields = [
        "name",
        "growing_window_start",
        "growing_window_end",
        "days_to_harvest",
        "plant_type",
        "market_types",
        "budget_yield_per_acre",
    ]


@admin.register(Commodity)
class CommodityAdmin(admin.ModelAdmin):
    list_display = ["name", "variety_count"]
    search_fields = ["name"]
    inlines = [VarietyInline]

    def variety_count(self, obj):
        return obj.varieties.count()

    variety_count.short_description = "Varieties"


@admin.register(Variety)
class VarietyAdmin(admin.ModelAdmin):
    list_display = ["name", "commodity", "days_to_harvest", "plant_type", "bed_size", "spacing"]
    list_filter = ["commodity", "plant_type", "bed_size"]
    search_fields = ["name", "commodity__name"]

    fieldsets = (
        ("Variety", {"fields": ("commodity", "name", "plant_type")}),
        (
            "Growing",
            {
                "fields": (
                    "growing_window_start",
                    "growing_window_end",
                    "days_to_harvest",
                    "bed_size",
                    "spacing",
                    "ideal_stand",
                )
            },
        ),
        ("Market", {"fields": ("market_types", "budget_yield_per_acre", "preferences")}),
    )


class LotInline(admin.TabularInline):
    model = Lot
    extra = 0
    fields = ["number", "acres", "soil_type", "microclimate", "last_crop", "last_plant_date"]


class RanchInline(admin.TabularInline):
    model = Ranch
    extra = 0
    fields = ["name"]


@admin.register(Region)
class RegionAdmin(admin.ModelAdmin):
    list_display = ["name", "total_acres"]
    inlines = [RanchInline]


@admin.register(Ranch)
class RanchAdmin(admin.ModelAdmin):
    list_display = ["name", "region", "total_acres"]
    list_filter = ["region"]
    inlines = [LotInline]


@admin.register(Lot)
class LotAdmin(admin.ModelAdmin):
    list_display = ["location", "acres", "soil_type", "microclimate", "last_crop", "last_plant_date"]
    list_filter = ["ranch__region", "soil_type", "microclimate"]
    search_fields = ["number", "ranch__name", "ranch__region__name"]
