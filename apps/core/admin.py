from django.contrib import admin

from .models import RotationRule


@admin.register(RotationRule)
class RotationRuleAdmin(admin.ModelAdmin):
    list_display = ["crop", "minimum_rotation_days", "conflicts"]
    search_fields = ["crop"]
