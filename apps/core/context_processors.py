# core/context_processors.py

from datetime import date
from planning.models import Planting


def planning_context(request):
    """Add today, the ISO week and the unassigned planting count to every template."""
    today = date.today()
    current_week = today.isocalendar()[1]

    return {
        "today": today,
        "current_week": current_week,
        "unassigned_count": Planting.objects.filter(lot__isnull=True).count(),
    }
