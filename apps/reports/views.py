"""reports/views.py"""

import logging

from django.http import HttpResponse
from django.utils import timezone
from django.views import View

from planning.models import Planting

from .csv_export import export_plantings_csv

logger = logging.getLogger(__name__)


class ExportCSVView(View):
    """Download every planting as a CSV file."""

    def get(self, request):
        filename = f"crop_plantings_{timezone.localdate().isoformat()}.csv"
        response = HttpResponse(content_type="text/csv")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'

        plantings = Planting.objects.select_related("lot__ranch__region")
        count = export_plantings_csv(plantings, response)
        logger.info("Exported %d plantings to %s", count, filename)
        return response
