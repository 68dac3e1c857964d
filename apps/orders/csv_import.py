"""orders/csv_import.py

Bulk order entry from a CSV file. Each row is validated with OrderForm; the
commodity column holds the commodity name. Valid rows are saved together,
invalid rows are reported by row number (the header is row 1).
"""

import csv
import io
import logging

from django.db import transaction

from reference.models import Commodity

from .forms import OrderForm

logger = logging.getLogger(__name__)

COLUMNS = ["customer", "commodity", "volume", "market_type", "delivery_date", "is_weekly"]
TRUE_VALUES = {"1", "true", "yes", "y", "weekly"}


def _row_data(row, commodities):
    data = {key: (row.get(key) or "").strip() for key in COLUMNS}
    commodity = commodities.get(data["commodity"].lower())
    data["commodity"] = commodity.pk if commodity else None
    data["is_weekly"] = data["is_weekly"].lower() in TRUE_VALUES
    return data


def _error_text(form):
    return "; ".join(
        f"{field}: {' '.join(errors)}" if field != "__all__" else " ".join(errors)
        for field, errors in form.errors.items()
    )


def import_orders_csv(stream):
    """Create orders from CSV text. Returns {"created": [...], "errors": [(row, msg)]}."""
    if isinstance(stream, (bytes, str)):
        stream = io.StringIO(stream.decode("utf-8-sig") if isinstance(stream, bytes) else stream)

    reader = csv.DictReader(stream)
    missing = [c for c in COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        return {"created": [], "errors": [(1, f"Missing columns: {', '.join(missing)}")]}

    commodities = {c.name.lower(): c for c in Commodity.objects.all()}

    forms_to_save = []
    errors = []
    for number, row in enumerate(reader, start=2):
        name = (row.get("commodity") or "").strip()
        if name.lower() not in commodities:
            errors.append((number, f'Unknown commodity "{name}"'))
            continue

        form = OrderForm(data=_row_data(row, commodities))
        if form.is_valid():
            forms_to_save.append(form)
        else:
            errors.append((number, _error_text(form)))

    with transaction.atomic():
        created = [form.save() for form in forms_to_save]

    logger.info("Imported %d orders from CSV, %d rows rejected", len(created), len(errors))
    return {"created": created, "errors": errors}
