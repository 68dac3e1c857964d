"""planning/signals.py

Deleting land never deletes plantings: anything on a lot that goes away
(directly or through its ranch or region) is put back in the unassigned pool.
"""

import logging

from django.db.models.signals import pre_delete
from django.dispatch import receiver

from reference.models import Lot

from .models import Planting

logger = logging.getLogger(__name__)


@receiver(pre_delete, sender=Lot)
def unassign_plantings_on_lot_delete(sender, instance, **kwargs):
    count = Planting.objects.filter(lot=instance).update(lot=None, sublot="")
    if count:
        logger.info("Unassigned %d plantings from deleted lot %s", count, instance.location)
