"""core/models.py"""

from django.db import models

from .constants import DEFAULT_ROTATION_DAYS


class RotationRuleQuerySet(models.QuerySet):
    def as_map(self):
        """crop name -> (conflicting crops, minimum rotation days)."""
        return {rule.crop: (list(rule.conflicts), rule.minimum_rotation_days) for rule in self}


class RotationRule(models.Model):
    crop = models.CharField(max_length=100, unique=True)
    conflicts = models.JSONField(default=list, blank=True)
    minimum_rotation_days = models.PositiveIntegerField(default=DEFAULT_ROTATION_DAYS)

    objects = RotationRuleQuerySet.as_manager()

    class Meta:
        ordering = ["crop"]

    def __str__(self):
        return f"{self.crop}: {self.minimum_rotation_days} days minimum"
