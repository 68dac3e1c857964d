from django.db import migrations

from core.constants import DEFAULT_ROTATION_RULES


def seed_rules(apps, schema_editor):
    RotationRule = apps.get_model("core", "RotationRule")
    for crop, (conflicts, days) in DEFAULT_ROTATION_RULES.items():
        RotationRule.objects.update_or_create(
            crop=crop,
            defaults={"conflicts": conflicts, "minimum_rotation_days": days},
        )


def unseed_rules(apps, schema_editor):
    RotationRule = apps.get_model("core", "RotationRule")
    RotationRule.objects.filter(crop__in=list(DEFAULT_ROTATION_RULES)).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_rules, unseed_rules),
    ]
