from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RotationRule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("crop", models.CharField(max_length=100, unique=True)),
                ("conflicts", models.JSONField(blank=True, default=list)),
                ("minimum_rotation_days", models.PositiveIntegerField(default=90)),
            ],
            options={
                "ordering": ["crop"],
            },
        ),
    ]
