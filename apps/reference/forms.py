"""reference/forms.py"""

from django import forms

from core.constants import (
    BED_SIZES,
    MICROCLIMATES,
    MONTHS,
    SOIL_TYPES,
    SPACING_OPTIONS,
    MarketType,
)

from .models import Lot, Variety


def _choices(values):
    return [(v, v) for v in values]


class VarietyForm(forms.ModelForm):
    """Variety with one yield box per market type instead of a raw dict."""

    growing_window_start = forms.ChoiceField(choices=_choices(MONTHS), initial="Jan")
    growing_window_end = forms.ChoiceField(choices=_choices(MONTHS), initial="Dec")
    bed_size = forms.ChoiceField(choices=_choices(BED_SIZES), initial="38-2")
    spacing = forms.CharField(max_length=20, initial="12in", help_text=", ".join(SPACING_OPTIONS))
    market_types = forms.MultipleChoiceField(
        choices=MarketType.choices,
        widget=forms.CheckboxSelectMultiple,
        initial=[MarketType.FRESH_CUT],
    )

    class Meta:
        model = Variety
        fields = [
            "name",
            "growing_window_start",
            "growing_window_end",
            "days_to_harvest",
            "bed_size",
            "spacing",
            "plant_type",
            "ideal_stand",
            "market_types",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        yields = self.instance.budget_yield_per_acre or {}
        for value, label in MarketType.choices:
            self.fields[self.yield_field(value)] = forms.DecimalField(
                label=f"Budget yield per acre ({label})",
                min_value=0,
                required=False,
                initial=yields.get(value, 0),
            )

    @staticmethod
    def yield_field(market_type):
        return "yield_" + market_type.lower().replace(" ", "_")

    def clean_days_to_harvest(self):
        days = self.cleaned_data["days_to_harvest"]
        if days <= 0:
            raise forms.ValidationError("Days to harvest must be greater than zero.")
        return days

    def save(self, commit=True):
        variety = super().save(commit=False)
        variety.budget_yield_per_acre = {
            value: float(self.cleaned_data.get(self.yield_field(value)) or 0)
            for value, _ in MarketType.choices
        }
        if commit:
            variety.save()
        return variety


class LotForm(forms.ModelForm):
    soil_type = forms.ChoiceField(choices=_choices(SOIL_TYPES))
    microclimate = forms.ChoiceField(choices=_choices(MICROCLIMATES))

    class Meta:
        model = Lot
        fields = [
            "number",
            "acres",
            "soil_type",
            "microclimate",
            "last_crop",
            "last_plant_date",
        ]
        widgets = {"last_plant_date": forms.DateInput(attrs={"type": "date"})}
