"""orders/forms.py"""

from django import forms

from .models import Order


class OrderForm(forms.ModelForm):
    class Meta:
        model = Order
        fields = ["customer", "commodity", "volume", "market_type", "delivery_date", "is_weekly"]
        widgets = {"delivery_date": forms.DateInput(attrs={"type": "date"})}

    def clean_customer(self):
        customer = self.cleaned_data["customer"].strip()
        if not customer:
            raise forms.ValidationError("Customer is required.")
        return customer


class OrderImportForm(forms.Form):
    csv_file = forms.FileField(
        label="Orders CSV",
        help_text="Columns: customer, commodity, volume, market_type, delivery_date, is_weekly",
    )
