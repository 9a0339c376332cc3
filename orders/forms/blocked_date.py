from django import forms


class BlockedDateForm(forms.Form):
    date = forms.DateField(
        input_formats=["%Y-%m-%d"],
        error_messages={"required": "Date is required", "invalid": "Enter the date as YYYY-MM-DD"},
    )


class RemoveBlockedDateForm(forms.Form):
    id = forms.IntegerField(
        min_value=1,
        error_messages={"required": "ID is required", "invalid": "ID must be a valid number"},
    )
