"""
Customer record forms, shared by self-registration and the administrator views.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

INPUT_CLASS = 'form-input'


class CustomerForm(forms.Form):
    """All four customer fields are required"""

    first_name = forms.CharField(
        label=_("First Name"),
        max_length=100,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS, 'placeholder': _('John')}),
    )

    last_name = forms.CharField(
        label=_("Last Name"),
        max_length=100,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS, 'placeholder': _('Doe')}),
    )

    email = forms.CharField(
        label=_("Email Address"),
        max_length=254,
        widget=forms.EmailInput(attrs={'class': INPUT_CLASS, 'placeholder': _('you@example.com')}),
    )

    phone = forms.CharField(
        label=_("Phone Number"),
        max_length=40,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS, 'placeholder': '+1 555 123 4567'}),
    )

    def clean_email(self) -> str:
        email = self.cleaned_data['email'].strip()
        if '@' not in email:
            raise forms.ValidationError(_("Please enter a valid email address"))
        return email

    @classmethod
    def initial_from(cls, customer) -> dict[str, str]:
        return {
            'first_name': customer.first_name,
            'last_name': customer.last_name,
            'email': customer.email,
            'phone': customer.phone,
        }
