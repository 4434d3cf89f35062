"""
Portal Customer Forms
Sign-in and registration forms. Registration is stored through the record store.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from apps.customers.forms import INPUT_CLASS, CustomerForm


class CustomerLoginForm(forms.Form):
    """
    Customer sign-in form.
    Only the email identifies the customer; the password must be present but is
    not verified anywhere.
    """

    email = forms.CharField(
        label=_("Email Address"),
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': _('you@example.com'),
            'autofocus': True,
        })
    )

    password = forms.CharField(
        label=_("Password"),
        strip=False,
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': _('Your password'),
        })
    )


class CustomerRegistrationForm(CustomerForm):
    """Self-service registration: creates a Customer record"""
