"""
Support ticket forms.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from apps.customers.forms import INPUT_CLASS

from .schemas import STATUS_FILTER_ALL, TicketStatus


class TicketCreateForm(forms.Form):
    """Customer files a new ticket; it always starts Open"""

    title = forms.CharField(
        label=_("Title"),
        max_length=200,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS, 'placeholder': _('Brief description of the issue')}),
    )

    description = forms.CharField(
        label=_("Description"),
        widget=forms.Textarea(attrs={
            'class': INPUT_CLASS,
            'rows': 5,
            'placeholder': _('Detailed description of the issue'),
        }),
    )


class TicketStatusForm(forms.Form):
    """Administrator status transition"""

    status = forms.ChoiceField(choices=TicketStatus.choices)


class TicketFilterForm(forms.Form):
    """Search box and status dropdown above ticket lists (GET)"""

    search = forms.CharField(required=False, strip=False)
    status = forms.ChoiceField(
        required=False,
        choices=[(STATUS_FILTER_ALL, _('All Status')), *TicketStatus.choices],
    )

    def filters(self) -> tuple[str, str]:
        """(search, status) with invalid input falling back to no filter"""
        if not self.is_valid():
            return '', STATUS_FILTER_ALL
        return self.cleaned_data['search'], self.cleaned_data['status'] or STATUS_FILTER_ALL
