"""
URL configuration for the Helpdesk Portal
"""

from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import include, path


# Portal status endpoint
def portal_status(request):
    return JsonResponse({'status': 'healthy', 'service': 'portal'})


def root_redirect(request):
    if request.portal_session.is_authenticated:
        return redirect('/dashboard/')
    return redirect('/login/')


urlpatterns = [
    # Authentication - login/logout/register
    path('', include('apps.users.urls')),

    # Dashboard - ticket statistics
    path('dashboard/', include('apps.dashboard.urls')),

    # Support tickets
    path('tickets/', include('apps.tickets.urls')),

    # Customers - administrator management
    path('customers/', include('apps.customers.urls')),

    path('status/', portal_status, name='portal_status'),

    path('', root_redirect, name='root'),
]
