"""
Support Tickets URLs - Portal Service
Customer ticket routes plus administrator management.
"""

from django.urls import path

from . import views

app_name = 'tickets'

urlpatterns = [
    path('', views.ticket_list, name='list'),
    path('create/', views.ticket_create, name='create'),
    path('admin/', views.admin_ticket_list, name='admin_list'),
    path('<str:ticket_id>/', views.ticket_detail, name='detail'),
    path('<str:ticket_id>/status/', views.ticket_update_status, name='update_status'),
    path('<str:ticket_id>/delete/', views.ticket_delete, name='delete'),
]
