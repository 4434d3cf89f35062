"""
Customers URLs - administrator customer management.
"""

from django.urls import path

from . import views

app_name = 'customers'

urlpatterns = [
    path('', views.customer_list, name='list'),
    path('create/', views.customer_create, name='create'),
    path('<str:customer_id>/edit/', views.customer_edit, name='edit'),
    path('<str:customer_id>/delete/', views.customer_delete, name='delete'),
]
