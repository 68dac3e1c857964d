"""orders/urls.py"""

from django.urls import path
from . import views

app_name = "orders"

urlpatterns = [
    path("", views.OrderListView.as_view(), name="order_list"),
    path("new/", views.OrderCreateView.as_view(), name="order_create"),
    path("import/", views.OrderImportView.as_view(), name="order_import"),
    path("<int:pk>/edit/", views.OrderUpdateView.as_view(), name="order_edit"),
    path("<int:pk>/delete/", views.OrderDeleteView.as_view(), name="order_delete"),
]
