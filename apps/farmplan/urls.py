"""farmplan/urls.py"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("", include("core.urls")),
    path("catalog/", include("reference.urls")),
    path("orders/", include("orders.urls")),
    path("planning/", include("planning.urls")),
    path("reports/", include("reports.urls")),
    path("admin/", admin.site.urls),
]
