"""core/urls.py"""

from django.urls import path
from . import views

app_name = "core"

urlpatterns = [
    path("", views.DashboardView.as_view(), name="dashboard"),
    path("data/", views.DataView.as_view(), name="data"),
    path("data/backup/", views.BackupDownloadView.as_view(), name="backup"),
    path("data/reset/", views.ResetDataView.as_view(), name="reset"),
    path("data/seed/", views.SeedDefaultsView.as_view(), name="seed"),
]
