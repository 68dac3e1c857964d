"""reference/urls.py"""

from django.urls import path
from . import views

app_name = "reference"

urlpatterns = [
    # Catalog
    path("", views.CommodityListView.as_view(), name="commodity_list"),
    path("commodity/new/", views.CommodityCreateView.as_view(), name="commodity_create"),
    path(
        "commodity/<int:pk>/delete/", views.CommodityDeleteView.as_view(), name="commodity_delete"
    ),
    path(
        "commodity/<int:commodity_id>/variety/new/",
        views.VarietyCreateView.as_view(),
        name="variety_create",
    ),
    path("variety/<int:pk>/edit/", views.VarietyUpdateView.as_view(), name="variety_edit"),
    path("variety/<int:pk>/delete/", views.VarietyDeleteView.as_view(), name="variety_delete"),
    path(
        "variety/<int:pk>/duplicate/",
        views.VarietyDuplicateView.as_view(),
        name="variety_duplicate",
    ),
    # Land
    path("land/", views.LandView.as_view(), name="land"),
    path("land/region/new/", views.RegionCreateView.as_view(), name="region_create"),
    path("land/region/<int:pk>/edit/", views.RegionUpdateView.as_view(), name="region_edit"),
    path("land/region/<int:pk>/delete/", views.RegionDeleteView.as_view(), name="region_delete"),
    path(
        "land/region/<int:region_id>/ranch/new/",
        views.RanchCreateView.as_view(),
        name="ranch_create",
    ),
    path("land/ranch/<int:pk>/edit/", views.RanchUpdateView.as_view(), name="ranch_edit"),
    path("land/ranch/<int:pk>/delete/", views.RanchDeleteView.as_view(), name="ranch_delete"),
    path(
        "land/ranch/<int:ranch_id>/lot/new/", views.LotCreateView.as_view(), name="lot_create"
    ),
    path("land/lot/<int:pk>/edit/", views.LotUpdateView.as_view(), name="lot_edit"),
    path("land/lot/<int:pk>/delete/", views.LotDeleteView.as_view(), name="lot_delete"),
]
