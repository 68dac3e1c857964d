"""planning/urls.py"""

from django.urls import path
from . import views

app_name = "planning"

urlpatterns = [
    # Assignment board and drag-and-drop endpoints
    path("", views.PlantingBoardView.as_view(), name="board"),
    path("planting/<str:code>/", views.PlantingDetailView.as_view(), name="planting_detail"),
    path(
        "planting/<str:code>/suggestions/", views.SuggestionsView.as_view(), name="suggestions"
    ),
    path(
        "planting/<str:code>/preview/<int:lot_id>/", views.PreviewView.as_view(), name="preview"
    ),
    path("planting/<str:code>/assign/", views.AssignView.as_view(), name="assign"),
    path("planting/<str:code>/unassign/", views.UnassignView.as_view(), name="unassign"),
    path(
        "recombine/<str:parent_code>/", views.RecombineView.as_view(), name="recombine"
    ),
    # Bulk actions
    path("optimize/", views.OptimizeView.as_view(), name="optimize"),
    path("generate/", views.GenerateView.as_view(), name="generate"),
    # Timeline
    path("gantt/", views.GanttView.as_view(), name="gantt"),
    path("gantt/week/<int:year>/<int:week>/", views.GanttView.as_view(), name="gantt_week"),
]
