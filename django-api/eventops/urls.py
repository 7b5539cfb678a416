from django.urls import include, path

from events.handlers import HealthView

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("", include("events.urls")),
]

handler404 = "events.handlers.errors.not_found"
