from django.conf import settings
from django.urls import path
from django.views import defaults as default_views

from livedeck.presentations.views import available_sets

from .health import health as health_view

urlpatterns = [
    path("health/", health_view, name="health"),
    path("api/sets/", available_sets, name="sets-available"),
]

if settings.DEBUG:
    # This allows the error pages to be debugged during development, just visit
    # these url in browser to see how these error pages look like.
    urlpatterns += [
        path(
            "400/",
            default_views.bad_request,
            kwargs={"exception": Exception("Bad Request!")},
        ),
        path(
            "404/",
            default_views.page_not_found,
            kwargs={"exception": Exception("Page not Found")},
        ),
        path("500/", default_views.server_error),
    ]
