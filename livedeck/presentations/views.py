from __future__ import annotations

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .services import get_registry


@require_GET
def available_sets(request):
    """List the sets that can be joined, without loading their decks."""

    sets = [summary.to_payload() for summary in get_registry().list_available()]
    return JsonResponse({"results": sets})
