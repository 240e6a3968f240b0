from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from django.conf import settings
from django.http import JsonResponse

from livedeck.presentations.services import get_registry


def check_decks() -> dict[str, Any]:
    decks_dir = Path(settings.LIVEDECK_DECKS_DIR)
    if not decks_dir.is_dir():
        return {"ok": False, "error": f"{decks_dir} is not a directory"}
    try:
        count = len(get_registry().list_available())
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True, "sets": count}


def check_snapshot() -> dict[str, Any]:
    path = getattr(settings, "LIVEDECK_STATE_FILE", None)
    if not path:
        return {"ok": False, "error": "LIVEDECK_STATE_FILE not configured"}
    parent = Path(path).parent
    if not parent.is_dir():
        return {"ok": False, "error": f"{parent} does not exist"}
    if not os.access(parent, os.W_OK):
        return {"ok": False, "error": f"{parent} is not writable"}
    return {"ok": True}


def health(request):
    decks = check_decks()
    snapshot = check_snapshot()
    components = {"decks": decks, "snapshot": snapshot}

    all_ok = all(v.get("ok", False) for v in components.values())
    some_ok = any(v.get("ok", False) for v in components.values())

    status = "ok" if all_ok else ("degraded" if some_ok else "down")
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )
