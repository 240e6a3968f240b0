from http import HTTPStatus

from livedeck.presentations.services import get_registry


def test_lists_available_sets(client, settings, tmp_path):
    (tmp_path / "room-b.csv").write_text(
        "slideId,language,title,content,duration\n1,pl,Witamy,Tekst,10\n",
        encoding="utf-8",
    )
    (tmp_path / "main.csv").write_text(
        "slideId,language,title,content,duration\n1,en,Hi,Text,10\n1,de,Hallo,Text,10\n",
        encoding="utf-8",
    )
    settings.LIVEDECK_DECKS_DIR = str(tmp_path)

    resp = client.get("/api/sets/")

    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == {
        "results": [
            {"id": "main", "displayName": "Main", "languages": ["en", "de"]},
            {"id": "room-b", "displayName": "Room B", "languages": ["pl"]},
        ],
    }
    assert get_registry().cached() == []


def test_only_get_is_allowed(client):
    resp = client.post("/api/sets/")

    assert resp.status_code == HTTPStatus.METHOD_NOT_ALLOWED
