import pytest

from livedeck.decks.defaults import get_default_deck
from livedeck.decks.loaders import CsvDeckLoader
from livedeck.decks.loaders import display_name_for
from livedeck.decks.loaders import parse_deck_rows
from livedeck.presentations.exceptions import DeckLoadError

MAIN_CSV = """slideId,language,title,content,duration
1,en,Welcome,Welcome to our presentation,30
1,pl,Witamy,Witamy na naszej prezentacji,30
2,en,Agenda,What we will cover,45
2,pl,Plan,Co omowimy,99
,,,,
3,en,Questions,Ask away,soon
"""


@pytest.fixture
def decks_dir(tmp_path):
    (tmp_path / "main.csv").write_text(MAIN_CSV, encoding="utf-8")
    return tmp_path


def test_load_groups_rows_by_slide(decks_dir):
    deck = CsvDeckLoader(decks_dir).load("main")

    assert [s.id for s in deck.slides] == ["1", "2", "3"]
    assert deck[0].title == {"en": "Welcome", "pl": "Witamy"}
    assert deck[0].content["pl"] == "Witamy na naszej prezentacji"
    assert deck.languages == ["en", "pl"]


def test_load_takes_duration_from_first_row_and_defaults_to_zero(decks_dir):
    deck = CsvDeckLoader(decks_dir).load("main")

    assert [s.duration for s in deck.slides] == [30, 45, 0]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("30.5", 30), (" 12 ", 12), ("20s", 20), ("-5", 0), ("abc", 0), ("", 0), (None, 0)],
)
def test_duration_uses_leading_integer(raw, expected):
    deck = parse_deck_rows(
        [{"slideId": "1", "language": "en", "title": "T", "content": "C", "duration": raw}],
    )

    assert deck[0].duration == expected


def test_missing_source_raises(decks_dir):
    with pytest.raises(DeckLoadError):
        CsvDeckLoader(decks_dir).load("other")


def test_empty_source_raises(decks_dir):
    (decks_dir / "empty.csv").write_text("slideId,language,title,content,duration\n")

    with pytest.raises(DeckLoadError):
        CsvDeckLoader(decks_dir).load("empty")


@pytest.mark.parametrize("set_id", ["../etc/passwd", "", "a/b", ".hidden"])
def test_rejects_unsafe_set_ids(decks_dir, set_id):
    with pytest.raises(DeckLoadError):
        CsvDeckLoader(decks_dir).load(set_id)


def test_available_peeks_languages_without_building_slides(decks_dir):
    (decks_dir / "room-b.csv").write_text(
        "slideId,language,title,content,duration\n1,de,Hallo,Text,10\n",
        encoding="utf-8",
    )
    (decks_dir / "notes.txt").write_text("ignored")

    summaries = CsvDeckLoader(decks_dir).available()

    assert [(s.id, s.display_name, s.languages) for s in summaries] == [
        ("main", "Main", ("en", "pl")),
        ("room-b", "Room B", ("de",)),
    ]


def test_available_without_directory_is_empty(tmp_path):
    assert CsvDeckLoader(tmp_path / "missing").available() == []


def test_display_name_for():
    assert display_name_for("track_2-de") == "Track 2 De"


def test_default_deck():
    deck = get_default_deck()

    assert len(deck) == 2
    assert [s.duration for s in deck.slides] == [30, 45]
    assert deck.languages == ["en", "pl", "de"]
