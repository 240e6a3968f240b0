import json

from livedeck.presentations.persistence import SnapshotGateway


def test_save_writes_sets_and_timestamp(tmp_path):
    path = tmp_path / "nested" / "state.json"

    assert SnapshotGateway(path).save({"main": 3}) is True

    data = json.loads(path.read_text())
    assert data["sets"] == {"main": 3}
    assert "timestamp" in data
    assert [p.name for p in path.parent.iterdir()] == ["state.json"]


def test_load_missing_file_is_empty(tmp_path):
    assert SnapshotGateway(tmp_path / "state.json").load() == {}


def test_load_ignores_malformed_entries(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"sets": {"a": 2, "b": -1, "c": "3", "d": True}}))

    assert SnapshotGateway(path).load() == {"a": 2}


def test_load_wrong_shape_is_empty(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"currentSlide": 4}))

    assert SnapshotGateway(path).load() == {}
    assert "Ignoring invalid state snapshot" in caplog.text


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.mkdir()

    assert SnapshotGateway(path).save({"main": 1}) is False
    assert "Error saving state snapshot" in caplog.text
    assert list(tmp_path.iterdir()) == [path]


def test_disabled_gateway():
    gateway = SnapshotGateway(None)

    assert gateway.load() == {}
    assert gateway.save({"main": 1}) is False
