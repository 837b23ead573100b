import os
from datetime import datetime, timezone

import pytest

from parking_lot.errors import StoreError
from parking_lot.state.models import Vehicle, VehicleCategory
from parking_lot.storage.text_store import TextStore, format_line, parse_line

ENTRY = datetime(2025, 12, 1, 9, 0, 0)
EPOCH = int(ENTRY.timestamp())


def test_missing_file_is_empty(store):
    assert store.load() == []


def test_format_line():
    v = Vehicle(plate="TRK1", category=VehicleCategory.LARGE, entry_time=ENTRY)
    assert format_line(v) == f"Truck TRK1 {EPOCH}"


def test_parse_line():
    v = parse_line(f"Motorbike MB7 {EPOCH}\n")
    assert v.category is VehicleCategory.LIGHT
    assert v.plate == "MB7"
    assert v.entry_time == ENTRY.astimezone(timezone.utc)
    assert v.entry_epoch == EPOCH


def test_parse_line_unknown_category():
    assert parse_line(f"Bus B1 {EPOCH}") is None


@pytest.mark.parametrize("line", ["Car ABC", "Car ABC notanumber", "Car A B 123"])
def test_parse_line_malformed(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_malformed_line_skipped(store):
    store.path.write_text(
        f"Car FIRST {EPOCH}\n"
        "Car BROKEN\n"
        "\n"
        f"Bus UNKNOWN {EPOCH}\n"
        f"Truck LAST {EPOCH + 60}\n"
    )
    vehicles = store.load()
    assert [(v.category, v.plate) for v in vehicles] == [
        (VehicleCategory.STANDARD, "FIRST"),
        (VehicleCategory.LARGE, "LAST"),
    ]


def test_save_overwrites(store):
    store.path.write_text("Car OLD 1\n")
    vehicles = [
        Vehicle(plate="A", category=VehicleCategory.STANDARD, entry_time=ENTRY),
        Vehicle(plate="B", category=VehicleCategory.LIGHT, entry_time=ENTRY),
    ]
    assert store.save(vehicles) == 2
    assert store.path.read_text() == f"Car A {EPOCH}\nMotorbike B {EPOCH}\n"
    assert store.load() == vehicles


def test_save_empty_set(store):
    store.path.write_text("Car OLD 1\n")
    store.save([])
    assert store.path.read_text() == ""


def test_save_creates_parent_directory(tmp_path):
    store = TextStore(tmp_path / "data" / "parking.txt")
    store.save([])
    assert store.path.exists()


def test_unwritable_destination(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    with pytest.raises(StoreError) as exc:
        TextStore(target).save([])
    assert exc.value.path == target


def test_unreadable_store_is_empty(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    assert TextStore(target).load() == []


def test_missing_store_not_found(store):
    store.load()
    assert store.found is False
    store.path.write_text("")
    assert store.load() == []
    assert store.found is True


def test_parent_is_a_file(tmp_path):
    parent = tmp_path / "not_a_dir"
    parent.write_text("")
    store = TextStore(parent / "parking_data.txt")
    assert store.load() == []
    assert store.found is False


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="needs a non-root user to deny directory access",
)
def test_unsearchable_parent_is_empty(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "parking_data.txt").write_text("Car A 1\n")
    locked.chmod(0)
    try:
        assert TextStore(locked / "parking_data.txt").load() == []
    finally:
        locked.chmod(0o755)
