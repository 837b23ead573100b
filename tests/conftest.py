"""Shared fixtures."""

from datetime import datetime, timedelta

import pytest

from parking_lot.storage.text_store import TextStore

START = datetime(2025, 12, 1, 9, 0, 0)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "parking_data.txt"


@pytest.fixture
def store(store_path):
    return TextStore(store_path)
