"""Data models for parked vehicles and facility state."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class VehicleCategory(str, Enum):
    """Vehicle category, which decides the hourly rate."""

    STANDARD = "Car"
    LARGE = "Truck"
    LIGHT = "Motorbike"

    @property
    def rate(self) -> float:
        """Hourly rate for this category."""
        return HOURLY_RATES[self]

    @property
    def store_name(self) -> str:
        """Name used for this category in the store file."""
        return self.value

    @classmethod
    def from_store_name(cls, name: str) -> Optional["VehicleCategory"]:
        """Look up a category by its store name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None

    def fee(self, hours: float) -> float:
        """Fee for a stay of the given length. The first hour is always billed."""
        return self.rate * max(1.0, hours)


HOURLY_RATES: dict[VehicleCategory, float] = {
    VehicleCategory.STANDARD: 20.0,
    VehicleCategory.LARGE: 50.0,
    VehicleCategory.LIGHT: 10.0,
}


class Vehicle(BaseModel):
    """A vehicle currently parked in the facility."""

    plate: str
    category: VehicleCategory
    entry_time: datetime

    @field_validator("plate", mode="before")
    @classmethod
    def check_plate(cls, v: str) -> str:
        """Plates are single non-empty tokens."""
        if not isinstance(v, str):
            raise ValueError("plate must be a string")
        v = v.strip()
        if not v:
            raise ValueError("plate must not be empty")
        if any(c.isspace() for c in v):
            raise ValueError("plate must not contain whitespace")
        return v

    @field_validator("entry_time")
    @classmethod
    def normalize_entry_time(cls, v: datetime) -> datetime:
        # Naive times are local wall-clock times; the store keeps whole epoch seconds
        return v.astimezone(timezone.utc).replace(microsecond=0)

    @property
    def entry_epoch(self) -> int:
        """Entry time as integer epoch seconds."""
        return int(self.entry_time.timestamp())

    @classmethod
    def from_epoch(cls, plate: str, category: VehicleCategory, epoch: int) -> "Vehicle":
        """Rebuild a vehicle from its stored epoch timestamp."""
        return cls(
            plate=plate,
            category=category,
            entry_time=datetime.fromtimestamp(epoch, tz=timezone.utc),
        )

    def hours_parked(self, now: Optional[datetime] = None) -> float:
        """Real hours elapsed between entry and ``now``, independent of DST shifts."""
        now = now or utc_now()
        return (now.timestamp() - self.entry_time.timestamp()) / 3600.0

    def fee(self, now: Optional[datetime] = None) -> float:
        """
        Compute the parking fee owed at ``now``.

        Args:
            now: Time of exit (defaults to the current time)

        Returns:
            Hourly rate times hours parked, with a one hour minimum
        """
        return self.category.fee(self.hours_parked(now))

    def display_info(self) -> str:
        """One line with category, plate and entry time."""
        return (
            f"{self.category.store_name:<15}{self.plate:<15}"
            f"Entry: {self.entry_time.astimezone().ctime()}"
        )


class Receipt(BaseModel):
    """Result of releasing a vehicle."""

    plate: str
    category: VehicleCategory
    fee: float
    entry_time: datetime
    exit_time: datetime


class FacilityStatus(BaseModel):
    """Snapshot of the facility for display."""

    capacity: int
    occupied: int
    available: int
    total_revenue: float
    vehicles: list[Vehicle]
