"""Exceptions raised by the parking facility."""

from pathlib import Path


class ParkingError(Exception):
    """Base class for all parking facility errors."""


class ValidationError(ParkingError):
    """Operator input could not be accepted (bad menu choice, empty plate)."""


class NotFoundError(ParkingError):
    """No parked vehicle carries the requested plate."""

    def __init__(self, plate: str):
        self.plate = plate
        super().__init__(f"Vehicle with plate {plate} not found")


class CapacityError(ParkingError):
    """The facility is full and the vehicle was turned away."""

    def __init__(self, plate: str, capacity: int):
        self.plate = plate
        self.capacity = capacity
        super().__init__(f"Parking lot is full ({capacity} slots), {plate} cannot enter")


class StoreError(ParkingError):
    """The persisted store could not be written."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not save to {self.path}: {reason}")
