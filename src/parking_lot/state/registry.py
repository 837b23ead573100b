"""Parking facility registry: parked vehicles, capacity and revenue."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from ..errors import CapacityError, NotFoundError, StoreError
from ..metrics import record_admission, record_rejection, record_release, update_occupancy
from .models import FacilityStatus, Receipt, Vehicle, VehicleCategory, utc_now

if TYPE_CHECKING:
    from ..storage.text_store import TextStore

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 7


class FacilityRegistry:
    """
    Owns the vehicles currently parked in the facility.

    Vehicles are kept in admission order. The registry enforces capacity,
    computes fees on release and accumulates revenue for the current run.
    The parked set is loaded from the store on construction and written
    back by ``save()`` or ``close()``; revenue is never stored.
    """

    def __init__(
        self,
        store: "TextStore",
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the registry and load previously parked vehicles.

        Args:
            store: Persistence backend for the parked set
            capacity: Maximum number of parked vehicles
            clock: Source of the current time
        """
        self.store = store
        self.capacity = capacity
        self.clock = clock

        self._vehicles: list[Vehicle] = []
        self._revenue = 0.0

        self.load()
        logger.info(f"Initialized FacilityRegistry with {self.occupancy}/{self.capacity} slots used")

    def __enter__(self) -> "FacilityRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def occupancy(self) -> int:
        """Number of vehicles currently parked."""
        return len(self._vehicles)

    @property
    def available(self) -> int:
        """Number of free slots."""
        return self.capacity - self.occupancy

    @property
    def is_full(self) -> bool:
        return self.occupancy >= self.capacity

    def admit(self, vehicle: Vehicle) -> Vehicle:
        """
        Park a vehicle.

        Duplicate plates are not checked.

        Args:
            vehicle: Vehicle to park

        Returns:
            The parked vehicle

        Raises:
            CapacityError: If the facility is full; the vehicle is not stored
        """
        if self.is_full:
            logger.info(f"Rejected {vehicle.plate}: lot full ({self.capacity})")
            record_rejection(vehicle.category.store_name)
            raise CapacityError(vehicle.plate, self.capacity)

        self._vehicles.append(vehicle)
        logger.info(
            f"Admitted {vehicle.category.store_name} {vehicle.plate} "
            f"({self.occupancy}/{self.capacity})"
        )
        record_admission(vehicle.category.store_name)
        update_occupancy(self.occupancy, self.capacity)
        return vehicle

    def park(self, plate: str, category: VehicleCategory) -> Vehicle:
        """Create a vehicle entering now and admit it."""
        vehicle = Vehicle(plate=plate, category=category, entry_time=self.clock())
        return self.admit(vehicle)

    def release(self, plate: str) -> Receipt:
        """
        Release the earliest admitted vehicle with the given plate.

        Args:
            plate: License plate to release

        Returns:
            Receipt with the fee charged

        Raises:
            NotFoundError: If no parked vehicle has this plate
        """
        for index, vehicle in enumerate(self._vehicles):
            if vehicle.plate == plate:
                break
        else:
            logger.info(f"Release failed, plate not found: {plate}")
            raise NotFoundError(plate)

        now = self.clock()
        fee = vehicle.fee(now)
        self._revenue += fee
        del self._vehicles[index]

        logger.info(f"Released {vehicle.category.store_name} {plate}, fee {fee:.2f}")
        record_release(vehicle.category.store_name, fee)
        update_occupancy(self.occupancy, self.capacity)

        return Receipt(
            plate=vehicle.plate,
            category=vehicle.category,
            fee=fee,
            entry_time=vehicle.entry_time,
            exit_time=now,
        )

    def list_all(self) -> list[tuple[Vehicle, str]]:
        """Parked vehicles in admission order, each with its display line."""
        return [(v, v.display_info()) for v in self._vehicles]

    def total_revenue(self) -> float:
        """Revenue collected since this registry was created."""
        return self._revenue

    def get_status(self) -> FacilityStatus:
        """Get current facility state."""
        return FacilityStatus(
            capacity=self.capacity,
            occupied=self.occupancy,
            available=self.available,
            total_revenue=self._revenue,
            vehicles=list(self._vehicles),
        )

    def load(self) -> None:
        """Replace the parked set with the store's contents. Revenue is kept."""
        vehicles = self.store.load()

        if len(vehicles) > self.capacity:
            logger.warning(
                f"Store holds {len(vehicles)} vehicles but capacity is {self.capacity}, "
                f"dropping {len(vehicles) - self.capacity}"
            )
            vehicles = vehicles[: self.capacity]

        self._vehicles = vehicles
        update_occupancy(self.occupancy, self.capacity)

    def save(self) -> None:
        """
        Write the parked set to the store.

        Raises:
            StoreError: If the store cannot be written; in-memory state is kept
        """
        self.store.save(self._vehicles)

    def close(self) -> bool:
        """
        Save the parked set, logging instead of raising on failure.

        Returns:
            True if the store was written
        """
        try:
            self.save()
        except StoreError as e:
            logger.error(f"Failed to save parking data: {e}")
            return False
        return True
