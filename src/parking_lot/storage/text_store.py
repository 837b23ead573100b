"""Flat text store for the parked vehicle set."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..errors import StoreError
from ..state.models import Vehicle, VehicleCategory

logger = logging.getLogger(__name__)


def format_line(vehicle: Vehicle) -> str:
    """Format a vehicle as ``<Category> <Plate> <EpochSeconds>``."""
    return f"{vehicle.category.store_name} {vehicle.plate} {vehicle.entry_epoch}"


def parse_line(line: str) -> Optional[Vehicle]:
    """
    Parse one store line.

    Args:
        line: A line of the form ``<Category> <Plate> <EpochSeconds>``

    Returns:
        The vehicle, or None if the category name is not recognized

    Raises:
        ValueError: If the line is malformed
    """
    fields = line.split()
    if len(fields) != 3:
        raise ValueError(f"expected 3 fields, got {len(fields)}")

    name, plate, epoch_text = fields
    try:
        epoch = int(epoch_text)
    except ValueError:
        raise ValueError(f"entry time is not an integer: {epoch_text!r}") from None

    category = VehicleCategory.from_store_name(name)
    if category is None:
        return None

    try:
        return Vehicle.from_epoch(plate, category, epoch)
    except (OverflowError, OSError) as e:
        raise ValueError(f"entry time out of range: {epoch}") from e


class TextStore:
    """
    Reads and writes the parked set as plain text, one vehicle per line.

    The file is opened and closed within each call. Revenue is not part of
    the stored state.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.found = False  # Whether the last load() opened an existing file

    def load(self) -> list[Vehicle]:
        """
        Read all vehicles from the store.

        A missing or unreadable file yields an empty list. Malformed lines are
        skipped; lines naming an unknown category are dropped.

        Returns:
            Vehicles in file order
        """
        self.found = False
        try:
            with open(self.path, encoding="utf-8") as f:
                lines = f.readlines()
        except FileNotFoundError:
            logger.info(f"No store found at {self.path}, starting empty")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read store {self.path}: {e}")
            return []

        self.found = True

        vehicles = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            try:
                vehicle = parse_line(line)
            except ValueError as e:
                logger.warning(f"Skipping malformed line {lineno} in {self.path}: {e}")
                continue

            if vehicle is None:
                logger.debug(f"Dropping line {lineno} with unknown category: {line.strip()}")
                continue

            vehicles.append(vehicle)

        logger.info(f"Loaded {len(vehicles)} vehicle(s) from {self.path}")
        return vehicles

    def save(self, vehicles: Iterable[Vehicle]) -> int:
        """
        Overwrite the store with the given vehicles.

        Args:
            vehicles: Vehicles to write, in order

        Returns:
            Number of vehicles written

        Raises:
            StoreError: If the file cannot be written
        """
        lines = [format_line(v) + "\n" for v in vehicles]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.writelines(lines)
        except OSError as e:
            raise StoreError(self.path, str(e)) from e

        logger.info(f"Saved {len(lines)} vehicle(s) to {self.path}")
        return len(lines)
