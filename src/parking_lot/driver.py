"""Interactive console driver for the parking facility."""

import logging
import sys
from typing import Optional, TextIO

from .errors import CapacityError, NotFoundError, ParkingError, ValidationError
from .state.models import Receipt, VehicleCategory
from .state.registry import FacilityRegistry

logger = logging.getLogger(__name__)

MENU = (
    "1. Park Car\n"
    "2. Park Truck\n"
    "3. Park Motorbike\n"
    "4. Unpark Vehicle (Pay & Exit)\n"
    "5. Display Status\n"
    "0. Exit & Save\n"
)

PARK_CHOICES = {
    1: VehicleCategory.STANDARD,
    2: VehicleCategory.LARGE,
    3: VehicleCategory.LIGHT,
}
UNPARK_CHOICE = 4
STATUS_CHOICE = 5
EXIT_CHOICE = 0

SEPARATOR = "-" * 56


class EndOfInput(Exception):
    """The operator's input stream is exhausted."""


def parse_choice(text: str) -> int:
    """
    Parse a menu selection.

    Raises:
        ValidationError: If the text is not an integer
    """
    try:
        return int(text.strip())
    except ValueError:
        raise ValidationError("Invalid input. Please enter a number.") from None


def parse_plate(text: str) -> str:
    """
    Take the first whitespace-delimited token as the plate.

    Raises:
        ValidationError: If no plate was entered
    """
    tokens = text.split()
    if not tokens:
        raise ValidationError("License plate must not be empty.")
    return tokens[0]


class ParkingDriver:
    """
    Menu loop that reads operator commands and dispatches them to the registry.

    Every error raised by a command is reported on the output stream and the
    loop continues.
    """

    def __init__(
        self,
        registry: FacilityRegistry,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.registry = registry
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.output)

    def prompt(self, text: str) -> str:
        """Show a prompt and read one line."""
        self.output.write(text)
        self.output.flush()
        line = self.input.readline()
        if not line:
            raise EndOfInput
        return line

    def run(self) -> None:
        """Run the menu loop until the exit command or end of input."""
        self.write("===========================================")
        self.write("   Parking Lot Management System   ")
        self.write("===========================================")

        while True:
            self.output.write(MENU)
            try:
                line = self.prompt("Select an option: ")
                choice = parse_choice(line)
                if choice == EXIT_CHOICE:
                    break
                self.run_command(choice)
            except EndOfInput:
                logger.info("Input closed, leaving menu loop")
                self.write()
                break
            except ParkingError as e:
                self.write(str(e))

    def run_command(self, choice: int) -> None:
        """
        Execute one menu command.

        Raises:
            ValidationError: For an unknown selection or empty plate
            EndOfInput: If input ends while reading a plate
        """
        if choice in PARK_CHOICES:
            plate = parse_plate(self.prompt("Enter License Plate: "))
            self.park(plate, PARK_CHOICES[choice])
        elif choice == UNPARK_CHOICE:
            plate = parse_plate(self.prompt("Enter License Plate to Unpark: "))
            self.unpark(plate)
        elif choice == STATUS_CHOICE:
            self.display_status()
        else:
            raise ValidationError("Invalid selection! Please try again.")

    def park(self, plate: str, category: VehicleCategory) -> None:
        try:
            vehicle = self.registry.park(plate, category)
        except CapacityError:
            self.write(f"Parking Lot is Full! {plate} cannot enter.")
            return
        self.write(f"{vehicle.category.store_name} ({vehicle.plate}) parked successfully.")

    def unpark(self, plate: str) -> None:
        try:
            receipt = self.registry.release(plate)
        except NotFoundError:
            self.write(f">> ERROR: Vehicle with plate {plate} not found!")
            return
        self.print_receipt(receipt)

    def print_receipt(self, receipt: Receipt) -> None:
        self.write()
        self.write("---------------------------------")
        self.write(f"[EXIT] {receipt.plate} is leaving.")
        self.write(f"Vehicle Type: {receipt.category.store_name}")
        self.write(f"Total Fee: ${receipt.fee:.2f}")
        self.write("---------------------------------")
        self.write()

    def display_status(self) -> None:
        status = self.registry.get_status()
        self.write()
        self.write(f"=== PARKING LOT STATUS ({status.occupied}/{status.capacity}) ===")
        self.write(f"Total Revenue: ${status.total_revenue:.2f}")
        self.write(SEPARATOR)

        entries = self.registry.list_all()
        if not entries:
            self.write("Parking lot is currently empty.")
        for _, line in entries:
            self.write(line)

        self.write(SEPARATOR)
        self.write()
