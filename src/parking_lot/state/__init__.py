"""State management module."""

from .models import FacilityStatus, Receipt, Vehicle, VehicleCategory
from .registry import FacilityRegistry

__all__ = ["FacilityStatus", "Receipt", "Vehicle", "VehicleCategory", "FacilityRegistry"]
