"""Vehicle model for the insurance risk engine."""

from dataclasses import dataclass
from enum import Enum


class VehicleType(Enum):
    """Vehicle categories offered by the type menu."""

    CAR = 1
    TRUCK = 2
    MOTORCYCLE = 3


@dataclass(frozen=True)
class Vehicle:
    """Immutable description of a single vehicle under assessment.

    Attributes:
        make: Manufacturer name as entered (may be empty).
        model: Model name as entered (may be empty).
        year: Model year.
        type: Declared vehicle category.
        accident_count: Number of recorded accidents (>= 0).
        is_commercial: Whether the vehicle is used commercially.
    """

    make: str
    model: str
    year: int
    type: VehicleType
    accident_count: int = 0
    is_commercial: bool = False

    def __post_init__(self) -> None:
        """Validate vehicle attributes."""
        if not isinstance(self.type, VehicleType):
            raise ValueError(f"type must be a VehicleType, got {self.type!r}.")
        if self.accident_count < 0:
            raise ValueError("accident_count must be >= 0.")

    @property
    def label(self) -> str:
        """Display label, also the registry key."""
        return f"{self.make} {self.model}"
