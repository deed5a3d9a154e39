"""Deterministic risk score formulas for the insurance risk engine.

Each :class:`VehicleType` maps to a formula function.  Only the car
formula is defined; trucks and motorcycles are scored with it as well,
so every declared type produces the same score for the same attributes.
"""

from __future__ import annotations

import logging
from typing import Callable

from vehicle_risk.core.vehicle import Vehicle, VehicleType

logger = logging.getLogger(__name__)

BASE_RISK: float = 0.8
COMMERCIAL_FACTOR: float = 1.5
REFERENCE_YEAR: int = 2024
AGE_STEP: float = 0.05
ACCIDENT_STEP: float = 0.15

RiskFormula = Callable[[Vehicle], float]


def car_base_risk(vehicle: Vehicle) -> float:
    """Base risk before age and accident modifiers.

    ``base = 0.8 * (1.5 if commercial else 1.0)``
    """
    return BASE_RISK * (COMMERCIAL_FACTOR if vehicle.is_commercial else 1.0)


def apply_car_modifiers(vehicle: Vehicle, risk: float) -> float:
    """Scale a base risk by the age and accident multipliers.

    The formula is:

        risk * age_multiplier * accident_multiplier

    Where:
        age_multiplier      = 1 + (2024 - year) * 0.05
        accident_multiplier = 1 + accident_count * 0.15

    Args:
        vehicle: The vehicle being scored.
        risk: Base risk from :func:`car_base_risk`.

    Returns:
        Modified risk score.
    """
    age_multiplier: float = 1.0 + (REFERENCE_YEAR - vehicle.year) * AGE_STEP
    accident_multiplier: float = 1.0 + vehicle.accident_count * ACCIDENT_STEP
    return risk * age_multiplier * accident_multiplier


def car_total_risk(vehicle: Vehicle) -> float:
    """Total risk score for a car."""
    return apply_car_modifiers(vehicle, car_base_risk(vehicle))


# Trucks and motorcycles have no calibrated formula of their own.
_FORMULAS: dict[VehicleType, RiskFormula] = {
    VehicleType.CAR: car_total_risk,
    VehicleType.TRUCK: car_total_risk,
    VehicleType.MOTORCYCLE: car_total_risk,
}


def formula_for(vehicle_type: VehicleType) -> RiskFormula:
    """Return the risk formula used for ``vehicle_type``.

    Raises:
        ValueError: If ``vehicle_type`` has no registered formula.
    """
    try:
        return _FORMULAS[vehicle_type]
    except KeyError:
        raise ValueError(f"No risk formula for vehicle type {vehicle_type!r}.") from None


def calculate_total_risk(vehicle: Vehicle) -> float:
    """Calculate the total risk score of ``vehicle``.

    Args:
        vehicle: The vehicle to score.

    Returns:
        Non-negative risk score for any model year up to 2024.
    """
    formula = formula_for(vehicle.type)
    if vehicle.type is not VehicleType.CAR:
        logger.info("Scoring %s with the car formula", vehicle.type.name)
    score = formula(vehicle)
    logger.debug("Risk score for %r: %.6f", vehicle.label, score)
    return score
