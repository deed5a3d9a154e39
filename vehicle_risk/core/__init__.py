"""Core domain modules for the insurance risk engine."""

from vehicle_risk.core.assessment import RiskAssessment, assess_vehicle
from vehicle_risk.core.classifier import RISK_THRESHOLDS, RiskLevel, categorize
from vehicle_risk.core.registry import RiskRegistry
from vehicle_risk.core.risk import (
    apply_car_modifiers,
    calculate_total_risk,
    car_base_risk,
    car_total_risk,
    formula_for,
)
from vehicle_risk.core.vehicle import Vehicle, VehicleType

__all__ = [
    "RISK_THRESHOLDS",
    "RiskAssessment",
    "RiskLevel",
    "RiskRegistry",
    "Vehicle",
    "VehicleType",
    "apply_car_modifiers",
    "assess_vehicle",
    "calculate_total_risk",
    "car_base_risk",
    "car_total_risk",
    "categorize",
    "formula_for",
]
