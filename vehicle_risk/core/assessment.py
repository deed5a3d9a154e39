"""Single-vehicle assessment: score a vehicle and classify the score."""

from dataclasses import dataclass

from vehicle_risk.core.classifier import RiskLevel, categorize
from vehicle_risk.core.risk import calculate_total_risk
from vehicle_risk.core.vehicle import Vehicle


@dataclass(frozen=True)
class RiskAssessment:
    """Outcome of assessing one vehicle.

    Attributes:
        label: ``"<make> <model>"`` of the assessed vehicle.
        score: Total risk score.
        level: Tier derived from ``score``.
    """

    label: str
    score: float
    level: RiskLevel


def assess_vehicle(vehicle: Vehicle) -> RiskAssessment:
    """Score ``vehicle`` and classify the result."""
    score = calculate_total_risk(vehicle)
    return RiskAssessment(label=vehicle.label, score=score, level=categorize(score))
