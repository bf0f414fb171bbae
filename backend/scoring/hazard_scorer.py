"""
Hazard risk scoring: one independent percent per hazard.

A hazard whose required inputs are missing reports None ("insufficient
data"), which is distinct from a genuine 0%. Missing inputs for one hazard
never affect another.
"""
import logging
from typing import Mapping, Optional

from models import (
    HazardAssessment,
    HazardEnum,
    HazardObservation,
    HazardScoreResult,
    ScoringStatus,
    SeverityEnum,
)
from .hazard_thresholds import HAZARDS, HazardDefinition
from .hazards import get_hazard_function
from .normalization import to_percent

logger = logging.getLogger(__name__)

HIGH_SEVERITY = 75
MODERATE_SEVERITY = 50


def severity_for(percent: Optional[int]) -> SeverityEnum:
    if percent is None:
        return SeverityEnum.unknown
    if percent >= HIGH_SEVERITY:
        return SeverityEnum.high
    if percent >= MODERATE_SEVERITY:
        return SeverityEnum.moderate
    return SeverityEnum.low


class HazardScorer:
    """Computes percent scores for every hazard in the reference table"""

    def score_hazard(self, observation: HazardObservation, hazard: HazardDefinition) -> HazardScoreResult:
        inputs = {name: getattr(observation, name) for name in hazard.input_fields()}

        missing = [name for name in hazard.required_fields if inputs[name] is None]
        if missing:
            logger.info(f"{hazard.display_name}: insufficient data, missing {missing}")
            return HazardScoreResult(hazard=hazard.key, percent=None, inputs=inputs)

        raw = get_hazard_function(hazard.key)(observation, hazard)
        percent = to_percent(raw)
        return HazardScoreResult(
            hazard=hazard.key,
            percent=percent,
            severity=severity_for(percent),
            inputs=inputs,
        )

    def assess(
        self,
        observation: HazardObservation,
        hazard_table: Optional[Mapping[HazardEnum, HazardDefinition]] = None,
    ) -> HazardAssessment:
        """
        Score all hazards. If anything goes wrong mid-computation every hazard
        is reset to 0 and the assessment is marked failed, so callers can tell
        a real all-clear from a broken computation.
        """
        table = HAZARDS if hazard_table is None else hazard_table
        try:
            results = [self.score_hazard(observation, hazard) for hazard in table.values()]
        except Exception as e:
            logger.exception(f"Hazard scoring failed: {e}")
            return HazardAssessment(
                results=[
                    HazardScoreResult(hazard=h, percent=0, severity=SeverityEnum.low)
                    for h in table
                ],
                status=ScoringStatus.failed,
                error=str(e),
            )

        logger.info(
            "Hazard scores: "
            + ", ".join(f"{r.hazard.value}={r.percent}" for r in results)
        )
        return HazardAssessment(results=results)


def score_hazards(
    observation: HazardObservation,
    hazard_table: Optional[Mapping[HazardEnum, HazardDefinition]] = None,
) -> HazardAssessment:
    """Functional entry point: observation -> HazardAssessment (see `.scores`)"""
    return HazardScorer().assess(observation, hazard_table)
