"""
Crop suitability scoring.

Each crop gets three factor scores against its profile:
 - temperature: closeness of avg_temp to the middle of the crop's range
 - rainfall: full marks inside the crop's yearly rainfall band, exponential
   decay outside it
 - moisture: closeness of root-zone moisture to the middle of the ideal band

combined = 0.4 * temperature + 0.4 * rainfall + 0.2 * moisture
"""
import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from models import (
    ClimateObservation,
    CropProfile,
    CropRanking,
    CropScoreResult,
    FactorScores,
    ScoringStatus,
)
from .crop_profiles import CROP_PROFILES
from .normalization import clamp, range_coverage_score, range_midpoint_score
from .ranker import RankingPolicy, rank_items

logger = logging.getLogger(__name__)

FACTOR_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "temperature": 0.4,
    "rainfall": 0.4,
    "moisture": 0.2,
})

# Published list = every crop at or above 0.45 plus the six best overall
CROP_RANKING_POLICY = RankingPolicy(threshold=0.45, top_n=6)


class CropScorer:
    """Scores and ranks crops for one ClimateObservation"""

    def __init__(self, policy: RankingPolicy = CROP_RANKING_POLICY):
        self.policy = policy

    @staticmethod
    def factor_scores(observation: ClimateObservation, profile: CropProfile) -> FactorScores:
        return FactorScores(
            temperature=range_midpoint_score(observation.avg_temp, profile.min_temp, profile.max_temp),
            rainfall=range_coverage_score(observation.yearly_rain, profile.min_rain, profile.max_rain),
            moisture=range_midpoint_score(
                observation.soil_moisture, profile.moisture_ideal_min, profile.moisture_ideal_max
            ),
        )

    @staticmethod
    def combine(factors: FactorScores) -> float:
        combined = (
            FACTOR_WEIGHTS["temperature"] * factors.temperature
            + FACTOR_WEIGHTS["rainfall"] * factors.rainfall
            + FACTOR_WEIGHTS["moisture"] * factors.moisture
        )
        return clamp(combined)

    def score(
        self,
        observation: ClimateObservation,
        crop_table: Optional[Mapping[str, CropProfile]] = None,
    ) -> List[CropScoreResult]:
        """
        Score every crop in the table and return the published ranking,
        best first. Errors propagate; use `rank` for the failure-safe variant.
        """
        table = CROP_PROFILES if crop_table is None else crop_table

        scored = []
        for crop_name, profile in table.items():
            factors = self.factor_scores(observation, profile)
            scored.append(((crop_name, profile, factors), self.combine(factors)))

        ranked = rank_items(scored, self.policy)
        logger.debug(
            f"Scored {len(scored)} crops, publishing {len(ranked)} "
            f"({sum(r.above_threshold for r in ranked)} above {self.policy.threshold})"
        )

        results = []
        for entry in ranked:
            crop_name, profile, factors = entry.item
            results.append(CropScoreResult(
                crop_name=crop_name,
                profile=profile,
                factor_scores=factors,
                combined_score=entry.score,
                rank=entry.rank,
                suitable=entry.above_threshold,
            ))
        return results

    def rank(
        self,
        observation: ClimateObservation,
        crop_table: Optional[Mapping[str, CropProfile]] = None,
    ) -> CropRanking:
        """Scoring boundary: a computation failure becomes an empty, failed ranking"""
        try:
            return CropRanking(results=self.score(observation, crop_table))
        except Exception as e:
            logger.exception(f"Crop scoring failed: {e}")
            return CropRanking(results=[], status=ScoringStatus.failed, error=str(e))


def score_crops(
    observation: ClimateObservation,
    crop_table: Optional[Mapping[str, CropProfile]] = None,
) -> List[CropScoreResult]:
    """Functional entry point: observation -> ordered CropScoreResult list"""
    return CropScorer().score(observation, crop_table)
