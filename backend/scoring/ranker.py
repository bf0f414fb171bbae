"""
Threshold-or-top-N ranking shared by the scorers.
"""
from dataclasses import dataclass
from typing import Generic, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RankingPolicy:
    threshold: float
    top_n: int

    def __post_init__(self):
        if self.top_n < 0:
            raise ValueError("top_n must be >= 0")


@dataclass(frozen=True)
class RankedItem(Generic[T]):
    item: T
    score: float
    rank: int                # 1-based position among ALL scored items
    above_threshold: bool


def rank_items(pairs: Iterable[Tuple[T, float]], policy: RankingPolicy) -> List[RankedItem[T]]:
    """
    Sort (item, score) pairs by score descending and keep the union of
    items scoring >= policy.threshold and the policy.top_n best items.

    The sort is stable, so equal scores keep their input order. Sub-threshold
    items are included whenever fewer than top_n items clear the threshold.
    """
    ordered = sorted(pairs, key=lambda pair: pair[1], reverse=True)

    kept = []
    for idx, (item, score) in enumerate(ordered):
        above = score >= policy.threshold
        if above or idx < policy.top_n:
            kept.append(RankedItem(item=item, score=score, rank=idx + 1, above_threshold=above))
    return kept
