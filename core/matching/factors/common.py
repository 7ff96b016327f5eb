from typing import Iterable, Optional

from core.matching.models import ScoreBreakdown, ScoreFactor
from core.utils import clamp, percentage, round_half_up


def share_of(max_points: int, ratio: float) -> int:
    """Points worth `ratio` of a factor's max, rounded half up."""
    return round_half_up(max_points * ratio)


def build_breakdown(
    factor: ScoreFactor,
    points: float,
    max_points: int,
    explanation: str,
    matched: Optional[Iterable[str]] = None,
) -> ScoreBreakdown:
    """Round and clamp points into [0, max_points] and derive the percentage."""
    bounded = int(clamp(round_half_up(points), 0, max_points))
    return ScoreBreakdown(
        factor=factor,
        points=bounded,
        max_points=max_points,
        percentage=percentage(bounded, max_points),
        explanation=explanation,
        matched_items=tuple(matched or ()),
    )
