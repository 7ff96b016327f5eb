"""
Factor Scorers - one module per compatibility factor.

Each scorer compares one member attribute against one mission attribute and
returns a ScoreBreakdown bounded by the factor's configured weight.
"""

from core.matching.factors.skills import score_skills
from core.matching.factors.availability import score_availability
from core.matching.factors.personality import score_personality
from core.matching.factors.domain import score_domain
from core.matching.factors.engagement import score_engagement

__all__ = [
    'score_skills',
    'score_availability',
    'score_personality',
    'score_domain',
    'score_engagement',
]
