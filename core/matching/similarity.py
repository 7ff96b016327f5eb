#!/usr/bin/env python3
"""
String Matching - Fuzzy predicates used by the factor scorers.

Kept separate from the scorers so the matching rule can be tightened or
loosened without touching any scoring formula.
"""

from typing import Iterable, List, Sequence

from core.utils import normalize_text


def skills_overlap(member_skill: str, mission_skill: str) -> bool:
    """
    True if two skill strings are similar enough to count as a match.

    After trimming and case-folding, the strings match when they are equal or
    when one contains the other, so "Web Development" matches "Development".
    Blank strings never match anything.
    """
    m = normalize_text(member_skill or "")
    t = normalize_text(mission_skill or "")
    if not m or not t:
        return False
    return m == t or t in m or m in t


def matched_skills(required: Sequence[str], pool: Iterable[str]) -> List[str]:
    """Required skills (in mission order) matched by at least one pool entry."""
    candidates = [p for p in pool if p]
    return [req for req in required if any(skills_overlap(p, req) for p in candidates)]


def overlapping_days(mission_days: Sequence[str], member_days: Iterable[str]) -> List[str]:
    """Mission days the member is available on, preserving the mission's order."""
    available = {normalize_text(d) for d in member_days if d}
    return [d for d in mission_days if normalize_text(d) in available]


def contains_either_way(a: str, b: str) -> bool:
    """Substring containment in either direction; blank strings never match."""
    a = normalize_text(a or "")
    b = normalize_text(b or "")
    if not a or not b:
        return False
    return a in b or b in a
