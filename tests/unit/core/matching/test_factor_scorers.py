#!/usr/bin/env python3
"""
Test suite for the five factor scorers.

Points use the default weights: skills 35, availability 20 (days 14 /
time slot 6), personality 15, domain 15, engagement 15.
"""

import unittest

from core.config_loader import MatchingConfig
from core.matching.factors import (
    score_availability,
    score_domain,
    score_engagement,
    score_personality,
    score_skills,
)
from core.matching.models import MemberProfile, Mission, ScoreFactor


def member(**fields):
    return MemberProfile(id="member-1", **fields)


def mission(**fields):
    return Mission(id="mission-1", title="Test", **fields)


class TestSkillsScorer(unittest.TestCase):

    def setUp(self):
        self.config = MatchingConfig()

    def test_partial_match_by_substring(self):
        """1 of 2 required skills matched through substring containment."""
        result = score_skills(
            member(specialties=["Web Development", "SEO"]),
            mission(required_skills=["Development", "Marketing"]),
            self.config,
        )
        self.assertEqual(result.factor, ScoreFactor.SKILLS)
        self.assertEqual(result.points, 18)  # round(0.5 * 35)
        self.assertEqual(result.max_points, 35)
        self.assertEqual(result.percentage, 51)
        self.assertEqual(result.matched_items, ("Development",))
        self.assertEqual(result.explanation, "You match 1 out of 2 required skill(s).")

    def test_no_required_skills_is_neutral(self):
        result = score_skills(member(specialties=["Design"]), mission(), self.config)
        self.assertEqual(result.points, 18)
        self.assertEqual(result.matched_items, ())

    def test_blank_required_skills_are_ignored(self):
        result = score_skills(member(), mission(required_skills=["", "  "]), self.config)
        self.assertEqual(result.points, 18)

    def test_empty_profile_gets_incomplete_credit(self):
        result = score_skills(member(), mission(required_skills=["Design"]), self.config)
        self.assertEqual(result.points, 11)  # round(0.3 * 35)
        self.assertIn("Add your specialties", result.explanation)

    def test_job_title_is_part_of_skill_pool(self):
        result = score_skills(
            member(job_title="Graphic Designer"),
            mission(required_skills=["Design"]),
            self.config,
        )
        self.assertEqual(result.points, 35)
        self.assertTrue(result.explanation.startswith("Perfect skills match"))

    def test_no_overlap_scores_zero(self):
        result = score_skills(
            member(specialties=["Accounting"]),
            mission(required_skills=["Marketing", "Design"]),
            self.config,
        )
        self.assertEqual(result.points, 0)
        self.assertEqual(result.percentage, 0)
        self.assertIn("2 required skill(s)", result.explanation)


class TestAvailabilityScorer(unittest.TestCase):

    def setUp(self):
        self.config = MatchingConfig()

    def test_partial_days_with_full_day_member(self):
        """Days sub-score round(1/2 * 14) = 7, time slot 6 since full_day fits any slot."""
        result = score_availability(
            member(availability_days=["Monday"], availability_time="full_day"),
            mission(schedule_days=["Monday", "Wednesday"], schedule_time="morning"),
            self.config,
        )
        self.assertEqual(result.points, 13)
        self.assertEqual(result.matched_items, ("Monday",))
        self.assertEqual(result.explanation, "You are available 1 of 2 required day(s): Monday.")

    def test_flexible_mission_is_neutral(self):
        result = score_availability(
            member(availability_days=["Monday"], availability_time="morning"),
            mission(),
            self.config,
        )
        self.assertEqual(result.points, 10)
        self.assertEqual(result.explanation, "This mission has a flexible schedule.")

    def test_missing_member_days(self):
        """No days earns nothing on days; an unset slot gets half the time sub-score."""
        result = score_availability(
            member(),
            mission(schedule_days=["Monday"], schedule_time="morning"),
            self.config,
        )
        self.assertEqual(result.points, 3)
        self.assertIn("Add your availability days", result.explanation)

    def test_full_coverage_and_matching_slot(self):
        result = score_availability(
            member(availability_days=["monday", "Wednesday"], availability_time="morning"),
            mission(schedule_days=["Monday", "Wednesday"], schedule_time="morning"),
            self.config,
        )
        self.assertEqual(result.points, 20)
        self.assertEqual(result.percentage, 100)
        self.assertIn("fully covers", result.explanation)

    def test_slot_mismatch_loses_time_points(self):
        result = score_availability(
            member(availability_days=["Monday"], availability_time="afternoon"),
            mission(schedule_days=["Monday"], schedule_time="morning"),
            self.config,
        )
        self.assertEqual(result.points, 14)

    def test_legacy_matinal_slot_is_morning(self):
        result = score_availability(
            member(availability_days=["Monday"], availability_time="matinal"),
            mission(schedule_days=["Monday"], schedule_time="morning"),
            self.config,
        )
        self.assertEqual(result.points, 20)

    def test_time_only_mission(self):
        result = score_availability(
            member(availability_time="afternoon"),
            mission(schedule_time="afternoon"),
            self.config,
        )
        self.assertEqual(result.points, 20)
        self.assertIn("No fixed days required", result.explanation)

    def test_no_day_overlap(self):
        result = score_availability(
            member(availability_days=["Saturday"]),
            mission(schedule_days=["Monday"]),
            self.config,
        )
        # Days 0, time slot unspecified on both sides: half of 6
        self.assertEqual(result.points, 3)
        self.assertEqual(result.matched_items, ())


class TestPersonalityScorer(unittest.TestCase):

    def setUp(self):
        self.config = MatchingConfig()

    def test_open_to_all(self):
        result = score_personality(member(personality_type="Dominant"), mission(), self.config)
        self.assertEqual(result.points, 8)

    def test_unset_personality(self):
        result = score_personality(member(), mission(personality_fit=["Influence"]), self.config)
        self.assertEqual(result.points, 5)

    def test_fit(self):
        result = score_personality(
            member(personality_type="steadiness"),
            mission(personality_fit=["Influence", "Steadiness"]),
            self.config,
        )
        self.assertEqual(result.points, 15)
        self.assertEqual(result.matched_items, ("Steadiness",))

    def test_mismatch_is_not_eliminating(self):
        result = score_personality(
            member(personality_type="Dominant"),
            mission(personality_fit=["Conscientious"]),
            self.config,
        )
        self.assertEqual(result.points, 2)
        self.assertGreater(result.points, 0)

    def test_mismatch_lists_types_in_declaration_order(self):
        result = score_personality(
            member(personality_type="Dominant"),
            mission(personality_fit={"Conscientious", "Influence", "Steadiness"}),
            self.config,
        )
        self.assertEqual(
            result.explanation,
            "This mission favours Influence / Steadiness / Conscientious; "
            "your Dominant type can still contribute.",
        )


class TestDomainScorer(unittest.TestCase):

    def setUp(self):
        self.config = MatchingConfig()

    def test_no_category_is_neutral(self):
        result = score_domain(member(preferred_committee="Education"), mission(), self.config)
        self.assertEqual(result.points, 8)

    def test_no_preferences(self):
        result = score_domain(member(), mission(category="Education"), self.config)
        self.assertEqual(result.points, 5)

    def test_exact_committee_match(self):
        result = score_domain(
            member(preferred_committee="education "),
            mission(category="Education"),
            self.config,
        )
        self.assertEqual(result.points, 15)
        self.assertEqual(result.matched_items, ("Education",))

    def test_partial_match_through_activity_type(self):
        result = score_domain(
            member(preferred_activity_type="Environment & Climate"),
            mission(category="Environment"),
            self.config,
        )
        self.assertEqual(result.points, 8)

    def test_activity_type_inside_category_is_not_partial(self):
        result = score_domain(
            member(preferred_activity_type="Education"),
            mission(category="Education & Youth"),
            self.config,
        )
        self.assertEqual(result.points, 2)

    def test_committee_inside_category_is_partial(self):
        result = score_domain(
            member(preferred_committee="Education"),
            mission(category="Education & Youth"),
            self.config,
        )
        self.assertEqual(result.points, 8)

    def test_blank_committee_is_not_a_partial_match(self):
        result = score_domain(
            member(preferred_committee="  ", preferred_activity_type="Health"),
            mission(category="Education"),
            self.config,
        )
        self.assertEqual(result.points, 2)
        self.assertEqual(result.explanation, "You prefer Health but this mission focuses on Education.")


class TestEngagementScorer(unittest.TestCase):

    def setUp(self):
        self.config = MatchingConfig()

    def test_sub_scores_are_rounded_separately(self):
        """250/500 * 10 = 5 and 25/50 * 5 = 2.5, rounded up to 3."""
        result = score_engagement(member(engagement_points=250, engagement_index_score=25), self.config)
        self.assertEqual(result.points, 8)
        self.assertTrue(result.explanation.startswith("Good engagement (250 points, engagement index 25.0)"))

    def test_caps(self):
        result = score_engagement(member(engagement_points=5000, engagement_index_score=400), self.config)
        self.assertEqual(result.points, 15)
        self.assertTrue(result.explanation.startswith("Highly active member"))

    def test_inactive_member(self):
        result = score_engagement(member(), self.config)
        self.assertEqual(result.points, 0)
        self.assertIn("Start participating", result.explanation)

    def test_negative_values_clamp_to_zero(self):
        result = score_engagement(member(engagement_points=-50, engagement_index_score=-3), self.config)
        self.assertEqual(result.points, 0)


if __name__ == '__main__':
    unittest.main()
