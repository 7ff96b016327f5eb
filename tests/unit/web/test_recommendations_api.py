#!/usr/bin/env python3
"""
Tests for member recommendations, score preview and feedback endpoints.
"""

import unittest
import uuid

from tests import add_engagement, add_member, add_mission, make_api_client, make_session_factory, make_test_engine
from web.backend.rate_limit import limiter


class RecommendationsApiTestCase(unittest.TestCase):

    def setUp(self):
        self.engine = make_test_engine()
        self.session_factory = make_session_factory(self.engine)
        self.client = make_api_client(self.session_factory)

        session = self.session_factory()
        member = add_member(
            session,
            specialties=["Teaching"],
            availability_days=["Saturday"],
            availability_time="morning",
            personality_type="Influence",
            preferred_committee="Education",
            points=250,
        )
        add_engagement(session, member.id, 2026, 5, 25.0)
        tutoring = add_mission(
            session,
            title="Weekend tutoring",
            required_skills=["Teaching"],
            personality_fit=["Influence", "Steadiness"],
            schedule_days=["Saturday"],
            schedule_time="morning",
            category="Education",
        )
        accounting = add_mission(
            session,
            title="Annual accounts",
            required_skills=["Accounting"],
            category="Finance",
        )
        session.commit()
        self.member_id = str(member.id)
        self.tutoring_id = str(tutoring.id)
        self.accounting_id = str(accounting.id)
        session.close()

    def tearDown(self):
        self.engine.dispose()

    def _recommendations(self, **params):
        response = self.client.get(f"/api/members/{self.member_id}/recommendations", params=params)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()


class TestMemberRecommendations(RecommendationsApiTestCase):

    def test_recommendations_best_first(self):
        body = self._recommendations()
        self.assertEqual(body["count"], 2)
        first = body["recommendations"][0]
        self.assertEqual(first["mission_id"], self.tutoring_id)
        # 35 + 20 + 15 + 15 + engagement (5 + 3)
        self.assertEqual(first["score"], 93)
        self.assertEqual(first["grade"], "Excellent")
        self.assertEqual(first["status"], "viewed")
        self.assertEqual(first["mission"]["title"], "Weekend tutoring")
        self.assertEqual(
            [b["factor"] for b in first["breakdown"]],
            ["Skills Match", "Availability", "Personality Fit", "Domain Interest", "Engagement Level"]
        )

    def test_improvement_tip_targets_weakest_factor(self):
        body = self._recommendations()
        accounting = body["recommendations"][1]
        self.assertEqual(accounting["mission_id"], self.accounting_id)
        self.assertTrue(accounting["improvement_tip"].startswith("None of your current skills match"))

    def test_unknown_member(self):
        response = self.client.get(f"/api/members/{uuid.uuid4()}/recommendations")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "MemberNotFoundException")

    def test_invalid_member_id(self):
        response = self.client.get("/api/members/42/recommendations")
        self.assertEqual(response.status_code, 400)

    def test_refused_hidden_by_default(self):
        self._recommendations()
        response = self.client.post(
            f"/api/members/{self.member_id}/missions/{self.accounting_id}/refuse",
            json={"feedback": "Not my field"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "refused")

        self.assertEqual(self._recommendations()["count"], 1)
        with_refused = self._recommendations(include_refused="true")
        self.assertEqual(with_refused["count"], 2)
        refused = [r for r in with_refused["recommendations"] if r["status"] == "refused"]
        self.assertEqual(refused[0]["feedback"], "Not my field")


class TestPreviewAndFeedback(RecommendationsApiTestCase):

    def test_preview_is_not_stored(self):
        response = self.client.get(f"/api/members/{self.member_id}/missions/{self.tutoring_id}/score")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 93)

        # Nothing stored yet, so there is nothing to accept
        response = self.client.post(f"/api/members/{self.member_id}/missions/{self.tutoring_id}/accept")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "RecommendationNotFoundException")

    def test_accept(self):
        self._recommendations()
        response = self.client.post(f"/api/members/{self.member_id}/missions/{self.tutoring_id}/accept")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "accepted")

        # Accepted status survives the next recompute
        first = self._recommendations()["recommendations"][0]
        self.assertEqual(first["status"], "accepted")

    def test_refuse_without_body(self):
        self._recommendations()
        response = self.client.post(f"/api/members/{self.member_id}/missions/{self.tutoring_id}/refuse")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["feedback"])

    def test_feedback_by_recommendation_id(self):
        rec_id = self._recommendations()["recommendations"][0]["recommendation_id"]
        response = self.client.post(
            f"/api/recommendations/{rec_id}/feedback",
            json={"status": "refused", "feedback": "Moving abroad"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["recommendation_id"], rec_id)
        self.assertEqual(response.json()["feedback"], "Moving abroad")

    def test_feedback_rejects_other_statuses(self):
        rec_id = self._recommendations()["recommendations"][0]["recommendation_id"]
        response = self.client.post(f"/api/recommendations/{rec_id}/feedback", json={"status": "viewed"})
        self.assertEqual(response.status_code, 422)

    def test_feedback_unknown_recommendation(self):
        response = self.client.post(f"/api/recommendations/{uuid.uuid4()}/feedback", json={"status": "accepted"})
        self.assertEqual(response.status_code, 404)


class TestRateLimit(RecommendationsApiTestCase):

    def setUp(self):
        super().setUp()
        limiter.reset()
        limiter.enabled = True

    def tearDown(self):
        limiter.enabled = False
        limiter.reset()
        super().tearDown()

    def test_recompute_is_rate_limited(self):
        url = f"/api/members/{self.member_id}/recommendations"
        for _ in range(10):
            self.assertEqual(self.client.get(url).status_code, 200)

        response = self.client.get(url)
        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.json()["type"], "RateLimitExceeded")


if __name__ == '__main__':
    unittest.main()
