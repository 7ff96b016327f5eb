#!/usr/bin/env python3
"""
Tests for the command line entry point, run against a temporary SQLite file.
"""

import io
import os
import shutil
import tempfile
import unittest
import uuid
from contextlib import redirect_stdout
from unittest.mock import patch

import yaml
from sqlalchemy import create_engine

from main import main
from tests import add_member, add_mission, make_session_factory


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.db_url = f"sqlite:///{os.path.join(self.tmpdir, 'missionmatch.db')}"
        self.config_path = os.path.join(self.tmpdir, "config.yaml")
        with open(self.config_path, "w") as f:
            yaml.safe_dump({"database": {"url": self.db_url}}, f)

        self.env = patch.dict(os.environ)
        self.env.start()
        os.environ.pop("DATABASE_URL", None)

        self.assertEqual(self.run_cli("init-db")[0], 0)

        self.engine = create_engine(self.db_url)
        session = make_session_factory(self.engine)()
        member = add_member(session, fullname="Ada", specialties=["Design"], preferred_committee="Culture")
        mission = add_mission(session, title="Poster design", required_skills=["Design"], category="Culture")
        session.commit()
        self.member_id, self.mission_id = str(member.id), str(mission.id)
        session.close()

    def tearDown(self):
        self.engine.dispose()
        self.env.stop()
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def run_cli(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--config", self.config_path, *args])
        return code, out.getvalue()

    def test_score(self):
        code, output = self.run_cli("score", "--member-id", self.member_id, "--mission-id", self.mission_id)
        self.assertEqual(code, 0)
        # 35 + 10 + 8 + 15 + 0
        self.assertIn("Score 68/100 (Good Match)", output)
        self.assertIn("Tip:", output)

    def test_recommend(self):
        code, output = self.run_cli("-v", "recommend", "--member-id", self.member_id)
        self.assertEqual(code, 0)
        self.assertIn("1 recommendation(s)", output)
        self.assertIn("Poster design", output)
        self.assertIn("Skills Match", output)

    def test_candidates(self):
        code, output = self.run_cli("candidates", "--mission-id", self.mission_id, "--top", "5")
        self.assertEqual(code, 0)
        self.assertIn("1 candidate(s)", output)
        self.assertIn("Ada", output)

    def test_unknown_member(self):
        code, _ = self.run_cli("recommend", "--member-id", str(uuid.uuid4()))
        self.assertEqual(code, 1)

    def test_malformed_id(self):
        code, _ = self.run_cli("score", "--member-id", "abc", "--mission-id", self.mission_id)
        self.assertEqual(code, 2)


if __name__ == '__main__':
    unittest.main()
