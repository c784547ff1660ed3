from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from nutriscreen.config import DEFAULT_CONFIG_PATH, load_config
from nutriscreen.models.screening.classifier import Category, InvalidMeasurement
from nutriscreen.schemas.survey import SurveySubmission
from nutriscreen.services.session_gate import DemoAccessCode, SessionGate
from nutriscreen.services.survey_service import SurveySession


def submission(**overrides) -> SurveySubmission:
    data = dict(
        ward=1,
        child_id=" c-01 ",
        age_months=30,
        weight_kg=12.5,
        height_cm=88,
        muac_cm=14.0,
        illness="no",
        immunized="yes",
        meals_per_day=4,
        diet_groups=5,
    )
    data.update(overrides)
    return SurveySubmission(**data)


class TestSurveySubmission(unittest.TestCase):
    def test_yes_no_fields(self) -> None:
        sub = submission(illness="Yes", immunized="no")
        self.assertTrue(sub.illness)
        self.assertFalse(sub.immunized)
        self.assertEqual(sub.child_id, "c-01")
        m = sub.to_measurement()
        self.assertEqual((m.muac, m.weight, m.height), (14.0, 12.5, 88.0))

    def test_rejects_bad_form_values(self) -> None:
        with self.assertRaises(ValidationError):
            submission(ward=-1)
        with self.assertRaises(ValidationError):
            submission(illness="maybe")
        with self.assertRaises(ValidationError):
            submission(muac_cm="abc")
        with self.assertRaises(ValidationError):
            submission(meals_per_day=2.5)


class TestSurveySession(unittest.TestCase):
    def test_submit_classifies_and_records(self) -> None:
        session = SurveySession()
        r1 = session.submit(submission())
        r2 = session.submit(
            submission(ward=1, child_id="c-02", muac_cm=12.0, meals_per_day=3, diet_groups=3, illness="yes")
        )
        r3 = session.submit(
            submission(ward=2, child_id="c-03", muac_cm=11.0, meals_per_day=2, diet_groups=2, immunized="no")
        )

        self.assertEqual(r1.category, Category.NOURISHED)
        self.assertEqual(r2.breakdown.total, 5)
        self.assertEqual(r2.category, Category.AT_RISK)
        self.assertEqual(r3.category, Category.SEVERELY_MALNOURISHED)
        self.assertEqual(r3.status.style, "bad")
        self.assertEqual(r3.recommendations.profile.follow_up_days, 7)

        self.assertEqual(session.observation_count, 3)
        self.assertEqual(session.hotspot_rows(), [("2", "1", "100.0%"), ("1", "2", "50.0%")])
        payload = session.chart_payload()
        self.assertEqual(payload.ward_labels, ("1", "2"))
        self.assertEqual(payload.values, ((1, 0), (1, 1)))

    def test_permissive_mode_scores_nan_as_absent(self) -> None:
        session = SurveySession(strict_inputs=False)
        result = session.submit(submission(muac_cm=np.nan))
        self.assertEqual(result.breakdown.muac_points, 0)
        self.assertEqual(session.observation_count, 1)

    def test_strict_mode_rejects_nan_without_recording(self) -> None:
        session = SurveySession(strict_inputs=True)
        with self.assertRaises(InvalidMeasurement) as ctx:
            session.submit(submission(muac_cm=np.nan))
        self.assertEqual(ctx.exception.bad_fields, ["muac"])
        self.assertEqual(session.observation_count, 0)

    def test_submit_uses_injected_classifier(self) -> None:
        seen = []

        def always_severe(m, rules):
            seen.append((m.muac, rules))
            return Category.SEVERELY_MALNOURISHED

        session = SurveySession(classifier=always_severe)
        result = session.submit(submission())

        self.assertEqual(seen, [(14.0, session.rules)])
        self.assertEqual(result.category, Category.SEVERELY_MALNOURISHED)
        self.assertEqual(result.breakdown.total, 0)
        self.assertEqual(result.status.style, "bad")
        self.assertEqual(result.recommendations.profile.category, Category.SEVERELY_MALNOURISHED.value)
        self.assertEqual(session.hotspot_rows(), [("1", "1", "100.0%")])

    def test_from_config(self) -> None:
        cfg = {
            "screening": {"strict_inputs": True, "thresholds": {"muac_mild": 15.0}},
            "recommendations": {"foods_per_category": 2},
        }
        session = SurveySession.from_config(cfg)
        self.assertTrue(session.strict_inputs)
        self.assertEqual(session.rules.muac_mild, 15.0)
        result = session.submit(submission(muac_cm=14.0, meals_per_day=3))
        self.assertEqual(result.breakdown.total, 2)
        self.assertEqual(result.category, Category.BORDERLINE)
        self.assertEqual(len(result.recommendations.foods), 4)


class TestSessionGate(unittest.TestCase):
    def test_start_and_refuse(self) -> None:
        gate = SessionGate.from_config({"session": {"access_code": "open-sesame", "hint": "nope"}})
        self.assertIsNone(gate.start("wrong"))
        self.assertEqual(gate.hint, "nope")
        first = gate.start(" open-sesame ")
        second = gate.start("open-sesame")
        self.assertIsInstance(first, SurveySession)
        first.submit(submission())
        self.assertEqual(second.observation_count, 0)

    def test_missing_code(self) -> None:
        with self.assertRaises(ValueError):
            SessionGate.from_config({"session": {}})

    def test_demo_access_code(self) -> None:
        self.assertTrue(DemoAccessCode("asha123").verify("asha123"))
        self.assertFalse(DemoAccessCode("asha123").verify(""))
        self.assertFalse(DemoAccessCode("asha123").verify(None))


class TestConfig(unittest.TestCase):
    def test_repo_config_loads(self) -> None:
        cfg = load_config(DEFAULT_CONFIG_PATH)
        self.assertEqual(cfg["session"]["access_code"], "asha123")
        self.assertFalse(cfg["screening"]["strict_inputs"])
        session = SurveySession.from_config(cfg)
        self.assertEqual(session.rules.muac_severe, 11.5)

    def test_env_override_and_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "alt.yaml"
            path.write_text("session:\n  access_code: abc\n", encoding="utf-8")
            old = os.environ.get("NUTRISCREEN_CONFIG")
            os.environ["NUTRISCREEN_CONFIG"] = str(path)
            try:
                self.assertEqual(load_config()["session"]["access_code"], "abc")
            finally:
                if old is None:
                    os.environ.pop("NUTRISCREEN_CONFIG", None)
                else:
                    os.environ["NUTRISCREEN_CONFIG"] = old
            with self.assertRaises(FileNotFoundError):
                load_config(Path(tmp) / "missing.yaml")
