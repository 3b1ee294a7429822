from datetime import datetime

import pytest
from pydantic import ValidationError

from chadjee.models.enums import Subject, TimeWindow
from chadjee.models.recommendation import Recommendation, recommendation_id
from chadjee.models.records import StudySession
from tests.conftest import TODAY


class TestSubjectLabels:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Mathematics", Subject.MATHEMATICS),
            ("  chemistry", Subject.CHEMISTRY),
            ("GENERAL STUDY", Subject.GENERAL_STUDY),
            ("", Subject.GENERAL_STUDY),
            (None, Subject.GENERAL_STUDY),
            ("Biology", Subject.OTHER),
            (Subject.PHYSICS, Subject.PHYSICS),
        ],
    )
    def test_from_label(self, label, expected):
        assert Subject.from_label(label) == expected


class TestStudySession:
    def test_defaults_to_active_general_study(self):
        session = StudySession(subject=None, start_time=datetime(2024, 5, 3, 9))
        assert session.subject == Subject.GENERAL_STUDY
        assert session.is_active
        assert session.duration == 0
        assert session.completed is False

    def test_iso_timestamp_parsed(self):
        session = StudySession(subject="Physics", start_time="2024-05-03T09:15:00")
        assert session.start_time == datetime(2024, 5, 3, 9, 15)

    def test_malformed_timestamp_rejected(self):
        with pytest.raises(ValidationError):
            StudySession(subject="Physics", start_time="yesterday morning")

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            StudySession(subject="Physics", start_time=datetime(2024, 5, 3, 9), duration=-5)


class TestRecommendation:
    def test_priority_bounds(self):
        with pytest.raises(ValidationError):
            Recommendation(
                id="x", subject="Physics", recommendation="...", type="streak", priority=6
            )

    def test_id_is_slugged(self):
        assert recommendation_id("gap", "General Study", TODAY) == "gap-general-study-2024-05-03"


def test_time_window_days():
    assert [w.days for w in TimeWindow] == [7, 30, 365]
