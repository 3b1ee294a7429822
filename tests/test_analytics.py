from datetime import date, datetime, timedelta

from chadjee.engine.analytics import (
    filter_tests,
    has_analytics_data,
    score_trends,
    study_hours_by_subject,
    weak_topics,
)
from chadjee.models.enums import Subject, TimeWindow
from tests.conftest import NOW, TODAY, make_session, make_test


class TestStudyHours:
    def test_sums_per_subject_within_window(self):
        sessions = [
            make_session(Subject.PHYSICS, start=NOW - timedelta(days=1), duration=90),
            make_session(Subject.PHYSICS, start=NOW - timedelta(days=2), duration=40),
            make_session(Subject.CHEMISTRY, start=NOW - timedelta(days=3), duration=20),
            make_session(Subject.MATHEMATICS, start=NOW - timedelta(days=10), duration=600),
        ]
        hours = study_hours_by_subject(sessions, TimeWindow.WEEK, NOW)
        assert [(h.subject, h.hours) for h in hours] == [
            (Subject.PHYSICS, 2.2),
            (Subject.CHEMISTRY, 0.3),
        ]

    def test_empty(self):
        assert study_hours_by_subject([], TimeWindow.MONTH, NOW) == []


class TestScoreTrends:
    def test_sorted_oldest_first(self):
        records = [
            make_test(Subject.PHYSICS, score=60, on=TODAY),
            make_test(Subject.MATHEMATICS, score=45, on=TODAY - timedelta(days=4)),
        ]
        points = score_trends(records, TimeWindow.WEEK, NOW)
        assert [(p.subject, p.percentage) for p in points] == [
            (Subject.MATHEMATICS, 45),
            (Subject.PHYSICS, 60),
        ]

    def test_window_applies_to_record_date(self):
        records = [make_test(on=TODAY - timedelta(days=31)), make_test(on=TODAY - timedelta(days=29))]
        assert len(filter_tests(records, TimeWindow.MONTH, NOW)) == 1
        assert len(score_trends(records, None, NOW)) == 2


class TestWeakTopics:
    def test_counts_fragments(self, config):
        records = [
            make_test(Subject.PHYSICS, areas="Optics, Rotational motion; Optics"),
            make_test(Subject.MATHEMATICS, areas="Optics.\nLimits"),
        ]
        topics = weak_topics(records, TimeWindow.WEEK, NOW, config)
        assert topics[0].topic == "Optics"
        assert topics[0].count == 3
        assert topics[0].subject == Subject.PHYSICS
        assert {t.topic for t in topics} == {"Optics", "Rotational motion", "Limits"}

    def test_short_fragments_dropped(self, config):
        records = [make_test(areas="pH, SN1, Moles")]
        assert [t.topic for t in weak_topics(records, None, NOW, config)] == ["Moles"]

    def test_top_five_only(self, config):
        areas = ", ".join(f"Topic {i}" for i in range(8))
        assert len(weak_topics([make_test(areas=areas)], None, NOW, config)) == 5


class TestHasAnalyticsData:
    def test_no_data(self):
        assert has_analytics_data([], [], TimeWindow.WEEK, NOW) is False

    def test_old_sessions_only(self):
        sessions = [make_session(start=datetime(2023, 1, 1, 9))]
        assert has_analytics_data(sessions, [], TimeWindow.WEEK, NOW) is False

    def test_any_test_record(self):
        records = [make_test(on=date(2023, 1, 1))]
        assert has_analytics_data([], records, TimeWindow.WEEK, NOW) is True
