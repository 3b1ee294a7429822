import re
from collections.abc import Iterable
from datetime import datetime, timedelta

from chadjee.engine.sessions import filter_sessions
from chadjee.kb import DEFAULT_CONFIG
from chadjee.models.enums import Subject, TimeWindow
from chadjee.models.kb import RecommendationConfig
from chadjee.models.recommendation import ScorePoint, SubjectHours, WeakTopic
from chadjee.models.records import StudySession, TestRecord

_TOPIC_SEPARATORS = re.compile(r"[,;.:\n]")


def filter_tests(
    records: Iterable[TestRecord], window: TimeWindow | None, now: datetime
) -> list[TestRecord]:
    if window is None:
        return list(records)
    cutoff = (now - timedelta(days=window.days)).date()
    return [r for r in records if r.date >= cutoff]


def study_hours_by_subject(
    sessions: Iterable[StudySession], window: TimeWindow | None, now: datetime
) -> list[SubjectHours]:
    """Logged minutes per subject within the window, as hours to one decimal."""
    minutes: dict[Subject, int] = {}
    for session in filter_sessions(sessions, window, now):
        minutes[session.subject] = minutes.get(session.subject, 0) + session.duration
    return [SubjectHours(subject=s, hours=round(m / 60, 1)) for s, m in minutes.items()]


def score_trends(
    records: Iterable[TestRecord], window: TimeWindow | None, now: datetime
) -> list[ScorePoint]:
    """Score percentage per test, oldest first."""
    ordered = sorted(filter_tests(records, window, now), key=lambda r: r.date)
    return [ScorePoint(subject=r.subject, date=r.date, percentage=r.percentage) for r in ordered]


def weak_topics(
    records: Iterable[TestRecord],
    window: TimeWindow | None,
    now: datetime,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> list[WeakTopic]:
    """Most frequently mentioned improvement areas.

    Each topic is attributed to the subject of the first record mentioning it.
    """
    counts: dict[str, int] = {}
    subjects: dict[str, Subject] = {}
    for record in filter_tests(records, window, now):
        if not record.areas_of_improvement:
            continue
        for fragment in _TOPIC_SEPARATORS.split(record.areas_of_improvement):
            topic = fragment.strip()
            if len(topic) < config.weak_topic_min_length:
                continue
            counts[topic] = counts.get(topic, 0) + 1
            subjects.setdefault(topic, record.subject)

    ranked = sorted(counts, key=lambda t: counts[t], reverse=True)
    return [
        WeakTopic(topic=t, count=counts[t], subject=subjects[t])
        for t in ranked[: config.weak_topic_limit]
    ]


def has_analytics_data(
    sessions: Iterable[StudySession],
    records: Iterable[TestRecord],
    window: TimeWindow | None,
    now: datetime,
) -> bool:
    return bool(study_hours_by_subject(sessions, window, now)) or bool(list(records))
