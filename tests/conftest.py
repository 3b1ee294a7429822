from datetime import date, datetime, timedelta

import pytest

from chadjee.kb import DEFAULT_CONFIG
from chadjee.models.enums import Subject
from chadjee.models.kb import RecommendationConfig
from chadjee.models.progress import StreakCounts, SubjectProgress
from chadjee.models.records import StudySession, TestRecord
from chadjee.storage.memory import InMemoryStorage


TODAY = date(2024, 5, 3)
NOW = datetime(2024, 5, 3, 18, 30)


# ── Config Fixtures ──────────────────────────────────────────────────


@pytest.fixture
def config() -> RecommendationConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


# ── Progress Fixtures ────────────────────────────────────────────────


@pytest.fixture
def healthy_progress() -> dict[Subject, SubjectProgress]:
    """All main subjects studied within the last two days."""
    return {
        Subject.MATHEMATICS: SubjectProgress(last_studied=TODAY, frequency=6),
        Subject.PHYSICS: SubjectProgress(last_studied=TODAY - timedelta(days=1), frequency=4),
        Subject.CHEMISTRY: SubjectProgress(last_studied=TODAY - timedelta(days=2), frequency=3),
    }


@pytest.fixture
def no_streak() -> StreakCounts:
    return StreakCounts(current=0, longest=0)


# ── Helpers to build records ─────────────────────────────────────────


def make_session(
    subject: Subject | str = Subject.MATHEMATICS,
    start: datetime = NOW,
    duration: int = 30,
    completed: bool = True,
    session_id: str | None = None,
) -> StudySession:
    data = dict(
        subject=subject,
        start_time=start,
        end_time=start + timedelta(minutes=duration) if completed else None,
        duration=duration,
        completed=completed,
    )
    if session_id is not None:
        data["id"] = session_id
    return StudySession(**data)


def make_test(
    subject: Subject | str = Subject.MATHEMATICS,
    score: float = 80,
    max_score: float = 100,
    on: date = TODAY,
    sub_topic: str | None = None,
    areas: str | None = None,
    record_id: str | None = None,
) -> TestRecord:
    data = dict(
        subject=subject,
        score=score,
        max_score=max_score,
        date=on,
        sub_topic=sub_topic,
        areas_of_improvement=areas,
    )
    if record_id is not None:
        data["id"] = record_id
    return TestRecord(**data)
