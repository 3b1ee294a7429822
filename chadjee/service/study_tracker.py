"""Per-user host for the engine: owns state, persistence and recomputation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from chadjee.engine.analytics import (
    has_analytics_data,
    score_trends,
    study_hours_by_subject,
    weak_topics,
)
from chadjee.engine.balance import progress_tips
from chadjee.engine.milestones import milestone_badges
from chadjee.engine.ranker import generate_recommendations
from chadjee.engine.streak import would_delete_break_streak
from chadjee.engine.tracker import log_study_session, rebuild_progress, rebuild_streak
from chadjee.kb import DEFAULT_CONFIG
from chadjee.models.enums import ActivityType, Subject, TimeWindow
from chadjee.models.kb import RecommendationConfig
from chadjee.models.progress import StudyActivity, StudyStreak, SubjectProgress
from chadjee.models.recommendation import (
    AnalyticsReport,
    MilestoneBadge,
    Recommendation,
    StudyTip,
)
from chadjee.models.records import StudySession, TestRecord
from chadjee.service.exceptions import (
    SessionAlreadyEndedError,
    SessionNotFoundError,
    TestRecordNotFoundError,
)
from chadjee.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def _drop_activity(
    activities: list[StudyActivity], subject: Subject, on: date, activity_type: ActivityType
) -> list[StudyActivity]:
    """Remove the most recent matching activity, if any."""
    for index in range(len(activities) - 1, -1, -1):
        a = activities[index]
        if a.subject == subject and a.date == on and a.type == activity_type:
            return activities[:index] + activities[index + 1 :]
    return list(activities)


class StudyTracker:
    """Study state for one user.

    Every mutation is written through to storage and followed by an eager
    recomputation of streak, subject progress and recommendations, so reads
    never see stale derived state.
    """

    def __init__(
        self,
        storage: StorageBackend,
        user_id: str,
        config: RecommendationConfig = DEFAULT_CONFIG,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._storage = storage
        self.user_id = user_id
        self.config = config
        self._clock = clock
        self.sessions: list[StudySession] = []
        self.tests: list[TestRecord] = []
        self.streak = StudyStreak()
        self.progress: dict[Subject, SubjectProgress] = {}
        self._recommendations: list[Recommendation] = []

    @property
    def recommendations(self) -> list[Recommendation]:
        return list(self._recommendations)

    @property
    def active_session(self) -> StudySession | None:
        active = [s for s in self.sessions if s.is_active]
        return active[-1] if active else None

    def load(self) -> None:
        """Re-initialise all state from storage."""
        self.sessions = self._storage.list_sessions(self.user_id)
        self.tests = self._storage.list_test_records(self.user_id)
        stored = self._storage.get_streak(self.user_id) or StudyStreak()
        self._rebuild(stored.activities)
        logger.info(
            "Loaded user %s: %d sessions, %d tests, %d activities",
            self.user_id,
            len(self.sessions),
            len(self.tests),
            len(stored.activities),
        )
        self.refresh()

    def refresh(self) -> None:
        self._recommendations = generate_recommendations(
            self.progress, self.streak, self.tests, self.sessions, self._clock(), self.config
        )

    # --- activity log ---

    def log_activity(
        self,
        subject: Subject | str | None,
        on: date | None = None,
        activity_type: ActivityType = ActivityType.POMODORO,
    ) -> StudyStreak:
        today = self._clock().date()
        self.streak, self.progress = log_study_session(
            self.streak,
            self.progress,
            Subject.from_label(subject),
            today,
            on=on,
            activity_type=activity_type,
        )
        self._storage.save_streak(self.user_id, self.streak)
        logger.info(
            "Logged %s activity for %s: streak %d (longest %d)",
            activity_type.value,
            self.user_id,
            self.streak.current,
            self.streak.longest,
        )
        self.refresh()
        return self.streak

    def _rebuild(self, activities: list[StudyActivity]) -> None:
        self.streak = rebuild_streak(activities, self._clock().date())
        self.progress = rebuild_progress(activities)

    def _forget_activity(self, subject: Subject, on: date, activity_type: ActivityType) -> None:
        activities = _drop_activity(self.streak.activities, subject, on, activity_type)
        self._rebuild(activities)
        self._storage.save_streak(self.user_id, self.streak)

    # --- study sessions ---

    def _find_session(self, session_id: str) -> StudySession:
        for session in self.sessions:
            if session.id == session_id:
                return session
        raise SessionNotFoundError(session_id)

    def start_session(self, subject: Subject | str | None, topic: str | None = None) -> StudySession:
        session = StudySession(subject=subject, topic=topic, start_time=self._clock())
        self._storage.save_session(self.user_id, session)
        self.sessions.append(session)
        logger.info("Started %s session %s for %s", session.subject.value, session.id, self.user_id)
        self.refresh()
        return session

    def end_session(self, session_id: str, duration: int | None = None) -> StudySession:
        """Close an active session and log it. Duration defaults to elapsed whole minutes."""
        session = self._find_session(session_id)
        if not session.is_active:
            raise SessionAlreadyEndedError(session_id)

        now = self._clock()
        if duration is None:
            duration = max(0, int((now - session.start_time).total_seconds() // 60))
        ended = StudySession.model_validate(
            {**session.model_dump(), "end_time": now, "duration": duration, "completed": True}
        )
        self._storage.save_session(self.user_id, ended)
        self.sessions = [ended if s.id == session_id else s for s in self.sessions]
        self.log_activity(ended.subject, on=now.date())
        return ended

    def delete_session(self, session_id: str) -> bool:
        """Delete a session and rebuild streak state. Returns True if the deletion broke the streak."""
        session = self._find_session(session_id)
        today = self._clock().date()
        broke_streak = would_delete_break_streak(
            self.sessions, session_id, today, self.config.streak_session_min_minutes
        )

        self._storage.delete_session(self.user_id, session_id)
        self.sessions = [s for s in self.sessions if s.id != session_id]
        if session.completed and session.end_time is not None:
            self._forget_activity(session.subject, session.end_time.date(), ActivityType.POMODORO)

        if broke_streak:
            logger.warning("Deleting session %s broke the streak for %s", session_id, self.user_id)
        else:
            logger.info("Deleted session %s for %s", session_id, self.user_id)
        self.refresh()
        return broke_streak

    # --- test records ---

    def add_test_record(self, record: TestRecord) -> TestRecord:
        self._storage.save_test_record(self.user_id, record)
        self.tests.append(record)
        self.log_activity(record.subject, on=record.date, activity_type=ActivityType.TEST)
        return record

    def delete_test_record(self, record_id: str) -> None:
        record = next((r for r in self.tests if r.id == record_id), None)
        if record is None:
            raise TestRecordNotFoundError(record_id)
        self._storage.delete_test_record(self.user_id, record_id)
        self.tests = [r for r in self.tests if r.id != record_id]
        self._forget_activity(record.subject, record.date, ActivityType.TEST)
        logger.info("Deleted test record %s for %s", record_id, self.user_id)
        self.refresh()

    # --- read-only views ---

    def analytics(self, window: TimeWindow = TimeWindow.WEEK) -> AnalyticsReport:
        now = self._clock()
        return AnalyticsReport(
            hours=study_hours_by_subject(self.sessions, window, now),
            score_trends=score_trends(self.tests, window, now),
            weak_topics=weak_topics(self.tests, window, now, self.config),
            has_data=has_analytics_data(self.sessions, self.tests, window, now),
        )

    def tips(self) -> list[StudyTip]:
        return progress_tips(self.progress, self.streak, self._clock().date(), self.config)

    def badges(self) -> list[MilestoneBadge]:
        return milestone_badges(self.sessions)
