"""Recommendation ranker: combines test, gap, session and streak signals into one list."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

from chadjee.engine.scores import evaluate_latest_test, subject_tests
from chadjee.engine.sessions import aggregate_sessions, session_recommendations
from chadjee.kb import DEFAULT_CONFIG, STREAK_SUBJECT
from chadjee.models.enums import RecommendationType, Subject
from chadjee.models.kb import RecommendationConfig
from chadjee.models.progress import StreakCounts, StudyStreak, SubjectProgress
from chadjee.models.recommendation import Recommendation, recommendation_id
from chadjee.models.records import StudySession, TestRecord

logger = logging.getLogger(__name__)


def _has_any_data(
    progress: dict[Subject, SubjectProgress],
    streak: StreakCounts | StudyStreak,
    tests: Sequence[TestRecord],
    sessions: Sequence[StudySession],
) -> bool:
    return bool(progress or tests or sessions or streak.current or streak.longest)


def subject_recommendation(
    subject: Subject,
    progress: dict[Subject, SubjectProgress],
    tests: Sequence[TestRecord],
    today: date,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> Recommendation | None:
    """Decision tree for one main subject: low test score, then time gap, then no data."""
    low_score = evaluate_latest_test(tests, subject, today, config)
    if low_score is not None:
        return low_score

    entry = progress.get(subject)
    if entry is not None:
        days_since = (today - entry.last_studied).days
        if days_since > config.time_gap_days:
            return Recommendation(
                id=recommendation_id("gap", subject.value, today),
                subject=subject.value,
                recommendation=(
                    f"You haven't studied {subject.value} in {days_since} days. "
                    "Consider revising key topics."
                ),
                type=RecommendationType.TIME_GAP,
                priority=max(1, min(days_since // 2, config.time_gap_priority_cap)),
            )
        return None

    if not subject_tests(tests, subject):
        return Recommendation(
            id=recommendation_id("no-data", subject.value, today),
            subject=subject.value,
            recommendation=(
                f"No data available for {subject.value}. Add a study session or test "
                "result to receive recommendations."
            ),
            type=RecommendationType.LOW_FREQUENCY,
            priority=1,
        )
    return None


def streak_recommendation(
    streak: StreakCounts | StudyStreak, today: date
) -> Recommendation | None:
    if streak.current > 0:
        return Recommendation(
            id=recommendation_id("streak-current", STREAK_SUBJECT, today),
            subject=STREAK_SUBJECT,
            recommendation=(
                f"Keep up your {streak.current}-day study streak! You're building great "
                "study habits for JEE success."
            ),
            type=RecommendationType.STREAK,
            priority=2,
        )
    if streak.longest > 0:
        return Recommendation(
            id=recommendation_id("streak-longest", STREAK_SUBJECT, today),
            subject=STREAK_SUBJECT,
            recommendation=(
                f"You previously reached a {streak.longest}-day study streak. Can you beat "
                "that record? Consistent study is key to JEE success."
            ),
            type=RecommendationType.STREAK,
            priority=1,
        )
    return None


def generate_recommendations(
    progress: dict[Subject, SubjectProgress],
    streak: StreakCounts | StudyStreak,
    tests: Sequence[TestRecord],
    sessions: Sequence[StudySession],
    now: datetime,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> list[Recommendation]:
    """Build the ranked recommendation list for one user.

    Pure function of its arguments: ``now`` is the only notion of time, ids
    are derived from it, and the inputs are never mutated. The result holds
    at most one entry per subject (plus the streak entry), is sorted by
    descending priority with ties in emission order, and is capped at
    ``config.max_recommendations``. A user with no data at all gets ``[]``.
    """
    if not _has_any_data(progress, streak, tests, sessions):
        return []

    today = now.date()
    candidates: list[Recommendation] = []

    for subject in config.main_subjects:
        rec = subject_recommendation(subject, progress, tests, today, config)
        if rec is not None:
            candidates.append(rec)

    if sessions:
        stats = aggregate_sessions(sessions, config)
        taken = {r.subject for r in candidates}
        candidates.extend(session_recommendations(stats, taken, today, config))

    streak_rec = streak_recommendation(streak, today)
    if streak_rec is not None:
        candidates.append(streak_rec)

    ranked = sorted(candidates, key=lambda r: r.priority, reverse=True)
    logger.debug(
        "Ranked %d candidate recommendations: %s",
        len(ranked),
        [(r.subject, r.type.value, r.priority) for r in ranked],
    )
    return ranked[: config.max_recommendations]
