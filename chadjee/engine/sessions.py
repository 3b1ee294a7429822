from collections.abc import Iterable
from datetime import date, datetime, timedelta

from chadjee.kb import DEFAULT_CONFIG, DEFAULT_FOCUS_TIP, FOCUS_TIPS
from chadjee.models.enums import RecommendationType, Subject, TimeOfDay, TimeWindow
from chadjee.models.kb import RecommendationConfig
from chadjee.models.recommendation import (
    Recommendation,
    SubjectSessionStats,
    recommendation_id,
)
from chadjee.models.records import StudySession, round_half_up


def filter_sessions(
    sessions: Iterable[StudySession], window: TimeWindow | None, now: datetime
) -> list[StudySession]:
    """Sessions started within the window ending at now. window=None keeps all."""
    if window is None:
        return list(sessions)
    cutoff = now - timedelta(days=window.days)
    return [s for s in sessions if s.start_time >= cutoff]


def aggregate_sessions(
    sessions: Iterable[StudySession], config: RecommendationConfig = DEFAULT_CONFIG
) -> dict[Subject, SubjectSessionStats]:
    """Per-subject count, total, average and best time of completed sessions.

    Subjects keep first-seen order. The best time starts at the first
    completed session of at least productive_min_minutes; afterwards every
    later completed session with a positive duration takes over.
    """
    counts: dict[Subject, int] = {}
    totals: dict[Subject, int] = {}
    best: dict[Subject, datetime | None] = {}

    for session in sessions:
        subject = session.subject
        counts.setdefault(subject, 0)
        totals.setdefault(subject, 0)
        best.setdefault(subject, None)
        if not session.completed:
            continue

        if best[subject] is None:
            if session.duration >= config.productive_min_minutes:
                best[subject] = session.start_time
        elif session.duration > 0:
            best[subject] = session.start_time

        counts[subject] += 1
        totals[subject] += session.duration

    return {
        subject: SubjectSessionStats(
            count=counts[subject],
            total_duration=totals[subject],
            average_duration=round_half_up(totals[subject] / counts[subject]) if counts[subject] else 0,
            best_time=best[subject],
        )
        for subject in counts
    }


def most_productive_subject(stats: dict[Subject, SubjectSessionStats]) -> Subject | None:
    """Subject with the highest average duration; the first one wins ties."""
    winner: Subject | None = None
    highest = 0
    for subject, entry in stats.items():
        if entry.count > 0 and entry.average_duration > highest:
            winner = subject
            highest = entry.average_duration
    return winner


def focus_issue_subjects(
    stats: dict[Subject, SubjectSessionStats], config: RecommendationConfig = DEFAULT_CONFIG
) -> list[Subject]:
    return [
        subject
        for subject, entry in stats.items()
        if entry.count >= config.focus_min_sessions
        and entry.average_duration < config.focus_max_average_minutes
    ]


def session_recommendations(
    stats: dict[Subject, SubjectSessionStats],
    taken: set[str],
    today: date,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> list[Recommendation]:
    """Study-balance suggestions: best time block (priority 3) and first focus issue (priority 4).

    Subjects already in ``taken`` are skipped.
    """
    taken = set(taken)
    recommendations: list[Recommendation] = []

    productive = most_productive_subject(stats)
    if productive is not None and productive.value not in taken:
        best_time = stats[productive].best_time
        if best_time is not None:
            time_of_day = TimeOfDay.from_hour(best_time.hour)
            recommendations.append(
                Recommendation(
                    id=recommendation_id("productivity", productive.value, today),
                    subject=productive.value,
                    recommendation=(
                        f"You're most productive studying {productive.value} in the "
                        f"{time_of_day.value}. Try scheduling more focused study blocks "
                        "during this time for better results."
                    ),
                    type=RecommendationType.STUDY_BALANCE,
                    priority=3,
                )
            )
            taken.add(productive.value)

    issues = focus_issue_subjects(stats, config)
    if issues and issues[0].value not in taken:
        subject = issues[0]
        template = FOCUS_TIPS.get(subject, DEFAULT_FOCUS_TIP)
        recommendations.append(
            Recommendation(
                id=recommendation_id("focus", subject.value, today),
                subject=subject.value,
                recommendation=template.format(subject=subject.value),
                type=RecommendationType.STUDY_BALANCE,
                priority=4,
            )
        )

    return recommendations
