from collections.abc import Iterable
from datetime import date

from chadjee.engine.streak import calculate_streak
from chadjee.models.enums import ActivityType, Subject
from chadjee.models.progress import StudyActivity, StudyStreak, SubjectProgress


def record_activity(
    progress: dict[Subject, SubjectProgress], subject: Subject, on: date
) -> dict[Subject, SubjectProgress]:
    """Upsert the subject: overwrite last_studied, frequency += 1. Returns a new mapping."""
    updated = dict(progress)
    previous = updated.get(subject)
    frequency = previous.frequency if previous is not None else 0
    updated[subject] = SubjectProgress(last_studied=on, frequency=frequency + 1)
    return updated


def log_study_session(
    streak: StudyStreak,
    progress: dict[Subject, SubjectProgress],
    subject: Subject,
    today: date,
    on: date | None = None,
    activity_type: ActivityType = ActivityType.POMODORO,
) -> tuple[StudyStreak, dict[Subject, SubjectProgress]]:
    """Log one activity: extend the studied dates, recompute streaks, bump subject progress."""
    session_date = on or today
    activity = StudyActivity(subject=subject, date=session_date, type=activity_type)
    dates = sorted(set(streak.dates_studied) | {session_date})
    counts = calculate_streak(dates, today)

    new_streak = StudyStreak(
        current=counts.current,
        longest=counts.longest,
        last_date=session_date,
        dates_studied=dates,
        activities=[*streak.activities, activity],
    )
    return new_streak, record_activity(progress, subject, session_date)


def rebuild_streak(activities: Iterable[StudyActivity], today: date) -> StudyStreak:
    """Recompute streak state from scratch out of an activity log."""
    log = list(activities)
    if not log:
        return StudyStreak()
    dates = sorted({a.date for a in log})
    counts = calculate_streak(dates, today)
    return StudyStreak(
        current=counts.current,
        longest=counts.longest,
        last_date=log[-1].date,
        dates_studied=dates,
        activities=log,
    )


def rebuild_progress(activities: Iterable[StudyActivity]) -> dict[Subject, SubjectProgress]:
    progress: dict[Subject, SubjectProgress] = {}
    for activity in activities:
        progress = record_activity(progress, activity.subject, activity.date)
    return progress
