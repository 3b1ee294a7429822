from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import TypeAdapter

from chadjee.models.progress import StreakCounts
from chadjee.models.records import StudySession

_DATE_LIST = TypeAdapter(list[date])


def parse_study_dates(values: Iterable[date | str]) -> set[date]:
    """Parse YYYY-MM-DD strings (or dates) into a set. Raises pydantic.ValidationError."""
    return set(_DATE_LIST.validate_python(list(values)))


def _count_back(anchor: date, studied: set[date]) -> int:
    count = 0
    day = anchor
    while day in studied:
        count += 1
        day -= timedelta(days=1)
    return count


def calculate_streak(dates: Iterable[date], today: date) -> StreakCounts:
    """Current and longest consecutive-day streaks.

    The current streak is anchored on today, or on yesterday when nothing is
    logged yet today. Longest starts at the current streak, so it is never
    reported below it.
    """
    ordered = sorted(set(dates))
    if not ordered:
        return StreakCounts()

    studied = set(ordered)
    yesterday = today - timedelta(days=1)
    if today in studied:
        current = _count_back(today, studied)
    elif yesterday in studied:
        current = _count_back(yesterday, studied)
    else:
        current = 0

    longest = current
    run = 1
    for prev, curr in zip(ordered, ordered[1:]):
        gap = (curr - prev).days
        if gap == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    return StreakCounts(current=current, longest=longest)


def session_study_dates(
    sessions: Iterable[StudySession], min_daily_minutes: int = 0
) -> set[date]:
    """Days whose completed sessions add up to at least min_daily_minutes."""
    daily: dict[date, int] = defaultdict(int)
    for session in sessions:
        if session.completed:
            daily[session.start_time.date()] += session.duration
    return {day for day, minutes in daily.items() if minutes >= min_daily_minutes}


def would_delete_break_streak(
    sessions: list[StudySession],
    session_id: str,
    today: date,
    min_daily_minutes: int = 0,
) -> bool:
    """True if removing the session lowers the session-derived current streak."""
    if not any(s.id == session_id for s in sessions):
        return False
    remaining = [s for s in sessions if s.id != session_id]
    before = calculate_streak(session_study_dates(sessions, min_daily_minutes), today)
    after = calculate_streak(session_study_dates(remaining, min_daily_minutes), today)
    return after.current < before.current
