from collections.abc import Iterable

from chadjee.kb import MILESTONE_BADGES
from chadjee.models.kb import BadgeDefinition
from chadjee.models.recommendation import MilestoneBadge
from chadjee.models.records import StudySession


def total_study_hours(sessions: Iterable[StudySession]) -> int:
    """Whole hours logged across all sessions."""
    return sum(s.duration for s in sessions) // 60


def milestone_badges(
    sessions: Iterable[StudySession],
    badges: list[BadgeDefinition] = MILESTONE_BADGES,
) -> list[MilestoneBadge]:
    hours = total_study_hours(sessions)
    return [
        MilestoneBadge(
            badge_id=b.badge_id,
            label=b.label,
            threshold_hours=b.threshold_hours,
            earned=hours >= b.threshold_hours,
        )
        for b in badges
    ]


def earned_badges(
    sessions: Iterable[StudySession],
    badges: list[BadgeDefinition] = MILESTONE_BADGES,
) -> list[MilestoneBadge]:
    return [b for b in milestone_badges(sessions, badges) if b.earned]
