from datetime import date

from chadjee.kb import DEFAULT_CONFIG, DEFAULT_PROGRESS_TIPS, PROGRESS_TIPS, STREAK_SUBJECT
from chadjee.models.enums import Subject
from chadjee.models.kb import RecommendationConfig
from chadjee.models.progress import StreakCounts, StudyStreak, SubjectProgress
from chadjee.models.recommendation import StudyTip


def _tip(kind: str, subject: Subject, **values) -> StudyTip:
    template = PROGRESS_TIPS[kind].get(subject, DEFAULT_PROGRESS_TIPS[kind])
    return StudyTip(
        subject=subject.value,
        recommendation=template.format(subject=subject.value, **values),
    )


def progress_tips(
    progress: dict[Subject, SubjectProgress],
    streak: StreakCounts | StudyStreak,
    today: date,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> list[StudyTip]:
    """Tips from subject progress alone: stalest, least frequent, imbalanced, streak.

    Nothing is suggested until at least one subject has progress.
    """
    if not progress:
        return []

    tips: list[StudyTip] = []
    entries = list(progress.items())

    stalest, stale_entry = min(entries, key=lambda item: item[1].last_studied)
    tips.append(_tip("stale", stalest, days=(today - stale_entry.last_studied).days))

    rarest, rare_entry = min(entries, key=lambda item: item[1].frequency)
    if rare_entry.frequency < config.low_frequency_threshold and all(
        t.subject != rarest.value for t in tips
    ):
        tips.append(_tip("infrequent", rarest))

    if len(entries) >= 3:
        highest = max(e.frequency for _, e in entries)
        lowest = min(e.frequency for _, e in entries)
        if highest >= lowest * 2:
            lagging = [s.value for s, e in entries if e.frequency == lowest]
            if not any(t.subject in lagging for t in tips):
                tips.append(_tip("imbalanced", Subject(lagging[0])))

    if streak.current > 0:
        tips.append(
            StudyTip(
                subject=STREAK_SUBJECT,
                recommendation=f"Keep up your {streak.current}-day study streak! You're building great study habits.",
            )
        )
    elif streak.longest > 0:
        tips.append(
            StudyTip(
                subject=STREAK_SUBJECT,
                recommendation=f"You previously reached a {streak.longest}-day study streak. Can you beat that record?",
            )
        )

    return tips
