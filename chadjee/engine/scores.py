from collections.abc import Iterable
from datetime import date

from chadjee.kb import DEFAULT_CONFIG
from chadjee.models.enums import RecommendationType, Subject
from chadjee.models.kb import RecommendationConfig
from chadjee.models.recommendation import Recommendation, recommendation_id
from chadjee.models.records import TestRecord


def subject_tests(records: Iterable[TestRecord], subject: Subject) -> list[TestRecord]:
    """Records for one subject, newest first. Same-day records keep input order."""
    matching = [r for r in records if r.subject == subject]
    return sorted(matching, key=lambda r: r.date, reverse=True)


def latest_test(records: Iterable[TestRecord], subject: Subject) -> TestRecord | None:
    ordered = subject_tests(records, subject)
    return ordered[0] if ordered else None


def is_low_score(record: TestRecord, config: RecommendationConfig = DEFAULT_CONFIG) -> bool:
    """Below the score threshold and with improvement notes to act on."""
    notes = record.areas_of_improvement
    return record.ratio < config.low_score_ratio and bool(notes and notes.strip())


def evaluate_latest_test(
    records: Iterable[TestRecord],
    subject: Subject,
    today: date,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> Recommendation | None:
    """Priority-5 test-score recommendation if the most recent test was weak, else None."""
    latest = latest_test(records, subject)
    if latest is None or not is_low_score(latest, config):
        return None
    focus = latest.sub_topic or subject.value
    return Recommendation(
        id=recommendation_id("test", subject.value, today),
        subject=subject.value,
        sub_topic=latest.sub_topic,
        recommendation=(
            f"You scored {latest.percentage}% in {focus}. "
            f"Focus on {latest.areas_of_improvement}."
        ),
        type=RecommendationType.TEST_SCORE,
        priority=5,
    )
