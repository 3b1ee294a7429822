from pydantic import BaseModel, Field

from chadjee.models.enums import Subject


class BadgeDefinition(BaseModel):
    badge_id: str
    label: str
    threshold_hours: int = Field(ge=1)


class RecommendationConfig(BaseModel):
    main_subjects: list[Subject] = Field(
        default_factory=lambda: [Subject.MATHEMATICS, Subject.PHYSICS, Subject.CHEMISTRY]
    )
    time_gap_days: int = 5  # strictly more than this triggers time-gap
    time_gap_priority_cap: int = 4
    low_score_ratio: float = 0.5
    productive_min_minutes: int = 25
    focus_min_sessions: int = 3
    focus_max_average_minutes: int = 20
    max_recommendations: int = Field(default=5, ge=1)
    streak_session_min_minutes: int = 60
    low_frequency_threshold: int = 3
    weak_topic_limit: int = 5
    weak_topic_min_length: int = 4
