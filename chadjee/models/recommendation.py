from datetime import date, datetime

from pydantic import BaseModel, Field

from chadjee.models.enums import RecommendationType, Subject


class Recommendation(BaseModel):
    id: str
    subject: str  # Subject value, or the "Study Streak" pseudo-subject
    sub_topic: str | None = None
    recommendation: str
    type: RecommendationType
    priority: int = Field(ge=1, le=5)


class SubjectSessionStats(BaseModel):
    count: int = 0
    total_duration: int = 0
    average_duration: int = 0
    best_time: datetime | None = None


class StudyTip(BaseModel):
    subject: str
    recommendation: str


class SubjectHours(BaseModel):
    subject: Subject
    hours: float


class ScorePoint(BaseModel):
    subject: Subject
    date: date
    percentage: int


class WeakTopic(BaseModel):
    topic: str
    count: int
    subject: Subject


class MilestoneBadge(BaseModel):
    badge_id: str
    label: str
    threshold_hours: int
    earned: bool


def recommendation_id(kind: str, subject: str, on: date) -> str:
    """Deterministic id, e.g. ``test-mathematics-2024-05-03``."""
    slug = subject.lower().replace(" ", "-")
    return f"{kind}-{slug}-{on.isoformat()}"


class AnalyticsReport(BaseModel):
    hours: list[SubjectHours] = Field(default_factory=list)
    score_trends: list[ScorePoint] = Field(default_factory=list)
    weak_topics: list[WeakTopic] = Field(default_factory=list)
    has_data: bool = False
