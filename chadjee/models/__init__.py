from chadjee.models.enums import (
    ActivityType,
    RecommendationType,
    Subject,
    TimeOfDay,
    TimeWindow,
)
from chadjee.models.kb import BadgeDefinition, RecommendationConfig
from chadjee.models.records import StudySession, TestRecord
from chadjee.models.progress import (
    StreakCounts,
    StudyActivity,
    StudyStreak,
    SubjectProgress,
)
from chadjee.models.recommendation import (
    AnalyticsReport,
    MilestoneBadge,
    Recommendation,
    ScorePoint,
    StudyTip,
    SubjectHours,
    SubjectSessionStats,
    WeakTopic,
    recommendation_id,
)
