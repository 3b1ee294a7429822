from enum import Enum


class Subject(str, Enum):
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    CHEMISTRY = "Chemistry"
    GENERAL_STUDY = "General Study"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: "str | Subject | None") -> "Subject":
        """Normalise a free-text subject label. Blank → General Study, unknown → Other."""
        if isinstance(label, Subject):
            return label
        if label is None or not label.strip():
            return cls.GENERAL_STUDY
        wanted = label.strip().lower()
        for subject in cls:
            if subject.value.lower() == wanted:
                return subject
        return cls.OTHER


class RecommendationType(str, Enum):
    TIME_GAP = "time-gap"
    LOW_FREQUENCY = "low-frequency"
    TEST_SCORE = "test-score"
    STUDY_BALANCE = "study-balance"
    STREAK = "streak"


class ActivityType(str, Enum):
    POMODORO = "pomodoro"
    TEST = "test"


class TimeWindow(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def days(self) -> int:
        return {"week": 7, "month": 30, "year": 365}[self.value]


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_hour(cls, hour: int) -> "TimeOfDay":
        if 5 <= hour < 12:
            return cls.MORNING
        if 12 <= hour < 17:
            return cls.AFTERNOON
        if 17 <= hour < 21:
            return cls.EVENING
        return cls.NIGHT
