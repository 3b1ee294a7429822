from datetime import date

from pydantic import BaseModel, Field

from chadjee.models.enums import ActivityType, Subject


class SubjectProgress(BaseModel):
    last_studied: date
    frequency: int = Field(default=0, ge=0)


class StudyActivity(BaseModel):
    subject: Subject
    date: date
    type: ActivityType = ActivityType.POMODORO


class StreakCounts(BaseModel):
    current: int = Field(default=0, ge=0)
    longest: int = Field(default=0, ge=0)


class StudyStreak(BaseModel):
    current: int = Field(default=0, ge=0)
    longest: int = Field(default=0, ge=0)
    last_date: date | None = None
    dates_studied: list[date] = Field(default_factory=list)  # deduplicated, ascending
    activities: list[StudyActivity] = Field(default_factory=list)
