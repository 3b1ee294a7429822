import math
from datetime import date, datetime
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from chadjee.models.enums import Subject


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class StudySession(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    subject: Subject = Subject.GENERAL_STUDY
    topic: str | None = None
    start_time: datetime
    end_time: datetime | None = None
    duration: int = Field(default=0, ge=0)  # minutes
    completed: bool = False
    notes: str | None = None

    @field_validator("subject", mode="before")
    @classmethod
    def _normalise_subject(cls, value):
        return Subject.from_label(value)

    @property
    def is_active(self) -> bool:
        return self.end_time is None


class TestRecord(BaseModel):
    __test__ = False  # not a pytest class
    id: str = Field(default_factory=lambda: str(uuid4()))
    subject: Subject
    sub_topic: str | None = None
    score: float = Field(ge=0)
    max_score: float = Field(gt=0)
    date: date
    areas_of_improvement: str | None = None

    @field_validator("subject", mode="before")
    @classmethod
    def _normalise_subject(cls, value):
        return Subject.from_label(value)

    @property
    def ratio(self) -> float:
        return self.score / self.max_score

    @property
    def percentage(self) -> int:
        """Score as a whole percent, rounded half up."""
        return round_half_up(self.ratio * 100)
