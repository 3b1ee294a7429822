from abc import ABC, abstractmethod

from chadjee.models.progress import StudyStreak
from chadjee.models.records import StudySession, TestRecord


class StorageBackend(ABC):
    @abstractmethod
    def list_sessions(self, user_id: str) -> list[StudySession]: ...

    @abstractmethod
    def save_session(self, user_id: str, session: StudySession) -> None: ...

    @abstractmethod
    def delete_session(self, user_id: str, session_id: str) -> None: ...

    @abstractmethod
    def list_test_records(self, user_id: str) -> list[TestRecord]: ...

    @abstractmethod
    def save_test_record(self, user_id: str, record: TestRecord) -> None: ...

    @abstractmethod
    def delete_test_record(self, user_id: str, record_id: str) -> None: ...

    @abstractmethod
    def get_streak(self, user_id: str) -> StudyStreak | None: ...

    @abstractmethod
    def save_streak(self, user_id: str, streak: StudyStreak) -> None: ...
