from chadjee.models.progress import StudyStreak
from chadjee.models.records import StudySession, TestRecord
from chadjee.storage.base import StorageBackend


class InMemoryStorage(StorageBackend):
    """Process-local backend. Returns copies so callers never alias stored state."""

    def __init__(self):
        self._sessions: dict[str, dict[str, StudySession]] = {}
        self._tests: dict[str, dict[str, TestRecord]] = {}
        self._streaks: dict[str, StudyStreak] = {}

    # --- StudySession ---

    def list_sessions(self, user_id: str) -> list[StudySession]:
        return [s.model_copy(deep=True) for s in self._sessions.get(user_id, {}).values()]

    def save_session(self, user_id: str, session: StudySession) -> None:
        self._sessions.setdefault(user_id, {})[session.id] = session.model_copy(deep=True)

    def delete_session(self, user_id: str, session_id: str) -> None:
        self._sessions.get(user_id, {}).pop(session_id, None)

    # --- TestRecord ---

    def list_test_records(self, user_id: str) -> list[TestRecord]:
        return [r.model_copy(deep=True) for r in self._tests.get(user_id, {}).values()]

    def save_test_record(self, user_id: str, record: TestRecord) -> None:
        self._tests.setdefault(user_id, {})[record.id] = record.model_copy(deep=True)

    def delete_test_record(self, user_id: str, record_id: str) -> None:
        self._tests.get(user_id, {}).pop(record_id, None)

    # --- StudyStreak ---

    def get_streak(self, user_id: str) -> StudyStreak | None:
        streak = self._streaks.get(user_id)
        return streak.model_copy(deep=True) if streak else None

    def save_streak(self, user_id: str, streak: StudyStreak) -> None:
        self._streaks[user_id] = streak.model_copy(deep=True)
