from __future__ import annotations


class TrackerError(Exception):
    """Base class for study tracker failures."""


class SessionNotFoundError(TrackerError):
    def __init__(self, session_id: str):
        super().__init__(f"Study session {session_id!r} not found")
        self.session_id = session_id


class SessionAlreadyEndedError(TrackerError):
    def __init__(self, session_id: str):
        super().__init__(f"Study session {session_id!r} has already ended")
        self.session_id = session_id


class TestRecordNotFoundError(TrackerError):
    __test__ = False

    def __init__(self, record_id: str):
        super().__init__(f"Test record {record_id!r} not found")
        self.record_id = record_id
