from datetime import date, timedelta

from chadjee.engine.balance import progress_tips
from chadjee.kb import STREAK_SUBJECT
from chadjee.models.enums import Subject
from chadjee.models.progress import StreakCounts, SubjectProgress


TODAY = date(2024, 5, 3)


def _progress(**entries: tuple[int, int]) -> dict[Subject, SubjectProgress]:
    """entries: subject attr name → (days ago, frequency)."""
    return {
        Subject[name]: SubjectProgress(last_studied=TODAY - timedelta(days=ago), frequency=freq)
        for name, (ago, freq) in entries.items()
    }


class TestProgressTips:
    def test_no_progress_no_tips(self, config):
        assert progress_tips({}, StreakCounts(current=3, longest=3), TODAY, config) == []

    def test_stalest_subject_first(self, config):
        progress = _progress(MATHEMATICS=(1, 5), PHYSICS=(9, 5))
        tips = progress_tips(progress, StreakCounts(), TODAY, config)
        assert tips[0].subject == "Physics"
        assert "9 days" in tips[0].recommendation
        assert len(tips) == 1

    def test_infrequent_subject(self, config):
        progress = _progress(MATHEMATICS=(4, 6), CHEMISTRY=(0, 1))
        tips = progress_tips(progress, StreakCounts(), TODAY, config)
        assert [t.subject for t in tips] == ["Mathematics", "Chemistry"]
        assert "organic reactions, periodic properties" in tips[1].recommendation

    def test_infrequent_not_repeated_for_stalest(self, config):
        progress = _progress(MATHEMATICS=(4, 1), CHEMISTRY=(0, 6))
        tips = progress_tips(progress, StreakCounts(), TODAY, config)
        assert [t.subject for t in tips] == ["Mathematics"]

    def test_imbalance_across_three_subjects(self, config):
        progress = _progress(MATHEMATICS=(5, 10), PHYSICS=(1, 4), CHEMISTRY=(0, 9))
        tips = progress_tips(progress, StreakCounts(), TODAY, config)
        assert [t.subject for t in tips] == ["Mathematics", "Physics"]
        assert "significantly lower" in tips[1].recommendation

    def test_generic_wording_for_general_study(self, config):
        progress = _progress(GENERAL_STUDY=(3, 8))
        tips = progress_tips(progress, StreakCounts(), TODAY, config)
        assert tips[0].recommendation == "You haven't studied General Study in 3 days. Time to revisit!"

    def test_streak_tip(self, config):
        progress = _progress(MATHEMATICS=(0, 5))
        tips = progress_tips(progress, StreakCounts(current=0, longest=6), TODAY, config)
        assert tips[-1].subject == STREAK_SUBJECT
        assert "6-day" in tips[-1].recommendation
