"""Static knowledge: default thresholds and advice wording."""

from chadjee.models.enums import Subject
from chadjee.models.kb import BadgeDefinition, RecommendationConfig

DEFAULT_CONFIG = RecommendationConfig()

STREAK_SUBJECT = "Study Streak"

# Short-session advice, keyed by subject. Templates take {subject}.
FOCUS_TIPS: dict[Subject, str] = {
    Subject.MATHEMATICS: (
        "Your {subject} study sessions tend to be shorter than ideal. Try breaking complex "
        "problems into steps and work through each one systematically to maintain focus."
    ),
    Subject.PHYSICS: (
        "You may be struggling to maintain focus during {subject} sessions. Try the "
        "'concept-to-calculation' approach: understand the theory first, then immediately "
        "apply it to problems."
    ),
    Subject.CHEMISTRY: (
        "Your {subject} Pomodoro sessions are shorter than recommended. Use visual aids like "
        "reaction mechanisms and periodic table patterns to keep engaged."
    ),
}
DEFAULT_FOCUS_TIP = (
    "You might be having difficulty focusing during {subject} studies. Try the Pomodoro "
    "technique with shorter intervals and take brief breaks to maintain engagement."
)

# Progress tips: "stale" takes {subject} and {days}, the others take {subject}.
PROGRESS_TIPS: dict[str, dict[Subject, str]] = {
    "stale": {
        Subject.MATHEMATICS: "You haven't practiced {subject} in {days} days. Focus on solving JEE Advanced level problems.",
        Subject.PHYSICS: "It's been {days} days since you studied {subject}. Review key mechanics and electromagnetism concepts.",
        Subject.CHEMISTRY: "{days} days without {subject} practice! Revise organic reactions and equilibrium concepts.",
    },
    "infrequent": {
        Subject.MATHEMATICS: "Your {subject} practice needs attention. Try focusing on calculus, algebra, and coordinate geometry for JEE.",
        Subject.PHYSICS: "Increase your focus on {subject}. Prioritize mechanics, electromagnetism, and modern physics concepts.",
        Subject.CHEMISTRY: "You need more practice in {subject}. Work on organic reactions, periodic properties, and physical chemistry.",
    },
    "imbalanced": {
        Subject.MATHEMATICS: "For JEE success, your {subject} preparation must be balanced with other subjects. Allocate more time to practice questions and mock tests.",
        Subject.PHYSICS: "Your {subject} study time is significantly lower than other subjects. Work on JEE previous year questions to identify weak areas.",
        Subject.CHEMISTRY: "Balance your preparation by increasing focus on {subject}. Review NCERT concepts and solve JEE Advanced problems.",
    },
}
DEFAULT_PROGRESS_TIPS: dict[str, str] = {
    "stale": "You haven't studied {subject} in {days} days. Time to revisit!",
    "infrequent": "You should focus more on {subject} since you've studied it less frequently.",
    "imbalanced": "You're studying {subject} much less than other subjects. Try to balance your study schedule.",
}

MILESTONE_BADGES: list[BadgeDefinition] = [
    BadgeDefinition(badge_id="beginner", label="Beginner", threshold_hours=1),
    BadgeDefinition(badge_id="determined", label="Determined", threshold_hours=10),
    BadgeDefinition(badge_id="dedicated", label="Dedicated", threshold_hours=50),
    BadgeDefinition(badge_id="master", label="Master", threshold_hours=100),
]
