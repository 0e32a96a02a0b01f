"""
strength.py - Heuristic password strength scoring.

The score is additive, out of 100:
- Length: 25 points at 12+ chars, 15 at 8+, 5 otherwise
- 15 each for a lowercase letter, an uppercase letter and a digit
- 20 for anything that is not an ASCII letter or digit
- 10 bonus when at least 70% of the characters are distinct

The diversity ratio favours short strings (a 2-char password with two
different characters gets the bonus, a long random one may not). That
behaviour is kept as is.
"""

import enum
import string
from dataclasses import dataclass


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
ALPHANUMERIC = LOWERCASE + UPPERCASE + DIGITS

DIVERSITY_RATIO = 0.7

# Scores at or above this count as "strong" in the session stats too
STRONG_THRESHOLD = 70


class StrengthLevel(enum.Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


class StyleTag(enum.Enum):
    """Presentation accent for a level. The GUI decides what each one looks like."""

    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


# Inclusive lower bounds, checked highest first
LEVEL_THRESHOLDS = (
    (85, StrengthLevel.VERY_STRONG),
    (STRONG_THRESHOLD, StrengthLevel.STRONG),
    (50, StrengthLevel.MEDIUM),
)

STYLE_TAGS = {
    StrengthLevel.WEAK: StyleTag.DANGER,
    StrengthLevel.MEDIUM: StyleTag.WARNING,
    StrengthLevel.STRONG: StyleTag.INFO,
    StrengthLevel.VERY_STRONG: StyleTag.SUCCESS,
}


@dataclass(frozen=True)
class StrengthResult:
    score: int
    level: StrengthLevel
    style_tag: StyleTag

    @property
    def is_strong(self) -> bool:
        return self.score >= STRONG_THRESHOLD


def level_for(points: int) -> StrengthLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if points >= threshold:
            return level
    return StrengthLevel.WEAK


def score(password: str) -> StrengthResult:
    """
    Score a password. Never raises; the empty string scores 5 (Weak).

    Args:
        password: The password to evaluate

    Returns:
        StrengthResult with the raw score, its level and style tag
    """
    length = len(password)

    if length >= 12:
        points = 25
    elif length >= 8:
        points = 15
    else:
        points = 5

    if any(c in LOWERCASE for c in password):
        points += 15
    if any(c in UPPERCASE for c in password):
        points += 15
    if any(c in DIGITS for c in password):
        points += 15
    if any(c not in ALPHANUMERIC for c in password):
        points += 20

    if length and len(set(password)) >= length * DIVERSITY_RATIO:
        points += 10

    level = level_for(points)
    return StrengthResult(score=points, level=level, style_tag=STYLE_TAGS[level])
