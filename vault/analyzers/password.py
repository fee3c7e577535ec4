"""
Password Strength Analyzer
===========================

Scores a candidate password in one synchronous, side-effect-free call.

The analysis runs nine steps over the password:

1. Character-set size: sum of the classes present (lower 26, upper 26,
   digit 10, symbol 32, extended whitespace/escape 6).
2. Entropy: ``length * log2(charset_size)`` minus a pattern penalty.
3. Pattern flags: repeated, sequential, keyboard, dictionary, dates.
4. Commonality against a static breached-password list, with two
   independent leetspeak normalisations.
5. Complexity: count of lowercase / uppercase / digit / other classes.
6. Brute-force crack time at 10^9 guesses per second, average case.
7. Additive score, clamped to 0-100.
8. Strength level bucket.
9. Ordered improvement suggestions.

The heuristics are illustrative rather than rigorous; they are kept
stable so that the same password always yields the same report.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math
from typing import Iterable

from vault.analyzers.patterns import (
    BREACHED_PASSWORDS,
    CHARSET_CLASSES,
    COMPLEXITY_CLASSES,
    FLAG_RULES,
    LEET_SUBSTITUTIONS,
    PENALTY_RULES,
    build_breached_set,
)
from vault.core.models import (
    Analysis,
    Commonality,
    PatternFlags,
    StrengthLevel,
)


GUESSES_PER_SECOND: int = 10**9

# (upper bound in seconds, unit length in seconds, label)
_TIME_UNITS: tuple[tuple[int, int, str], ...] = (
    (60, 1, "seconds"),
    (3_600, 60, "minutes"),
    (86_400, 3_600, "hours"),
    (31_536_000, 86_400, "days"),
    (31_536_000_000, 31_536_000, "years"),
)

# Average-case brute force searches half the space.
_CENTURIES_COMBINATIONS: int = 2 * GUESSES_PER_SECOND * _TIME_UNITS[-1][0]
_CENTURIES_LOG2: float = math.log2(_CENTURIES_COMBINATIONS)

_LEVEL_BOUNDS: tuple[tuple[int, StrengthLevel], ...] = (
    (20, StrengthLevel.VERY_WEAK),
    (40, StrengthLevel.WEAK),
    (60, StrengthLevel.FAIR),
    (80, StrengthLevel.GOOD),
    (95, StrengthLevel.STRONG),
)

EMPTY_PROMPT = "Enter a password to analyze"

_MISSING_CLASS_ADVICE: tuple[str, ...] = (
    "Add lowercase letters",
    "Add uppercase letters",
    "Add numbers",
    "Add special characters (!@#$%^&*)",
)

_FLAG_ADVICE: dict[str, str] = {
    "repeated": "Avoid repeated characters (e.g. aaa, 111)",
    "sequential": "Avoid sequential characters (e.g. abc, 123)",
    "keyboard": "Avoid keyboard patterns (e.g. qwerty, asdf)",
    "dictionary": "Avoid common dictionary words",
    "dates": "Avoid dates and years",
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_crack_time(seconds: float) -> str:
    """Render a crack-time estimate in seconds as a human-readable string.

    The count is rounded to the nearest integer in the chosen unit and the
    unit is always plural, so 60 seconds reads ``"1 minutes"``.
    """
    if seconds < 1:
        return "Instant"
    for limit, unit, label in _TIME_UNITS:
        if seconds < limit:
            return f"{_round_half_up(seconds / unit)} {label}"
    return "Centuries"


def strength_level(score: int) -> StrengthLevel:
    """Map a 0-100 score onto its :class:`StrengthLevel` bucket."""
    for bound, level in _LEVEL_BOUNDS:
        if score < bound:
            return level
    return StrengthLevel.EXCELLENT


class PasswordAnalyzer:
    """Analyses password strength using entropy and pattern detection.

    The breached-password set and the rule tables are fixed at
    construction; :meth:`analyze` holds no other state and is safe to call
    from several threads at once.

    Usage::

        analyzer = PasswordAnalyzer()
        result = analyzer.analyze("MyP@ssw0rd!")
        print(result.level.value, result.score)
    """

    def __init__(self, extra_breached_passwords: Iterable[str] = ()) -> None:
        """Initialise the analyzer.

        Args:
            extra_breached_passwords: Additional known-weak passwords merged
                into the built-in list (compared case-insensitively).
        """
        extra = tuple(extra_breached_passwords)
        self._breached: frozenset[str] = (
            build_breached_set(extra) if extra else BREACHED_PASSWORDS
        )

    @property
    def breached_passwords(self) -> frozenset[str]:
        return self._breached

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> Analysis:
        """Perform the full strength analysis of *password*.

        Args:
            password: The password to analyse. May be empty.

        Returns:
            The :class:`Analysis` record. An empty password yields the
            fixed empty analysis.
        """
        if not password:
            return self.empty_analysis()

        charset_size = self.calculate_charset_size(password)
        entropy = self.calculate_entropy(password)
        patterns = self.detect_patterns(password)
        commonality = self.check_commonality(password)
        complexity = self.calculate_complexity(password)

        score = self.calculate_score(
            length=len(password),
            complexity=complexity,
            entropy=entropy,
            patterns=patterns,
            commonality=commonality,
        )

        return Analysis(
            length=len(password),
            charset_size=charset_size,
            entropy=entropy,
            patterns=patterns,
            commonality=commonality,
            complexity=complexity,
            crack_time=self.estimate_crack_time(password),
            score=score,
            level=strength_level(score),
            suggestions=self.generate_suggestions(
                password, complexity, patterns, commonality
            ),
        )

    @staticmethod
    def empty_analysis() -> Analysis:
        """The fixed analysis returned for an empty password."""
        return Analysis(
            length=0,
            charset_size=0,
            entropy=0.0,
            patterns=PatternFlags(),
            commonality=Commonality.UNIQUE,
            complexity=0,
            crack_time="0 seconds",
            score=0,
            level=StrengthLevel.VERY_WEAK,
            suggestions=[EMPTY_PROMPT],
        )

    # ------------------------------------------------------------------ #
    #  Character set and entropy
    # ------------------------------------------------------------------ #

    @staticmethod
    def calculate_charset_size(password: str) -> int:
        """Sum the sizes of every character class present in *password*."""
        return sum(
            cls.size for cls in CHARSET_CLASSES if cls.pattern.search(password)
        )

    def calculate_entropy(self, password: str) -> float:
        """Estimate entropy as ``length * log2(charset)`` minus the penalty."""
        charset_size = self.calculate_charset_size(password)
        if not password or charset_size == 0:
            return 0.0

        entropy = len(password) * math.log2(charset_size)
        return max(0.0, entropy - self.calculate_pattern_penalty(password))

    @staticmethod
    def calculate_pattern_penalty(password: str) -> float:
        """Weighted length of all non-overlapping penalty-rule matches."""
        penalty = 0.0
        for rule in PENALTY_RULES:
            matched = sum(len(m.group(0)) for m in rule.pattern.finditer(password))
            penalty += matched * rule.weight
        return penalty

    # ------------------------------------------------------------------ #
    #  Pattern flags and commonality
    # ------------------------------------------------------------------ #

    @staticmethod
    def detect_patterns(password: str) -> PatternFlags:
        """Test *password* against each pattern-flag rule."""
        return PatternFlags(
            **{
                name: pattern.search(password) is not None
                for name, pattern in FLAG_RULES.items()
            }
        )

    def check_commonality(self, password: str) -> Commonality:
        """Classify *password* against the breached-password set.

        An exact (case-insensitive) hit is ``breached``. Otherwise each
        leetspeak pass is applied on its own to the lower-cased password;
        a hit on either is ``similar_to_breached``.
        """
        lowered = password.lower()
        if lowered in self._breached:
            return Commonality.BREACHED

        for table in LEET_SUBSTITUTIONS:
            variation = lowered.translate(str.maketrans(table))
            if variation in self._breached:
                return Commonality.SIMILAR_TO_BREACHED

        return Commonality.UNIQUE

    @staticmethod
    def calculate_complexity(password: str) -> int:
        """Count of lowercase, uppercase, digit and non-alphanumeric classes."""
        return sum(1 for pattern in COMPLEXITY_CLASSES if pattern.search(password))

    # ------------------------------------------------------------------ #
    #  Crack time
    # ------------------------------------------------------------------ #

    def estimate_crack_time(self, password: str) -> str:
        """Average-case brute-force time over the full character space."""
        if not password:
            return "0 seconds"

        charset_size = self.calculate_charset_size(password)
        length = len(password)

        # Skip building astronomically large integers for long passwords.
        if charset_size > 1 and length * math.log2(charset_size) > _CENTURIES_LOG2 + 1:
            return "Centuries"

        combinations = charset_size**length
        if combinations >= _CENTURIES_COMBINATIONS:
            return "Centuries"
        return format_crack_time(combinations / (2 * GUESSES_PER_SECOND))

    # ------------------------------------------------------------------ #
    #  Score and suggestions
    # ------------------------------------------------------------------ #

    @staticmethod
    def calculate_score(
        *,
        length: int,
        complexity: int,
        entropy: float,
        patterns: PatternFlags,
        commonality: Commonality,
    ) -> int:
        """Combine the individual metrics into a 0-100 score."""
        score = 0

        # Length
        if length >= 8:
            score += 10
        if length >= 12:
            score += 10
        if length >= 16:
            score += 10
        if length >= 20:
            score += 5
        if length >= 25:
            score += 5

        score += complexity * 5

        # Entropy
        if entropy >= 30:
            score += 5
        if entropy >= 50:
            score += 10
        if entropy >= 70:
            score += 10

        # Patterns
        if patterns.repeated:
            score -= 5
        if patterns.sequential:
            score -= 5
        if patterns.keyboard:
            score -= 5
        if patterns.dictionary:
            score -= 10
        if patterns.dates:
            score -= 3

        if commonality is Commonality.BREACHED:
            score -= 25
        elif commonality is Commonality.SIMILAR_TO_BREACHED:
            score -= 15

        return max(0, min(100, score))

    @staticmethod
    def generate_suggestions(
        password: str,
        complexity: int,
        patterns: PatternFlags,
        commonality: Commonality,
    ) -> list[str]:
        """Build the ordered improvement advice for *password*."""
        suggestions: list[str] = []

        if len(password) < 12:
            suggestions.append("Use at least 12 characters for better security")

        if complexity < 3:
            for pattern, advice in zip(COMPLEXITY_CLASSES, _MISSING_CLASS_ADVICE):
                if not pattern.search(password):
                    suggestions.append(advice)

        for flag in patterns.detected():
            suggestions.append(_FLAG_ADVICE[flag])

        if commonality is Commonality.BREACHED:
            suggestions.append(
                "This password has appeared in data breaches. Change it immediately!"
            )
        elif commonality is Commonality.SIMILAR_TO_BREACHED:
            suggestions.append(
                "This password is too similar to a known breached password"
            )

        if not suggestions:
            suggestions.append("Excellent password! It meets all strength criteria.")

        return suggestions
