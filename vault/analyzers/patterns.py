"""
Password Pattern Tables
========================

Static data for the password analyzer: the breached-password list, the
character-class expressions, the entropy-penalty rules and the
pattern-flag rules.

The penalty table and the flag table overlap but differ (the flag
dictionary list is longer, the flag date rule also recognises D/M/Y
tokens, the penalty digit rule also counts plain 4/6/8-digit runs).
They are kept as two separate tables; merging them changes scores.

All tables are built once at import time and never mutated.
"""

from __future__ import annotations

import re
from typing import NamedTuple


# ===================================================================== #
#  Breached Passwords
# ===================================================================== #

_BREACHED_PASSWORDS: tuple[str, ...] = (
    "password", "123456", "password123", "admin", "qwerty", "letmein",
    "welcome", "monkey", "1234567890", "abc123", "Password1", "password1",
    "sunshine", "master", "shadow", "football", "baseball", "dragon",
    "princess", "superman", "qwertyuiop", "iloveyou", "trustno1",
    "startrek", "freedom", "whatever", "nicolejean", "computer",
    "dallas", "rangers", "london", "klaster", "corvette", "heaven",
    "fishing", "teresa", "salasana", "michigan", "marlboro",
    "987654321", "111111", "666666", "121212", "charlie", "pass",
    "mustang", "gizmodo", "birthday", "green", "honda", "chocolate",
)


def build_breached_set(extra: tuple[str, ...] | list[str] = ()) -> frozenset[str]:
    """Return the lower-cased breached-password set, plus any *extra* entries."""
    return frozenset(p.lower() for p in (*_BREACHED_PASSWORDS, *extra))


BREACHED_PASSWORDS: frozenset[str] = build_breached_set()

# Leetspeak normalisation passes; each is applied to the lower-cased
# password on its own, never composed.
LEET_SUBSTITUTIONS: tuple[dict[str, str], ...] = (
    {"@": "a", "3": "e", "1": "i", "0": "o", "$": "s"},
    {"4": "a", "3": "e", "1": "l", "7": "t"},
)


# ===================================================================== #
#  Character Classes
# ===================================================================== #

class CharClass(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    size: int


CHARSET_CLASSES: tuple[CharClass, ...] = (
    CharClass("lowercase", re.compile(r"[a-z]"), 26),
    CharClass("uppercase", re.compile(r"[A-Z]"), 26),
    CharClass("digit", re.compile(r"[0-9]"), 10),
    CharClass("symbol", re.compile(r"[!@#$%^&*()_+\-=\[\]{}|;':\",./<>?]"), 32),
    CharClass("extended", re.compile(r"[`~\\/ \t\n]"), 6),
)

COMPLEXITY_CLASSES: tuple[re.Pattern[str], ...] = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)


# ===================================================================== #
#  Shared Alternations
# ===================================================================== #

_DIGIT_RUNS = "012|123|234|345|456|567|678|789|890"
_LETTER_RUNS = (
    "abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|"
    "qrs|rst|stu|tuv|uvw|vwx|wxy|xyz"
)
_KEYBOARD_RUNS = (
    "qwe|wer|ert|rty|tyu|yui|uio|iop|asd|sdf|dfg|fgh|ghj|hjk|jkl|"
    "zxc|xcv|cvb|vbn|bnm"
)
_PENALTY_WORDS = "password|pass|admin|user|login|guest|test|demo|root"
_FLAG_WORDS = _PENALTY_WORDS + "|love|secret|welcome"


# ===================================================================== #
#  Entropy Penalty Rules
# ===================================================================== #

class PenaltyRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    weight: float


PENALTY_RULES: tuple[PenaltyRule, ...] = (
    PenaltyRule("repetition", re.compile(r"(.)\1{2,}"), 2.0),
    PenaltyRule("numeric_sequence", re.compile(_DIGIT_RUNS), 1.5),
    PenaltyRule("alphabetic_sequence", re.compile(_LETTER_RUNS, re.IGNORECASE | re.ASCII), 1.5),
    PenaltyRule("keyboard_sequence", re.compile(_KEYBOARD_RUNS, re.IGNORECASE | re.ASCII), 1.5),
    PenaltyRule("common_word", re.compile(_PENALTY_WORDS, re.IGNORECASE | re.ASCII), 1.5),
    PenaltyRule(
        "digit_run_or_year",
        re.compile(r"\d{4}|\d{6}|\d{8}|19\d{2}|20\d{2}", re.ASCII),
        1.5,
    ),
)


# ===================================================================== #
#  Pattern Flag Rules
# ===================================================================== #

FLAG_RULES: dict[str, re.Pattern[str]] = {
    "repeated": re.compile(r"(.)\1{2,}"),
    "sequential": re.compile(f"{_DIGIT_RUNS}|{_LETTER_RUNS}", re.IGNORECASE | re.ASCII),
    "keyboard": re.compile(_KEYBOARD_RUNS, re.IGNORECASE | re.ASCII),
    "dictionary": re.compile(_FLAG_WORDS, re.IGNORECASE | re.ASCII),
    "dates": re.compile(
        r"19\d{2}|20\d{2}|\d{1,2}/\d{1,2}/\d{2,4}|\d{1,2}-\d{1,2}-\d{2,4}",
        re.ASCII,
    ),
}
