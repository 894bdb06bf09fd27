from __future__ import annotations

import re

from .config import SPECIAL_CHARACTERS
from .models import Rule, VerificationResult


MIN_SCORE = 1
MAX_SCORE = 10
MAX_STRENGTHS = 5

LENGTH_TIERS = (
    (12, 3, "Good length (12+ characters)"),
    (8, 2, "Adequate length (8+ characters)"),
)
TOO_SHORT = "Too short (less than 8 characters)"

LEVELS = (
    (8, "Very Strong"),
    (6, "Strong"),
    (4, "Moderate"),
    (2, "Weak"),
)
LOWEST_LEVEL = "Very Weak"

_SPECIAL_RE = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_COMMON_RE = re.compile(r"123|abc|password|qwerty", re.IGNORECASE)

RULES = (
    Rule(
        lambda pw: re.search(r"[a-z]", pw) is not None,
        1,
        "Contains lowercase letters",
        "Missing lowercase letters",
    ),
    Rule(
        lambda pw: re.search(r"[A-Z]", pw) is not None,
        1,
        "Contains uppercase letters",
        "Missing uppercase letters",
    ),
    Rule(
        lambda pw: re.search(r"[0-9]", pw) is not None,
        1,
        "Contains numbers",
        "Missing numbers",
    ),
    Rule(
        lambda pw: _SPECIAL_RE.search(pw) is not None,
        2,
        "Contains special characters",
        "Missing special characters",
    ),
    Rule(
        lambda pw: _REPEAT_RE.search(pw) is None,
        1,
        "No repeated character sequences",
        "Contains repeated character sequences",
    ),
    Rule(
        lambda pw: _COMMON_RE.search(pw) is None,
        1,
        "No common patterns detected",
        "Contains common patterns",
    ),
)


def level_for_score(score: int) -> str:
    for threshold, level in LEVELS:
        if score >= threshold:
            return level
    return LOWEST_LEVEL


def _score_length(password: str) -> tuple[int, str | None, str | None]:
    for minimum, points, label in LENGTH_TIERS:
        if len(password) >= minimum:
            return points, label, None
    return 0, None, TOO_SHORT


def verify(password: str) -> VerificationResult:
    """Score ``password`` against the length tiers and the ordered ``RULES``.

    An empty string short-circuits to score 0. Any other input is reported
    with its raw rule sum clamped into [1, 10].
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be a str, got {type(password).__name__}")
    if not password:
        return VerificationResult(
            score=0,
            level=LOWEST_LEVEL,
            strengths=(),
            weaknesses=("No password entered",),
            message="Please enter a password to verify.",
        )

    raw, strength, weakness = _score_length(password)
    strengths: list[str] = [strength] if strength else []
    weaknesses: list[str] = [weakness] if weakness else []

    for rule in RULES:
        if rule.predicate(password):
            raw += rule.points
            strengths.append(rule.strength)
        else:
            weaknesses.append(rule.weakness)

    score = min(MAX_SCORE, max(MIN_SCORE, raw))
    level = level_for_score(score)
    return VerificationResult(
        score=score,
        level=level,
        strengths=tuple(strengths[:MAX_STRENGTHS]),
        weaknesses=tuple(weaknesses),
        message=f"Password strength: {score}/10 ({level})",
    )
