from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class Rule:
    predicate: Callable[[str], bool]
    points: int
    strength: str
    weakness: str


@dataclass(frozen=True)
class VerificationResult:
    score: int
    level: str
    strengths: tuple[str, ...] = field(default_factory=tuple)
    weaknesses: tuple[str, ...] = field(default_factory=tuple)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["strengths"] = list(self.strengths)
        payload["weaknesses"] = list(self.weaknesses)
        return payload
