from __future__ import annotations

import secrets

from .config import DEFAULT_ALPHABET, DEFAULT_LENGTH, validate_generator_options


def generate(length: int = DEFAULT_LENGTH, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Return a random password of ``length`` characters drawn from ``alphabet``.

    Each character is picked independently, with replacement, by ``secrets.choice``.
    Raises ``ConfigError`` for an empty alphabet or a non-positive length.
    """
    length, alphabet = validate_generator_options(length, alphabet)
    return "".join(secrets.choice(alphabet) for _ in range(length))
