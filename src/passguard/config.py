from __future__ import annotations

import json
import os
import string
from pathlib import Path
from typing import Any


WORKSPACE_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = WORKSPACE_ROOT / "config"
SETTINGS_PATH = CONFIG_DIR / "passguard_settings.json"
SETTINGS_ENV_VAR = "PASSGUARD_SETTINGS"

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
DEFAULT_ALPHABET = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + string.digits
    + SPECIAL_CHARACTERS
)
DEFAULT_LENGTH = 16


class ConfigError(ValueError):
    pass


def default_settings() -> dict[str, Any]:
    return {
        "generator": {
            "length": DEFAULT_LENGTH,
            "alphabet": DEFAULT_ALPHABET,
        },
    }


def load_json(path: Path, fallback: Any) -> Any:
    if not path.exists():
        return fallback
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return fallback


def save_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def settings_path(path: Path | None = None) -> Path:
    # SETTINGS_PATH only sits in the project root for source checkouts.
    if path is not None:
        return path
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return SETTINGS_PATH


def ensure_settings_file(path: Path | None = None, force: bool = False) -> tuple[Path, bool]:
    target = settings_path(path)
    if target.exists() and not force:
        return target, False
    save_json(target, default_settings())
    return target, True


def load_settings(path: Path | None = None) -> dict[str, Any]:
    settings = default_settings()
    payload = load_json(settings_path(path), {})
    if not isinstance(payload, dict):
        return settings
    generator = payload.get("generator")
    if isinstance(generator, dict):
        settings["generator"].update(generator)
    return settings


def validate_generator_options(length: Any, alphabet: Any) -> tuple[int, str]:
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ConfigError(f"generator length must be a positive integer, got {length!r}")
    if not isinstance(alphabet, str) or not alphabet:
        raise ConfigError("generator alphabet must be a non-empty string")
    return length, alphabet


def generator_options(settings: dict[str, Any]) -> tuple[int, str]:
    generator = settings.get("generator", {})
    return validate_generator_options(
        generator.get("length", DEFAULT_LENGTH),
        generator.get("alphabet", DEFAULT_ALPHABET),
    )
