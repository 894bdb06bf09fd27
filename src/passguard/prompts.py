from __future__ import annotations

from getpass import getpass


def prompt_secret(label: str = "Password: ") -> str:
    return getpass(label)


def prompt_action(question: str, actions: list[str], default: str | None = None) -> str:
    if not actions:
        raise ValueError("actions must not be empty")
    fallback = default if default in actions else actions[0]
    print("  ".join(f"[{idx}] {name}" for idx, name in enumerate(actions, start=1)))
    while True:
        raw = input(f"{question} ({fallback}): ").strip().lower()
        if not raw:
            return fallback
        if raw in actions:
            return raw
        if raw.isdigit() and 1 <= int(raw) <= len(actions):
            return actions[int(raw) - 1]
        print("Invalid selection.")
