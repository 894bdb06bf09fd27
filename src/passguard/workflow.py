from __future__ import annotations

from dataclasses import dataclass, field

from .config import DEFAULT_ALPHABET, DEFAULT_LENGTH
from .models import VerificationResult
from .passwords import generate
from .prompts import prompt_action, prompt_secret
from .strength import verify


RETRY_MESSAGE = "Please click Generate again with empty field."
GENERATED_PREFIX = "Generated"

SESSION_ACTIONS = ["type", "generate", "verify", "clear", "quit"]


@dataclass
class PasswordForm:
    """Caller-side state around the generator and verifier.

    Generating over a non-empty field is refused: the field is cleared and the
    user is asked to try again.
    """

    password: str = ""
    status: str = ""
    verification: VerificationResult | None = None
    length: int = DEFAULT_LENGTH
    alphabet: str = field(default=DEFAULT_ALPHABET, repr=False)

    def update(self, value: str) -> None:
        self.password = value
        self.verification = None
        if self.status and GENERATED_PREFIX not in self.status:
            self.status = ""

    def generate(self) -> str | None:
        if self.password:
            self.password = ""
            self.status = RETRY_MESSAGE
            return None
        self.password = generate(self.length, self.alphabet)
        self.status = f"{GENERATED_PREFIX}: {self.password}"
        self.verification = None
        return self.password

    def verify(self) -> VerificationResult:
        self.verification = verify(self.password)
        self.status = ""
        return self.verification


def format_report(result: VerificationResult) -> list[str]:
    lines = [result.message]
    if result.strengths:
        lines.append("Strengths:")
        lines.extend(f"  + {item}" for item in result.strengths)
    if result.weaknesses:
        lines.append("Weaknesses:")
        lines.extend(f"  - {item}" for item in result.weaknesses)
    return lines


def run_interactive_session(form: PasswordForm | None = None) -> PasswordForm:
    form = form or PasswordForm()
    print("Type a password to verify it, or generate one into the empty field.")
    while True:
        action = prompt_action("Action", SESSION_ACTIONS, default="verify" if form.password else "generate")
        if action == "quit":
            return form
        if action == "type":
            form.update(prompt_secret())
        elif action == "clear":
            form.update("")
            print("Field cleared.")
        elif action == "generate":
            form.generate()
            print(form.status)
        elif action == "verify":
            for line in format_report(form.verify()):
                print(line)
