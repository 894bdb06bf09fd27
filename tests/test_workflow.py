import pytest

from passguard import workflow
from passguard.workflow import RETRY_MESSAGE, PasswordForm, format_report, run_interactive_session


def _feed(monkeypatch, answers, secrets=()):
    answers = iter(answers)
    secrets = iter(secrets)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    monkeypatch.setattr("passguard.prompts.getpass", lambda _prompt="": next(secrets))


class TestPasswordForm:

    def test_generate_into_empty_field(self):
        form = PasswordForm()
        password = form.generate()
        assert password is not None
        assert form.password == password
        assert form.status == f"Generated: {password}"

    def test_generate_refused_when_field_has_value(self):
        form = PasswordForm(password="hunter2")
        assert form.generate() is None
        assert form.password == ""
        assert form.status == RETRY_MESSAGE

    def test_generate_after_refusal(self):
        form = PasswordForm(password="hunter2")
        form.generate()
        assert form.generate() is not None

    def test_generate_honours_options(self, monkeypatch):
        calls = []
        monkeypatch.setattr(workflow, "generate", lambda length, alphabet: calls.append((length, alphabet)) or "q" * length)
        form = PasswordForm(length=4, alphabet="q")
        assert form.generate() == "qqqq"
        assert calls == [(4, "q")]

    def test_generate_clears_verification(self):
        form = PasswordForm()
        form.verify()
        form.generate()
        assert form.verification is None

    def test_verify_stores_result(self):
        form = PasswordForm(password="Xy9!")
        result = form.verify()
        assert form.verification is result
        assert result.score == 7

    def test_update_clears_retry_status(self):
        form = PasswordForm(status=RETRY_MESSAGE)
        form.update("abc")
        assert form.status == ""

    def test_verify_clears_generated_status(self):
        form = PasswordForm()
        form.generate()
        form.verify()
        assert form.status == ""
        form.update("typed")
        assert form.status == ""

    def test_update_keeps_generated_status(self):
        form = PasswordForm()
        form.generate()
        status = form.status
        form.update("edited")
        assert form.status == status
        assert form.verification is None


class TestFormatReport:

    def test_lists_both_sections(self):
        form = PasswordForm(password="Password123!")
        lines = format_report(form.verify())
        assert lines[0] == "Password strength: 9/10 (Very Strong)"
        assert "Strengths:" in lines
        assert "  - Contains common patterns" in lines

    def test_empty_password_report(self):
        lines = format_report(PasswordForm().verify())
        assert lines == [
            "Please enter a password to verify.",
            "Weaknesses:",
            "  - No password entered",
        ]


class TestInteractiveSession:

    def test_type_then_verify(self, monkeypatch, capsys):
        _feed(monkeypatch, ["type", "verify", "quit"], secrets=["Xy9!"])
        form = run_interactive_session()
        assert form.verification.score == 7
        assert "Password strength: 7/10 (Strong)" in capsys.readouterr().out

    def test_generate_guard_in_session(self, monkeypatch, capsys):
        _feed(monkeypatch, ["1", "2", "quit"], secrets=["typed"])
        form = run_interactive_session()
        assert form.password == ""
        assert RETRY_MESSAGE in capsys.readouterr().out

    def test_default_action_generates_into_empty_field(self, monkeypatch):
        _feed(monkeypatch, ["", "quit"])
        form = run_interactive_session()
        assert len(form.password) == 16

    def test_invalid_selection_reprompts(self, monkeypatch, capsys):
        _feed(monkeypatch, ["bogus", "9", "clear", "quit"])
        run_interactive_session(PasswordForm(password="abc"))
        out = capsys.readouterr().out
        assert out.count("Invalid selection.") == 2
        assert "Field cleared." in out


def test_prompt_action_requires_actions():
    from passguard.prompts import prompt_action

    with pytest.raises(ValueError):
        prompt_action("Action", [])
