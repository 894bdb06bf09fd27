from __future__ import annotations

import argparse
import json
import os
from pathlib import Path

from .config import SETTINGS_ENV_VAR, ConfigError, ensure_settings_file, generator_options, load_settings
from .passwords import generate
from .prompts import prompt_secret
from .strength import verify
from .workflow import PasswordForm, format_report, run_interactive_session


def _settings_arg(args: argparse.Namespace) -> Path | None:
    return Path(args.settings).expanduser() if args.settings else None


def _settings_from_args(args: argparse.Namespace) -> dict:
    return load_settings(_settings_arg(args))


def _read_password(env_var: str | None) -> str:
    if env_var:
        value = os.environ.get(env_var)
        if value is None:
            raise ConfigError(f"Environment variable {env_var} is not set.")
        return value
    return prompt_secret("Password to verify: ")


def _cmd_generate(args: argparse.Namespace) -> int:
    length, alphabet = generator_options(_settings_from_args(args))
    if args.length is not None:
        length = args.length
    print(generate(length, alphabet))
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    result = verify(_read_password(args.password_env))
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0
    for line in format_report(result):
        print(line)
    return 0


def _cmd_session(args: argparse.Namespace) -> int:
    length, alphabet = generator_options(_settings_from_args(args))
    try:
        run_interactive_session(PasswordForm(length=length, alphabet=alphabet))
    except (KeyboardInterrupt, EOFError):
        print("")
        print("Session ended by user.")
    return 0


def _cmd_show_config(args: argparse.Namespace) -> int:
    length, alphabet = generator_options(_settings_from_args(args))
    print(f"Length: {length}")
    print(f"Alphabet ({len(alphabet)} characters): {alphabet}")
    return 0


def _cmd_init_config(args: argparse.Namespace) -> int:
    path, written = ensure_settings_file(_settings_arg(args), force=args.force)
    if written:
        print(f"Wrote default settings to {path}")
    else:
        print(f"Settings file already exists: {path} (use --force to overwrite)")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="passguard - password generator and strength checker",
        epilog=f"Settings are read from --settings, then ${SETTINGS_ENV_VAR}, then the project config directory.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_generate = sub.add_parser("generate", help="Print a random password")
    cmd_generate.add_argument("--length", type=int, default=None, help="Override the configured password length")
    cmd_generate.add_argument("--settings", default=None, help="Path to a JSON settings file")
    cmd_generate.set_defaults(func=_cmd_generate)

    cmd_verify = sub.add_parser("verify", help="Score a password against the strength rules")
    cmd_verify.add_argument("--password-env", default=None, help="Read the password from environment variable name")
    cmd_verify.add_argument("--json", action="store_true", help="Print the result as JSON")
    cmd_verify.set_defaults(func=_cmd_verify)

    cmd_session = sub.add_parser("session", help="Interactive generate/verify loop")
    cmd_session.add_argument("--settings", default=None, help="Path to a JSON settings file")
    cmd_session.set_defaults(func=_cmd_session)

    cmd_config = sub.add_parser("show-config", help="Print the effective generator settings")
    cmd_config.add_argument("--settings", default=None, help="Path to a JSON settings file")
    cmd_config.set_defaults(func=_cmd_show_config)

    cmd_init = sub.add_parser("init-config", help="Write the default settings file")
    cmd_init.add_argument("--settings", default=None, help="Path to a JSON settings file")
    cmd_init.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    cmd_init.set_defaults(func=_cmd_init_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
