#!/usr/bin/env python3
"""
Management script for developer operations.

Commands:
  - upgrade: apply Alembic migrations up to head
  - downgrade: roll every migration back (drops the spells table)
  - makemigration: autogenerate a new Alembic revision
  - seed: import the default spells from the public API
  - reset: downgrade -> upgrade -> seed
  - lint / format: Ruff (containerized)
"""

import argparse
import os
import subprocess
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))


def run_command(command: list[str]) -> None:
    """Run a shell command and raise on failure."""
    result = subprocess.run(command, check=False, cwd=PROJECT_ROOT)
    if result.returncode != 0:
        raise SystemExit(result.returncode)


def cmd_upgrade(_: argparse.Namespace) -> None:
    """Apply Alembic migrations up to head."""
    run_command(["alembic", "upgrade", "head"])


def cmd_downgrade(_: argparse.Namespace) -> None:
    """Roll back all Alembic migrations."""
    run_command(["alembic", "downgrade", "base"])


def cmd_makemigration(args: argparse.Namespace) -> None:
    """Create a new Alembic migration with autogenerate."""
    run_command(["alembic", "revision", "--autogenerate", "-m", args.message])


def cmd_seed(_: argparse.Namespace) -> None:
    """Seed spells from the public API."""
    run_command([sys.executable, os.path.join(PROJECT_ROOT, "seed.py")])


def cmd_reset(args: argparse.Namespace) -> None:
    """Drop, recreate and reseed the spells table."""
    cmd_downgrade(args)
    cmd_upgrade(args)
    cmd_seed(args)


def _ruff_base() -> list[str]:
    return [
        "docker",
        "run",
        "--rm",
        "-u",
        f"{os.getuid()}:{os.getgid()}",
        "-v",
        f"{PROJECT_ROOT}:/io",
        "-w",
        "/io",
        "ghcr.io/astral-sh/ruff:latest",
    ]


def cmd_lint(args: argparse.Namespace) -> None:
    """Run Ruff linter inside a throwaway container."""
    command = _ruff_base() + ["check"]
    if getattr(args, "fix", False):
        command.append("--fix")
    command.append(".")
    run_command(command)


def cmd_format(_: argparse.Namespace) -> None:
    """Format codebase using Ruff (import sorting + formatter)."""
    run_command(_ruff_base() + ["check", "--fix", "."])
    run_command(_ruff_base() + ["format", "."])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Project management utility")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade = subparsers.add_parser("upgrade", help="Apply Alembic migrations up to head")
    upgrade.set_defaults(func=cmd_upgrade)

    downgrade = subparsers.add_parser("downgrade", help="Roll back all Alembic migrations")
    downgrade.set_defaults(func=cmd_downgrade)

    makemigration = subparsers.add_parser(
        "makemigration",
        help="Create a new Alembic migration with autogenerate",
    )
    makemigration.add_argument("-m", "--message", required=True, help="Migration message")
    makemigration.set_defaults(func=cmd_makemigration)

    seed = subparsers.add_parser("seed", help="Seed spells from the public API")
    seed.set_defaults(func=cmd_seed)

    reset = subparsers.add_parser("reset", help="Full reset: downgrade, upgrade, seed")
    reset.set_defaults(func=cmd_reset)

    lint = subparsers.add_parser("lint", help="Run Ruff linter (containerized)")
    lint.add_argument(
        "--fix",
        action="store_true",
        help="Apply automatic fixes where possible",
    )
    lint.set_defaults(func=cmd_lint)

    fmt = subparsers.add_parser("format", help="Format code using Ruff (imports + formatter)")
    fmt.set_defaults(func=cmd_format)

    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
