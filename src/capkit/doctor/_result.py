"""Check results shared by the platform checkers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import click

from capkit._exceptions import DoctorCheckError
from capkit._util import emoji, failure, success


@dataclass
class CheckResult:
    """Result of a single platform check."""
    name: str
    status: str  # "ok", "error", "skipped"
    message: str
    fix: str = ""


def format_problems(results: List[CheckResult]) -> str:
    """Format the failed checks, one per line, with their fixes."""
    lines = []
    for r in results:
        if r.status != "error":
            continue
        lines.append(f"  {failure('[error]')} {r.name}: {r.message}")
        if r.fix:
            lines.append(f"          Fix: {r.fix}")
    return "\n".join(lines)


def report(label: str, platform_name: str, results: List[CheckResult]) -> None:
    """Print the outcome of a platform's checks.

    Raises:
        DoctorCheckError: If any check has status ``"error"``.
    """
    problems = [r for r in results if r.status == "error"]
    if problems:
        click.echo(format_problems(results))
        raise DoctorCheckError(platform_name, [f"{r.name}: {r.message}" for r in problems])
    click.echo(success(f"[success] {label} looking great! {emoji('👌', '')}".rstrip()))
