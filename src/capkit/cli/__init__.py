"""CLI package for capkit.

Subcommands are registered from separate modules.

Usage::

    capkit doctor
    capkit doctor android
    capkit doctor --project-dir path/to/app
"""

from __future__ import annotations

import click

from capkit._logging import get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(package_name="capkit")
def main() -> None:
    """capkit: tooling for Capacitor native app projects."""


from capkit.cli.doctor import doctor  # noqa: E402

main.add_command(doctor)
