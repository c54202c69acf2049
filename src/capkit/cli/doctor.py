"""``capkit doctor``: project and toolchain diagnostics."""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from capkit._exceptions import CapkitError


@click.command()
@click.argument("platform", required=False)
@click.option("--project-dir", default=None, type=click.Path(file_okay=False),
              help="Project root (default: nearest directory with a capacitor config, "
                   "else the current directory)")
def doctor(platform: Optional[str], project_dir: Optional[str]) -> None:
    """Check the project config, dependency versions, and platform projects."""
    from capkit.config import find_config_root, load_config
    from capkit.doctor import doctor_command

    try:
        config = load_config(project_dir or find_config_root())
        asyncio.run(doctor_command(config, platform))
    except CapkitError as e:
        raise click.ClickException(str(e)) from e
