"""The ``doctor`` orchestration flow.

Order of operations:

1. Offer to migrate a legacy ``capacitor.config.json`` to
   ``capacitor.config.ts`` (asked once, only when the JSON file exists)
2. Print latest vs. installed versions of the core packages
3. Run the platform checkers for the selected platforms concurrently
"""

from __future__ import annotations

import asyncio
import os
from typing import List, Optional

import click

from capkit._exceptions import PlatformError
from capkit._logging import get_logger
from capkit._util import emoji, strong
from capkit.config import CONFIG_FILE_NAME_TS, Config, write_config
from capkit.doctor import android, ios
from capkit.doctor.version_check import print_versions

logger = get_logger(__name__)


async def doctor_command(config: Config, selected_platform_name: Optional[str] = None) -> None:
    """Run the whole doctor flow for *config*."""
    pill = emoji("💊", "")
    click.echo(f"{pill}   {strong('Capacitor Doctor')}  {pill} \n")

    await doctor_core(config)

    platforms = select_platforms(config, selected_platform_name)
    await dispatch_platforms(config, platforms)


async def doctor_core(config: Config) -> None:
    """Config migration prompt followed by the dependency version report."""
    await migrate_config(config)
    await print_versions(config.app.root_dir)


async def migrate_config(config: Config) -> bool:
    """Offer to replace a legacy JSON config with a TS one.

    Returns:
        True if the config was migrated.
    """
    app = config.app
    if app.ext_config_type != "json":
        return False
    if not await asyncio.to_thread(app.ext_config_file_path.is_file):
        return False

    click.echo(
        f"{strong(f'Switch to a {CONFIG_FILE_NAME_TS} file for your configuration?')}\n"
        f"It looks like you're using a {strong(app.ext_config_name)} file. "
        "As of Capacitor 3, you can use a TypeScript configuration file, which allows "
        "for autocomplete in your editor and dynamic configuration values."
    )
    confirmed = click.confirm("Switch to TS configuration?", default=True)

    if confirmed:
        new_path = app.ext_config_file_path.parent / CONFIG_FILE_NAME_TS
        await write_config(app.ext_config, new_path)
        await asyncio.to_thread(os.unlink, app.ext_config_file_path)
        logger.info("Migrated %s to %s", app.ext_config_name, new_path.name)

    click.echo()
    return confirmed


def select_platforms(config: Config, selected_platform_name: Optional[str] = None) -> List[str]:
    """Resolve the platforms to check.

    With a name, only that platform (which must exist in the project).
    Without one, every added native platform plus web.

    Raises:
        PlatformError: For an unknown platform or one not added yet.
    """
    if selected_platform_name:
        name = selected_platform_name.strip().lower()
        platform = config.platforms.get(name)
        if platform is None:
            raise PlatformError(f"Invalid platform: {name}")
        if not platform.platform_dir.is_dir():
            if name == config.web.name:
                raise PlatformError(
                    "Could not find the web platform directory. "
                    f"Make sure {config.app.web_dir} exists."
                )
            raise PlatformError(f"{name} platform has not been added yet.")
        return [name]

    added = [
        p.name for p in (config.android, config.ios) if p.platform_dir.is_dir()
    ]
    added.append(config.web.name)
    return added


async def dispatch_platforms(config: Config, platform_names: List[str]) -> None:
    """Run :func:`doctor` for every platform concurrently.

    A failing platform does not stop its siblings.  Once all have finished,
    the first failure (in *platform_names* order) is re-raised.
    """
    results = await asyncio.gather(
        *(doctor(config, name) for name in platform_names),
        return_exceptions=True,
    )
    failures = [r for r in results if isinstance(r, BaseException)]
    for failure in failures:
        logger.debug("platform check failed: %s", failure)
    if failures:
        raise failures[0]


async def doctor(config: Config, platform_name: str) -> None:
    """Run the checker for a single platform.

    Raises:
        PlatformError: If *platform_name* is not a known platform.
    """
    if platform_name == config.ios.name:
        await ios.doctor_ios(config)
    elif platform_name == config.android.name:
        await android.doctor_android(config)
    elif platform_name == config.web.name:
        return
    else:
        raise PlatformError(f"Platform {platform_name} is not valid.")
