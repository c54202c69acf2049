"""Latest vs. installed versions of the core Capacitor packages.

Two independent sources are consulted for the same fixed package list:

* the npm registry, via ``npm info <package> version``;
* the project's own ``node_modules``, by reading each package's
  ``package.json``.

Every lookup degrades instead of failing: a registry miss is reported as
``unknown`` and a missing or unreadable manifest as ``not installed``.
Both batches are gathered before anything is printed, so the report lines
always come out in :data:`PACKAGE_NAMES` order.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

import click

from capkit._logging import get_logger
from capkit._subprocess import get_command_output
from capkit._util import resolve_node, strong, weak

logger = get_logger(__name__)

PACKAGE_NAMES: Tuple[str, ...] = (
    "@capacitor/cli",
    "@capacitor/core",
    "@capacitor/android",
    "@capacitor/ios",
)

UNKNOWN = "unknown"
NOT_INSTALLED = "not installed"

# (package name, version) in PACKAGE_NAMES order
VersionReport = List[Tuple[str, str]]


def _npm_command() -> str:
    return os.environ.get("CAPKIT_NPM", "npm")


async def get_latest_version(package_name: str) -> Optional[str]:
    """Ask the registry for the latest published version of *package_name*."""
    version = await get_command_output(_npm_command(), "info", package_name, "version")
    logger.debug("latest %s -> %s", package_name, version)
    return version


async def get_latest_versions() -> VersionReport:
    """Query the registry for every package concurrently."""
    versions = await asyncio.gather(*(get_latest_version(name) for name in PACKAGE_NAMES))
    return [(name, version or UNKNOWN) for name, version in zip(PACKAGE_NAMES, versions)]


async def read_package_version(package_path: Optional[Path]) -> Optional[str]:
    """Return the ``version`` declared in a ``package.json``, if any."""
    if package_path is None:
        return None
    try:
        text = await asyncio.to_thread(package_path.read_text, encoding="utf-8")
        manifest = json.loads(text)
    except (OSError, ValueError) as exc:
        logger.debug("Could not read %s: %s", package_path, exc)
        return None
    version = manifest.get("version") if isinstance(manifest, dict) else None
    return str(version) if version else None


async def get_installed_version(root_dir: Union[str, Path], package_name: str) -> Optional[str]:
    package_path = resolve_node(root_dir, package_name, "package.json")
    version = await read_package_version(package_path)
    logger.debug("installed %s (%s) -> %s", package_name, package_path, version)
    return version


async def get_installed_versions(root_dir: Union[str, Path]) -> VersionReport:
    """Resolve every package from the project's ``node_modules`` concurrently."""
    versions = await asyncio.gather(
        *(get_installed_version(root_dir, name) for name in PACKAGE_NAMES)
    )
    return [(name, version or NOT_INSTALLED) for name, version in zip(PACKAGE_NAMES, versions)]


def format_versions(report: VersionReport) -> str:
    return "".join(f"  {name}: {weak(version)}\n" for name, version in report)


async def print_versions(root_dir: Union[str, Path]) -> None:
    """Print the latest and installed dependency blocks."""
    latest = await get_latest_versions()
    click.echo(
        f"{strong('Latest Dependencies:')}\n\n"
        f"{format_versions(latest)}\n"
        f"{strong('Installed Dependencies:')}\n",
    )

    installed = await get_installed_versions(root_dir)
    click.echo(format_versions(installed))
