"""Project diagnostics behind ``capkit doctor``.

Provides:
- ``core``: the orchestration flow (config migration, version report,
  platform dispatch)
- ``version_check``: latest vs. installed versions of the core packages
- ``android`` / ``ios``: native project checkers

Usage::

    import asyncio
    from capkit.config import load_config
    from capkit.doctor import doctor_command

    asyncio.run(doctor_command(load_config("."), "android"))

    # Or via CLI:
    # capkit doctor android
"""

from capkit.doctor.core import (
    dispatch_platforms,
    doctor,
    doctor_command,
    doctor_core,
    migrate_config,
    select_platforms,
)
from capkit.doctor.version_check import get_installed_versions, get_latest_versions

__all__ = [
    "dispatch_platforms",
    "doctor",
    "doctor_command",
    "doctor_core",
    "migrate_config",
    "select_platforms",
    "get_installed_versions",
    "get_latest_versions",
]
