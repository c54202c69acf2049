"""Exception hierarchy for capkit.

Usage::

    from capkit._exceptions import PlatformError

    try:
        await doctor(config, "bogus")
    except PlatformError as e:
        print(f"doctor failed: {e}")
"""

from __future__ import annotations

from typing import List


class CapkitError(Exception):
    """Base exception for all capkit errors.

    The CLI turns any subclass into a one-line error message and exit
    status 1.
    """


class ConfigError(CapkitError):
    """Raised when the project's external config file cannot be parsed."""


class PlatformError(CapkitError):
    """Raised for an unknown platform name or a platform that has not been added."""


class DoctorCheckError(CapkitError):
    """Raised when a platform checker finds one or more errors."""

    def __init__(self, platform_name: str, problems: List[str]) -> None:
        self.platform_name = platform_name
        self.problems = list(problems)
        super().__init__(
            f"{platform_name} doctor found {len(self.problems)} problem(s)"
        )
