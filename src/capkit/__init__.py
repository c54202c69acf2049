"""capkit: command-line tooling for Capacitor native app projects.

A Capacitor project is a web app plus native Android and iOS projects,
driven by an external config file (``capacitor.config.json`` or
``capacitor.config.ts``) at the project root.

Layers::

    ┌─────────────────────────────────────────────────────┐
    │  capkit.cli                                         │
    │  click command group (``capkit doctor``)            │
    ├─────────────────────────────────────────────────────┤
    │  capkit.doctor                                      │
    │  config migration, version report, platform checks  │
    ├─────────────────────────────────────────────────────┤
    │  capkit.config                                      │
    │  external config loading and writing                │
    └─────────────────────────────────────────────────────┘

Logging is silent by default; set ``CAPKIT_LOG_LEVEL=DEBUG`` to see every
registry query and manifest lookup.
"""

from __future__ import annotations

__version__ = "0.1.0"

from capkit._exceptions import (  # noqa: E402
    CapkitError,
    ConfigError,
    DoctorCheckError,
    PlatformError,
)
from capkit._logging import set_log_level  # noqa: E402
from capkit.config import Config, load_config  # noqa: E402

__all__ = [
    "__version__",
    "CapkitError",
    "ConfigError",
    "DoctorCheckError",
    "PlatformError",
    "Config",
    "load_config",
    "set_log_level",
]
