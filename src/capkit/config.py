"""Project configuration: loading and writing ``capacitor.config.*`` files.

A project keeps its settings in an *external config* file at the project
root, either ``capacitor.config.json`` or ``capacitor.config.ts``.  The TS
variant is never executed; :func:`load_config` only recovers the object
literal when it is JSON-compatible (which is always the case for files
written by :func:`write_config`).
"""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from capkit._exceptions import ConfigError
from capkit._logging import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME_TS = "capacitor.config.ts"
CONFIG_FILE_NAME_JSON = "capacitor.config.json"

_TS_TEMPLATE = """import type {{ CapacitorConfig }} from '@capacitor/cli';

const config: CapacitorConfig = {body};

export default config;
"""

_TS_OBJECT_RE = re.compile(
    r"const\s+config(?:\s*:\s*[\w.]+)?\s*=\s*(\{.*\})\s*;?\s*export\s+default\s+config",
    re.DOTALL,
)


@dataclass
class PlatformConfig:
    """A target platform and the directory its project lives in."""
    name: str
    platform_dir: Path


@dataclass
class AppConfig:
    """Host project settings plus the external config record."""
    root_dir: Path
    ext_config_file_path: Path
    ext_config_type: str  # "json" or "ts"
    ext_config: Dict[str, Any] = field(default_factory=dict)
    app_id: str = ""
    app_name: str = ""
    web_dir: str = "www"

    @property
    def ext_config_name(self) -> str:
        return self.ext_config_file_path.name

    @property
    def web_dir_abs(self) -> Path:
        return self.root_dir / self.web_dir


@dataclass
class Config:
    """Everything a command needs to know about the host project."""
    app: AppConfig
    android: PlatformConfig
    ios: PlatformConfig
    web: PlatformConfig

    @property
    def platforms(self) -> Dict[str, PlatformConfig]:
        return {p.name: p for p in (self.android, self.ios, self.web)}


def load_config(root_dir: Union[str, Path] = ".") -> Config:
    """Load the project configuration rooted at *root_dir*.

    ``capacitor.config.ts`` takes precedence over ``capacitor.config.json``.
    When neither exists the external config record points at a (missing)
    JSON file and holds an empty object.

    Raises:
        ConfigError: If the config file cannot be read, is not valid JSON, or
            holds a non-string appId, appName or webDir.
    """
    root = Path(root_dir).resolve()
    ts_path = root / CONFIG_FILE_NAME_TS
    json_path = root / CONFIG_FILE_NAME_JSON

    if ts_path.is_file():
        ext_type, ext_path = "ts", ts_path
        ext_config = _read_ts_config(ts_path)
    else:
        ext_type, ext_path = "json", json_path
        ext_config = _read_json_config(json_path) if json_path.is_file() else {}

    logger.debug("Loaded %s config from %s", ext_type, ext_path)

    app = AppConfig(
        root_dir=root,
        ext_config_file_path=ext_path,
        ext_config_type=ext_type,
        ext_config=ext_config,
        app_id=_string_setting(ext_config, "appId", "", ext_path),
        app_name=_string_setting(ext_config, "appName", "", ext_path),
        web_dir=_string_setting(ext_config, "webDir", "www", ext_path),
    )
    return Config(
        app=app,
        android=PlatformConfig("android", root / _platform_path(ext_config, "android")),
        ios=PlatformConfig("ios", root / _platform_path(ext_config, "ios")),
        web=PlatformConfig("web", app.web_dir_abs),
    )


def _string_setting(ext_config: Dict[str, Any], key: str, default: str, path: Path) -> str:
    value = ext_config.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{key} in {path.name} must be a string, got {type(value).__name__}")
    return value


def _platform_path(ext_config: Dict[str, Any], name: str) -> str:
    section = ext_config.get(name)
    if isinstance(section, dict) and section.get("path"):
        return str(section["path"])
    return name


def _read_json_config(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Could not parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")
    return data


def _read_ts_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Could not read {path.name}: {exc}") from exc
    match = _TS_OBJECT_RE.search(text)
    if match is None:
        logger.warning("No config object found in %s; using an empty config", path.name)
        return {}
    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError:
        logger.warning(
            "%s uses TypeScript syntax that cannot be read statically; using an empty config",
            path.name,
        )
        return {}
    return data if isinstance(data, dict) else {}


def format_config(ext_config: Dict[str, Any], path: Union[str, Path]) -> str:
    """Serialize *ext_config* for the file format implied by *path*."""
    body = json.dumps(ext_config, indent=2)
    if Path(path).suffix == ".ts":
        return _TS_TEMPLATE.format(body=body)
    return body + "\n"


async def write_config(ext_config: Dict[str, Any], path: Union[str, Path]) -> None:
    """Write *ext_config* to *path* as TypeScript or JSON (by extension)."""
    contents = format_config(ext_config, path)
    await asyncio.to_thread(Path(path).write_text, contents, encoding="utf-8")
    logger.debug("Wrote config to %s", path)


def find_config_root(start: Optional[Union[str, Path]] = None) -> Path:
    """Return the nearest ancestor of *start* holding a config file.

    Falls back to *start* itself (default: the working directory).
    """
    origin = Path(start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        if (directory / CONFIG_FILE_NAME_TS).is_file() or (directory / CONFIG_FILE_NAME_JSON).is_file():
            return directory
    return origin
