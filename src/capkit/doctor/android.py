"""Android project diagnostics.

Verifies that the native Android project under ``config.android.platform_dir``
is complete enough to build:

1. Platform directory present
2. Gradle wrapper present
3. App source directories and copied web assets
4. ``AndroidManifest.xml`` parses and declares an ``<application>``
5. ``app/build.gradle`` uses the configured app id
"""

from __future__ import annotations

import asyncio
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

from capkit._logging import get_logger
from capkit.config import Config
from capkit.doctor._result import CheckResult, report

logger = get_logger(__name__)

APP_DIR = "app"
SRC_MAIN_DIR = "app/src/main"
ASSETS_DIR = "app/src/main/assets"
WEB_DIR = "app/src/main/assets/public"


async def doctor_android(config: Config) -> None:
    """Run every Android check and print the outcome.

    Raises:
        DoctorCheckError: If any check fails.
    """
    results = await asyncio.to_thread(check_android, config)
    logger.debug("Android checks finished: %d result(s)", len(results))
    report("Android", config.android.name, results)


def check_android(config: Config) -> List[CheckResult]:
    platform_dir = config.android.platform_dir
    if not platform_dir.is_dir():
        return [CheckResult("Platform", "error",
                            f"{platform_dir.name} directory is missing",
                            fix="Run: npx cap add android")]

    results = [CheckResult("Platform", "ok", str(platform_dir))]
    results.append(_check_gradlew(platform_dir))

    src_dirs = _check_app_src_dirs(platform_dir)
    results.append(src_dirs)
    if src_dirs.status != "ok":
        return results

    results.append(_check_manifest(platform_dir / SRC_MAIN_DIR / "AndroidManifest.xml"))
    results.append(_check_build_gradle(platform_dir / APP_DIR / "build.gradle", config.app.app_id))
    return results


def _check_gradlew(platform_dir: Path) -> CheckResult:
    if (platform_dir / "gradlew").is_file():
        return CheckResult("Gradle wrapper", "ok", "gradlew present")
    return CheckResult("Gradle wrapper", "error",
                       f"gradlew file is missing in {platform_dir.name}",
                       fix="Regenerate the wrapper with: gradle wrapper")


def _check_app_src_dirs(platform_dir: Path) -> CheckResult:
    for rel in (APP_DIR, SRC_MAIN_DIR, ASSETS_DIR, WEB_DIR):
        if not (platform_dir / rel).is_dir():
            return CheckResult("App sources", "error",
                               f"{rel} directory is missing in {platform_dir.name}")

    if not (platform_dir / WEB_DIR / "index.html").is_file():
        return CheckResult("App sources", "error",
                           f"index.html file is missing in {WEB_DIR}",
                           fix="Build your web assets, then run: npx cap sync android")
    return CheckResult("App sources", "ok", "app sources and web assets present")


def _check_manifest(manifest_path: Path) -> CheckResult:
    if not manifest_path.is_file():
        return CheckResult("AndroidManifest.xml", "error",
                           f"AndroidManifest.xml is missing in {manifest_path.parent}")
    try:
        root = ET.parse(manifest_path).getroot()
    except ET.ParseError as exc:
        return CheckResult("AndroidManifest.xml", "error",
                           f"AndroidManifest.xml is not valid XML: {exc}")
    except OSError as exc:
        return CheckResult("AndroidManifest.xml", "error",
                           f"AndroidManifest.xml could not be read: {exc}")

    if root.tag != "manifest":
        return CheckResult("AndroidManifest.xml", "error",
                           "Missing <manifest> XML node in AndroidManifest.xml")
    if root.find("application") is None:
        return CheckResult("AndroidManifest.xml", "error",
                           "Missing <application> XML node as a child node of <manifest>")
    return CheckResult("AndroidManifest.xml", "ok", "manifest is valid")


def _check_build_gradle(gradle_path: Path, app_id: str) -> CheckResult:
    if not app_id:
        return CheckResult("build.gradle", "skipped", "no appId configured")
    if not gradle_path.is_file():
        return CheckResult("build.gradle", "error",
                           f"build.gradle file is missing in {gradle_path.parent}")

    try:
        contents = gradle_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return CheckResult("build.gradle", "error",
                           f"build.gradle could not be read: {exc}")
    match = re.search(r"""applicationId\s*=?\s*["']([^"']+)["']""", contents)
    if match is None:
        return CheckResult("build.gradle", "error",
                           "build.gradle does not declare an applicationId")
    if match.group(1) != app_id:
        return CheckResult("build.gradle", "error",
                           f"applicationId {match.group(1)} does not match appId {app_id}",
                           fix=f'Set applicationId "{app_id}" in app/build.gradle')
    return CheckResult("build.gradle", "ok", f"applicationId {app_id}")
