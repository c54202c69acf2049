"""iOS project diagnostics.

Checks the Xcode project layout under ``config.ios.platform_dir`` and, on
macOS, that the CocoaPods and Xcode toolchains respond.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import List

from capkit._logging import get_logger
from capkit._subprocess import get_command_output
from capkit.config import Config
from capkit.doctor._result import CheckResult, report

logger = get_logger(__name__)

PROJECT_DIR = "App"


async def doctor_ios(config: Config) -> None:
    """Run every iOS check and print the outcome.

    Raises:
        DoctorCheckError: If any check fails.
    """
    results = await asyncio.to_thread(check_ios_project, config.ios.platform_dir)
    if sys.platform == "darwin":
        results.extend(await asyncio.gather(check_cocoapods(), check_xcode()))
    else:
        logger.debug("Skipping CocoaPods/Xcode checks on %s", sys.platform)
    report("iOS", config.ios.name, results)


def check_ios_project(platform_dir: Path) -> List[CheckResult]:
    if not platform_dir.is_dir():
        return [CheckResult("Platform", "error",
                            f"{platform_dir.name} directory is missing",
                            fix="Run: npx cap add ios")]

    project_dir = platform_dir / PROJECT_DIR
    if not project_dir.is_dir():
        return [CheckResult("Xcode project", "error",
                            f"{PROJECT_DIR} directory is missing in {platform_dir.name}")]

    results = [CheckResult("Platform", "ok", str(platform_dir))]
    for name, fix in (
        ("Podfile", "Restore the Podfile or re-add the ios platform"),
        ("App.xcodeproj", "Restore App.xcodeproj or re-add the ios platform"),
    ):
        if (project_dir / name).exists():
            results.append(CheckResult(name, "ok", "present"))
        else:
            results.append(CheckResult(name, "error",
                                       f"{name} is missing in {platform_dir.name}/{PROJECT_DIR}",
                                       fix=fix))

    index_html = project_dir / "App" / "public" / "index.html"
    if index_html.is_file():
        results.append(CheckResult("Web assets", "ok", "index.html present"))
    else:
        results.append(CheckResult("Web assets", "error",
                                   f"index.html file is missing in {PROJECT_DIR}/App/public",
                                   fix="Build your web assets, then run: npx cap sync ios"))
    return results


async def check_cocoapods() -> CheckResult:
    version = await get_command_output("pod", "--version")
    if version is None:
        return CheckResult("CocoaPods", "error",
                           "CocoaPods is not installed",
                           fix="Install with: sudo gem install cocoapods")
    return CheckResult("CocoaPods", "ok", f"CocoaPods {version}")


async def check_xcode() -> CheckResult:
    output = await get_command_output("xcodebuild", "-version")
    if output is None:
        return CheckResult("Xcode", "error",
                           "Xcode is not installed",
                           fix="Install Xcode from the Mac App Store")
    return CheckResult("Xcode", "ok", output.splitlines()[0])
