"""Shared test fixtures for capkit.

These fixtures build throwaway Capacitor projects under ``tmp_path`` and
replace the npm registry subprocess, so no test needs node, npm, Xcode or
network access.

Design decisions:
- The registry is mocked at ``capkit.doctor.version_check.get_command_output``
  so the real resolution and formatting code still runs
- Installed packages are real ``node_modules/<pkg>/package.json`` files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional
from unittest.mock import patch

import pytest

LATEST_VERSIONS = {
    "@capacitor/cli": "6.1.2",
    "@capacitor/core": "6.1.2",
    "@capacitor/android": "6.1.1",
    "@capacitor/ios": "6.1.0",
}

EXT_CONFIG = {
    "appId": "com.example.app",
    "appName": "Example",
    "webDir": "www",
}


def install_package(root: Path, name: str, version: Optional[str]) -> Path:
    """Write ``node_modules/<name>/package.json`` under *root*."""
    pkg_dir = root / "node_modules" / Path(*name.split("/"))
    pkg_dir.mkdir(parents=True, exist_ok=True)
    manifest = {"name": name}
    if version is not None:
        manifest["version"] = version
    path = pkg_dir / "package.json"
    path.write_text(json.dumps(manifest), encoding="utf-8")
    return path


def make_android_project(root: Path, app_id: str = "com.example.app") -> Path:
    """Create a minimal Android project that passes every check."""
    android = root / "android"
    web = android / "app" / "src" / "main" / "assets" / "public"
    web.mkdir(parents=True)
    (web / "index.html").write_text("<html></html>", encoding="utf-8")
    (android / "gradlew").write_text("#!/bin/sh\n", encoding="utf-8")
    (android / "app" / "src" / "main" / "AndroidManifest.xml").write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<manifest xmlns:android="http://schemas.android.com/apk/res/android">\n'
        "  <application android:label=\"Example\" />\n"
        "</manifest>\n",
        encoding="utf-8",
    )
    (android / "app" / "build.gradle").write_text(
        "android {\n"
        "    defaultConfig {\n"
        f'        applicationId "{app_id}"\n'
        "    }\n"
        "}\n",
        encoding="utf-8",
    )
    return android


def make_ios_project(root: Path) -> Path:
    """Create a minimal iOS project that passes the layout checks."""
    ios = root / "ios"
    public = ios / "App" / "App" / "public"
    public.mkdir(parents=True)
    (public / "index.html").write_text("<html></html>", encoding="utf-8")
    (ios / "App" / "Podfile").write_text("platform :ios, '13.0'\n", encoding="utf-8")
    (ios / "App" / "App.xcodeproj").mkdir()
    return ios


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with a legacy JSON config, a web dir and all packages installed."""
    (tmp_path / "capacitor.config.json").write_text(json.dumps(EXT_CONFIG), encoding="utf-8")
    (tmp_path / "www").mkdir()
    for name, version in LATEST_VERSIONS.items():
        install_package(tmp_path, name, version)
    return tmp_path


@pytest.fixture
def registry():
    """Replace ``npm info`` with a lookup table.

    Yields the mutable table; remove or set an entry to ``None`` to make
    that package's query fail.
    """
    versions: Dict[str, Optional[str]] = dict(LATEST_VERSIONS)

    async def fake_output(command: str, *args: str, cwd: Optional[str] = None) -> Optional[str]:
        assert args[0] == "info" and args[2] == "version"
        return versions.get(args[1])

    with patch("capkit.doctor.version_check.get_command_output", side_effect=fake_output):
        yield versions
