"""Async subprocess helpers.

Registry queries and toolchain probes run as child processes on the event
loop so that several of them can be outstanding at once.
"""

from __future__ import annotations

import asyncio
import shutil
from typing import Optional

from capkit._logging import get_logger

logger = get_logger(__name__)


async def run_command(command: str, *args: str, cwd: Optional[str] = None) -> str:
    """Run *command* and return its decoded stdout.

    Raises:
        FileNotFoundError: If *command* is not on PATH.
        RuntimeError: If the process exits with a non-zero status.
    """
    executable = shutil.which(command)
    if executable is None:
        raise FileNotFoundError(f"{command} not found on PATH")

    proc = await asyncio.create_subprocess_exec(
        executable,
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=cwd,
    )
    stdout, stderr = await proc.communicate()

    if proc.returncode != 0:
        error = stderr.decode(errors="replace").strip() if stderr else "unknown error"
        raise RuntimeError(
            f"{command} {' '.join(args)} exited with {proc.returncode}: {error}"
        )
    return stdout.decode(errors="replace") if stdout else ""


async def get_command_output(command: str, *args: str, cwd: Optional[str] = None) -> Optional[str]:
    """Like :func:`run_command`, but return ``None`` on any failure.

    Empty output is also reported as ``None``.
    """
    try:
        output = await run_command(command, *args, cwd=cwd)
    except (OSError, RuntimeError) as exc:
        logger.debug("%s %s failed: %s", command, " ".join(args), exc)
        return None
    output = output.strip()
    return output or None

