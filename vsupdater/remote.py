"""Platform-specific download, probing and unpacking of game releases."""

from __future__ import annotations

import os
import platform
import subprocess
import time
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path

from .fsutils import UpdaterError, move_items
from .logger import Color, log

WINDOWS = "windows"
LINUX = "linux"

_PREFIXES = {
    (WINDOWS, "server"): "vs_server_win-x64_",
    (LINUX, "client"): "vs_client_linux-x64_",
    (LINUX, "server"): "vs_server_linux-x64_",
}
_SUFFIXES = {WINDOWS: ".zip", LINUX: ".tar.gz"}
_EXTRACTED_DIR = "vintagestory"


def _system(system: str | None) -> str:
    name = (system or platform.system()).lower()
    if name not in _SUFFIXES:
        raise UpdaterError("Unknown system")
    return name


def game_type_prefix(game_type: str, system: str | None = None) -> str:
    """Return the release file prefix for ``game_type`` on ``system``."""
    name = (system or platform.system()).lower()
    if name == WINDOWS and game_type == "client":
        raise UpdaterError(
            "This update tool does not support windows client update, "
            "because there is only .exe installer in official repositories"
        )
    try:
        return _PREFIXES[(name, game_type)]
    except KeyError:
        raise UpdaterError("Unknown system or game type") from None


def archive_suffix(system: str | None = None) -> str:
    """Return the archive extension used for releases on ``system``."""
    return _SUFFIXES[_system(system)]


def url_exists(url: str, system: str | None = None) -> bool:
    """Check whether ``url`` can be fetched, without downloading it."""
    if _system(system) == WINDOWS:
        command = [
            "powershell",
            "-Command",
            f"Invoke-WebRequest -Uri '{url}' -Method Head",
        ]
    else:
        command = ["wget", "--spider", url, "--quiet"]
    try:
        result = subprocess.run(command, capture_output=True)
    except OSError:
        return False
    return result.returncode == 0


def download_file(
    url: str, working_path: str | os.PathLike, system: str | None = None
) -> Path:
    """Download ``url`` into ``working_path`` and return the saved file's path."""
    name = _system(system)
    working_path = Path(working_path)
    if not working_path.exists():
        raise UpdaterError(f"Working path {working_path} does not exist")

    file_name = url.rsplit("/", 1)[-1] or "invalid_file_name"
    save_path = working_path / file_name

    if name == WINDOWS:
        tool = "curl"
        command = ["curl", "-L", url, "-o", str(save_path)]
    else:
        tool = "wget"
        command = ["wget", url, "-O", str(save_path)]

    try:
        result = subprocess.run(command)
    except OSError as exc:
        raise UpdaterError(f"Failed to execute {tool}: {exc}") from exc
    if result.returncode != 0:
        raise UpdaterError(f"Download failed with exit status {result.returncode}")
    return save_path


def uncompress(archive: str | os.PathLike, system: str | None = None) -> None:
    """Unpack ``archive`` next to itself and lift the game folder's contents up."""
    name = _system(system)
    archive = Path(archive)
    if not archive.exists():
        raise UpdaterError(f"File does not exist: {archive}")

    parent = archive.parent

    if name == WINDOWS:
        tool = "Expand-Archive"
        command = [
            "powershell",
            "-Command",
            f"Expand-Archive -Path '{archive}' -DestinationPath '{parent}' -Force",
        ]
    else:
        tool = "tar"
        command = ["tar", "-xzf", str(archive), "-C", str(parent)]

    try:
        result = subprocess.run(command)
    except OSError as exc:
        raise UpdaterError(f"Failed to execute {tool}: {exc}") from exc
    if result.returncode != 0:
        raise UpdaterError(f"{tool} command failed with exit status {result.returncode}")

    with suppress(UpdaterError, OSError):
        move_items(parent / _EXTRACTED_DIR, parent)


def countdown(
    seconds: int,
    color: Color = Color.BRIGHT_RED,
    sleep: Callable[[float], object] | None = None,
) -> None:
    """Print a second-by-second countdown."""
    pause = sleep if sleep is not None else time.sleep
    for remaining in range(seconds, 0, -1):
        plural = "" if remaining == 1 else "s"
        log(f"Continuing in {remaining} second{plural}...", color)
        pause(1)