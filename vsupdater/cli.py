"""Command line entry point for updating a game installation."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from contextlib import suppress
from pathlib import Path

from . import remote
from .fsutils import (
    TEMP_DIR_NAME,
    UpdaterError,
    check_temp_folder,
    clean_working_path,
    clear_temp,
    move_item,
    read_game_version,
)
from .logger import Color, log
from .version import GameVersion

BASE_URL = "https://cdn.vintagestory.at/gamefiles/stable/"
_VERSION = "0.1.0"


def _comma_list(value: str) -> list[str]:
    return value.split(",")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="vsupdater",
        description="Update a game installation to the latest stable release.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("--ignore-folders", type=_comma_list, action="extend", default=None)
    parser.add_argument("--ignore-files", type=_comma_list, action="extend", default=None)
    parser.add_argument("--working-path", default=None)
    parser.add_argument("--game-type", default=None)
    return parser.parse_args(argv)


def resolve_working_path(
    option: str | None, environ: Mapping[str, str] | None = None
) -> tuple[Path, Color]:
    """Choose the working directory and the colour it is reported in."""
    if option is not None:
        path = Path(option)
        if path.is_dir():
            return path, Color.GREEN
        raise UpdaterError(f"The working-path: {option}, is invalid")

    env = os.environ if environ is None else environ
    value = env.get("VINTAGE_STORY")
    if value is not None:
        return Path(value), Color.BRIGHT_GREEN

    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    folder = Path(program).resolve().parent if program else Path(".")
    return folder, Color.YELLOW


def find_latest_version(
    current: GameVersion, exists: Callable[[GameVersion], bool]
) -> GameVersion:
    """Probe versions from ``current`` upwards and return the last one found.

    Returns ``0.0.0`` when none exists.
    """
    candidate = current
    latest = GameVersion(0, 0, 0)
    while True:
        if exists(candidate):
            latest = candidate
            candidate = candidate.next_patch()
        elif candidate.minor != current.minor:
            if candidate.major != current.major:
                return latest
            candidate = candidate.next_major()
        else:
            candidate = candidate.next_minor()


def _release_url(prefix: str, version: GameVersion, suffix: str) -> str:
    return f"{BASE_URL}{prefix}{version}{suffix}"


def _stash(names: Sequence[str] | None, working_path: Path, temp_dir: Path, kind: str) -> None:
    for name in names or ():
        try:
            move_item(working_path / name, temp_dir)
        except (OSError, UpdaterError) as exc:
            raise UpdaterError(f"Cannot move {kind} to temp: {exc}") from exc


def _run(args: argparse.Namespace) -> int:
    working_path, color = resolve_working_path(args.working_path)
    log(f'Working Directory: "{working_path}"', color)

    if not check_temp_folder(working_path):
        return 0

    temp_dir = working_path / TEMP_DIR_NAME
    try:
        temp_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise UpdaterError(f"Error creating temporary directory: {exc}") from exc

    _stash(args.ignore_folders, working_path, temp_dir, "folder")
    _stash(args.ignore_files, working_path, temp_dir, "file")

    version_text = read_game_version(working_path)
    if version_text is None:
        raise UpdaterError("Unknown game version, add a file in assets/version-1.0.0.txt")
    try:
        installed = GameVersion.parse(version_text)
    except ValueError:
        raise UpdaterError(f"Invalid game version: {version_text}") from None

    prefix = remote.game_type_prefix(args.game_type or "server")
    suffix = remote.archive_suffix()
    log(f"Actual Version: {prefix}{installed}{suffix}", Color.WHITE)

    def probe(version: GameVersion) -> bool:
        url = _release_url(prefix, version, suffix)
        log(f"Pinging: {url}", Color.WHITE)
        if remote.url_exists(url):
            log(f"Version available: {version}", Color.GREEN)
            return True
        return False

    latest = find_latest_version(installed, probe)
    log(
        f"Latest version available: {latest}, installed version: {installed}",
        Color.BRIGHT_GREEN,
    )

    if latest.is_empty():
        log("No available versions found", Color.RED)
        clear_temp(temp_dir, working_path)
        return 1

    if latest == installed:
        log("No update needed! :D", Color.BRIGHT_GREEN)
        clear_temp(temp_dir, working_path)
        return 0

    download_url = _release_url(prefix, latest, suffix)
    log(
        f"All files and folders will be deleted in: {working_path}, except for ignored!!",
        Color.BRIGHT_YELLOW,
    )
    remote.countdown(5, Color.BRIGHT_RED)

    try:
        clean_working_path(working_path)
    except OSError as exc:
        raise UpdaterError(f"Failed to clean working path: {exc}") from exc
    log("Working path cleared!", Color.GREEN)

    try:
        archive = remote.download_file(download_url, working_path)
    except UpdaterError as exc:
        raise UpdaterError(f"Failed to download the version: {exc}") from exc

    log("File downloaded, decompressing...", Color.WHITE)
    try:
        remote.uncompress(archive)
    except UpdaterError as exc:
        raise UpdaterError(f"Failed to uncompress: {exc}") from exc

    log("Moving temp files to working path...", Color.WHITE)
    clear_temp(temp_dir, working_path)
    with suppress(OSError):
        archive.unlink()

    log(
        f"Success!!!, your vintage story has been updated to {latest}",
        Color.BRIGHT_GREEN,
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the updater and return the process exit code."""
    args = parse_args(argv)
    try:
        return _run(args)
    except UpdaterError as exc:
        log(str(exc), Color.RED)
        return 1


if __name__ == "__main__":
    sys.exit(main())