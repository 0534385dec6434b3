"""File-system helpers for preparing and restoring the game directory."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Iterable
from contextlib import suppress
from pathlib import Path

from .logger import Color, log

TEMP_DIR_NAME = ".temp"
_VERSION_PREFIX = "version-"


class UpdaterError(Exception):
    """An update step failed."""


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def move_item(source: str | os.PathLike, destination_dir: str | os.PathLike) -> Path:
    """Move ``source`` into ``destination_dir``, replacing what is there.

    Returns the new path of the item.
    """
    source = Path(source)
    name = source.name
    if name in ("", ".."):
        raise UpdaterError("Invalid source path")
    target = Path(destination_dir) / name

    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists():
        _remove(target)

    source.rename(target)
    return target


def move_items(source_dir: str | os.PathLike, destination_dir: str | os.PathLike) -> None:
    """Move every entry of ``source_dir`` into ``destination_dir``.

    Entries that cannot be moved are left where they are.
    """
    source_dir = Path(source_dir)
    destination_dir = Path(destination_dir)
    if not source_dir.is_dir() or not destination_dir.is_dir():
        raise UpdaterError("Invalid path")

    for entry in list(source_dir.iterdir()):
        with suppress(OSError, UpdaterError):
            move_item(entry, destination_dir)


def read_game_version(working_path: str | os.PathLike) -> str | None:
    """Return the version text from the ``assets/version-*`` file, if any."""
    assets = Path(working_path) / "assets"
    if not assets.is_dir():
        return None
    try:
        names = sorted(entry.name for entry in assets.iterdir())
    except OSError:
        return None

    for name in names:
        if name.startswith(_VERSION_PREFIX):
            while name.startswith(_VERSION_PREFIX):
                name = name[len(_VERSION_PREFIX):]
            return name
    return None


def check_temp_folder(
    working_path: str | os.PathLike,
    ask: Callable[[], str] = input,
) -> bool:
    """Offer to delete a temp folder left by an interrupted run.

    Returns False if the user declines, True otherwise.
    """
    temp_path = Path(working_path) / TEMP_DIR_NAME
    if not temp_path.is_dir():
        return True

    log(
        "The folder .temp already exists, probably the updater tool exited before completing.",
        Color.YELLOW,
    )
    log("Do you want to delete it? (y,N): ", Color.YELLOW)

    try:
        answer = ask()
    except (OSError, EOFError) as exc:
        raise UpdaterError(f"Failed to read input: {exc}") from exc

    if answer.strip().lower() != "y":
        return False

    try:
        shutil.rmtree(temp_path)
    except OSError as exc:
        raise UpdaterError(f"Failed to delete folder: {exc}") from exc
    return True


def _default_keep() -> tuple[Path, ...]:
    return (Path(sys.argv[0]),) if sys.argv and sys.argv[0] else ()


def clean_working_path(
    working_path: str | os.PathLike,
    keep: Iterable[str | os.PathLike] | None = None,
) -> None:
    """Delete everything in ``working_path`` except the temp folder and ``keep``.

    ``keep`` defaults to the running program. Items that cannot be removed
    are reported and skipped.
    """
    working_path = Path(working_path)
    kept = {Path(p).resolve() for p in (_default_keep() if keep is None else keep)}

    for path in list(working_path.iterdir()):
        if path.name == TEMP_DIR_NAME:
            continue
        if path.resolve() in kept:
            continue

        kind = "directory" if path.is_dir() and not path.is_symlink() else "file"
        try:
            _remove(path)
        except OSError as exc:
            log(f"Failed to remove {kind} {path}: {exc}", Color.YELLOW)


def clear_temp(temp_dir: str | os.PathLike, working_path: str | os.PathLike) -> None:
    """Move the saved items back into ``working_path`` and drop the temp folder."""
    try:
        move_items(temp_dir, working_path)
    except (UpdaterError, OSError) as exc:
        raise UpdaterError(f"Failed to move temp to working path: {exc}") from exc
    shutil.rmtree(temp_dir, ignore_errors=True)