"""
Atomic publication of a generated directory tree.

The new tree is built in a temporary directory next to the output directory,
then swapped in with two renames:

1. ``build`` -> ``build-bak-<timestamp>``
2. ``tmp`` -> ``build``

If the second rename fails the backup is renamed back. Removing the backup
afterwards is a non-fatal cleanup step.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from errors import GeneratorError, PublishError

LOGGER = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S%f"


@dataclass
class PublishResult:
    build_dir: Path
    backup_dir: Path
    backup_removed: bool
    pages: int = 0


def backup_path(build_dir: Path, now: Optional[datetime] = None) -> Path:
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    return build_dir.with_name(f"{build_dir.name}-bak-{stamp}")


def _remove_backup(backup_dir: Path) -> bool:
    try:
        shutil.rmtree(backup_dir)
    except OSError as e:
        LOGGER.warning(f"Could not remove backup {backup_dir}: {e}")
        return False
    return True


def _swap(tmp_dir: Path, build_dir: Path, backup_dir: Path) -> None:
    try:
        os.rename(build_dir, backup_dir)
    except OSError as e:
        raise PublishError(f"failed to move {build_dir} aside to {backup_dir}: {e}") from e

    try:
        os.rename(tmp_dir, build_dir)
    except OSError as e:
        try:
            os.rename(backup_dir, build_dir)
            LOGGER.info(f"Restored {build_dir} from {backup_dir}")
        except OSError as rollback_err:
            LOGGER.error(f"Rollback failed, previous output left at {backup_dir}: {rollback_err}")
        raise PublishError(f"failed to rename {tmp_dir} to {build_dir}: {e}") from e


def publish_tree(
    build_dir: str | Path,
    populate: Callable[[Path], Optional[int]],
    now: Optional[datetime] = None,
) -> PublishResult:
    """Build a fresh tree with ``populate(tmp_dir)`` and swap it into ``build_dir``.

    ``build_dir`` must already exist; ``populate`` may return a page count.
    """
    build_dir = Path(build_dir)
    try:
        backup_dir = backup_path(build_dir, now)
    except ValueError as e:
        raise PublishError(f"cannot derive a backup name for {build_dir}: {e}") from e
    parent = build_dir.parent
    try:
        tmp_dir = Path(tempfile.mkdtemp(prefix=f".{build_dir.name}-tmp-", dir=parent))
    except (OSError, ValueError) as e:
        raise PublishError(f"failed to create temporary directory in {parent}: {e}") from e

    try:
        try:
            pages = populate(tmp_dir) or 0
        except GeneratorError:
            raise
        except OSError as e:
            raise PublishError(f"failed to build output in {tmp_dir}: {e}") from e

        _swap(tmp_dir, build_dir, backup_dir)
    finally:
        if tmp_dir.exists():
            shutil.rmtree(tmp_dir, ignore_errors=True)

    LOGGER.info(f"Published {build_dir}")
    removed = _remove_backup(backup_dir)
    return PublishResult(build_dir=build_dir, backup_dir=backup_dir, backup_removed=removed, pages=pages)


__all__ = ["PublishResult", "backup_path", "publish_tree"]
