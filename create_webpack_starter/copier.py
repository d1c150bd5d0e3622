"""Copy a template directory tree into a new project directory.

Template files are copied byte-for-byte; nothing is rendered.  A partially
written target is left in place if the copy fails midway.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path

from .errors import CopyError, DirectoryExistsError


def target_exists(path: str | Path) -> bool:
    """Return ``True`` if anything (including a dangling symlink) is at *path*."""
    return os.path.lexists(path)


async def copy_template(template_path: str | Path, target_dir: str | Path) -> Path:
    """Recursively copy *template_path* to *target_dir*.

    Args:
        template_path: Source template directory.
        target_dir: Destination; must not exist yet.  Missing parent
            directories are created.

    Returns:
        The destination path.

    Raises:
        DirectoryExistsError: If *target_dir* already exists.  Nothing is
            written in that case.
        CopyError: If the source is not a directory or any file fails to copy.
    """
    source = Path(template_path)
    target = Path(target_dir)

    if target_exists(target):
        raise DirectoryExistsError(target)
    if not source.is_dir():
        raise CopyError(f"Template directory not found: {source}")

    try:
        await asyncio.to_thread(shutil.copytree, source, target)
    except FileExistsError as exc:
        # copytree creates the root with exist_ok=False; a directory created
        # after the existence check lands here.
        if exc.filename is not None and Path(exc.filename) == target:
            raise DirectoryExistsError(target) from exc
        raise CopyError(str(exc)) from exc
    except (shutil.Error, OSError) as exc:
        raise CopyError(f"Failed to copy template to {target}: {exc}") from exc

    return target
