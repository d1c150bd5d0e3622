"""Exceptions raised by the scaffolding stages."""

from __future__ import annotations

from pathlib import Path


class StarterError(Exception):
    """Base class for every failure the scaffolder reports to the operator."""


class DirectoryExistsError(StarterError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'Directory "{path}" already exists')


class CopyError(StarterError):
    """Raised when the template tree cannot be copied."""


class InstallError(StarterError):
    """Raised when the dependency install command fails or cannot start."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        command: list[str] | None = None,
    ) -> None:
        self.returncode = returncode
        self.command = list(command or [])
        super().__init__(message)
