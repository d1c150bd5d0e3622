"""Install the new project's npm dependencies."""

from __future__ import annotations

from pathlib import Path

from .errors import InstallError
from .utils import run_command

DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")


async def install_deps(
    target_dir: str | Path,
    command: list[str] | tuple[str, ...] = DEFAULT_INSTALL_COMMAND,
) -> None:
    """Run the install *command* inside *target_dir*.

    The child inherits this process's stdin, stdout and stderr, so the
    operator sees live output and can answer any prompt it raises.  There is
    no timeout.

    Raises:
        InstallError: If the command cannot be started or exits non-zero.
    """
    cmd = list(command)
    display = " ".join(cmd)

    try:
        returncode = await run_command(cmd, cwd=target_dir)
    except OSError as exc:
        raise InstallError(f"Could not run '{display}': {exc}", command=cmd) from exc

    if returncode != 0:
        raise InstallError(
            f"'{display}' failed with exit code {returncode}",
            returncode=returncode,
            command=cmd,
        )
