"""Shared pytest fixtures for the create-webpack-starter test suite.

Provides reusable fixtures for:
- A fake template root holding one small tree per registered template
- A working directory to scaffold projects into
- Scripted answers for the interactive prompts
- Mock subprocess helpers
- A wide Rich console so long paths are not wrapped in captured output
"""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_webpack_starter import utils
from create_webpack_starter.registry import TEMPLATES


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping tmp paths across lines in captured output."""
    monkeypatch.setattr(utils.console, "width", 500)
    monkeypatch.setattr(utils.error_console, "width", 500)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

def _template_files(key: str) -> dict[str, bytes]:
    """Relative path -> content for the fake tree of template *key*."""
    return {
        "package.json": f'{{"name": "{key}", "private": true}}\n'.encode("utf-8"),
        "webpack.config.js": b"module.exports = () => ({});\n",
        "src/views/pages/home/index.pug": b"doctype html\nhtml\n  body\n    h1 Hello\n",
        "src/assets/styles/main.scss": b"body { margin: 0; }\n",
        "src/assets/images/logo.bin": bytes(range(256)),
        "src/assets/empty.txt": b"",
    }


@pytest.fixture
def template_files() -> Callable[[str], dict[str, bytes]]:
    """Return the expected file map for a template key."""
    return _template_files


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Directory laid out like the package: ``<root>/templates/<key>/...``."""
    root = tmp_path / "template-root"
    for key, descriptor in TEMPLATES.items():
        base = root / descriptor.path
        for rel, content in _template_files(key).items():
            target = base / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
    yield root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for the operator's current directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    yield cwd


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative posix path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, bytes]]:
    return snapshot_tree


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

@pytest.fixture
def answers(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], list[str]]:
    """Script the operator's keyboard input.

    Usage:
        def test_prompt(answers):
            asked = answers(["demo-app", "1"])
            ...
            assert len(asked) == 2

    Returns the list of prompts that consumed an answer.
    """
    def factory(lines: Iterable[str]) -> list[str]:
        queue = list(lines)
        consumed: list[str] = []

        def fake_input(prompt: str = "") -> str:
            if not queue:
                raise AssertionError("Unexpected extra prompt")
            consumed.append(prompt)
            return queue.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)
        return consumed

    return factory


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
