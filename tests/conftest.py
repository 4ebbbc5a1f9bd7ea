"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restore the working directory after each test.

    A run changes into its root directory; monkeypatch.chdir records the
    current directory and switches back on teardown.
    """
    monkeypatch.chdir(Path.cwd())


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture every record emitted by the package loggers."""
    caplog.set_level(logging.DEBUG, logger="checksymlinks")
    return caplog


@pytest.fixture
def link_tree(tmp_path: Path) -> Path:
    """Build a tree with one broken and one valid link.

    Layout::

        root/
            a -> b          (b missing, broken)
            c -> d          (valid)
            d               (regular file)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "d").write_text("content")
    (root / "a").symlink_to("b")
    (root / "c").symlink_to("d")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Build a nested tree with links at several depths.

    Layout::

        root/
            data.txt
            docs/
                guide.md
                old -> ../missing.md     (broken)
                readme -> guide.md       (valid)
            lib -> docs                  (valid, link to directory)
            src/
                deep/
                    chain -> ../../lib   (valid, chain through lib)
                    gone -> nowhere      (broken)
    """
    root = tmp_path / "root"
    docs = root / "docs"
    deep = root / "src" / "deep"
    docs.mkdir(parents=True)
    deep.mkdir(parents=True)

    (root / "data.txt").write_text("data")
    (docs / "guide.md").write_text("# guide")
    (docs / "old").symlink_to("../missing.md")
    (docs / "readme").symlink_to("guide.md")
    (root / "lib").symlink_to("docs")
    (deep / "chain").symlink_to("../../lib")
    (deep / "gone").symlink_to("nowhere")
    return root


@pytest.fixture
def list_symlinks() -> Callable[[Path], list[str]]:
    """Return a helper listing all symlinks below a root, root-relative and sorted."""

    def _list(root: Path) -> list[str]:
        return sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_symlink())

    return _list
