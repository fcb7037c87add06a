"""Shared pytest fixtures for the PackageMetadata test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Mapping

import pytest


@pytest.fixture(autouse=True)
def _restore_environ() -> None:
    """Snapshot environment variables and restore them after each test."""

    original = os.environ.copy()
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(original)


@pytest.fixture(autouse=True)
def _restore_cwd() -> None:
    """Ensure tests leave the current working directory unchanged."""

    original_cwd = Path.cwd()
    try:
        yield
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def crate_dir(tmp_path: Path) -> Callable[[Mapping[str, str]], Path]:
    """Return a factory that writes manifest files into a fresh crate directory."""

    def _make(files: Mapping[str, str]) -> Path:
        root = tmp_path / "crate"
        root.mkdir(exist_ok=True)
        for name, content in files.items():
            (root / name).write_text(content, encoding="utf-8")
        return root

    return _make
