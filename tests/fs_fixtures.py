"""Filesystem helpers shared by the unit tests."""

from __future__ import annotations

import os
from pathlib import Path


def touch(path: Path, mtime: int) -> Path:
    """Write ``path`` with its own name as content and pin its mtime."""
    path.write_text(path.name, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path
