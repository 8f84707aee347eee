"""Directory listing for the cycler.

Builds the ordered file sequence: direct regular files of one directory,
filtered by a file-name regex and sorted by an ordering predicate.
The sequence is rebuilt on every call and never cached.
"""

from __future__ import annotations

import os
import re
from functools import cmp_to_key
from pathlib import Path

from .ordering import Predicate, older_than


def compile_filter(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """Return ``pattern`` compiled, or ``None`` when no filter is set.

    Raises ``re.error`` for an invalid expression.
    """
    if pattern is None:
        return None
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def name_matches(name: str, pattern: re.Pattern[str] | None) -> bool:
    """True when no filter is set or ``pattern`` is found in ``name``."""
    return pattern is None or pattern.search(name) is not None


def _predicate_key(predicate: Predicate):
    def compare(a: Path, b: Path) -> int:
        if predicate(a, b):
            return -1
        if predicate(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def list_files(
    directory: str | os.PathLike[str],
    filter: str | re.Pattern[str] | None = None,
    predicate: Predicate = older_than,
) -> list[Path]:
    """List regular files directly under ``directory`` in predicate order.

    Returns an empty list when ``directory`` is not a directory. Other
    filesystem errors, such as ``PermissionError``, propagate.
    """
    root = Path(directory).absolute()
    if not root.is_dir():
        return []

    pattern = compile_filter(filter)
    names: list[str] = []
    with os.scandir(root) as entries:
        for entry in entries:
            if not name_matches(entry.name, pattern):
                continue
            try:
                is_file = entry.is_file(follow_symlinks=True)
            except OSError:
                is_file = False
            if is_file:
                names.append(entry.name)

    # scandir order is arbitrary; ties keep name order through the stable sort.
    candidates = [root / name for name in sorted(names)]
    return sorted(candidates, key=_predicate_key(predicate))
