"""Ordering predicates for directory cycling.

A predicate is a two-argument ``less(a, b)`` callable answering "should ``a``
precede ``b``". Predicates read filesystem metadata on demand and never cache.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

Predicate = Callable[[Path, Path], bool]

DEFAULT_PREDICATE_NAME = "older"


def safe_mtime_ns(path: Path) -> int | None:
    """Return ``st_mtime_ns`` for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_mtime_ns)
    except OSError:
        return None


def safe_file_size(path: Path) -> int | None:
    """Return the byte size of ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_size)
    except OSError:
        return None


def older_than(a: Path, b: Path) -> bool:
    """True when ``a`` was modified before ``b``.

    A missing ``b`` never has anything before it; a missing ``a`` precedes
    any existing ``b``.
    """
    b_mtime = safe_mtime_ns(b)
    if b_mtime is None:
        return False
    a_mtime = safe_mtime_ns(a)
    if a_mtime is None:
        return True
    return a_mtime < b_mtime


def newer_than(a: Path, b: Path) -> bool:
    """True when ``a`` was modified after ``b``; missing files come last."""
    return older_than(b, a)


def name_less(a: Path, b: Path) -> bool:
    return a.name < b.name


def size_less(a: Path, b: Path) -> bool:
    """True when ``a`` is smaller than ``b``; missing files come first."""
    b_size = safe_file_size(b)
    if b_size is None:
        return False
    a_size = safe_file_size(a)
    if a_size is None:
        return True
    return a_size < b_size


PREDICATES: dict[str, Predicate] = {
    "older": older_than,
    "newer": newer_than,
    "name": name_less,
    "size": size_less,
}


def predicate_names() -> list[str]:
    return sorted(PREDICATES)


def predicate_by_name(name: str) -> Predicate:
    """Resolve a predicate identifier such as ``"older"`` or ``"name"``."""
    key = name.strip().lower()
    try:
        return PREDICATES[key]
    except KeyError:
        known = ", ".join(predicate_names())
        raise ValueError(f"unknown order {name!r} (expected one of: {known})") from None
