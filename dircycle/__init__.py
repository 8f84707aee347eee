"""Public package surface for dircycle.

Exports the cycling engine and ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .cycler import CycleSettings, DirectoryCycler, next_name
from .host import Buffer, BufferHost, Host
from .listing import list_files
from .ordering import PREDICATES, newer_than, older_than, predicate_by_name


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "Buffer",
    "BufferHost",
    "CycleSettings",
    "DirectoryCycler",
    "Host",
    "PREDICATES",
    "list_files",
    "main",
    "newer_than",
    "next_name",
    "older_than",
    "predicate_by_name",
]
