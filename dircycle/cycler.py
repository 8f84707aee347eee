"""Position-relative navigation over a directory's ordered files.

``next_name`` finds the current file in the ordered sequence and steps by an
increment. ``DirectoryCycler`` composes it with a host that opens the target
and discards the previous buffer when it carries no unsaved changes.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from .host import Host
from .listing import list_files
from .ordering import Predicate, older_than


def next_name(
    current_file: str | os.PathLike[str] | None,
    increment: int,
    directory: str | os.PathLike[str],
    filter: str | re.Pattern[str] | None = None,
    predicate: Predicate = older_than,
) -> Path | None:
    """Return the file ``increment`` steps from ``current_file``, or ``None``.

    Positive increments step toward the end of the ordered sequence, negative
    ones toward its start. ``None`` is returned when ``current_file`` is unset
    or not part of the sequence, and when the target index falls before the
    first file or past the last one.
    """
    if current_file is None:
        return None
    files = list_files(directory, filter, predicate)
    current = Path(current_file).absolute()
    try:
        index = files.index(current)
    except ValueError:
        return None

    target = index + increment
    if target < 0 or target >= len(files):
        return None
    return files[target]


@dataclass(frozen=True)
class CycleSettings:
    """Explicit cycler configuration.

    ``directory=None`` means "the directory of the current file".
    """

    directory: Path | None = None
    filter: str | re.Pattern[str] | None = None
    predicate: Predicate = older_than
    close_previous: bool = True


class DirectoryCycler:
    def __init__(self, settings: CycleSettings | None = None) -> None:
        self.settings = settings if settings is not None else CycleSettings()

    def directory_for(self, current_file: str | os.PathLike[str] | None) -> Path:
        """Resolve the directory to cycle through for ``current_file``."""
        if self.settings.directory is not None:
            return Path(self.settings.directory)
        if current_file is not None:
            return Path(current_file).absolute().parent
        return Path.cwd()

    def files(self, current_file: str | os.PathLike[str] | None = None) -> list[Path]:
        return list_files(
            self.directory_for(current_file),
            self.settings.filter,
            self.settings.predicate,
        )

    def peek(self, current_file: str | os.PathLike[str] | None, increment: int = 1) -> Path | None:
        """Return the cycle target without asking a host to open it."""
        return next_name(
            current_file,
            increment,
            self.directory_for(current_file),
            self.settings.filter,
            self.settings.predicate,
        )

    def cycle(self, host: Host, increment: int = 1) -> Path | None:
        """Open the file ``increment`` steps away in ``host``.

        No-op returning ``None`` when there is nothing to step to. Otherwise
        the target is opened and, when ``close_previous`` is set, the previous
        buffer is handed to the host to discard if it is unmodified.
        """
        current_file = host.current_file()
        target = self.peek(current_file, increment)
        if target is None:
            return None

        previous = host.current_buffer()
        host.open_file(target)
        if self.settings.close_previous and previous is not None:
            host.close_if_unmodified(previous)
        return target

    def next_file(self, host: Host) -> Path | None:
        return self.cycle(host, 1)

    def previous_file(self, host: Host) -> Path | None:
        return self.cycle(host, -1)
