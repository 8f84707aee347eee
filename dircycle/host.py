"""Host-side primitives used by ``DirectoryCycler.cycle``.

The host owns the notion of a current file and its buffers. ``BufferHost`` is
an in-memory editor model: an ordered buffer list with one current buffer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class Host(Protocol):
    def current_file(self) -> Path | None: ...

    def current_buffer(self) -> object | None: ...

    def open_file(self, path: Path) -> None: ...

    def close_if_unmodified(self, buffer: object) -> bool: ...


@dataclass
class Buffer:
    path: Path | None
    modified: bool = False


class BufferHost:
    def __init__(self, initial: str | os.PathLike[str] | None = None) -> None:
        self.buffers: list[Buffer] = []
        self.current: Buffer | None = None
        if initial is not None:
            self.open_file(Path(initial))

    def current_file(self) -> Path | None:
        if self.current is None:
            return None
        return self.current.path

    def current_buffer(self) -> Buffer | None:
        return self.current

    def buffer_for(self, path: str | os.PathLike[str]) -> Buffer | None:
        target = Path(path).absolute()
        for buffer in self.buffers:
            if buffer.path == target:
                return buffer
        return None

    def open_file(self, path: Path) -> None:
        """Switch to the buffer visiting ``path``, creating it when needed.

        Raises ``FileNotFoundError`` when ``path`` is no longer a file.
        """
        target = Path(path).absolute()
        existing = self.buffer_for(target)
        if existing is not None:
            self.current = existing
            return
        if not target.is_file():
            raise FileNotFoundError(f"No such file: {target}")
        buffer = Buffer(path=target)
        self.buffers.append(buffer)
        self.current = buffer

    def scratch(self) -> Buffer:
        """Switch to a new buffer that visits no file."""
        buffer = Buffer(path=None)
        self.buffers.append(buffer)
        self.current = buffer
        return buffer

    def close_if_unmodified(self, buffer: object) -> bool:
        """Drop ``buffer`` unless it has unsaved changes or is still current."""
        if not isinstance(buffer, Buffer) or buffer.modified:
            return False
        if buffer is self.current or not any(candidate is buffer for candidate in self.buffers):
            return False
        self.buffers = [candidate for candidate in self.buffers if candidate is not buffer]
        return True
