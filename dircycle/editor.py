"""Cycling host backed by an external ``$EDITOR`` process.

Each opened file is handed to the editor command, which runs to completion.
Launch problems are kept as a message on the host instead of being raised.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from pathlib import Path


class EditorHost:
    """Opens cycle targets in ``$EDITOR``.

    The external editor owns its buffers, so there is nothing to close here.
    ``error`` holds the last launch failure message, if any.
    """

    def __init__(self, current: Path | None, editor: str | None = None) -> None:
        self.current = Path(current).absolute() if current is not None else None
        self.editor = editor if editor is not None else os.environ.get("EDITOR", "")
        self.error: str | None = None

    def current_file(self) -> Path | None:
        return self.current

    def current_buffer(self) -> Path | None:
        return self.current

    def command_for(self, target: Path) -> list[str]:
        """Return the argv that edits ``target``; empty when no editor is set."""
        editor = shlex.split(self.editor.strip())
        return [*editor, str(target)] if editor else []

    def open_file(self, path: Path) -> None:
        target = Path(path).absolute()
        cmd = self.command_for(target)
        if not cmd:
            self.error = "Cannot edit: $EDITOR is not set."
            return
        try:
            subprocess.run(cmd, check=False)
        except OSError as exc:
            self.error = f"Failed to launch editor: {exc}"
            return
        self.error = None
        self.current = target

    def close_if_unmodified(self, buffer: object) -> bool:
        return False
