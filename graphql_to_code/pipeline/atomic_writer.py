"""
Atomic file writer for emitted source files.

Ensures that an interrupted run never leaves a half-written output file.
"""

from __future__ import annotations

import tempfile
from pathlib import Path


class AtomicWriter:
    """Writes files through a temporary file in the target directory.

    1. Write to a temporary file next to the target
    2. Atomically replace the target file

    Content is written as UTF-8 with newline translation disabled, so line
    separators already present in the content are kept as-is.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory so the rename stays on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise
