"""
Errors raised by the generation pipeline.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for fatal errors that abort a generation run."""

    pass


class GeneratedFileNotFoundError(GenerationError, FileNotFoundError):
    """Raised when the external generator did not produce its output file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Generated {path.name} file not found at {path}")


class CommandExecutionError(GenerationError):
    """Raised when an external command cannot be started or exits non-zero.

    Attributes:
        command: The program that was run
        returncode: Exit code, or None if the process never started
        stderr: Captured standard error
    """

    def __init__(self, command: str, returncode: int | None = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Failed to start process: {command}"
        else:
            message = f"Command failed with exit code {returncode}. Error: {stderr}"
        super().__init__(message)
