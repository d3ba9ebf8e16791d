"""
External command execution.

The pipeline only talks to the outside world (npm, pnpm, graphql-codegen)
through a ``CommandExecutor`` so tests can substitute a fake one.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import CommandExecutionError

LOG = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a successful command."""

    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class CommandExecutor(ABC):
    """Abstract base class for command executors."""

    @abstractmethod
    def execute(self, command: str, arguments: Sequence[str]) -> CommandResult:
        """
        Run a command to completion.

        Args:
            command: Program to run
            arguments: Arguments passed to the program, one per element

        Returns:
            The command result

        Raises:
            CommandExecutionError: If the command cannot be started or fails
        """


class SubprocessCommandExecutor(CommandExecutor):
    """Runs commands with ``subprocess.run``, capturing their output."""

    def __init__(self, logger: logging.Logger | None = None):
        self._log = logger or LOG

    def execute(self, command: str, arguments: Sequence[str]) -> CommandResult:
        cmd = [command, *arguments]
        self._log.debug("Executing command: %s", subprocess.list2cmdline(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            self._log.error("Failed to start process: %s", command)
            raise CommandExecutionError(command) from e

        if result.returncode != 0:
            self._log.error("Command failed with exit code %d. Error: %s", result.returncode, result.stderr)
            raise CommandExecutionError(command, result.returncode, result.stderr)

        if result.stdout.strip():
            self._log.debug("Command output: %s", result.stdout)

        return CommandResult(result.returncode, result.stdout, result.stderr)
