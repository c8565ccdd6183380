from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
EXIT_NOT_FOUND = 127


class CommandRunner(Protocol):
    def run(self, args: list[str], *, cwd: str | None = None) -> int: ...

    def spawn(self, args: list[str], *, cwd: str | None = None) -> int | None: ...


@dataclass
class SubprocessRunner:
    """Runs tools attached to the caller's terminal.

    ``run`` waits for the command and returns its exit code. ``spawn`` starts
    it in the background and returns the pid without waiting.
    """

    def run(self, args: list[str], *, cwd: str | None = None) -> int:
        logger.debug("+ (%s) %s", cwd or ".", " ".join(args))
        try:
            cp = subprocess.run(args, cwd=cwd, check=False)
        except FileNotFoundError:
            logger.warning("Command not found: %s", args[0])
            return EXIT_NOT_FOUND
        return int(cp.returncode)

    def spawn(self, args: list[str], *, cwd: str | None = None) -> int | None:
        logger.debug("+ (%s) %s &", cwd or ".", " ".join(args))
        try:
            proc = subprocess.Popen(args, cwd=cwd)
        except FileNotFoundError:
            logger.warning("Command not found: %s", args[0])
            return None
        return proc.pid
