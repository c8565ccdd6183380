from __future__ import annotations

import logging
import shlex
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from src.setup.runner import CommandRunner

logger = logging.getLogger(__name__)

TEMP_MODEL_FILE = "temp_model.txt"


class Prompter(Protocol):
    def ask(self, message: str, *, default: str = "") -> str: ...

    def confirm(self, message: str) -> bool: ...


@dataclass
class ConsolePrompter:
    def ask(self, message: str, *, default: str = "") -> str:
        answer = input(message).strip()
        return answer or default

    def confirm(self, message: str) -> bool:
        # Only an explicit "y" counts as yes.
        return input(message).strip() == "y"


def capture_schema_fragment(
    project_dir: str | Path,
    *,
    runner: CommandRunner,
    prompter: Prompter,
    editor: str,
) -> bytes | None:
    """Let the user paste a Prisma model into a scratch file.

    Opens ``editor`` on ``temp_model.txt`` inside the project and blocks until
    it exits. Returns the raw file bytes once the user confirms, ``None``
    otherwise. The scratch file is removed in both cases.
    """
    tmp = Path(project_dir) / TEMP_MODEL_FILE
    tmp.touch()
    try:
        logger.info("Opening %s for you to paste your model...", TEMP_MODEL_FILE)
        rc = runner.run([*shlex.split(editor), str(tmp)], cwd=str(project_dir))
        if rc != 0:
            logger.warning("Editor %r exited with code %d", editor, rc)

        if not prompter.confirm("Is your model input complete? (y to proceed): "):
            return None
        return tmp.read_bytes()
    finally:
        with suppress(FileNotFoundError):
            tmp.unlink()
        logger.info("Temporary model file deleted.")
