import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _clean_setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings come from the environment; keep every test on the defaults.
    for name in list(os.environ):
        if name.startswith("NEXT_SETUP_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EDITOR", "nano")


@dataclass
class RecordingRunner:
    """Fake CommandRunner: records argv and answers with canned exit codes."""

    exit_codes: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[list[str], str | None]] = field(default_factory=list)
    spawned: list[tuple[list[str], str | None]] = field(default_factory=list)
    on_run: dict[str, object] = field(default_factory=dict)

    def run(self, args, *, cwd=None):
        self.calls.append((list(args), cwd))
        key = " ".join(args)
        for prefix, hook in self.on_run.items():
            if key.startswith(prefix):
                hook(args, cwd)
        for prefix, rc in self.exit_codes.items():
            if key.startswith(prefix):
                return rc
        return 0

    def spawn(self, args, *, cwd=None):
        self.spawned.append((list(args), cwd))
        return 4242

    def commands(self) -> list[str]:
        return [" ".join(a) for a, _ in self.calls]


@dataclass
class ScriptedPrompter:
    answers: list[str] = field(default_factory=list)
    confirms: list[bool] = field(default_factory=list)
    asked: list[str] = field(default_factory=list)

    def ask(self, message, *, default=""):
        self.asked.append(message)
        answer = self.answers.pop(0).strip() if self.answers else ""
        return answer or default

    def confirm(self, message):
        self.asked.append(message)
        return self.confirms.pop(0) if self.confirms else False


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()
