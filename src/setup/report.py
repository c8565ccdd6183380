from __future__ import annotations

from pydantic import BaseModel, Field


class StepResult(BaseModel):
    name: str
    argv: list[str] = Field(default_factory=list)
    exit_code: int | None = None
    checked: bool = False
    background: bool = False
    skipped: bool = False
    pid: int | None = None

    @property
    def ok(self) -> bool:
        if self.skipped or self.background:
            return True
        return self.exit_code == 0


class SetupReport(BaseModel):
    project_dir: str = ""
    database_name: str = ""
    custom_model: bool = False
    files: list[str] = Field(default_factory=list)
    steps: list[StepResult] = Field(default_factory=list)
    aborted: bool = False
    abort_reason: str | None = None

    def failed_steps(self) -> list[StepResult]:
        return [s for s in self.steps if not s.ok]
