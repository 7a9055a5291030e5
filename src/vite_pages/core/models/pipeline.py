"""Setup pipeline step and report models."""

from enum import Enum

from pydantic import BaseModel, Field


class StepStatus(str, Enum):
    """Status of a single pipeline step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class StepResult(BaseModel):
    """Outcome of one pipeline step."""

    name: str
    description: str
    status: StepStatus
    error: str | None = None
    exit_code: int | None = None


class SetupReport(BaseModel):
    """Ordered results of a setup run."""

    steps: list[StepResult] = Field(default_factory=list)

    @property
    def failed_step(self) -> StepResult | None:
        for step in self.steps:
            if step.status == StepStatus.FAILED:
                return step
        return None

    @property
    def completed_steps(self) -> list[StepResult]:
        return [s for s in self.steps if s.status == StepStatus.SUCCEEDED]

    @property
    def succeeded(self) -> bool:
        return bool(self.steps) and all(s.status == StepStatus.SUCCEEDED for s in self.steps)

    @property
    def exit_code(self) -> int:
        failed = self.failed_step
        if failed is None:
            return 0
        return failed.exit_code or 1
