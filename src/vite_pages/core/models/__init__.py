"""Domain models for vite-pages."""

from vite_pages.core.models.patch import PatchOutcome, PatchResult
from vite_pages.core.models.pipeline import SetupReport, StepResult, StepStatus
from vite_pages.core.models.project import ProjectConfig

__all__ = [
    "PatchOutcome",
    "PatchResult",
    "ProjectConfig",
    "SetupReport",
    "StepResult",
    "StepStatus",
]
