"""Config patch result models."""

from enum import Enum

from pydantic import BaseModel, Field


class PatchOutcome(str, Enum):
    """What a config patch did to the document."""

    CREATED = "created"
    REPLACED = "replaced"
    INSERTED = "inserted"
    UNCHANGED = "unchanged"


class PatchResult(BaseModel):
    """Result of patching a configuration document.

    ``UNCHANGED`` means an existing document was left as is: either it has a
    ``base`` key whose value is not a string literal (``unrecognized_index``
    points at that line) or it has neither a declaration nor an anchor line.
    """

    outcome: PatchOutcome
    lines: list[str]
    original: list[str] | None = None
    declarations: int = Field(default=0, ge=0)
    anchor_index: int | None = None
    unrecognized_index: int | None = None

    @property
    def changed(self) -> bool:
        return self.original != self.lines

    @property
    def base_unrecognized(self) -> bool:
        return self.unrecognized_index is not None

    @property
    def anchor_found(self) -> bool:
        return self.outcome != PatchOutcome.UNCHANGED
