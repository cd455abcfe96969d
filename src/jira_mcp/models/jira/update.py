"""
Models describing the outcome of an issue update.

An update runs up to two independent phases (status transition, then field
edit). Each phase that runs records one outcome; a failure in one phase
does not stop the other.
"""

from typing import Literal

from pydantic import BaseModel, Field

UpdatePhase = Literal["transition", "fields"]


class JiraUpdateOutcome(BaseModel):
    """Result of one update phase."""

    phase: UpdatePhase
    success: bool
    # New status name on a successful transition, the comma-separated
    # field names on a successful field edit, the error message otherwise
    detail: str


class JiraUpdateResult(BaseModel):
    """Ordered outcomes of updating one issue."""

    issue_key: str
    outcomes: list[JiraUpdateOutcome] = Field(default_factory=list)
