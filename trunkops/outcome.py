"""
Tagged outcome types shared by the executor and the workflow engine.

A single git invocation yields a CommandOutcome (Success or Failure).
A whole workflow yields a WorkflowResult (Completed or Failed).
"""
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    """A git command exited with status 0."""
    text: str = ""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A git command exited nonzero, could not be launched, or timed out."""
    text: str = ""

    @property
    def ok(self) -> bool:
        return False


CommandOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class Completed:
    """Every step of a workflow succeeded."""
    payload: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """A workflow stopped at its first failing step.

    ``diagnostic`` is the failing step's text, verbatim. ``step`` describes
    the step it came from.
    """
    diagnostic: str
    step: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False


WorkflowResult = Union[Completed, Failed]
