"""
Short-lived branch naming.
"""
from dataclasses import dataclass
from enum import Enum

from .exit_codes import ValidationError


class BranchKind(Enum):
    FEATURE = "feature"
    RELEASE = "release"
    HOTFIX = "hotfix"

    @classmethod
    def parse(cls, value) -> "BranchKind":
        """
        Parses a branch kind case-insensitively.

        Raises:
            ValidationError: if the value is not feature, release or hotfix.
        """
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise ValidationError(
            f"Invalid branch type '{value}'. Use 'feature', 'release', or 'hotfix'."
        )


@dataclass(frozen=True)
class BranchSpec:
    kind: BranchKind
    identifier: str

    @property
    def name(self) -> str:
        return f"{self.kind.value}/{self.identifier}"

    def __str__(self):
        return self.name
