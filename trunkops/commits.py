"""
Conventional Commit message assembly.
"""
from dataclasses import dataclass
from typing import Optional

# Offered in help text only; any type is accepted.
COMMON_TYPES = ("feat", "fix", "chore", "docs", "refactor", "test", "perf", "build", "ci", "style")


@dataclass(frozen=True)
class CommitMessage:
    type: str
    description: str
    scope: Optional[str] = None
    breaking: bool = False

    @property
    def header(self) -> str:
        scope = f"({self.scope})" if self.scope else ""
        marker = "!" if self.breaking else ""
        return f"{self.type}{scope}{marker}: {self.description}"

    def render(self) -> str:
        """
        Renders ``type(scope)!: description``.

        Breaking changes also get a ``BREAKING CHANGE:`` footer that repeats
        the description.
        """
        if self.breaking:
            return f"{self.header}\n\nBREAKING CHANGE: {self.description}"
        return self.header

    def __str__(self):
        return self.render()
