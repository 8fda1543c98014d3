"""
The git invocations workflows are built from.

Each function returns a WorkflowStep descriptor; nothing runs until the
engine hands the step to an executor.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .executor import render_args

TRUNK = "main"
REMOTE = "origin"


@dataclass(frozen=True)
class WorkflowStep:
    operation: str
    args: Tuple[str, ...] = ()
    description: str = ""

    @property
    def arg_string(self) -> str:
        return render_args(self.args)

    def __str__(self):
        return f"{self.operation} {self.arg_string}".rstrip()


def checkout_trunk(trunk: str = TRUNK) -> WorkflowStep:
    return WorkflowStep("checkout", (trunk,), f"checkout {trunk}")


def pull_rebase() -> WorkflowStep:
    return WorkflowStep("pull", ("--rebase",), "pull latest with rebase")


def create_branch(branch: str, from_ref: Optional[str] = None) -> WorkflowStep:
    args = ("-b", branch, from_ref) if from_ref else ("-b", branch)
    return WorkflowStep("checkout", args, f"create branch {branch}")


def stage_all() -> WorkflowStep:
    return WorkflowStep("add", (".",), "stage all changes")


def commit(message: str) -> WorkflowStep:
    return WorkflowStep("commit", ("-m", message), "commit")


def push() -> WorkflowStep:
    return WorkflowStep("push", (), "push")


def merge_no_ff(branch: str) -> WorkflowStep:
    return WorkflowStep("merge", ("--no-ff", branch), f"merge {branch}")


def delete_local_branch(branch: str) -> WorkflowStep:
    return WorkflowStep("branch", ("-d", branch), f"delete local branch {branch}")


def delete_remote_branch(branch: str, remote: str = REMOTE) -> WorkflowStep:
    return WorkflowStep("push", (remote, "--delete", branch), f"delete remote branch {branch}")


def status_porcelain() -> WorkflowStep:
    return WorkflowStep("status", ("--porcelain",), "status")


def current_branch() -> WorkflowStep:
    return WorkflowStep("rev-parse", ("--abbrev-ref", "HEAD"), "current branch")
