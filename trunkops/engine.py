"""
Workflow engine: sequences git steps into trunk-based workflows.

Every workflow is a fixed, ordered list of steps. Steps run one at a time;
the first Failure stops the workflow and becomes its diagnostic. Steps that
already succeeded are not undone.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from . import steps
from .branches import BranchKind, BranchSpec
from .commits import CommitMessage
from .config import logger
from .outcome import Completed, Failed, WorkflowResult


class Workflow(Enum):
    """The workflows trunkops can run, valued by their CLI verb."""
    FEATURE = "feature"
    RELEASE = "release"
    HOTFIX = "hotfix"
    COMMIT = "commit"
    COMPLETE = "complete"
    STATUS = "status"
    CURRENT_BRANCH = "current-branch"


class WorkflowEngine:
    """Runs trunk-based workflows through an executor."""

    def __init__(self, executor, trunk: str = steps.TRUNK, remote: str = steps.REMOTE):
        """Initialize workflow engine.

        Args:
            executor: Object with ``execute(operation, args)`` returning a
                CommandOutcome.
            trunk: Name of the integration branch.
            remote: Remote that branches are pushed to and deleted from.
        """
        self.executor = executor
        self.trunk = trunk
        self.remote = remote
        self._handlers: Dict[Workflow, Callable[..., WorkflowResult]] = {
            Workflow.FEATURE: self.feature,
            Workflow.RELEASE: self.release,
            Workflow.HOTFIX: self.hotfix,
            Workflow.COMMIT: self.commit,
            Workflow.COMPLETE: self.complete,
            Workflow.STATUS: self.status,
            Workflow.CURRENT_BRANCH: self.current_branch,
        }

    def dispatch(self, workflow: Workflow, **params) -> WorkflowResult:
        """Runs the handler registered for ``workflow`` with ``params``."""
        return self._handlers[Workflow(workflow)](**params)

    def run_steps(self, workflow_steps: List[steps.WorkflowStep], payload: Any = None,
                  capture_last: bool = False) -> WorkflowResult:
        """Execute steps in order, stopping at the first failure.

        Args:
            workflow_steps: Steps to run.
            payload: Value returned in Completed when every step succeeds.
            capture_last: If True, the last step's output is the payload.

        Returns:
            Completed(payload), or Failed with the first failing step's text.
        """
        total = len(workflow_steps)
        output = None
        for index, step in enumerate(workflow_steps, 1):
            logger.debug(f"Step {index}/{total}: {step.description or step}")
            outcome = self.executor.execute(step.operation, step.args)
            if not outcome.ok:
                logger.debug(f"Step {index}/{total} failed: {step.description or step}")
                return Failed(outcome.text, step=step.description or str(step))
            output = outcome.text

        if capture_last:
            return Completed(output)
        return Completed(payload)

    def _sync_trunk(self) -> List[steps.WorkflowStep]:
        return [steps.checkout_trunk(self.trunk), steps.pull_rebase()]

    def _start_branch(self, branch: BranchSpec, from_ref: Optional[str] = None) -> WorkflowResult:
        workflow_steps = self._sync_trunk() + [steps.create_branch(branch.name, from_ref)]
        return self.run_steps(workflow_steps, payload=branch.name)

    def feature(self, name: str) -> WorkflowResult:
        """Create ``feature/<name>`` from an up-to-date trunk."""
        return self._start_branch(BranchSpec(BranchKind.FEATURE, name))

    def release(self, version: str, from_commit: Optional[str] = None) -> WorkflowResult:
        """Create ``release/<version>`` from ``from_commit``, or trunk HEAD."""
        from_ref = from_commit if from_commit else "HEAD"
        return self._start_branch(BranchSpec(BranchKind.RELEASE, version), from_ref)

    def hotfix(self, name: str) -> WorkflowResult:
        """Create ``hotfix/<name>`` from an up-to-date trunk."""
        return self._start_branch(BranchSpec(BranchKind.HOTFIX, name))

    def commit(self, message: CommitMessage) -> WorkflowResult:
        """Stage everything, commit with a Conventional Commit message and push."""
        workflow_steps = [
            steps.stage_all(),
            steps.commit(message.render()),
            steps.push(),
        ]
        return self.run_steps(workflow_steps)

    def complete(self, kind, name: str) -> WorkflowResult:
        """Merge a short-lived branch into trunk, push, and delete it.

        Raises:
            ValidationError: if ``kind`` is not feature, release or hotfix.
                Nothing is executed in that case.
        """
        branch = self.branch_for(kind, name)
        workflow_steps = self._sync_trunk() + [
            steps.merge_no_ff(branch.name),
            steps.push(),
            steps.delete_local_branch(branch.name),
            steps.delete_remote_branch(branch.name, self.remote),
        ]
        return self.run_steps(workflow_steps)

    def status(self) -> WorkflowResult:
        """Porcelain working-tree status."""
        return self.run_steps([steps.status_porcelain()], capture_last=True)

    def current_branch(self) -> WorkflowResult:
        return self.run_steps([steps.current_branch()], capture_last=True)

    @staticmethod
    def branch_for(kind, name: str) -> BranchSpec:
        return BranchSpec(BranchKind.parse(kind), name)
