"""
Runs single git operations and classifies their outcome.

Every workflow step goes through an executor's ``execute(operation, args)``.
Tests substitute an object with the same method that returns scripted
outcomes instead of spawning processes.
"""
import shlex
import subprocess
from typing import Optional, Sequence, Union

from .config import logger
from .outcome import CommandOutcome, Failure, Success

Args = Union[str, Sequence[str]]


def _quote(token: str) -> str:
    if token == "" or any(c.isspace() for c in token) or '"' in token:
        return '"' + token.replace('"', '\\"') + '"'
    return token


def render_args(args: Args) -> str:
    """
    Renders arguments the way they would be typed after the operation.

    A string is returned unchanged. Tokens containing whitespace are wrapped
    in double quotes, so ``("-m", "feat: add login")`` renders as
    ``-m "feat: add login"``.
    """
    if isinstance(args, str):
        return args
    return " ".join(_quote(token) for token in args)


def split_args(args: Args) -> list:
    """Turns ``args`` into a list of process arguments."""
    if isinstance(args, str):
        return shlex.split(args)
    return list(args)


def format_command(binary: str, operation: str, args: Args) -> str:
    """Formats an invocation for trace output, e.g. ``git checkout main``."""
    rendered = render_args(args)
    return f"{binary} {operation} {rendered}".rstrip()


class GitExecutor:
    """Executes git operations as blocking subprocesses."""

    def __init__(self, binary: str = "git", cwd: Optional[str] = None,
                 timeout: Optional[float] = None):
        """
        Args:
            binary: The git executable, looked up on PATH.
            cwd: Working directory for git. Defaults to the current directory.
            timeout: Seconds to wait for each command. None waits forever.
        """
        self.binary = binary
        self.cwd = cwd
        self.timeout = timeout

    def execute(self, operation: str, args: Args = "") -> CommandOutcome:
        """
        Runs ``git <operation> <args>`` and waits for it to finish.

        Returns:
            Success with trimmed stdout on exit status 0, otherwise Failure
            with trimmed stderr.
        """
        command_line = format_command(self.binary, operation, args)
        logger.info(f"[RUNNING] {command_line}")

        try:
            argv = [self.binary, operation] + split_args(args)
        except ValueError as e:
            return Failure(f"Could not parse arguments for '{command_line}': {e}")

        try:
            result = subprocess.run(
                argv,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return Failure(f"{command_line} timed out after {self.timeout} seconds")
        except OSError as e:
            return Failure(f"Failed to launch '{self.binary}': {e}")

        stdout = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()

        if result.returncode == 0:
            if stdout:
                logger.debug(stdout)
            return Success(stdout)

        logger.debug(f"Command failed with exit code {result.returncode}: {command_line}")
        # Some git failures only write to stdout (e.g. merge conflicts).
        diagnostic = stderr or stdout or f"{self.binary} {operation} exited with status {result.returncode}"
        return Failure(diagnostic)


class DryRunExecutor:
    """Logs the commands a workflow would run without running them."""

    def __init__(self, binary: str = "git"):
        self.binary = binary
        self.commands = []

    def execute(self, operation: str, args: Args = "") -> CommandOutcome:
        command_line = format_command(self.binary, operation, args)
        self.commands.append(command_line)
        logger.info(f"[Dry Run] Would run: {command_line}")
        return Success("")


def make_executor(config: dict, cwd: Optional[str] = None, dry_run: bool = False):
    """Builds the executor described by the ``git`` section of the config."""
    git_config = config.get("git", {})
    binary = git_config.get("binary") or "git"
    if dry_run:
        return DryRunExecutor(binary)
    return GitExecutor(binary=binary, cwd=cwd, timeout=git_config.get("timeout"))
