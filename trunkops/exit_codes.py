"""
Exit codes and exception types for trunkops commands.
"""

SUCCESS = 0
GENERAL_ERROR = 1
# Invalid or unrecognised invocations exit with 1, not click's default of 2.
USAGE_ERROR = 1
INTERRUPTED = 130


class CommandError(Exception):
    """Base class for errors that end a command with a specific exit code."""
    exit_code = GENERAL_ERROR

    def __init__(self, message, exit_code=None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ValidationError(CommandError):
    """A workflow precondition failed before any git command ran."""
    exit_code = GENERAL_ERROR


def get_exit_code_for_exception(exc):
    """Map an exception to the process exit code it should produce."""
    if isinstance(exc, CommandError):
        return exc.exit_code
    if isinstance(exc, KeyboardInterrupt):
        return INTERRUPTED
    return GENERAL_ERROR
