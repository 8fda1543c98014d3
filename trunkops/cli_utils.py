"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Dict

import click

from .config import logger
from .exit_codes import SUCCESS, GENERAL_ERROR, INTERRUPTED, CommandError, get_exit_code_for_exception
from .render import render_result, render_error, print_colour


@dataclass
class AppContext:
    """State shared by every command through ``click`` context ``obj``."""
    engine: Any = None
    config: Dict[str, Any] = field(default_factory=dict)
    as_json: bool = False

    @property
    def trunk(self) -> str:
        if self.engine is not None:
            return self.engine.trunk
        return self.config.get("git", {}).get("trunk", "main")


def workflow_command(workflow):
    """
    Decorator that provides standard workflow command behavior:
    - Exits 0 when the command returns a successful result, 1 otherwise
    - ValidationError and other CommandErrors are printed and mapped to their exit code
    - Ctrl-C exits with 130
    - Any other exception is reported and mapped through get_exit_code_for_exception

    The decorated function receives the AppContext as its first argument
    and returns the exit code.
    """
    def decorator(func):

        @wraps(func)
        def wrapper(app, *args, **kwargs):
            try:
                code = func(app, *args, **kwargs)
                sys.exit(SUCCESS if code is None else code)
            except KeyboardInterrupt:
                print_colour("error", "Interrupted by user")
                sys.exit(INTERRUPTED)
            except CommandError as e:
                logger.debug(f"{workflow.value} rejected: {e}")
                render_error(workflow, e, as_json=app.as_json)
                sys.exit(e.exit_code)
            except Exception as e:
                logger.debug(f"{workflow.value} failed unexpectedly", exc_info=True)
                render_error(workflow, f"Command failed: {e}", as_json=app.as_json)
                sys.exit(get_exit_code_for_exception(e))

        return wrapper
    return decorator


def report(workflow, result, app: AppContext, **context) -> int:
    """Render ``result`` and return the exit code it maps to."""
    context.setdefault("trunk", app.trunk)
    render_result(workflow, result, as_json=app.as_json, **context)
    return SUCCESS if result.ok else GENERAL_ERROR


# Standard options that the command group and commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Show debug logging'),
    'dry_run': click.option('--dry-run', is_flag=True,
                            help='Print the git commands without running them'),
    'as_json': click.option('--json', 'as_json', is_flag=True,
                            help='Print the outcome as a JSON object'),
    'repo': click.option('-C', '--repo', default=None,
                         type=click.Path(exists=True, file_okay=False),
                         help='Run git in this directory (default: current directory)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'dry_run')
        def my_command(verbose, dry_run):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator

