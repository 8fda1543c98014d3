"""
Handles the 'commit' command: stage, commit and push straight to trunk.
"""

import click

from ..cli_utils import workflow_command, report
from ..commits import COMMON_TYPES, CommitMessage
from ..engine import Workflow
from ..render import render_banner


@click.command(name='commit')
@click.option('-t', '--type', 'commit_type', required=True,
              help=f"Commit type (e.g., {', '.join(repr(t) for t in COMMON_TYPES[:3])}).")
@click.option('-m', '--message', required=True, help='The commit message description.')
@click.option('-s', '--scope', default=None, help='Optional scope of the commit.')
@click.option('-b', '--breaking', is_flag=True, help='Mark this commit as a breaking change.')
@click.pass_obj
@workflow_command(Workflow.COMMIT)
def commit_handler(app, commit_type, message, scope, breaking):
    """Commits all changes directly to trunk and pushes.

    \b
    The message follows Conventional Commits:
        trunkops commit -t feat -m "add login"            # feat: add login
        trunkops commit -t fix -s auth -b -m "token bug"  # fix(auth)!: token bug
    """
    if not app.as_json:
        render_banner(Workflow.COMMIT, trunk=app.trunk)
    commit_message = CommitMessage(type=commit_type, description=message, scope=scope, breaking=breaking)
    result = app.engine.dispatch(Workflow.COMMIT, message=commit_message)
    return report(Workflow.COMMIT, result, app)
