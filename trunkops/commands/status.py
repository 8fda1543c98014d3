"""
Handles the 'status' and 'current-branch' query commands.
"""

import click

from ..cli_utils import workflow_command, report
from ..engine import Workflow
from ..render import render_banner


@click.command(name='status')
@click.pass_obj
@workflow_command(Workflow.STATUS)
def status_handler(app):
    """Shows the current git status."""
    if not app.as_json:
        render_banner(Workflow.STATUS)
    return report(Workflow.STATUS, app.engine.dispatch(Workflow.STATUS), app)


@click.command(name='current-branch')
@click.pass_obj
@workflow_command(Workflow.CURRENT_BRANCH)
def current_branch_handler(app):
    """Shows the current git branch name."""
    return report(Workflow.CURRENT_BRANCH, app.engine.dispatch(Workflow.CURRENT_BRANCH), app)
