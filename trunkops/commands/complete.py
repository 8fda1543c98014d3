"""
Handles the 'complete' command: merge a short-lived branch back into trunk.
"""

import click

from ..cli_utils import workflow_command, report
from ..engine import Workflow
from ..render import render_banner, print_colour


@click.command(name='complete')
@click.option('-t', '--type', 'branch_type', required=True,
              help="Type of branch to complete ('feature', 'release', 'hotfix').")
@click.option('-n', '--name', required=True, help='Name/version of the branch to complete.')
@click.pass_obj
@workflow_command(Workflow.COMPLETE)
def complete_handler(app, branch_type, name):
    """Merges a short-lived branch into trunk and deletes it.

    A failure part-way through leaves earlier steps in place: a merge that
    could not be pushed stays merged locally.
    """
    if not app.as_json:
        render_banner(Workflow.COMPLETE)
    branch = app.engine.branch_for(branch_type, name)
    if not app.as_json:
        print_colour("info", f"Branch to complete: {branch.name}")
    result = app.engine.dispatch(Workflow.COMPLETE, kind=branch.kind, name=name)
    return report(Workflow.COMPLETE, result, app, branch=branch.name)
