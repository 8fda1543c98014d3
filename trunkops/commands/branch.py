"""
Handles the 'feature', 'release' and 'hotfix' commands.

Each one brings trunk up to date and creates a short-lived branch from it.
"""

import click

from ..cli_utils import workflow_command, report
from ..engine import Workflow
from ..render import render_banner


@click.command(name='feature')
@click.option('-n', '--name', required=True, help="Name of the feature (e.g., 'add-login-page').")
@click.pass_obj
@workflow_command(Workflow.FEATURE)
def feature_handler(app, name):
    """Creates a new short-lived feature branch from trunk."""
    if not app.as_json:
        render_banner(Workflow.FEATURE)
    result = app.engine.dispatch(Workflow.FEATURE, name=name)
    return report(Workflow.FEATURE, result, app)


@click.command(name='release')
@click.option('-v', '--version', 'version', required=True, help="Version for the release branch (e.g., '1.0.0').")
@click.option('-f', '--from-commit', default=None, help="Optional commit hash on trunk to branch from (default: HEAD).")
@click.pass_obj
@workflow_command(Workflow.RELEASE)
def release_handler(app, version, from_commit):
    """Creates a new short-lived release branch from trunk."""
    if not app.as_json:
        render_banner(Workflow.RELEASE)
    result = app.engine.dispatch(Workflow.RELEASE, version=version, from_commit=from_commit)
    return report(Workflow.RELEASE, result, app)


@click.command(name='hotfix')
@click.option('-n', '--name', required=True, help="Name of the hotfix (e.g., 'fix-critical-bug').")
@click.pass_obj
@workflow_command(Workflow.HOTFIX)
def hotfix_handler(app, name):
    """Creates a new short-lived hotfix branch from trunk."""
    if not app.as_json:
        render_banner(Workflow.HOTFIX)
    result = app.engine.dispatch(Workflow.HOTFIX, name=name)
    return report(Workflow.HOTFIX, result, app)
