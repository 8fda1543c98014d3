#!/usr/bin/env python3

import sys

import click

from trunkops import __version__
from trunkops.cli_utils import AppContext, add_common_options
from trunkops.config import load_config, set_log_level
from trunkops.engine import WorkflowEngine
from trunkops.executor import make_executor
from trunkops.exit_codes import SUCCESS, USAGE_ERROR, INTERRUPTED
from trunkops.commands.branch import feature_handler, release_handler, hotfix_handler
from trunkops.commands.commit import commit_handler
from trunkops.commands.complete import complete_handler
from trunkops.commands.status import status_handler, current_branch_handler
from trunkops.commands.config import config_cmd


@click.group()
@click.version_option(version=__version__, prog_name="trunkops")
@add_common_options('verbose', 'dry_run', 'as_json', 'repo')
@click.pass_context
def cli(ctx, verbose, dry_run, as_json, repo):
    """Trunk-based development workflows on top of git."""
    if ctx.obj is None:
        ctx.obj = AppContext()
    app = ctx.obj

    if not app.config:
        app.config = load_config()
    set_log_level("DEBUG" if verbose else app.config.get("logging", {}).get("level", "INFO"))

    app.as_json = as_json
    if app.engine is None:
        git_config = app.config.get("git", {})
        executor = make_executor(app.config, cwd=repo, dry_run=dry_run)
        app.engine = WorkflowEngine(
            executor,
            trunk=git_config.get("trunk") or "main",
            remote=git_config.get("remote") or "origin",
        )


# Workflows
cli.add_command(feature_handler)
cli.add_command(release_handler)
cli.add_command(hotfix_handler)
cli.add_command(commit_handler)
cli.add_command(complete_handler)

# Queries
cli.add_command(status_handler)
cli.add_command(current_branch_handler)

cli.add_command(config_cmd)


def main(argv=None):
    """Console entry point. Usage errors exit with 1."""
    try:
        rv = cli.main(args=argv, prog_name="trunkops", standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(INTERRUPTED)
    except click.ClickException as e:
        e.show()
        sys.exit(USAGE_ERROR)
    sys.exit(rv if isinstance(rv, int) else SUCCESS)


if __name__ == "__main__":
    main()
