"""
Output rendering functions for trunkops.
Handles displaying workflow outcomes as coloured text or JSON.
"""
import json
from collections import namedtuple

import click

from .config import console
from .engine import Workflow
from .outcome import Completed

Messages = namedtuple("Messages", ["banner", "success", "error"])

MESSAGES = {
    Workflow.FEATURE: Messages(
        "--- Creating feature branch ---",
        "Feature branch '{payload}' created successfully.",
        "Error creating feature branch:",
    ),
    Workflow.RELEASE: Messages(
        "--- Creating release branch ---",
        "Release branch '{payload}' created successfully.",
        "Error creating release branch:",
    ),
    Workflow.HOTFIX: Messages(
        "--- Creating hotfix branch ---",
        "Hotfix branch '{payload}' created successfully.",
        "Error creating hotfix branch:",
    ),
    Workflow.COMMIT: Messages(
        "--- Committing directly to {trunk} branch ---",
        "Changes committed and pushed to {trunk} successfully.",
        "Error committing changes:",
    ),
    Workflow.COMPLETE: Messages(
        "--- Completing short-lived branch ---",
        "\nSuccess! Branch '{branch}' was merged into {trunk} and deleted.",
        "\nWorkflow failed:",
    ),
    Workflow.STATUS: Messages(
        "--- Git Status ---",
        "{payload}",
        "Error running git status:",
    ),
    Workflow.CURRENT_BRANCH: Messages(
        None,
        "Current branch is: {payload}",
        "Error getting current branch:",
    ),
}

STYLES = {
    "success": "green",
    "error": "red",
    "info": "blue",
    "warning": "yellow",
}


def print_colour(mode, text):
    """Print ``text`` in the colour for ``mode`` (success, error, info, warning)."""
    # Git output may contain square brackets; never treat it as markup.
    console.print(text, style=STYLES.get(mode), markup=False, highlight=False, soft_wrap=True)


def render_banner(workflow, **context):
    banner = MESSAGES[workflow].banner
    if banner:
        console.print(banner.format(**context), markup=False, highlight=False, soft_wrap=True)


def render_result(workflow, result, as_json=False, **context):
    """
    Render a workflow outcome.

    Args:
        workflow: The Workflow that produced ``result``.
        result: Completed or Failed.
        as_json: If True, print one JSON object instead of coloured text.
        context: Extra values for the message templates (trunk, branch).
    """
    if as_json:
        click.echo(json.dumps(result_to_dict(workflow, result, **context), ensure_ascii=False))
        return

    messages = MESSAGES[workflow]
    if isinstance(result, Completed):
        mode = "info" if workflow is Workflow.STATUS else "success"
        payload = "" if result.payload is None else result.payload
        print_colour(mode, messages.success.format(payload=payload, **context))
    else:
        print_colour("error", f"{messages.error}\n{result.diagnostic}")


def render_error(workflow, error, as_json=False):
    """Render an error raised before or outside the workflow's steps."""
    if as_json:
        click.echo(json.dumps({
            "workflow": workflow.value,
            "status": "failed",
            "error": str(error),
        }, ensure_ascii=False))
        return
    print_colour("error", str(error))


def result_to_dict(workflow, result, **context):
    data = {"workflow": workflow.value}
    if isinstance(result, Completed):
        data["status"] = "completed"
        data["payload"] = result.payload
    else:
        data["status"] = "failed"
        data["error"] = result.diagnostic
        data["step"] = result.step
    if context.get("branch"):
        data["branch"] = context["branch"]
    return data
