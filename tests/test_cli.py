"""
Tests for the trunkops command line interface.
"""
import json

import pytest
from click.testing import CliRunner

from trunkops.cli import cli, main
from trunkops.cli_utils import AppContext
from trunkops.config import get_default_config
from trunkops.engine import WorkflowEngine


def invoke(args, executor):
    app = AppContext(engine=WorkflowEngine(executor), config=get_default_config())
    runner = CliRunner()
    return runner.invoke(cli, args, obj=app)


def last_json_line(output):
    return json.loads(output.strip().splitlines()[-1])


class TestBranchCommands:

    def test_feature_success(self, executor):
        result = invoke(['feature', '--name', 'add-login-page'], executor)

        assert result.exit_code == 0
        assert "--- Creating feature branch ---" in result.output
        assert "Feature branch 'feature/add-login-page' created successfully." in result.output
        assert executor.calls[-1] == ("checkout", ("-b", "feature/add-login-page"))

    def test_feature_failure(self, make_executor):
        executor = make_executor(fail_on={2: "error: cannot pull with rebase: You have unstaged changes."})
        result = invoke(['feature', '-n', 'x'], executor)

        assert result.exit_code == 1
        assert "Error creating feature branch:" in result.output
        assert "You have unstaged changes." in result.output
        assert len(executor.calls) == 2

    def test_release_from_commit(self, executor):
        result = invoke(['release', '-v', '1.0.0', '-f', 'abc123'], executor)

        assert result.exit_code == 0
        assert "Release branch 'release/1.0.0' created successfully." in result.output
        assert executor.calls[-1] == ("checkout", ("-b", "release/1.0.0", "abc123"))

    def test_release_defaults_to_head(self, executor):
        invoke(['release', '--version', '1.0.0'], executor)

        assert executor.calls[-1][1][-1] == "HEAD"

    def test_hotfix(self, executor):
        result = invoke(['hotfix', '-n', 'fix-critical-bug'], executor)

        assert result.exit_code == 0
        assert "Hotfix branch 'hotfix/fix-critical-bug' created successfully." in result.output


class TestCommitCommand:

    def test_commit_builds_conventional_message(self, executor):
        result = invoke(['commit', '-t', 'fix', '-s', 'auth', '-b', '-m', 'token bug'], executor)

        assert result.exit_code == 0
        assert "Changes committed and pushed to main successfully." in result.output
        assert executor.calls[1] == ("commit", ("-m", "fix(auth)!: token bug\n\nBREAKING CHANGE: token bug"))

    def test_commit_failure(self, make_executor):
        executor = make_executor(fail_on={3: "! [rejected] main -> main (fetch first)"})
        result = invoke(['commit', '--type', 'feat', '--message', 'add login'], executor)

        assert result.exit_code == 1
        assert "Error committing changes:" in result.output
        assert "[rejected]" in result.output


class TestCompleteCommand:

    def test_complete_success(self, executor):
        result = invoke(['complete', '-t', 'feature', '-n', 'x'], executor)

        assert result.exit_code == 0
        assert "Branch to complete: feature/x" in result.output
        assert "Success! Branch 'feature/x' was merged into main and deleted." in result.output
        assert executor.operations == ["checkout", "pull", "merge", "push", "branch", "push"]

    def test_complete_invalid_type(self, executor):
        result = invoke(['complete', '-t', 'bogus', '-n', 'x'], executor)

        assert result.exit_code == 1
        assert "Invalid branch type 'bogus'" in result.output
        assert executor.calls == []

    def test_complete_failure(self, make_executor):
        executor = make_executor(fail_on={5: "error: branch 'feature/x' not found."})
        result = invoke(['complete', '-t', 'feature', '-n', 'x'], executor)

        assert result.exit_code == 1
        assert "Workflow failed:" in result.output
        assert len(executor.calls) == 5


class TestQueryCommands:

    def test_status(self, make_executor):
        result = invoke(['status'], make_executor(output="?? notes.txt"))

        assert result.exit_code == 0
        assert "--- Git Status ---" in result.output
        assert "?? notes.txt" in result.output

    def test_status_failure(self, make_executor):
        result = invoke(['status'], make_executor(fail_on={1: "fatal: not a git repository"}))

        assert result.exit_code == 1
        assert "Error running git status:" in result.output

    def test_current_branch(self, make_executor):
        result = invoke(['current-branch'], make_executor(output="main"))

        assert result.exit_code == 0
        assert "Current branch is: main" in result.output

    def test_current_branch_failure(self, make_executor):
        result = invoke(['current-branch'], make_executor(fail_on={1: "fatal: ambiguous argument 'HEAD'"}))

        assert result.exit_code == 1
        assert "Error getting current branch:" in result.output


class TestJsonOutput:

    def test_completed_as_json(self, executor):
        result = invoke(['--json', 'feature', '-n', 'x'], executor)

        assert result.exit_code == 0
        assert last_json_line(result.output) == {
            "workflow": "feature",
            "status": "completed",
            "payload": "feature/x",
        }

    def test_failed_as_json(self, make_executor):
        executor = make_executor(fail_on={1: "error: pathspec 'main' did not match"})
        result = invoke(['--json', 'complete', '-t', 'hotfix', '-n', 'y'], executor)

        assert result.exit_code == 1
        data = last_json_line(result.output)
        assert data["status"] == "failed"
        assert data["error"] == "error: pathspec 'main' did not match"
        assert data["step"] == "checkout main"
        assert data["branch"] == "hotfix/y"

    def test_validation_error_as_json(self, executor):
        result = invoke(['--json', 'complete', '-t', 'bogus', '-n', 'y'], executor)

        assert result.exit_code == 1
        data = last_json_line(result.output)
        assert data["status"] == "failed"
        assert "Invalid branch type 'bogus'" in data["error"]


class BrokenExecutor:

    def execute(self, operation, args=""):
        raise RuntimeError("boom")


class TestUnexpectedErrors:

    def test_unexpected_error_exits_one(self):
        result = invoke(['status'], BrokenExecutor())

        assert result.exit_code == 1
        assert "Command failed: boom" in result.output

    def test_unexpected_error_as_json(self):
        result = invoke(['--json', 'feature', '-n', 'x'], BrokenExecutor())

        assert result.exit_code == 1
        assert last_json_line(result.output) == {
            "workflow": "feature",
            "status": "failed",
            "error": "Command failed: boom",
        }


class TestMain:

    def test_unknown_command_exits_one(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['bogus'])
        assert excinfo.value.code == 1

    def test_missing_option_exits_one(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['feature'])
        assert excinfo.value.code == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--version'])
        assert excinfo.value.code == 0
        assert "0.1.0" in capsys.readouterr().out

    def test_dry_run_runs_nothing(self, capsys, caplog, monkeypatch, tmp_path):
        monkeypatch.setenv("TRUNKOPS_CONFIG", str(tmp_path / "missing.json"))
        with pytest.raises(SystemExit) as excinfo:
            main(['--dry-run', 'complete', '-t', 'release', '-n', '1.0.0'])
        assert excinfo.value.code == 0
        captured = capsys.readouterr()
        assert "Branch 'release/1.0.0' was merged into main and deleted." in captured.out
        assert "[Dry Run] Would run: git merge --no-ff release/1.0.0" in caplog.text
