from pathlib import Path

from covreport.exceptions import (
    EXIT_TOOL_NOT_FOUND,
    CollectionToolError,
    DirectoryCreationError,
    RenderToolError,
    RunError,
)


def test_tool_error_uses_tool_exit_status():
    err = CollectionToolError(["cargo", "llvm-cov"], 101)
    assert isinstance(err, RunError)
    assert err.step == "collect"
    assert err.exit_code == 101
    assert "cargo exited with status 101" in str(err)


def test_tool_not_launched_maps_to_127():
    cause = FileNotFoundError(2, "No such file or directory", "genhtml")
    err = RenderToolError(["genhtml"], None, cause)
    assert err.step == "render"
    assert err.returncode is None
    assert err.cause is cause
    assert err.exit_code == EXIT_TOOL_NOT_FOUND
    assert "could not run genhtml" in str(err)


def test_tool_killed_by_signal():
    err = CollectionToolError(["cargo"], -9)
    assert err.exit_code == 137


def test_directory_error_exit_code_and_message(tmp_path):
    cause = PermissionError(13, "Permission denied")
    err = DirectoryCreationError(tmp_path / "out", cause)
    assert err.step == "ensure-output-dir"
    assert err.path == Path(tmp_path / "out")
    assert err.exit_code == 1
    assert "ensure-output-dir" in str(err)
