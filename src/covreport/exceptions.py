from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

# Shell convention for "command not found / not executable".
EXIT_TOOL_NOT_FOUND = 127
EXIT_ORCHESTRATION = 1


class RunError(RuntimeError):
    """Base class for a failed coverage run; ``step`` names the failing step."""

    step = "run"

    @property
    def exit_code(self) -> int:
        return EXIT_ORCHESTRATION


class DirectoryCreationError(RunError):
    """Raised when the output directory cannot be created."""

    step = "ensure-output-dir"

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"step '{self.step}' failed: cannot create {path}: {cause}")


class ToolError(RunError):
    """An external tool exited non-zero or could not be launched."""

    def __init__(
        self,
        argv: Sequence[str],
        returncode: Optional[int],
        cause: Optional[OSError] = None,
    ):
        self.argv = list(argv)
        self.returncode = returncode
        self.cause = cause
        program = self.argv[0] if self.argv else "<none>"
        if returncode is None:
            detail = f"could not run {program}: {cause}"
        else:
            detail = f"{program} exited with status {returncode}"
        super().__init__(f"step '{self.step}' failed: {detail}")

    @property
    def exit_code(self) -> int:
        if self.returncode is not None and self.returncode < 0:
            # Killed by a signal; report it the way a shell would.
            return 128 - self.returncode
        if self.returncode:
            return self.returncode
        return EXIT_TOOL_NOT_FOUND


class CollectionToolError(ToolError):
    """Raised when ``cargo llvm-cov`` fails."""

    step = "collect"


class RenderToolError(ToolError):
    """Raised when ``genhtml`` fails."""

    step = "render"
