"""
Coverage run orchestration.

The run is three blocking steps, in order:
1. Ensure the output directory exists
2. Collect coverage with ``cargo llvm-cov`` into ``<output>/lcov.info``
3. Render ``<output>/html`` from that file with ``genhtml``

Any failure stops the sequence and is raised as a ``RunError``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Type, Union

from .commands import (
    DEFAULT_COLLECTOR,
    DEFAULT_RENDERER,
    collector_argv,
    format_argv,
    renderer_argv,
)
from .config import DEFAULT_OUTPUT_DIR, RunConfig
from .exceptions import (
    CollectionToolError,
    DirectoryCreationError,
    RenderToolError,
    ToolError,
)

_logger = logging.getLogger(__name__)

LCOV_FILENAME = "lcov.info"
HTML_DIRNAME = "html"

# launcher(argv, cwd) -> exit status; raises OSError if the program can't start
Launcher = Callable[[Sequence[str], Path], int]


def subprocess_launcher(argv: Sequence[str], cwd: Path) -> int:
    """Run ``argv`` in ``cwd``, letting the tool write straight to the terminal."""
    result = subprocess.run(list(argv), cwd=cwd, check=False)  # noqa: S603
    return result.returncode


@dataclass
class RunResult:
    """Absolute locations of the artifacts of a successful run."""

    output_dir: Path
    lcov_path: Path
    html_dir: Path

    @property
    def index_html(self) -> Path:
        return self.html_dir / "index.html"


def _normalized_dir(working_dir: Optional[Union[str, Path]]) -> Path:
    # Must match `pwd`: genhtml strips --prefix as literal text.
    if not working_dir:
        return Path.cwd()
    return Path(os.path.abspath(working_dir))


def ensure_output_dir(working_dir: Path, output_dir: Union[str, Path]) -> Path:
    """Create ``working_dir / output_dir`` and any missing parents.

    An existing directory is fine. Returns the absolute path.
    """
    target = _normalized_dir(working_dir) / output_dir
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(target, e) from e
    _logger.debug("Output directory ready: %s", target)
    return target


class CoverageRunner:
    """Runs cargo llvm-cov followed by genhtml."""

    def __init__(
        self,
        launcher: Optional[Launcher] = None,
        *,
        collector: str = DEFAULT_COLLECTOR,
        renderer: str = DEFAULT_RENDERER,
    ) -> None:
        self.launcher = launcher or subprocess_launcher
        self.collector = collector
        self.renderer = renderer

    @classmethod
    def from_config(cls, cfg: RunConfig, launcher: Optional[Launcher] = None) -> CoverageRunner:
        return cls(launcher, collector=cfg.collector, renderer=cfg.renderer)

    # --------------------------- Public methods -----------------------

    def plan(
        self,
        working_dir: Optional[Path] = None,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    ) -> Tuple[List[str], List[str]]:
        """Return the collector and renderer command lines, in run order."""
        prefix = _normalized_dir(working_dir)
        out = Path(output_dir)
        lcov_path = out / LCOV_FILENAME
        return (
            collector_argv(lcov_path, program=self.collector),
            renderer_argv(prefix, out / HTML_DIRNAME, lcov_path, program=self.renderer),
        )

    def run(
        self,
        working_dir: Optional[Path] = None,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    ) -> RunResult:
        """Ensure the output dir, collect coverage, then render the HTML report."""
        cwd = _normalized_dir(working_dir)
        collect_cmd, render_cmd = self.plan(cwd, output_dir)

        _logger.info("Preparing output directory %s", output_dir)
        out_abs = ensure_output_dir(cwd, output_dir)

        _logger.info("Collecting coverage with %s", self.collector)
        self._invoke(collect_cmd, cwd, CollectionToolError)

        _logger.info("Rendering HTML report with %s", self.renderer)
        self._invoke(render_cmd, cwd, RenderToolError)

        result = RunResult(
            output_dir=out_abs,
            lcov_path=out_abs / LCOV_FILENAME,
            html_dir=out_abs / HTML_DIRNAME,
        )
        _logger.info("Coverage report written to %s", result.html_dir)
        return result

    # --------------------------- Internals ----------------------------

    def _invoke(self, argv: List[str], cwd: Path, error_cls: Type[ToolError]) -> None:
        _logger.debug("Running in %s: %s", cwd, format_argv(argv))
        try:
            code = self.launcher(argv, cwd)
        except OSError as e:
            _logger.debug("Could not launch %s: %s", argv[0], e)
            raise error_cls(argv, None, e) from e

        if code != 0:
            _logger.debug("%s exited with status %s", argv[0], code)
            raise error_cls(argv, code)
