from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .commands import DEFAULT_COLLECTOR, DEFAULT_RENDERER, format_argv
from .config import (
    DEFAULT_OUTPUT_DIR,
    ENV_COLLECTOR,
    ENV_OUTPUT_DIR,
    ENV_RENDERER,
    ENV_WORKDIR,
    RunConfig,
)
from .env_loader import load_env_files
from .exceptions import RunError
from .logging_config import configure_logging
from .runner import CoverageRunner

_logger = logging.getLogger(__name__)

# Load .env very early, so click's envvar lookups see it
load_env_files(quiet=True)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "--version", prog_name="covreport")
@click.option(
    "-C",
    "--workdir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    envvar=ENV_WORKDIR,
    default=None,
    help="Workspace root (default: current directory).",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path),
    envvar=ENV_OUTPUT_DIR,
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Output directory, relative to the workspace root.",
)
@click.option(
    "--cargo",
    "collector",
    envvar=ENV_COLLECTOR,
    default=DEFAULT_COLLECTOR,
    show_default=True,
    help="Program used to run 'llvm-cov'.",
)
@click.option(
    "--genhtml",
    "renderer",
    envvar=ENV_RENDERER,
    default=DEFAULT_RENDERER,
    show_default=True,
    help="Program used to render the HTML report.",
)
@click.option("--dry-run", is_flag=True, help="Print the commands without running them.")
@click.option(
    "-v",
    "--verbose",
    "loglevel",
    flag_value=logging.INFO,
    default=None,
    help="Enable INFO logs.",
)
@click.option(
    "-vv",
    "--very-verbose",
    "loglevel",
    flag_value=logging.DEBUG,
    help="Enable DEBUG logs.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    workdir: Optional[Path],
    output_dir: Path,
    collector: str,
    renderer: str,
    dry_run: bool,
    loglevel: Optional[int],
) -> None:
    """Generate an LCOV file and HTML coverage report for a Cargo workspace.

    Runs 'cargo llvm-cov' and then 'genhtml', writing into OUTPUT_DIR.
    """
    configure_logging(loglevel)
    _logger.debug("CLI start, version=%s", __version__)

    cfg = RunConfig(
        working_dir=workdir if workdir is not None else Path.cwd(),
        output_dir=output_dir,
        collector=collector,
        renderer=renderer,
    )
    runner = CoverageRunner.from_config(cfg)

    if dry_run:
        for argv in runner.plan(cfg.working_dir, cfg.output_dir):
            click.echo(format_argv(argv))
        return

    try:
        result = runner.run(cfg.working_dir, cfg.output_dir)
    except RunError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.exit_code)

    click.echo(f"Coverage report: {result.index_html}")
