from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .commands import DEFAULT_COLLECTOR, DEFAULT_RENDERER

DEFAULT_OUTPUT_DIR = "target/llvm-cov"

ENV_WORKDIR = "COVREPORT_WORKDIR"
ENV_OUTPUT_DIR = "COVREPORT_OUTPUT_DIR"
ENV_COLLECTOR = "COVREPORT_CARGO"
ENV_RENDERER = "COVREPORT_GENHTML"


# ----------------------------------------------------------------------
# Configuration dataclass
# ----------------------------------------------------------------------
@dataclass
class RunConfig:
    """Settings for one coverage run."""

    # Root of the Cargo workspace; also passed to genhtml as --prefix
    working_dir: Path = field(default_factory=Path.cwd)

    # Relative to working_dir unless absolute
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    collector: str = DEFAULT_COLLECTOR
    renderer: str = DEFAULT_RENDERER

    @classmethod
    def from_env(cls) -> RunConfig:
        """Load configuration from environment variables."""
        workdir = os.getenv(ENV_WORKDIR)
        return cls(
            working_dir=Path(workdir) if workdir else Path.cwd(),
            output_dir=Path(os.getenv(ENV_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR),
            collector=os.getenv(ENV_COLLECTOR) or DEFAULT_COLLECTOR,
            renderer=os.getenv(ENV_RENDERER) or DEFAULT_RENDERER,
        )
