"""
Argument vectors for the two external tools.

Kept as plain token lists so they can be asserted on without spawning
anything.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import List, Sequence, Tuple, Union

PathLike = Union[str, Path]

DEFAULT_COLLECTOR = "cargo"
DEFAULT_RENDERER = "genhtml"

COLLECTOR_ARGS: Tuple[str, ...] = (
    "llvm-cov",
    "--workspace",
    "--all-features",
    "--include-build-script",
    "--lcov",
)


def collector_argv(lcov_path: PathLike, program: str = DEFAULT_COLLECTOR) -> List[str]:
    """``cargo llvm-cov ... --lcov --output-path <lcov_path>``"""
    return [program, *COLLECTOR_ARGS, "--output-path", str(lcov_path)]


def renderer_argv(
    prefix: PathLike,
    html_dir: PathLike,
    lcov_path: PathLike,
    program: str = DEFAULT_RENDERER,
) -> List[str]:
    """``genhtml --prefix <prefix> -o <html_dir> <lcov_path>``"""
    return [program, "--prefix", str(prefix), "-o", str(html_dir), str(lcov_path)]


def format_argv(argv: Sequence[str]) -> str:
    return shlex.join(argv)
