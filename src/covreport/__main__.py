# src/covreport/__main__.py
from __future__ import annotations

from .cli import cli


def main() -> None:
    # Fixed prog_name so `python -m covreport --help` reads like the console script.
    cli(prog_name="covreport")


if __name__ == "__main__":
    main()
