"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dining.parsing import ArgumentError, parse_args
from dining.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError:
        sys.stderr.write("Invalid arguments\n")
        return 1
    Simulation(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())