"""
Command-line entry point.

Runs the reference simulation and prints one line:

    potential=<pe>, kinetic=<ke>, <relative drift>

There are no flags; every parameter is a SimulationConfig default.
"""

from __future__ import annotations

import logging
import sys

from .config import SimulationConfig
from .engines import MDEngine
from .exceptions import SeedError

logger = logging.getLogger(__name__)


def main(config: SimulationConfig | None = None) -> int:
    """
    Run the simulation and print the summary line.

    Args:
        config: Run parameters (default: SimulationConfig()).

    Returns:
        Process exit status: 0 on success, 1 on a fatal seed error.
    """
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    try:
        result = MDEngine(config).run()
    except SeedError as exc:
        logger.debug("run aborted at seed %d", exc.seed)
        sys.stderr.write(f"\n{exc}\n")
        return 1

    print(result.summary_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
