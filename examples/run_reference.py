#!/usr/bin/env python
"""
Reference run with an energy table and an energy plot.

Runs the default configuration (2000 particles, 3 dimensions, 100 steps
of dt = 1e-4), printing energies every 10 steps, then saves a plot of the
energy time series.

Usage:
    python examples/run_reference.py [output.png]
"""

import sys

from satmd import plotting, simulate
from satmd.engines import StateReporter


def main():
    output = sys.argv[1] if len(sys.argv) > 1 else "reference_energy.png"

    result = simulate.run(reporters=[StateReporter(frequency=10)])
    print()
    print(result.summary_line())

    plotting.energy(result, show=False)
    plotting.save(output)
    plotting.close()


if __name__ == "__main__":
    main()
