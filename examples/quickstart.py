#!/usr/bin/env python
"""
Quick start example - the simplest way to run a simulation.

Usage:
    python examples/quickstart.py
"""

from satmd import simulate


def main():
    print("=" * 60)
    print("satmd Quick Start")
    print("=" * 60)

    # 1. Two particles beyond the saturation radius
    print("\n1. Saturated pair (step 0 only):")
    print("-" * 40)
    result = simulate.pair(separation=2.0)
    print(f"   {result.summary_line()}")

    # 2. Two particles inside the well
    print("\n2. Bound pair:")
    print("-" * 40)
    result = simulate.pair(separation=1.0, step_num=1000, dt=0.001)
    print(f"   Energy conserved: {abs(result.relative_drift) < 1e-3}")

    # 3. A reduced random system
    print("\n3. 200 particles, 100 steps:")
    print("-" * 40)
    result = simulate.run(n_particles=200, step_num=100)
    print(f"   {result.summary_line()}")

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
