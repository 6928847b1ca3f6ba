#!/usr/bin/env python3
"""
Example: Continued fraction convergents of pi.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from integral_ratios import Algorithm, AlgorithmInput


def main():
    """Pi convergents example."""

    algorithm_input = AlgorithmInput(
        ratio=[3.14159, 1.0],
        mask=[True, True],
        precision=[5e-6, 5e-16]
    )
    algorithm = Algorithm(algorithm_input)

    print(f"Approximating {algorithm_input.ratio}...")
    for convergent in algorithm.run():
        print(f"  {convergent[0]:>8d} / {convergent[1]:<8d} "
              f"factor={algorithm.ratio_factor():.6f} pivot={algorithm.current_pivot()}")

    print(f"Pivot sequence: {algorithm.pivot_sequence()}")
    print("Converged!")


if __name__ == "__main__":
    main()
