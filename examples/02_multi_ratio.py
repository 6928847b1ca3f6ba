#!/usr/bin/env python3
"""
Example: Approximate several typed values at once and tabulate the errors.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from integral_ratios import Session, SessionConfig, analysis


def main():
    """Multi-dimensional ratio example."""

    session = Session(config=SessionConfig(initial_lines=5))

    # Values as a user would type them; precision follows from the digits
    session.set_input_raw(["85.47", "72.65", "21.37"], [True, True, True])
    print(f"Values: {session.values}")
    print(f"Implied precision: {session.algorithm.precision.tolist()}")

    # Compute in small batches until the engine converges
    while not session.finished:
        session.compute_lines(5)
        print(f"  {len(session.ratio_outputs)} convergents so far")

    df = analysis.convergents_frame(session)
    print("\nConvergents:")
    print(df.to_string(index=False))

    best = df.iloc[-1]
    scaled = analysis.scaled_values(session.values, best["factor"])
    digits = session.settings.output_precision
    print(f"\nScaled input at last convergent: {analysis.format_scaled(scaled, digits)}")

    # Disable the last value: it is still reduced but never chosen as pivot
    session.set_mask_value(2, False)
    print(f"\nWith the last value masked: {session.ratio_outputs[:5]}")


if __name__ == "__main__":
    main()
