#!/usr/bin/env python3
"""
Example: Encode a session into a shareable string and restore it.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from integral_ratios import BaseObserver, Session


class PrintingObserver(BaseObserver):
    """Report session notifications."""

    def on_inputs_changed(self):
        print("  inputs changed")

    def on_settings_changed(self):
        print("  settings changed")

    def on_finished(self, finished):
        if finished:
            print("  finished")


def main():
    """Shareable state example."""

    source = Session()
    source.set_input_raw(["20", "7", "17", "21.4"], [True, True, True, True])
    source.set_output_precision(8)

    encoded = source.serialize_state()
    print(f"Encoded state: {encoded}")

    target = Session()
    target.add_observer(PrintingObserver())
    print("Restoring...")
    if not target.deserialize_state(encoded):
        print("State was written by another version")
        return

    print(f"Restored values: {target.value_strings}")
    print(f"Restored settings: {target.settings}")
    print(f"First convergents: {target.ratio_outputs[:5]}")


if __name__ == "__main__":
    main()
