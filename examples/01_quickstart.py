#!/usr/bin/env python3
"""Example: quickstart for numeral-calc

Minimal working example: evaluate Arabic and Roman expressions,
inspect which numeral system accepted an input, and handle errors.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install numeral-calc
"""
from __future__ import annotations

import numcalc

SAMPLES = ["1 + 2", "VI / III", "2 - 5", "I - II", "I + 1", "6 / 0"]


def main() -> None:
    print(f"numeral-calc version: {numcalc.__version__}")

    # Step 1: Evaluate expressions in either numeral system
    for source in SAMPLES:
        try:
            print(f"  {source:<10} = {numcalc.evaluate(source)}")
        except numcalc.CalculatorError as exc:
            print(f"  {source:<10} ! {type(exc).__name__}: {exc}")

    # Step 2: Parse without evaluating
    match = numcalc.parse("XIV * II")
    print(f"\nParsed {match.expression} as {match.system} numerals")


if __name__ == "__main__":
    main()
