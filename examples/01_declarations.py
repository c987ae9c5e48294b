#!/usr/bin/env python3
"""Example: Declarations walkthrough — declarations

Minimal working example: build and rename an Employee record, then
print the four-line walkthrough.

Usage:
    python examples/01_declarations.py

Requirements:
    pip install declarations
"""
from __future__ import annotations

import declarations


def main() -> None:
    print(f"declarations version: {declarations.__version__}")

    # Step 1: A record keeps its id but lets its name change
    employee = declarations.Employee("Lynn Jones", 500)
    print(f"Before rename: {employee}")
    employee.name = "Lynn Smith"
    print(f"After rename:  {employee}")

    # Step 2: Run the full walkthrough
    print("\nWalkthrough:")
    declarations.run()


if __name__ == "__main__":
    main()
