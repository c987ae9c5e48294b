"""declarations — a walkthrough of variables, a record type and string templates.

Public API
----------
The stable public surface is everything exported from this module.

Example
-------
::

    import declarations

    # Print the four-line walkthrough to stdout
    declarations.run()

    # Or collect the lines yourself
    lines = list(declarations.scenario_lines())

    # The record type on its own
    employee = declarations.Employee("Lynn Jones", 500)
    employee.name = "Lynn Smith"
    str(employee)
    'Employee(name=Lynn Smith, id=500)'

    declarations.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TextIO

from declarations.records import Employee

__version__: str = "0.1.0"


def scenario_lines(args: Sequence[str] = ()) -> Iterator[str]:
    """Yield the walkthrough's output lines, in order, without newlines.

    Parameters
    ----------
    args:
        Command-line style arguments.  Accepted and ignored.
    """
    from declarations.scenario import scenario_lines as _scenario_lines

    return _scenario_lines(args)


def run(args: Sequence[str] = (), out: TextIO | None = None) -> int:
    """Write the walkthrough to ``out`` (stdout by default).

    Returns
    -------
    int
        The exit status, always ``0``.
    """
    from declarations.scenario import run as _run

    return _run(args, out=out)


__all__ = [
    "__version__",
    "Employee",
    "scenario_lines",
    "run",
]
