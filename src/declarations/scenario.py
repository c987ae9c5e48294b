"""The declarations walkthrough: a single, linear scenario.

The scenario binds a mutable local, builds an ``Employee``, renames it,
and produces four lines of text.  ``scenario_lines`` yields those lines;
``run`` writes them to a stream.

Usage
-----
::

    from declarations.scenario import run

    run()  # prints the four lines to stdout, returns 0
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from declarations.records import Employee

logger = logging.getLogger(__name__)


def scenario_lines(args: Sequence[str] = ()) -> Iterator[str]:
    """Yield the scenario's output lines, in order, without newlines.

    Parameters
    ----------
    args:
        Command-line style arguments.  Accepted and ignored.
    """
    number: int
    number = 10
    number = 20  # noqa: F841

    employee = Employee("Lynn Jones", 500)
    employee.name = "Lynn Smith"
    logger.debug("Built %r (ignoring %d argument(s))", employee, len(args))

    yield str(employee)

    change = 4.22  # noqa: F841
    yield "Your change is $"

    numerator = 10.99
    denominator = 20.00
    yield f"The value of {numerator} divided by {denominator} is {numerator / denominator}"

    yield f"The employee's id is {employee.id}"


def run(args: Sequence[str] = (), out: TextIO | None = None) -> int:
    """Write every scenario line to ``out`` and return the exit status.

    Parameters
    ----------
    args:
        Forwarded to :func:`scenario_lines`, which ignores them.
    out:
        Destination stream.  Defaults to the current ``sys.stdout``.

    Returns
    -------
    int
        Always ``0``.
    """
    stream = out if out is not None else sys.stdout
    for line in scenario_lines(args):
        stream.write(line + "\n")
    logger.debug("Scenario finished")
    return 0
