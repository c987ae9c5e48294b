"""Record types used by the declarations scenario.

``Employee`` pairs a mutable ``name`` with an ``id`` that is bound once,
at construction, and exposed read-only afterwards.  Rebinding ``id``
raises the interpreter's ordinary ``AttributeError``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, repr=False)
class Employee:
    """An employee-like record with a renameable name and a fixed id.

    Parameters
    ----------
    name:
        Display name.  May be reassigned any number of times.
    _id:
        Numeric identifier, read back through ``id``.  Fixed for the
        lifetime of the instance.

    Example
    -------
    ::

        employee = Employee("Lynn Jones", 500)
        employee.name = "Lynn Smith"
        str(employee)
        'Employee(name=Lynn Smith, id=500)'
    """

    name: str
    _id: int

    @property
    def id(self) -> int:
        """The identifier given at construction."""
        return self._id

    def __str__(self) -> str:
        return f"Employee(name={self.name}, id={self._id})"

    def __repr__(self) -> str:
        return str(self)
