from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): payroll services depend on this interface, not on a concrete DB.
    """

    def get_all(self) -> Sequence[Employee]:
        raise NotImplementedError
