from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from ..attendance.model import AttendanceRecord


def group_by_employee(records: Iterable[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    grouped: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for record in records:
        grouped[record.employee_id].append(record)
    return grouped
