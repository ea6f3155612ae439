"""
Leave day counting and balance evaluation.

Balances are never stored: they are derived on every call from the
approved requests of a leave type and the fixed annual allotment table.
"""
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from hrms.core.config import settings
from hrms.core.exceptions import InvalidArgumentError, InvalidDateRangeError

APPROVED = "approved"


def _field(request: Any, name: str, alias: Optional[str] = None):
    # Accept ORM rows, pydantic models and plain dicts alike
    if isinstance(request, Mapping):
        return request.get(name, request.get(alias) if alias else None)
    value = getattr(request, name, None)
    if value is None and alias:
        value = getattr(request, alias, None)
    return value


def _status_value(status: Any) -> Any:
    return getattr(status, "value", status)


def day_span(start_date: date, end_date: date) -> int:
    """Inclusive number of calendar days between start_date and end_date."""
    if end_date < start_date:
        raise InvalidDateRangeError(start_date, end_date)
    return (end_date - start_date).days + 1


def allotment(leave_type: str, allotments: Optional[Mapping[str, int]] = None) -> int:
    table = settings.leave_allotments if allotments is None else allotments
    if leave_type not in table:
        raise InvalidArgumentError(
            f"Unknown leave type '{leave_type}'",
            {"known_types": sorted(table)}
        )
    return table[leave_type]


def used_days(leave_type: str, requests: Iterable[Any]) -> int:
    """Sum of days over approved requests of the given type. Pending and rejected never count."""
    return sum(
        int(_field(r, "days") or 0)
        for r in requests
        if _field(r, "leave_type", "type") == leave_type and _status_value(_field(r, "status")) == APPROVED
    )


def remaining_days(
    leave_type: str,
    requests: Iterable[Any],
    allotments: Optional[Mapping[str, int]] = None
) -> int:
    """Allotment minus usage. Not clamped: approvals beyond the allotment go negative."""
    return allotment(leave_type, allotments) - used_days(leave_type, requests)


def balances(requests: Iterable[Any], allotments: Optional[Mapping[str, int]] = None) -> List[Dict[str, Any]]:
    table = settings.leave_allotments if allotments is None else allotments
    requests = list(requests)
    rows = []
    for leave_type, total in table.items():
        used = used_days(leave_type, requests)
        rows.append({
            "leave_type": leave_type,
            "total_days": total,
            "used_days": used,
            "remaining_days": total - used,
        })
    return rows
