import pytest
from datetime import date
from types import SimpleNamespace

from hrms.core.exceptions import InvalidArgumentError, InvalidDateRangeError
from hrms.services.leave_balance import (
    allotment, balances, day_span, remaining_days, used_days,
)


def _request(leave_type, days, status):
    return {"type": leave_type, "days": days, "status": status}


def test_single_day_leave_counts_as_one():
    assert day_span(date(2024, 1, 1), date(2024, 1, 1)) == 1


def test_day_span_is_inclusive():
    assert day_span(date(2024, 1, 1), date(2024, 1, 5)) == 5


def test_day_span_across_month_and_leap_day():
    assert day_span(date(2024, 2, 28), date(2024, 3, 1)) == 3


def test_end_before_start_is_an_error():
    with pytest.raises(InvalidDateRangeError) as exc:
        day_span(date(2024, 1, 5), date(2024, 1, 1))
    assert exc.value.error_code == "INVALID_DATE_RANGE"


def test_used_days_counts_only_approved():
    requests = [
        _request("Sick Leave", 2, "approved"),
        _request("Sick Leave", 3, "approved"),
        _request("Annual Leave", 4, "approved"),
    ]
    noise = [
        _request("Sick Leave", 7, "pending"),
        _request("Sick Leave", 9, "rejected"),
    ]
    assert used_days("Sick Leave", requests) == 5
    assert used_days("Sick Leave", requests + noise) == 5


def test_used_days_accepts_orm_like_rows():
    rows = [SimpleNamespace(leave_type="Annual Leave", days=3, status="approved")]
    assert used_days("Annual Leave", rows) == 3


def test_remaining_with_no_requests_is_full_allotment():
    for leave_type, total in {"Annual Leave": 20, "Sick Leave": 10, "Personal Leave": 5, "Unpaid Leave": 30}.items():
        assert remaining_days(leave_type, []) == total


def test_remaining_days_is_not_clamped():
    requests = [_request("Personal Leave", 8, "approved")]
    assert remaining_days("Personal Leave", requests) == -3


def test_unknown_leave_type():
    with pytest.raises(InvalidArgumentError):
        allotment("Sabbatical")


def test_custom_allotment_table():
    assert remaining_days("Study Leave", [_request("Study Leave", 1, "approved")], {"Study Leave": 4}) == 3


def test_balances_cover_every_configured_type():
    rows = balances([_request("Annual Leave", 12, "approved")])
    by_type = {row["leave_type"]: row for row in rows}
    assert set(by_type) == {"Annual Leave", "Sick Leave", "Personal Leave", "Unpaid Leave"}
    assert by_type["Annual Leave"]["used_days"] == 12
    assert by_type["Annual Leave"]["remaining_days"] == 8
    assert by_type["Unpaid Leave"]["remaining_days"] == 30
