"""
End-of-service gratuity rules.

Tiered accrual on the monthly basic salary:
- under one year of service: nothing
- years one to five: half a month's salary per year
- beyond five years: a full month's salary per additional year

All functions are pure. Amounts are returned unrounded; rounding to two
decimals happens when presenting them.
"""
from datetime import date
from typing import Optional

from hrms.core.exceptions import InvalidArgumentError

FULL_RATE_AFTER_YEARS = 5
DAYS_PER_YEAR = 365.25

SERVICE_BANDS = ("< 1 year", "1-3 years", "3-5 years", "5+ years")
AMOUNT_BANDS = ("< 10K", "10K-50K", "50K-100K", "> 100K")


def calculate_gratuity(years_of_service: float, basic_salary: float) -> float:
    if years_of_service < 0:
        raise InvalidArgumentError("years_of_service must be non-negative", {"years_of_service": years_of_service})
    if basic_salary < 0:
        raise InvalidArgumentError("basic_salary must be non-negative", {"basic_salary": basic_salary})

    if years_of_service < 1:
        return 0.0
    half_month = basic_salary / 2
    if years_of_service <= FULL_RATE_AFTER_YEARS:
        return half_month * years_of_service
    return half_month * FULL_RATE_AFTER_YEARS + basic_salary * (years_of_service - FULL_RATE_AFTER_YEARS)


def years_of_service(hire_date: date, as_of: Optional[date] = None) -> float:
    """Tenure in fractional years between hire_date and as_of (today by default)."""
    as_of = as_of or date.today()
    days = (as_of - hire_date).days
    if days <= 0:
        return 0.0
    return round(days / DAYS_PER_YEAR, 2)


def service_band(years: float) -> str:
    if years < 1:
        return SERVICE_BANDS[0]
    if years < 3:
        return SERVICE_BANDS[1]
    if years < 5:
        return SERVICE_BANDS[2]
    return SERVICE_BANDS[3]


def amount_band(amount: float) -> str:
    if amount < 10_000:
        return AMOUNT_BANDS[0]
    if amount < 50_000:
        return AMOUNT_BANDS[1]
    if amount < 100_000:
        return AMOUNT_BANDS[2]
    return AMOUNT_BANDS[3]
