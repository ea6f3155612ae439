import pytest
from datetime import date

from hrms.core.exceptions import InvalidArgumentError
from hrms.services.gratuity import (
    calculate_gratuity, years_of_service, service_band, amount_band,
)


@pytest.mark.parametrize("years,salary,expected", [
    (0, 10000, 0),
    (0.5, 10000, 0),
    (0.99, 10000, 0),
    (1, 10000, 5000),
    (3, 10000, 15000),
    (5, 10000, 25000),
    (7, 10000, 45000),
    (10, 8000, 60000),
])
def test_tiered_gratuity(years, salary, expected):
    assert calculate_gratuity(years, salary) == pytest.approx(expected)


def test_half_year_beyond_five_accrues_full_rate():
    # 25000 for the first five years + 0.5 * 10000
    assert calculate_gratuity(5.5, 10000) == pytest.approx(30000)


@pytest.mark.parametrize("salary", [0, 1, 7350.5, 10000, 123456.78])
def test_boundary_at_five_years_is_continuous(salary):
    assert calculate_gratuity(5, salary) == calculate_gratuity(5.0000, salary)
    assert calculate_gratuity(5.000001, salary) == pytest.approx(calculate_gratuity(5, salary), rel=1e-6)


def test_zero_salary_gives_zero():
    assert calculate_gratuity(12, 0) == 0


def test_amount_is_not_rounded():
    assert calculate_gratuity(1.333, 1000) == pytest.approx(666.5)


@pytest.mark.parametrize("years,salary", [(-1, 10000), (2, -5)])
def test_negative_inputs_are_rejected(years, salary):
    with pytest.raises(InvalidArgumentError):
        calculate_gratuity(years, salary)


def test_years_of_service_from_hire_date():
    assert years_of_service(date(2020, 1, 1), as_of=date(2025, 1, 1)) == pytest.approx(5.0, abs=0.01)
    assert years_of_service(date(2025, 1, 1), as_of=date(2024, 1, 1)) == 0.0


@pytest.mark.parametrize("years,band", [
    (0.2, "< 1 year"), (1, "1-3 years"), (2.9, "1-3 years"),
    (3, "3-5 years"), (4.99, "3-5 years"), (5, "5+ years"), (20, "5+ years"),
])
def test_service_band(years, band):
    assert service_band(years) == band


@pytest.mark.parametrize("amount,band", [
    (0, "< 10K"), (9999.99, "< 10K"), (10000, "10K-50K"),
    (50000, "50K-100K"), (100000, "> 100K"),
])
def test_amount_band(amount, band):
    assert amount_band(amount) == band
