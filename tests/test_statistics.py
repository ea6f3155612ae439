import math
from types import SimpleNamespace

from hrms.services import statistics
from hrms.services.gratuity import SERVICE_BANDS, service_band


def test_empty_aggregates_are_zero():
    assert statistics.total([], "gratuity_amount") == 0
    assert statistics.average([], "rating") == 0
    assert not math.isnan(statistics.average([], "rating", ndigits=2))
    assert statistics.count_where([], "status", "active") == 0
    assert statistics.count_by([], "status") == {}


def test_average_rating_rounded():
    reviews = [SimpleNamespace(rating=4.5), SimpleNamespace(rating=3.0), SimpleNamespace(rating=4.0)]
    assert statistics.average(reviews, "rating", ndigits=2) == 3.83


def test_total_treats_missing_values_as_zero():
    records = [{"amount": 10.5}, {"amount": None}, {}]
    assert statistics.total(records, "amount") == 10.5


def test_count_by_status():
    records = [{"status": "active"}, {"status": "resolved"}, {"status": "active"}]
    assert statistics.count_by(records, "status") == {"active": 2, "resolved": 1}
    assert statistics.count_where(records, "status", "active") == 2


def test_band_counts_keep_empty_bands():
    records = [{"years": 0.5}, {"years": 6}, {"years": 7}]
    counts = statistics.band_counts(records, "years", service_band, SERVICE_BANDS)
    assert counts == {"< 1 year": 1, "1-3 years": 0, "3-5 years": 0, "5+ years": 2}
    assert statistics.band_counts([], "years", service_band, SERVICE_BANDS) == {b: 0 for b in SERVICE_BANDS}
