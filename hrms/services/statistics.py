"""
Aggregations over already-loaded record lists.

Every function returns 0 (or an empty/zeroed mapping) for empty input so
dashboards stay stable.
"""
from collections import Counter
from typing import Any, Callable, Dict, Iterable, Optional, Sequence


def _get(record: Any, attr: str):
    if isinstance(record, dict):
        return record.get(attr)
    return getattr(record, attr, None)


def total(records: Iterable[Any], attr: str) -> float:
    return sum(float(_get(r, attr) or 0) for r in records)


def average(records: Sequence[Any], attr: str, ndigits: Optional[int] = None) -> float:
    records = list(records)
    if not records:
        return 0
    value = total(records, attr) / len(records)
    return round(value, ndigits) if ndigits is not None else value


def count_where(records: Iterable[Any], attr: str, value: Any) -> int:
    return sum(1 for r in records if _get(r, attr) == value)


def count_by(records: Iterable[Any], attr: str) -> Dict[str, int]:
    return dict(Counter(_get(r, attr) for r in records))


def band_counts(
    records: Iterable[Any],
    attr: str,
    classify: Callable[[float], str],
    labels: Sequence[str]
) -> Dict[str, int]:
    """Counts per band label, keeping every label (zero when empty)."""
    counts = {label: 0 for label in labels}
    for r in records:
        counts[classify(float(_get(r, attr) or 0))] += 1
    return counts
