"""Counting inspectors: records, records per chromosome, FILTER status."""
from __future__ import annotations

from typing import Dict

import pandas as pd

__all__ = [
    "RecordCounter",
    "ChromosomeCounter",
    "FilterStatusCounter",
    "MISSING_FILTER",
    "chromosome_table",
    "filter_status_table",
]

MISSING_FILTER = "."


class RecordCounter:
    """Count every record it sees."""

    def __init__(self):
        self.n_records = 0

    def reset(self) -> None:
        self.n_records = 0

    def inspect_record(self, record) -> None:
        self.n_records += 1

    def get_result(self) -> int:
        return self.n_records


class ChromosomeCounter:
    """Count records per CHROM, keeping the order chromosomes first appear in."""

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def reset(self) -> None:
        self._counts = {}

    def inspect_record(self, record) -> None:
        chrom = str(record.CHROM)
        self._counts[chrom] = self._counts.get(chrom, 0) + 1

    def get_result(self) -> Dict[str, int]:
        return dict(self._counts)


class FilterStatusCounter:
    """Tally FILTER values.

    ``PASS`` records count under ``PASS``, records with a missing FILTER
    ('.') under ``.``, and each failed filter listed on a record once under
    its own name. A record failing two filters therefore adds to both.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def reset(self) -> None:
        self._counts = {}

    def inspect_record(self, record) -> None:
        filters = [f for f in (record.FILTER or []) if f and f != MISSING_FILTER]
        if not filters:
            filters = [MISSING_FILTER]
        for name in dict.fromkeys(filters):  # unique, order kept
            self._counts[name] = self._counts.get(name, 0) + 1

    def get_result(self) -> Dict[str, int]:
        return dict(self._counts)


def _count_table(counts: Dict[str, int], key: str) -> pd.DataFrame:
    df = pd.DataFrame({key: list(counts.keys()), "Records": list(counts.values())})
    df["Records"] = df["Records"].astype("int64")
    return df


def chromosome_table(counts: Dict[str, int]) -> pd.DataFrame:
    """Return DataFrame with columns: Chrom, Records (first-seen order)."""
    return _count_table(counts, "Chrom")


def filter_status_table(counts: Dict[str, int]) -> pd.DataFrame:
    """Return DataFrame with columns: Filter, Records, sorted by count (desc)."""
    df = _count_table(counts, "Filter")
    return df.sort_values("Records", ascending=False, kind="stable").reset_index(drop=True)
