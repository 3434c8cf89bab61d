"""Allele-frequency histogram inspector.

One frequency per ALT allele is taken from INFO ``AF`` when present, else
from ``AC``/``AN``, else from the called genotypes (see
:func:`megadrile.utils.alt_allele_frequencies`). Bins split [0, 1] into
equal-width intervals; the last bin is closed on the right so AF == 1 is
counted.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from ..config import DEFAULT_AF_BINS
from ..utils import alt_allele_frequencies

__all__ = ["AlleleFrequencyHistogram", "AlleleFrequencyHistogramResult", "allele_frequency_table"]


@dataclass(frozen=True)
class AlleleFrequencyHistogramResult:
    """Bin edges (n_bins + 1), per-bin allele counts and alleles without a usable AF."""

    edges: Tuple[float, ...]
    counts: Tuple[int, ...]
    undetermined: int = 0

    @property
    def total(self) -> int:
        return sum(self.counts)


class AlleleFrequencyHistogram:
    """Histogram of ALT allele frequencies over all records seen."""

    def __init__(self, n_bins: int = DEFAULT_AF_BINS):
        if n_bins < 1:
            raise ValueError(f"n_bins must be >= 1, got {n_bins}")
        self.n_bins = n_bins
        self._edges = np.linspace(0.0, 1.0, n_bins + 1)
        self._counts = np.zeros(n_bins, dtype=np.int64)
        self._undetermined = 0

    def reset(self) -> None:
        self._counts = np.zeros(self.n_bins, dtype=np.int64)
        self._undetermined = 0

    def _bin_index(self, af: float) -> int:
        # searchsorted(side="right") - 1 puts af in [edge_i, edge_i+1)
        idx = int(np.searchsorted(self._edges, af, side="right")) - 1
        return min(idx, self.n_bins - 1)

    def inspect_record(self, record) -> None:
        for af in alt_allele_frequencies(record):
            if af is None or math.isnan(af) or af < 0.0 or af > 1.0:
                self._undetermined += 1
                continue
            self._counts[self._bin_index(af)] += 1

    def get_result(self) -> AlleleFrequencyHistogramResult:
        return AlleleFrequencyHistogramResult(
            edges=tuple(float(e) for e in self._edges),
            counts=tuple(int(c) for c in self._counts),
            undetermined=self._undetermined,
        )


def allele_frequency_table(result: AlleleFrequencyHistogramResult) -> pd.DataFrame:
    """Return DataFrame with columns: Bin, Alleles (one row per bin)."""
    n = len(result.counts)
    labels = []
    for i in range(n):
        lo, hi = result.edges[i], result.edges[i + 1]
        close = "]" if i == n - 1 else ")"
        labels.append(f"[{lo:.2f}, {hi:.2f}{close}")
    return pd.DataFrame({"Bin": labels, "Alleles": list(result.counts)})
