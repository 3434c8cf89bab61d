"""Concrete inspectors and the name -> factory registry used by the CLI."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

from ..config import DEFAULT_AF_BINS
from .allele_metrics import (  # noqa: F401
	AlleleFrequencyHistogram,
	AlleleFrequencyHistogramResult,
	allele_frequency_table,
)
from .counters import (  # noqa: F401
	ChromosomeCounter,
	FilterStatusCounter,
	RecordCounter,
	chromosome_table,
	filter_status_table,
)
from .sample_metrics import (  # noqa: F401
	SampleCallTally,
	SampleMissingnessCounter,
	sample_missingness_table,
)

# factory(samples, af_bins) -> inspector
INSPECTOR_FACTORIES: Dict[str, Callable[[Sequence[str], int], object]] = {
	"records": lambda samples, af_bins: RecordCounter(),
	"chrom": lambda samples, af_bins: ChromosomeCounter(),
	"filter": lambda samples, af_bins: FilterStatusCounter(),
	"af": lambda samples, af_bins: AlleleFrequencyHistogram(af_bins),
	"missing": lambda samples, af_bins: SampleMissingnessCounter(samples),
}

INSPECTOR_NAMES = tuple(INSPECTOR_FACTORIES)


def build_inspectors(
	names: Iterable[str] = (),
	samples: Sequence[str] = (),
	af_bins: int = DEFAULT_AF_BINS,
) -> Dict[str, object]:
	"""Instantiate inspectors by name, in run order.

	``records`` is always included and always first; duplicates are
	dropped. Unknown names raise ValueError.
	"""
	ordered: List[str] = ["records"]
	for name in names:
		if name not in INSPECTOR_FACTORIES:
			raise ValueError(
				f"Unknown inspector '{name}'. Options: {', '.join(INSPECTOR_NAMES)}"
			)
		if name not in ordered:
			ordered.append(name)
	return {name: INSPECTOR_FACTORIES[name](samples, af_bins) for name in ordered}


__all__ = [
	"RecordCounter",
	"ChromosomeCounter",
	"FilterStatusCounter",
	"AlleleFrequencyHistogram",
	"AlleleFrequencyHistogramResult",
	"SampleCallTally",
	"SampleMissingnessCounter",
	"chromosome_table",
	"filter_status_table",
	"allele_frequency_table",
	"sample_missingness_table",
	"INSPECTOR_FACTORIES",
	"INSPECTOR_NAMES",
	"build_inspectors",
]
