"""Per-sample genotype missingness inspector.

Follows the usual QC definition: a genotype is missing when GT is absent,
'.', or has any missing allele ('./.', '0/.', '.|1').
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

import pandas as pd

from ..utils import gt_is_missing

__all__ = [
	"SampleCallTally",
	"SampleMissingnessCounter",
	"sample_missingness_table",
]


@dataclass(frozen=True)
class SampleCallTally:
	called: int = 0
	missing: int = 0

	@property
	def total(self) -> int:
		return self.called + self.missing

	@property
	def missing_rate(self) -> float:
		return self.missing / self.total if self.total else 0.0


class SampleMissingnessCounter:
	"""Count called vs. missing genotypes per sample.

	Parameters
	----------
	samples : Iterable[str]
		Sample names in header order. Calls are matched to samples by the
		name vcfpy attaches to each call, so records are not assumed to
		carry every sample.
	"""

	def __init__(self, samples: Iterable[str]):
		self.samples: List[str] = list(samples)
		self._called: Dict[str, int] = {}
		self._missing: Dict[str, int] = {}
		self.reset()

	def reset(self) -> None:
		self._called = {s: 0 for s in self.samples}
		self._missing = {s: 0 for s in self.samples}

	def inspect_record(self, record) -> None:
		for call in record.calls or []:
			if call.sample not in self._called:
				continue
			gt = call.data.get("GT") if call.data else None
			if gt_is_missing(gt):
				self._missing[call.sample] += 1
			else:
				self._called[call.sample] += 1

	def get_result(self) -> Dict[str, SampleCallTally]:
		return {
			s: SampleCallTally(called=self._called[s], missing=self._missing[s])
			for s in self.samples
		}


def sample_missingness_table(result: Dict[str, SampleCallTally]) -> pd.DataFrame:
	"""Return DataFrame with columns: Sample, CalledSites, MissingSites, MissingRate."""
	rows = []
	for s, tally in result.items():
		rows.append({
			"Sample": s,
			"CalledSites": tally.called,
			"MissingSites": tally.missing,
			"MissingRate": tally.missing_rate,
		})
	return pd.DataFrame(rows, columns=["Sample", "CalledSites", "MissingSites", "MissingRate"])
