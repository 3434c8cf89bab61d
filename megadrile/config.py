"""Run configuration for the megadrile pipeline.

Everything is supplied on the command line; ``RunConfig`` just freezes the
parsed values so the pipeline can be driven without argparse (tests,
notebooks).
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Optional, Tuple

__all__ = ["DEFAULT_AF_BINS", "RunConfig"]

DEFAULT_AF_BINS = 10


@dataclass(frozen=True)
class RunConfig:
	"""Options for a single pass over one VCF."""

	input: Optional[str] = None
	inspect: Tuple[str, ...] = field(default_factory=tuple)
	af_bins: int = DEFAULT_AF_BINS
	max_records: Optional[int] = None
	verbose: bool = False

	def __post_init__(self):
		if self.af_bins < 1:
			raise ValueError(f"af_bins must be >= 1, got {self.af_bins}")
		if self.max_records is not None and self.max_records < 1:
			raise ValueError(f"max_records must be >= 1, got {self.max_records}")

	@classmethod
	def from_args(cls, args: argparse.Namespace) -> "RunConfig":
		return cls(
			input=args.input or None,
			inspect=tuple(args.inspect or ()),
			af_bins=args.af_bins,
			max_records=args.max_records,
			verbose=args.verbose,
		)
