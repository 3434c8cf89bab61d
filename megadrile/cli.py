"""Command line interface for megadrile.

Opens a gzip-compressed VCF, reports the number of samples and records, and
optionally runs extra inspectors over the same single pass.

Example:
	python -m megadrile --input calls.vcf.gz --inspect chrom filter af
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

from . import __version__
from .config import DEFAULT_AF_BINS, RunConfig
from .core import run_inspectors
from .errors import VcfOpenError
from .io import open_vcf
from .metrics import (
	INSPECTOR_NAMES,
	allele_frequency_table,
	build_inspectors,
	chromosome_table,
	filter_status_table,
	sample_missingness_table,
)
from .utils import setup_logging

logger = logging.getLogger(__name__)

NO_INPUT_MSG = "No input specified."
OPEN_FAILED_MSG = "Something went wrong!"
READ_FAILED_MSG = "Something went wrong while reading record."
DONE_MSG = "Done!"

# name -> (section title, result -> DataFrame)
_SECTIONS = {
	"chrom": ("Records per chromosome:", chromosome_table),
	"filter": ("Records per FILTER status:", filter_status_table),
	"af": ("ALT allele frequency histogram:", allele_frequency_table),
	"missing": ("Per-sample genotype missingness:", sample_missingness_table),
}


def _print_section(name: str, result) -> None:
	title, to_table = _SECTIONS[name]
	print(title)
	df = to_table(result)
	if df.empty:
		print("  (none)")
	else:
		print(df.to_string(index=False))
	if name == "af":
		print(f"Alleles without frequency: {result.undetermined}")


def report_results(inspectors: Dict[str, object]) -> None:
	"""Print the record count, then one section per extra inspector."""
	print(f"Number of records: {inspectors['records'].get_result()}")
	for name, inspector in inspectors.items():
		if name == "records":
			continue
		_print_section(name, inspector.get_result())


def run(config: RunConfig) -> int:
	"""Run one pass as described by ``config``; always returns 0.

	Failures are reported on stdout (generic message) and stderr (detail
	through logging) rather than through the exit status.
	"""
	if not config.input:
		print(NO_INPUT_MSG)
		print(DONE_MSG)
		return 0

	print(f"Input: {config.input}")
	try:
		source = open_vcf(config.input)
	except VcfOpenError as err:
		logger.error("%s", err)
		print(OPEN_FAILED_MSG)
		print(DONE_MSG)
		return 0

	with source:
		print(f"Number of samples: {source.n_samples}")
		inspectors = build_inspectors(config.inspect, source.samples, config.af_bins)
		report = run_inspectors(source, list(inspectors.values()), max_records=config.max_records)

	if report.error is not None:
		print(READ_FAILED_MSG)
	report_results(inspectors)
	print(DONE_MSG)
	return 0


def cmd_run(args: argparse.Namespace) -> int:
	setup_logging(args.verbose)
	return run(RunConfig.from_args(args))


def _positive_int(value: str) -> int:
	try:
		n = int(value)
	except ValueError:
		raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
	if n < 1:
		raise argparse.ArgumentTypeError(f"expected a positive integer, got {n}")
	return n


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="megadrile", description="Count samples and records in a gzip-compressed VCF")
	p.add_argument("-i", "--input", "--vcf", dest="input", default=None, help="Input VCF.GZ file")
	p.add_argument("--inspect", nargs="+", default=[], choices=[n for n in INSPECTOR_NAMES if n != "records"], metavar="NAME", help=f"Extra inspectors to run in the same pass. Options: {', '.join(n for n in INSPECTOR_NAMES if n != 'records')}")
	p.add_argument("--af-bins", type=_positive_int, default=DEFAULT_AF_BINS, help=f"Number of allele-frequency histogram bins (default: {DEFAULT_AF_BINS})")
	p.add_argument("--max-records", type=_positive_int, default=None, help="Stop after this many records (debug)")
	p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
	p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	p.set_defaults(func=cmd_run)
	return p


def main(argv: Optional[list] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	return args.func(args)


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
