"""Example: plug a custom inspector into a megadrile pass.

Counts SNVs vs. other ALT alleles alongside the built-in record and
chromosome counters, all in one read of the file.

Usage:
    PYTHONPATH=.. python3 examples/variant_type_counts.py --vcf calls.vcf.gz
"""
from __future__ import annotations

import argparse
from typing import Dict

from megadrile.core import run_inspectors
from megadrile.io import open_vcf
from megadrile.metrics import ChromosomeCounter, RecordCounter, chromosome_table


class VariantTypeCounter:
    """ALT alleles split into SNV / other by REF and ALT length."""

    def __init__(self):
        self._counts: Dict[str, int] = {"SNV": 0, "other": 0}

    def reset(self) -> None:
        self._counts = {"SNV": 0, "other": 0}

    def inspect_record(self, record) -> None:
        for alt in record.ALT or []:
            is_snv = len(record.REF) == 1 and len(getattr(alt, "value", "")) == 1
            self._counts["SNV" if is_snv else "other"] += 1

    def get_result(self) -> Dict[str, int]:
        return dict(self._counts)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--vcf", required=True, help="Input VCF.GZ")
    ap.add_argument("--max-records", type=int, default=None, help="Limit records (debug)")
    args = ap.parse_args()

    records, chroms, types = RecordCounter(), ChromosomeCounter(), VariantTypeCounter()
    with open_vcf(args.vcf) as source:
        report = run_inspectors(source, [records, chroms, types], max_records=args.max_records)

    if not report.ok:
        print(f"[WARNING] stopped early: {report.error}")
    print(f"Records: {records.get_result():,}")
    print(chromosome_table(chroms.get_result()).to_string(index=False))
    for kind, n in types.get_result().items():
        print(f"{kind}: {n:,}")


if __name__ == "__main__":
    main()
