import gzip
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Iterable, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

HEADER_LINES = [
    "##fileformat=VCFv4.2",
    "##contig=<ID=chr1,length=248956422>",
    "##contig=<ID=chr2,length=242193529>",
    '##INFO=<ID=AF,Number=A,Type=Float,Description="Allele Frequency">',
    '##INFO=<ID=AC,Number=A,Type=Integer,Description="Allele count in genotypes">',
    '##INFO=<ID=AN,Number=1,Type=Integer,Description="Total number of alleles in called genotypes">',
    '##FILTER=<ID=q10,Description="Quality below 10">',
    '##FILTER=<ID=s50,Description="Less than 50% of samples have data">',
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
]
FIXED_COLUMNS = ["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO"]


def vcf_line(
    chrom: str = "chr1",
    pos="100",
    ref: str = "A",
    alt: str = "G",
    filt: str = "PASS",
    info: str = ".",
    gts: Sequence[str] = (),
) -> str:
    cols = [chrom, str(pos), ".", ref, alt, "50", filt, info]
    if gts:
        cols.append("GT")
        cols.extend(gts)
    return "\t".join(cols)


def write_vcf_gz(path: Path, samples: Sequence[str], lines: Iterable[str]) -> Path:
    header = list(HEADER_LINES)
    cols = list(FIXED_COLUMNS)
    if samples:
        cols.append("FORMAT")
        cols.extend(samples)
    header.append("\t".join(cols))
    text = "\n".join(header + list(lines)) + "\n"
    with gzip.open(path, "wt") as fh:
        fh.write(text)
    return path


def fake_record(
    chrom: str = "chr1",
    filters: Optional[List[str]] = None,
    n_alt: int = 1,
    info: Optional[dict] = None,
    calls: Sequence = (),
):
    """Stand-in for vcfpy.Record carrying only the attributes inspectors read."""
    return SimpleNamespace(
        CHROM=chrom,
        FILTER=["PASS"] if filters is None else filters,
        ALT=[object() for _ in range(n_alt)],
        INFO=info or {},
        calls=list(calls),
    )


def fake_call(sample: str, gt: Optional[str]):
    data = {} if gt is None else {"GT": gt}
    return SimpleNamespace(sample=sample, data=data)


@pytest.fixture
def two_sample_vcf(tmp_path: Path) -> Path:
    lines = [
        vcf_line("chr1", 100, info="AF=0.25", gts=["0/1", "0/0"]),
        vcf_line("chr1", 200, filt="q10", info="AC=3;AN=4", gts=["1/1", "0/1"]),
        vcf_line("chr1", 300, filt=".", gts=["./.", "0/1"]),
        vcf_line("chr2", 150, filt="q10;s50", info="AF=0.95", gts=["1/1", "1/1"]),
        vcf_line("chr2", 250, alt=".", gts=["0/0", "0|."]),
    ]
    return write_vcf_gz(tmp_path / "two_samples.vcf.gz", ["NA001", "NA002"], lines)
