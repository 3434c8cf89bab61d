"""Small utility helpers used across the megadrile package.

Pure-Python helpers for reading values out of parsed ``vcfpy`` records plus
the shared logging setup. Nothing here touches files.
"""
import logging
import sys
from typing import Any, Dict, List, Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``megadrile`` logger to write timestamped lines to stderr.

    Results go to stdout through ``print``; logging is for progress and
    diagnostics only. Python warnings (vcfpy reports unconvertible values
    and undeclared fields that way) are routed through the same handler.
    Calling this twice replaces the handler rather than stacking a second one.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    levels = {
        "megadrile": logging.INFO if verbose else logging.WARNING,
        "py.warnings": logging.WARNING,
    }
    for name, level in levels.items():
        logger = logging.getLogger(name)
        for old in list(logger.handlers):
            logger.removeHandler(old)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    logging.captureWarnings(True)


def progress_interval(count: int) -> int:
    """Adaptive progress step: every 1K up to 10K, 10K up to 100K, then 50K."""
    if count <= 10000:
        return 1000
    if count <= 100000:
        return 10000
    return 50000


def gt_is_missing(gt: Optional[str]) -> bool:
    """Check if a genotype is missing or half-missing.

    Treat None, '.', './.', '.|.', '0/.', './1', '0|.' etc. as missing.
    """
    if gt is None or gt == "":
        return True
    if gt == ".":
        return True
    return "." in gt


def split_gt(gt: str) -> List[str]:
    """Split a GT string on its phasing separator; haploid calls give one allele."""
    sep = "/" if "/" in gt else "|" if "|" in gt else None
    return gt.split(sep) if sep else [gt]


def as_float_list(value: Any) -> List[Optional[float]]:
    """Normalise an INFO value to a list of floats.

    vcfpy returns lists for ``Number=A`` fields declared in the header but
    plain strings for undeclared ones, so both shapes are accepted. Missing
    ('.') or unparsable entries become None. An absent value gives [].
    """
    if value is None:
        return []
    if isinstance(value, str):
        items: List[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        items = [value]
    out: List[Optional[float]] = []
    for item in items:
        if item is None or item == ".":
            out.append(None)
            continue
        try:
            out.append(float(item))
        except (TypeError, ValueError):
            out.append(None)
    return out


def genotype_allele_frequencies(calls, n_alt: int) -> List[Optional[float]]:
    """Derive ALT allele frequencies from called GT alleles.

    Individual '.' alleles are skipped, so ``0/.`` still contributes its
    REF allele. Returns None for every ALT when no allele was called.
    """
    allele_counts: Dict[int, int] = {}
    for call in calls or []:
        gt = call.data.get("GT") if call.data else None
        if not gt or gt in (".", "./.", ".|."):
            continue
        for a in split_gt(str(gt)):
            if a.isdigit():
                idx = int(a)
                allele_counts[idx] = allele_counts.get(idx, 0) + 1
    an = sum(allele_counts.values())
    if an == 0:
        return [None] * n_alt
    return [allele_counts.get(i, 0) / an for i in range(1, n_alt + 1)]


def alt_allele_frequencies(record) -> List[Optional[float]]:
    """Return one frequency per ALT allele of a vcfpy record.

    Prefers INFO ``AF``, then ``AC``/``AN``, then falls back to the
    genotype calls. Records without ALT alleles give [].
    """
    n_alt = len(record.ALT or [])
    if n_alt == 0:
        return []
    info = record.INFO or {}
    af = as_float_list(info.get("AF"))
    if len(af) == n_alt:
        return af
    ac = as_float_list(info.get("AC"))
    an = as_float_list(info.get("AN"))
    if len(ac) == n_alt and len(an) == 1 and an[0] is not None and an[0] > 0:
        return [c / an[0] if c is not None else None for c in ac]
    return genotype_allele_frequencies(record.calls, n_alt)


__all__ = [
    "LOG_FORMAT",
    "LOG_DATEFMT",
    "setup_logging",
    "progress_interval",
    "gt_is_missing",
    "split_gt",
    "as_float_list",
    "genotype_allele_frequencies",
    "alt_allele_frequencies",
]
