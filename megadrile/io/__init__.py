"""I/O subpackage.

Exposes the gzip + vcfpy backed stream source the inspector pass reads
from. The VCF grammar itself is vcfpy's business.
"""

from .vcf_reader import VcfStreamSource, open_vcf  # noqa: F401

__all__ = ["VcfStreamSource", "open_vcf"]
