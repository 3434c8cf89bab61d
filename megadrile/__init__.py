"""megadrile – single-pass inspection of gzip-compressed VCF files.

Subpackages:
	io        – gzip + vcfpy backed record stream
	core      – the inspector protocol and the pass that drives it
	metrics   – concrete inspectors (record / chromosome / FILTER counts,
	            allele-frequency histogram, per-sample missingness)

Typical library use::

	from megadrile.io import open_vcf
	from megadrile.core import run_inspectors
	from megadrile.metrics import RecordCounter

	with open_vcf("calls.vcf.gz") as source:
		counter = RecordCounter()
		run_inspectors(source, [counter])
	print(counter.get_result())

Add new analyses by writing a class with ``reset`` / ``inspect_record`` /
``get_result`` and registering it in ``metrics.INSPECTOR_FACTORIES``.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
