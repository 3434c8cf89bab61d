"""Streaming access to gzip-compressed VCF files.

Decompression is done by :mod:`gzip` (multi-member files, including BGZF,
read transparently) and the text is handed to ``vcfpy`` which owns the
header and record grammar. This module only adds the cursor contract used
by the inspector pass: ``next_record`` returns a record, ``None`` at end of
stream, or raises :class:`~megadrile.errors.RecordReadError`.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import Iterator, List, Optional

import vcfpy

from ..errors import RecordReadError, VcfOpenError, describe

__all__ = ["VcfStreamSource", "open_vcf"]

logger = logging.getLogger(__name__)

# What gzip / TextIOWrapper / vcfpy raise on bad input. BadGzipFile is an
# OSError; UnicodeDecodeError is a ValueError; corrupt deflate data is zlib.error.
_STREAM_ERRORS = (
	OSError,
	EOFError,
	ValueError,
	IndexError,
	KeyError,
	zlib.error,
	vcfpy.exceptions.VCFPyException,
)


class VcfStreamSource:
	"""Sequential record cursor over one ``.vcf.gz`` file.

	Parameters
	----------
	path : str
		Path to a gzip-compressed VCF file.

	Use as a context manager, or call :meth:`open` / :meth:`close`
	yourself. The header is parsed on open, so ``samples`` is populated
	before the first record is requested.
	"""

	def __init__(self, path: str):
		self.path = path
		self.samples: List[str] = []
		self.records_read = 0
		self._stream = None
		self._reader: Optional[vcfpy.Reader] = None
		self._exhausted = False

	# -- lifecycle ---------------------------------------------------------
	def open(self) -> "VcfStreamSource":
		if self._reader is not None:
			return self
		try:
			stream = gzip.open(self.path, "rt")
		except _STREAM_ERRORS as err:
			raise VcfOpenError(self.path, describe(err)) from err
		try:
			reader = vcfpy.Reader.from_stream(stream, self.path)
		except _STREAM_ERRORS as err:
			stream.close()
			raise VcfOpenError(self.path, describe(err)) from err
		self._stream = stream
		self._reader = reader
		self.samples = list(reader.header.samples.names)
		self.records_read = 0
		self._exhausted = False
		logger.info("Opened %s (%d samples)", self.path, len(self.samples))
		return self

	def close(self) -> None:
		if self._reader is not None:
			self._reader.close()
		if self._stream is not None:
			self._stream.close()
		self._reader = None
		self._stream = None

	def __enter__(self) -> "VcfStreamSource":
		return self.open()

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	# -- access ------------------------------------------------------------
	@property
	def header(self) -> vcfpy.Header:
		self._require_open()
		return self._reader.header

	@property
	def n_samples(self) -> int:
		return len(self.samples)

	def next_record(self) -> Optional[vcfpy.Record]:
		"""Return the next record, or None once the stream is exhausted.

		Raises RecordReadError when a line fails to decompress, decode or
		parse. Records read before the failure stay counted in
		``records_read``.
		"""
		self._require_open()
		if self._exhausted:
			return None
		index = self.records_read + 1
		try:
			record = next(self._reader)
		except StopIteration:
			# vcfpy also stops on a blank line, so make sure nothing follows
			self._exhausted = True
			if self._data_remains(index):
				raise RecordReadError(self.path, index, "blank line before end of file")
			return None
		except _STREAM_ERRORS as err:
			raise RecordReadError(self.path, index, describe(err)) from err
		self.records_read = index
		return record

	def _data_remains(self, index: int) -> bool:
		"""True if a non-blank line is left after vcfpy stopped iterating.

		The vcfpy parser keeps one line of lookahead, so that line is checked
		before the rest of the stream.
		"""
		pending = getattr(getattr(self._reader, "parser", None), "_line", None)
		if pending and pending.strip():
			return True
		try:
			for line in self._stream:
				if line.strip():
					return True
		except _STREAM_ERRORS as err:
			raise RecordReadError(self.path, index, describe(err)) from err
		return False

	def __iter__(self) -> Iterator[vcfpy.Record]:
		while True:
			record = self.next_record()
			if record is None:
				return
			yield record

	def _require_open(self) -> None:
		if self._reader is None:
			raise RuntimeError(f"VCF stream for '{self.path}' is not open")


def open_vcf(path: str) -> VcfStreamSource:
	"""Open ``path`` and parse its header; caller must close the source."""
	return VcfStreamSource(path).open()
