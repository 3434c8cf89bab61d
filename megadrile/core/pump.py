"""Drive records from a stream source into inspectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import RecordReadError
from ..utils import progress_interval
from .inspector import VcfRecordInspector

__all__ = ["PassReport", "run_inspectors"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassReport:
	"""Outcome of one pass.

	``error`` is set when a record failed to read; the inspectors then hold
	the partial results for the ``records_read`` records before it.
	``stopped_early`` is True when ``max_records`` cut the pass short.
	"""

	records_read: int
	error: Optional[RecordReadError] = None
	stopped_early: bool = False

	@property
	def ok(self) -> bool:
		return self.error is None


def run_inspectors(
	source,
	inspectors: Sequence[VcfRecordInspector],
	max_records: Optional[int] = None,
) -> PassReport:
	"""Feed every record from ``source`` to ``inspectors``, in order.

	``source`` needs a ``next_record()`` returning a record or None at end
	of stream and raising RecordReadError on a bad record. Each record goes
	to every inspector in sequence order before the next record is read.
	A read failure ends the pass without retry; it is reported, not raised.
	"""
	count = 0
	while True:
		if max_records is not None and count >= max_records:
			logger.info("Stopped after %d records (max_records reached)", count)
			return PassReport(records_read=count, stopped_early=True)
		try:
			record = source.next_record()
		except RecordReadError as err:
			logger.error("%s", err)
			return PassReport(records_read=count, error=err)
		if record is None:
			break
		for inspector in inspectors:
			inspector.inspect_record(record)
		count += 1
		if count % progress_interval(count) == 0:
			logger.info("Inspected %d records...", count)
	logger.info("Reached end of stream after %d records", count)
	return PassReport(records_read=count)
