"""The inspector capability interface.

An inspector is any object with ``reset``, ``inspect_record`` and
``get_result``. It is a structural protocol, so concrete inspectors do not
inherit from anything and share no state.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = ["VcfRecordInspector", "R"]

R = TypeVar("R", covariant=True)


@runtime_checkable
class VcfRecordInspector(Protocol[R]):
	"""Single-pass, stateful analysis over a stream of VCF records.

	Contract
	--------
	reset()
		Return to the construction-time state. Idempotent; never fails.
	inspect_record(record)
		Update state from one record. The record is only valid during the
		call: do not keep it or anything borrowed from it. Problems with a
		record are accumulated in the inspector's own state, never raised.
	get_result()
		Current result. Calling it twice without an intervening
		``inspect_record``/``reset`` gives equal values, and the returned
		value is never aliased to internal state.

	After N ``inspect_record`` calls since the last ``reset`` the result is
	a function of those N records in order and nothing else.
	"""

	def reset(self) -> None:
		...

	def inspect_record(self, record: Any) -> None:
		...

	def get_result(self) -> R:
		...
