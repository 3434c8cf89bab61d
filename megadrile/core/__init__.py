"""Core pass machinery: the inspector protocol and the loop that feeds it."""

from .inspector import VcfRecordInspector  # noqa: F401
from .pump import PassReport, run_inspectors  # noqa: F401

__all__ = ["VcfRecordInspector", "PassReport", "run_inspectors"]
