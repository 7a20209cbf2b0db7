"""Concurrent TCP connect port scanner."""

from .ports import InvalidPort, InvalidRange, PortSpecError, resolve
from .scan import Scan, ScanOutcome, ScanState
from .workers import probe, worker_count

__all__ = [
    "InvalidPort", "InvalidRange", "PortSpecError", "Scan", "ScanOutcome",
    "ScanState", "probe", "resolve", "worker_count",
]
