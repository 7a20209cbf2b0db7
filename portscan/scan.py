# scan.py
# One scan run: resolve the port spec, feed the workers, wait, sort.

import enum
import logging
import time
from dataclasses import dataclass, field

from .ports import PortSpecError, resolve
from .workers import collect, load_queues, run_pool, worker_count

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 500


class ScanState(enum.Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    DISPATCHING = "dispatching"
    COLLECTING = "collecting"
    SORTED = "sorted"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ScanOutcome:
    host: str
    open_ports: list[int] = field(default_factory=list)
    ports_scanned: int = 0
    workers: int = 0

    @property
    def count(self) -> int:
        return len(self.open_ports)


class Scan:
    """
    A single scan of `host` over the ports named by `spec`.

    run() walks IDLE -> RESOLVING -> DISPATCHING -> COLLECTING -> SORTED -> DONE.
    A bad port spec stops it in FAILED and the PortSpecError propagates.
    Individual probe failures never leave the dispatcher.
    """

    def __init__(self, host: str, spec: str = "", timeout: float | None = DEFAULT_TIMEOUT_MS / 1000,
                 max_workers: int | None = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.host = host
        self.spec = spec
        self.timeout = timeout
        self.max_workers = max_workers
        self.state = ScanState.IDLE

    def run(self) -> ScanOutcome:
        if self.state is not ScanState.IDLE:
            raise RuntimeError(f"scan already ran (state={self.state.value})")

        self.state = ScanState.RESOLVING
        try:
            ports = resolve(self.spec)
        except PortSpecError:
            self.state = ScanState.FAILED
            raise
        log.debug("resolved %d ports for %s", len(ports), self.host)

        self.state = ScanState.DISPATCHING
        workers = worker_count(len(ports), self.max_workers)
        work, results = load_queues(ports, workers)

        t0 = time.perf_counter()
        log.debug("scanning %s with %d workers, timeout %ss", self.host, workers, self.timeout)
        run_pool(self.host, work, results, self.timeout, workers)
        log.debug("scan of %s finished in %.2fs", self.host, time.perf_counter() - t0)

        self.state = ScanState.COLLECTING
        found = collect(results)

        found.sort()
        self.state = ScanState.SORTED

        outcome = ScanOutcome(host=self.host, open_ports=found,
                              ports_scanned=len(ports), workers=workers)
        self.state = ScanState.DONE
        return outcome


def scan(host: str, spec: str = "", timeout: float | None = DEFAULT_TIMEOUT_MS / 1000,
         max_workers: int | None = None) -> ScanOutcome:
    return Scan(host, spec, timeout, max_workers).run()
