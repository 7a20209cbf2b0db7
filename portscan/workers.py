# workers.py
# Fan port probes out over a pool of worker threads and fan the open ones back in.
#
#   work queue (ports + one stop sentinel per worker) -> workers -> results queue
#
# Workers stop when they read the sentinel, so they never need to know how
# many ports there are.

import logging
import os
import queue
import socket
import time
from concurrent.futures import ThreadPoolExecutor

log = logging.getLogger(__name__)

WORKERS_PER_CPU = 20   # connects are I/O bound, so oversubscribe the CPUs
_STOP = None           # "no more ports" marker on the work queue


def worker_count(n_ports: int, max_workers: int | None = None) -> int:
    """Never more workers than ports, never more than cpu_count * WORKERS_PER_CPU."""
    n = min(n_ports, (os.cpu_count() or 1) * WORKERS_PER_CPU)
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        n = min(n, max_workers)
    return max(n, 0)


# ------------------ Probe ------------------
def probe(host: str, port: int, timeout: float | None) -> bool:
    """
    One TCP connect to the first address `host` resolves to.
    The lookup and the connect share a single `timeout` (None blocks).
    """
    if not 0 <= port <= 65535:
        # getaddrinfo would silently wrap these to a 16-bit port
        return False
    deadline = None if timeout is None else time.monotonic() + timeout
    try:
        family, type_, proto, _, addr = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)[0]
    except OSError:
        # DNS failure
        return False
    if deadline is not None:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
    else:
        remaining = None

    s = socket.socket(family, type_, proto)
    try:
        s.settimeout(remaining)
        s.connect(addr)
        return True
    except OSError:
        # refused, timed out, unreachable
        return False
    finally:
        try:
            s.close()
        except OSError:
            pass


# ------------------ Workers ------------------
def scan_worker(host: str, work: queue.Queue, results: queue.Queue, timeout: float | None) -> None:
    while True:
        port = work.get()
        if port is _STOP:
            return
        if probe(host, port, timeout):
            results.put(port)


def close_work(work: queue.Queue, workers: int) -> None:
    """Tell every worker there is nothing more to read."""
    for _ in range(workers):
        work.put(_STOP)


def load_queues(ports: list[int], workers: int) -> tuple[queue.Queue, queue.Queue]:
    """
    Build the work queue (every port, then closed for `workers` readers)
    and an empty results queue big enough for every port to be open.
    """
    work: queue.Queue = queue.Queue(maxsize=len(ports) + workers)
    results: queue.Queue = queue.Queue(maxsize=len(ports))
    for p in ports:
        work.put(p)
    close_work(work, workers)
    return work, results


def run_pool(host: str, work: queue.Queue, results: queue.Queue,
             timeout: float | None, workers: int) -> None:
    """Run `workers` scan_worker threads and block until all of them have exited."""
    if workers <= 0:
        return
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="probe") as ex:
        futures = [ex.submit(scan_worker, host, work, results, timeout) for _ in range(workers)]
    # leaving the with-block joined the threads; surface anything a worker raised
    for f in futures:
        f.result()


def collect(results: queue.Queue) -> list[int]:
    found = []
    while True:
        try:
            found.append(results.get_nowait())
        except queue.Empty:
            return found


def dispatch(host: str, ports: list[int], timeout: float | None,
             max_workers: int | None = None) -> list[int]:
    """
    Probe every port in `ports` on `host` and return the ones that accepted
    a connection, in no particular order.
    """
    workers = worker_count(len(ports), max_workers)
    work, results = load_queues(ports, workers)
    log.debug("dispatching %d ports to %d workers", len(ports), workers)
    run_pool(host, work, results, timeout, workers)
    return collect(results)
