# scan_cli.py
# Command line front end for the port scanner.
#   Usage (examples):
#     portscan -host 127.0.0.1 -p 1-1024
#     portscan -host scanme.example -p 22,80,443 -timeout 300 --no-color
#     python -m portscan -host 127.0.0.1          (all 65535 ports)
#
# NOTE: Scan only systems you own or have explicit permission to test.

import argparse
import logging
import sys

import colorama

from .output import ColorMode, render
from .ports import PortSpecError
from .scan import DEFAULT_TIMEOUT_MS, scan

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="portscan", description="Fast concurrent TCP connect port scanner")
    ap.add_argument("-host", "--host", default="", help="Target host to scan")
    ap.add_argument("-p", "--ports", default="",
                    help="Ports to scan (e.g. 80,443 or 20-100). Defaults to all ports.")
    ap.add_argument("-timeout", "--timeout", type=int, default=DEFAULT_TIMEOUT_MS,
                    help=f"Timeout in milliseconds for each port, 0 for none (default: {DEFAULT_TIMEOUT_MS})")
    ap.add_argument("--max-workers", type=_positive_int, default=None,
                    help="Lower the number of concurrent probes (default: ports or 20 per CPU)")
    ap.add_argument("--no-color", action="store_true", help="Plain output, no ANSI colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not args.host:
        print("Error: You must specify a host to scan using the -host flag.")
        return 1

    try:
        # 0 means wait as long as the OS lets a connect take
        timeout = None if args.timeout == 0 else args.timeout / 1000
        outcome = scan(args.host, args.ports, timeout=timeout, max_workers=args.max_workers)
    except PortSpecError as e:
        print(f"Error parsing ports: {e}")
        return 1

    if args.no_color or not sys.stdout.isatty():
        mode = ColorMode.PLAIN
    else:
        colorama.just_fix_windows_console()
        mode = ColorMode.ANSI

    for line in render(outcome, mode):
        print(line)
    log.debug("%d of %d ports open on %s", outcome.count, outcome.ports_scanned, outcome.host)
    return 0


if __name__ == "__main__":
    sys.exit(main())
