# ports.py
# Turn a port spec like "22,80,8000-8100" into the list of ports to probe.
#   ""            -> every port, 1..65535
#   "80,443"      -> [80, 443]
#   "20-22,80"    -> [20, 21, 22, 80]

import logging
import re

log = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


class PortSpecError(ValueError):
    """A token in the port spec could not be understood."""
    kind = "port spec"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"{self.kind}: {token}")


class InvalidPort(PortSpecError):
    kind = "invalid port"


class InvalidRange(PortSpecError):
    kind = "invalid range"


# ASCII digits with an optional sign, nothing else: no spaces, "_" or other scripts
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def _parse_range(token: str) -> range:
    bounds = token.split("-")
    if len(bounds) != 2:
        raise InvalidRange(token)
    start, end = _to_int(bounds[0]), _to_int(bounds[1])
    if start is None or end is None or start > end:
        raise InvalidRange(token)
    return range(start, end + 1)


def _parse_port(token: str) -> int:
    port = _to_int(token)
    if port is None:
        raise InvalidPort(token)
    return port


def resolve(spec: str) -> list[int]:
    """
    Expand a port spec into an ordered list of ports.

    Tokens are expanded in the order given and duplicates are kept.
    The first bad token raises InvalidPort / InvalidRange and nothing
    is returned. Explicit ports outside 1-65535 are passed through
    unchanged (they just never connect); a warning is logged for them.
    """
    if not spec:
        return list(range(MIN_PORT, MAX_PORT + 1))

    ports: list[int] = []
    for token in spec.split(","):
        if "-" in token:
            ports.extend(_parse_range(token))
        else:
            ports.append(_parse_port(token))

    outside = sorted({p for p in ports if p < MIN_PORT or p > MAX_PORT})
    if outside:
        log.warning("ports outside %d-%d will never connect: %s",
                    MIN_PORT, MAX_PORT, ", ".join(map(str, outside[:10])))
    return ports
