import socket

import pytest

LOCALHOST = "127.0.0.1"


def _listener() -> socket.socket:
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind((LOCALHOST, 0))
    s.listen(64)
    return s


@pytest.fixture
def open_ports():
    """Two local listeners on ephemeral ports; yields their port numbers, ascending."""
    socks = [_listener(), _listener()]
    try:
        yield sorted(s.getsockname()[1] for s in socks)
    finally:
        for s in socks:
            s.close()


@pytest.fixture
def closed_port():
    """A port that was just released, so nothing is listening on it."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind((LOCALHOST, 0))
    port = s.getsockname()[1]
    s.close()
    return port
