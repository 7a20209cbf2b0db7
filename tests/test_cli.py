import pytest

from portscan import workers
from portscan.scan_cli import main

HOST = "127.0.0.1"


def test_missing_host_is_an_error(capsys):
    assert main(["-p", "80"]) == 1
    assert "must specify a host" in capsys.readouterr().out


def test_empty_host_is_an_error(capsys):
    assert main(["-host", "", "-p", "80"]) == 1


def test_bad_port_spec(capsys, monkeypatch):
    monkeypatch.setattr(workers, "probe", lambda *a: pytest.fail("scan must not start"))
    assert main(["-host", HOST, "-p", "50-20"]) == 1
    assert "Error parsing ports: invalid range: 50-20" in capsys.readouterr().out


def test_open_ports_printed_in_order(capsys, open_ports, closed_port):
    low, high = open_ports
    assert main(["-host", HOST, "-p", f"{high},{low},{closed_port}", "-timeout", "500"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Port {low} is open",
        f"Port {high} is open",
        "",
        "Scan complete. 2 open ports found.",
    ]


def test_no_open_ports_still_exits_zero(capsys, closed_port):
    assert main(["--host", HOST, "--ports", str(closed_port), "--no-color"]) == 0
    assert capsys.readouterr().out.strip() == "Scan complete. 0 open ports found."


def test_timeout_flag_reaches_probe(monkeypatch, capsys):
    seen = []
    monkeypatch.setattr(workers, "probe", lambda host, port, timeout: seen.append(timeout) or False)
    assert main(["-host", HOST, "-p", "1", "-timeout", "250"]) == 0
    assert seen == [0.25]


def test_zero_timeout_means_no_timeout(monkeypatch, capsys):
    seen = []
    monkeypatch.setattr(workers, "probe", lambda host, port, timeout: seen.append(timeout) or False)
    assert main(["-host", HOST, "-p", "1,2", "-timeout", "0"]) == 0
    assert seen == [None, None]
    assert "Scan complete. 0 open ports found." in capsys.readouterr().out


@pytest.mark.parametrize("flags", [["-timeout", "abc"], ["--max-workers", "0"]])
def test_bad_numbers_are_usage_errors(flags):
    with pytest.raises(SystemExit) as exc:
        main(["-host", HOST, "-p", "80"] + flags)
    assert exc.value.code == 2
