# output.py
# Turn a ScanOutcome into the lines we print.

import enum

from colorama import Fore, Style

from .scan import ScanOutcome


class ColorMode(enum.Enum):
    PLAIN = "plain"
    ANSI = "ansi"


def open_port_line(port: int, mode: ColorMode = ColorMode.PLAIN) -> str:
    line = f"Port {port} is open"
    if mode is ColorMode.ANSI:
        return f"{Fore.GREEN}{line}{Style.RESET_ALL}"
    return line


def summary_line(count: int) -> str:
    return f"Scan complete. {count} open ports found."


def render(outcome: ScanOutcome, mode: ColorMode = ColorMode.PLAIN) -> list[str]:
    lines = [open_port_line(p, mode) for p in outcome.open_ports]
    lines.append("")
    lines.append(summary_line(outcome.count))
    return lines
