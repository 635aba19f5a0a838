"""
Color-coded console output for the command-line tools.

Uses colorama for cross-platform terminal color support.
"""

import datetime
import logging
import os
import sys

from colorama import Fore, Style, init

# Initialize colorama (auto-reset after each print)
init(autoreset=True)


class C:
    """Color shortcuts for console output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    STEP = Fore.BLUE + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    WARN = Fore.YELLOW + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    DIM = Style.DIM
    COMPANY = Fore.MAGENTA + Style.BRIGHT
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def header(msg: str) -> None:
    """Print a bold section header."""
    print(f"\n{C.HEADER}{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}{C.RESET}\n")


def step(msg: str) -> None:
    print(f"{C.STEP}[{_ts()}] >> {msg}{C.RESET}")


def info(msg: str) -> None:
    print(f"{C.DIM}[{_ts()}]{C.RESET} {msg}")


def ok(msg: str) -> None:
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}")


def warn(msg: str) -> None:
    print(f"{C.WARN}[{_ts()}] WARN {msg}{C.RESET}")


def err(msg: str) -> None:
    """Print an error (stderr)."""
    print(f"{C.ERR}[{_ts()}] ERR {msg}{C.RESET}", file=sys.stderr)


def company_line(index: int, name: str, ticker: str, cik: str) -> None:
    """Print one numbered search result: 1. Apple Inc. (AAPL) - CIK: 0000320193"""
    print(f"{index}. {C.COMPANY}{name}{C.RESET} ({ticker}) - CIK: {cik}")


def summary_table(title: str, rows: list[tuple[str, str]]) -> None:
    """Print a summary table with label-value pairs."""
    print(f"\n{C.HEADER}{title}{C.RESET}")
    max_label = max(len(r[0]) for r in rows) if rows else 0
    for label, value in rows:
        print(f"  {label:<{max_label}}  {C.VALUE}{value}{C.RESET}")
    print()


# ---------------------------------------------------------------------------
# Verbose logging setup
# ---------------------------------------------------------------------------

def setup_verbose_logging(name: str = "fetch10k", level: int = logging.DEBUG) -> logging.Logger:
    """
    Logger writing WARNING+ to the console and DEBUG+ to logs/<name>.log.

    Attached to the root logger so library modules using
    logging.getLogger(__name__) end up in the same file.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Prevent duplicate handlers on repeated calls
    if any(getattr(h, "_fetch10k", False) for h in logger.handlers):
        return logging.getLogger(name)

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.WARNING)
    ch.setFormatter(fmt)
    ch._fetch10k = True
    logger.addHandler(ch)

    log_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"{name}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh._fetch10k = True
    logger.addHandler(fh)

    return logging.getLogger(name)
