"""
Console output for patchgen

Everything the tool reports goes through these helpers. Regular progress is
printed to stdout, warnings and errors to stderr. Debug lines only appear
when verbose output is switched on (--verbose).
"""

import sys


class Colors:
    """ANSI color codes for terminal output"""
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    RED = '\033[0;31m'
    BLUE = '\033[0;34m'
    GREY = '\033[0;90m'
    NC = '\033[0m'  # No Color


_verbose = False


def set_verbose(enabled: bool):
    global _verbose
    _verbose = bool(enabled)


def _emit(stream, color: str, message: str):
    if stream.isatty():
        message = f"{color}{message}{Colors.NC}"
    print(message, file=stream)


def banner(description: str, version: str):
    _emit(sys.stdout, Colors.BLUE, f"--- {description} v{version} ---")


def info(message: str):
    _emit(sys.stdout, Colors.BLUE, message)


def success(message: str):
    _emit(sys.stdout, Colors.GREEN, f"✅ {message}")


def warning(message: str):
    _emit(sys.stderr, Colors.YELLOW, f"⚠️  {message}")


def error(message: str):
    _emit(sys.stderr, Colors.RED, f"❌ {message}")


def debug(message: str):
    if _verbose:
        _emit(sys.stdout, Colors.GREY, message)
