from __future__ import annotations
import os
import sys
import time

_RESET, _BOLD, _DIM = "\033[0m", "\033[1m", "\033[2m"
_CYAN, _YELLOW, _RED, _MAGENTA = "\033[36m", "\033[33m", "\033[31m", "\033[35m"

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_LEVEL_COLOURS = {"DEBUG": _DIM, "WARN": _YELLOW, "ERROR": _RED}


def _c(text: str, *codes: str) -> str:
    if not (os.getenv("FORCE_COLOR") or sys.stderr.isatty()):
        return text
    return "".join(codes) + text + _RESET


def trace_enabled() -> bool:
    return os.getenv("METAMIX_TRACE") == "True"


def log(level: str, message: str, *, stream=None) -> None:
    """Write *message* to *stream* (default ``sys.stderr``) unless *level* is below ``METAMIX_LOG_LEVEL``."""
    level = level.upper()
    threshold = LEVELS.get(os.getenv("METAMIX_LOG_LEVEL", "WARN").upper(), LEVELS["WARN"])
    if LEVELS.get(level, 0) < threshold:
        return
    prefix = _c(f"[metamix:{level}]", _LEVEL_COLOURS.get(level, ""), _BOLD)
    print(f"{prefix} {_c(time.strftime('%H:%M:%S'), _DIM)} {message}", file=stream or sys.stderr)


def label(obj: object) -> str:
    """Short display name for receivers, providers and sources."""
    name = getattr(obj, "_name", None)
    if isinstance(name, str) and name:
        return name
    if isinstance(obj, type):
        return obj.__qualname__
    return f"{type(obj).__qualname__}@{id(obj):x}"


def log_copy(target: object, source: object, names: list[str]) -> None:
    """Emit a DEBUG line for a mixin copy."""
    log("DEBUG", f"apply {_c(label(source), _CYAN)} -> {_c(label(target), _CYAN)} slots={names}")


def log_install(receiver: object, provider: object, mode: str, names: list[str]) -> None:
    """Emit a DEBUG line for trampoline installation."""
    log(
        "DEBUG",
        f"{_c(mode.lower(), _MAGENTA)} {_c(label(receiver), _CYAN)}"
        f" -> {_c(label(provider), _CYAN)} methods={names}",
    )


def log_trace(receiver: object, method: str, mode: str, provider: object, context: object) -> None:
    """Emit a TRACE-level trampoline invocation line."""
    if not trace_enabled():
        return
    msg = (
        f"{_c(label(receiver), _CYAN)}.{_c(method, _BOLD)}"
        f" [{_c(mode, _MAGENTA)}]"
        f" provider={_c(label(provider), _YELLOW)}"
        f" self={_c(label(context), _DIM)}"
    )
    log("DEBUG", msg)
