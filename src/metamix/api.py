from __future__ import annotations

import os

from .debug import LEVELS


def configure(*, trace: bool | None = None, log_level: str | None = None) -> None:
    """Set lightweight runtime options.

    Parameters
    ----------
    trace:
        When ``True`` every trampoline call emits a DEBUG line naming the
        receiver, method, mode, provider and the object used as ``self``.
    log_level:
        One of ``DEBUG``, ``INFO``, ``WARN`` or ``ERROR``. Lines below the
        level are dropped. Defaults to ``WARN``.
    """
    if trace is not None:
        os.environ["METAMIX_TRACE"] = "True" if trace else "False"
    if log_level is not None:
        level = log_level.strip().upper()
        if level not in LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LEVELS)}.")
        os.environ["METAMIX_LOG_LEVEL"] = level
