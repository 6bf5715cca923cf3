from __future__ import annotations
from typing import Any

from .debug import label


class CompositionError(Exception):
    """Base error."""

class InvalidArgumentError(CompositionError, TypeError):
    """Raised when a target, source, provider or method name cannot take part in composition."""

class MissingMethodError(CompositionError, AttributeError):
    """Raised when a trampoline's provider has no callable under the requested name."""

    def __init__(self, provider: Any, method: str) -> None:
        self.provider = provider
        self.method = method
        super().__init__(f"{label(provider)} has no method {method!r}")
