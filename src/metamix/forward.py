from __future__ import annotations
from typing import Any

from .model import MODE
from .trampoline import install


def forward(receiver: Any, provider: Any, *method_names: str) -> Any:
    """Forward each named method from *receiver* to *provider*.

    The provider's current method is looked up on every call and runs with
    the provider as ``self``, so every receiver forwarding to one provider
    reads and writes that provider's state. Returns *receiver*.
    """
    return install(receiver, provider, method_names, MODE.FORWARD)
