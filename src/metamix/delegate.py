from __future__ import annotations
from typing import Any

from .model import MODE
from .trampoline import install


def delegate(receiver: Any, provider: Any, *method_names: str) -> Any:
    """Delegate each named method of *receiver* to *provider*.

    The provider's current method body is looked up on every call but runs
    with the receiver as ``self``: code comes from the provider, state stays
    on the receiver. Returns *receiver*.
    """
    return install(receiver, provider, method_names, MODE.DELEGATE)
