from __future__ import annotations
from typing import Any, Iterable, List

from .debug import label, log_install, log_trace
from .errors import InvalidArgumentError
from .model import Binding, MODE
from .slots import SLOT_LOCK, bind, check_name, is_composable, is_receiver, lookup, own_slots, write_slot


class Trampoline:
    """Installed method that re-resolves its provider's behaviour on every call.

    The provider supplies the code; ``mode`` decides whose state it runs
    against (the provider for ``FORWARD``, the receiver for ``DELEGATE``).
    """

    __slots__ = ("receiver", "method", "provider", "mode")

    def __init__(self, receiver: Any, method: str, provider: Any, mode: MODE) -> None:
        self.receiver = receiver
        self.method = method
        self.provider = provider
        self.mode = mode

    @property
    def context(self) -> Any:
        return self.provider if self.mode is MODE.FORWARD else self.receiver

    @property
    def binding(self) -> Binding:
        return Binding(receiver=self.receiver, method=self.method, provider=self.provider, mode=self.mode)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        behavior = lookup(self.provider, self.method)
        context = self.context
        log_trace(self.receiver, self.method, self.mode.value, self.provider, context)
        return bind(behavior, context)(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<Trampoline {self.mode.value.lower()} {self.method!r} -> {label(self.provider)}>"


def is_trampoline(value: Any) -> bool:
    return isinstance(value, Trampoline)


def install(receiver: Any, provider: Any, names: Iterable[Any], mode: MODE) -> Any:
    """Install one trampoline per name on *receiver*; later installs overwrite earlier slots."""
    if not isinstance(mode, MODE):
        raise InvalidArgumentError("mode must be a MODE enum value.")
    if not is_receiver(receiver):
        raise InvalidArgumentError(f"receiver must be an object with settable slots, got {type(receiver).__qualname__}.")
    if not is_composable(provider):
        raise InvalidArgumentError(f"provider must be an object or mapping, got {type(provider).__qualname__}.")
    if receiver is provider:
        raise InvalidArgumentError("receiver and provider must be distinct objects.")
    checked = [check_name(n) for n in names]

    with SLOT_LOCK:
        for name in checked:
            write_slot(receiver, name, Trampoline(receiver, name, provider, mode))
    if checked:
        log_install(receiver, provider, mode.value, checked)
    return receiver


def bindings(receiver: Any) -> List[Binding]:
    """Binding records for the trampolines currently held by *receiver*."""
    if not is_receiver(receiver):
        raise InvalidArgumentError(f"receiver must be an object with settable slots, got {type(receiver).__qualname__}.")
    return [v.binding for v in list(own_slots(receiver).values()) if isinstance(v, Trampoline)]
