from __future__ import annotations
import threading
from contextlib import contextmanager
from types import FunctionType, MethodType
from typing import Any, Iterator, List, Mapping

from .errors import InvalidArgumentError, MissingMethodError

MISSING = object()

# Guards slot writes made by apply() and trampoline installation.
SLOT_LOCK = threading.RLock()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


@contextmanager
def locked() -> Iterator[None]:
    """Hold the slot lock, e.g. while swapping a provider's methods."""
    with SLOT_LOCK:
        yield


def is_composable(obj: Any) -> bool:
    """Whether *obj* can act as a mixin source or a provider."""
    if obj is None or isinstance(obj, _SCALARS):
        return False
    return isinstance(obj, Mapping) or hasattr(obj, "__dict__")


def is_receiver(obj: Any) -> bool:
    """Whether trampolines can be installed on *obj*."""
    return is_composable(obj) and not isinstance(obj, Mapping)


def is_behavior(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return callable(value) or isinstance(value, (staticmethod, classmethod))


def own_slots(obj: Any) -> Mapping[str, Any]:
    if isinstance(obj, Mapping):
        return obj
    return vars(obj)


def behavior_names(obj: Any) -> List[str]:
    """Public behaviour slots held directly by *obj*, in definition order."""
    return [
        name for name, value in list(own_slots(obj).items())
        if isinstance(name, str) and not name.startswith("_") and is_behavior(value)
    ]


def read_slot(obj: Any, name: str) -> Any:
    """Current value stored under *name*, or ``MISSING``.

    Own slots shadow the class hierarchy. Nothing is cached: every call
    reads the live tables.
    """
    slots = own_slots(obj)
    if name in slots:
        return slots[name]
    if isinstance(obj, Mapping):
        return MISSING
    mro = obj.__mro__[1:] if isinstance(obj, type) else type(obj).__mro__
    for klass in mro:
        if name in vars(klass):
            return vars(klass)[name]
    return MISSING


def lookup(obj: Any, name: str) -> Any:
    """Current callable stored under *name* on *obj*."""
    value = read_slot(obj, name)
    if value is MISSING or not is_behavior(value):
        raise MissingMethodError(obj, name)
    return value


def write_slot(obj: Any, name: str, value: Any) -> None:
    try:
        setattr(obj, name, value)
    except (AttributeError, TypeError) as exc:
        raise InvalidArgumentError(f"cannot set {name!r} on {type(obj).__qualname__}: {exc}") from exc


def bind(behavior: Any, context: Any) -> Any:
    """Callable running *behavior* with *context* as ``self``.

    Plain functions are bound to *context*. Trampolines, bound methods and
    other callables already carry their own context and run as-is.
    """
    if isinstance(behavior, FunctionType):
        return MethodType(behavior, context)
    if isinstance(behavior, staticmethod):
        return behavior.__func__
    if isinstance(behavior, classmethod):
        owner = context if isinstance(context, type) else type(context)
        return MethodType(behavior.__func__, owner)
    return behavior


def check_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("method names must be non-empty strings.")
    if name != name.strip():
        raise InvalidArgumentError(f"method name {name!r} has surrounding whitespace.")
    return name
