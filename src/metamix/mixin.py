from __future__ import annotations
from typing import Any

from .debug import log_copy
from .errors import InvalidArgumentError
from .model import Composable
from .slots import SLOT_LOCK, behavior_names, is_composable, own_slots, write_slot


def apply(target: Any, *sources: Any) -> Any:
    """Copy every behaviour slot of each source onto *target*.

    References are copied, not wrapped: afterwards ``vars(target)[name] is
    vars(source)[name]``. Sources are applied left to right, so later ones
    win on shared names. Returns *target*.
    """
    if not (isinstance(target, Composable) or isinstance(target, type)):
        raise InvalidArgumentError(
            f"target must be a Composable instance or a class, got {type(target).__qualname__}."
        )
    for source in sources:
        if not is_composable(source):
            raise InvalidArgumentError(f"source must be an object or mapping, got {type(source).__qualname__}.")

    for source in sources:
        with SLOT_LOCK:
            names = behavior_names(source)
            slots = own_slots(source)
            for name in names:
                write_slot(target, name, slots[name])
        if names:
            log_copy(target, source, names)
    return target
