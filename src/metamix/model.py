from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import FunctionType, MethodType
from typing import Any, Dict, Mapping, Optional


class MODE(str, Enum):
    FORWARD = "FORWARD"
    DELEGATE = "DELEGATE"

@dataclass(frozen=True)
class Binding:
    """Record of one installed trampoline.

    ``FORWARD`` runs the provider's code against the provider,
    ``DELEGATE`` runs it against the receiver.
    """
    receiver: Any
    method: str
    provider: Any
    mode: MODE


class Composable:
    """An object whose own slots may hold behaviour.

    Plain functions stored on the instance are bound to whichever instance
    reads them, so one function shared by many receivers acts on each
    receiver's own state. Static and class methods resolve as they would
    on a class body. Everything else is returned as stored.
    """

    def __init__(self, **slots: Any) -> None:
        self.__dict__.update(slots)

    def __getattribute__(self, name: str) -> Any:
        value = object.__getattribute__(self, name)
        if object.__getattribute__(self, "__dict__").get(name) is not value:
            return value
        if type(value) is FunctionType:
            return MethodType(value, self)
        if isinstance(value, (staticmethod, classmethod)):
            return value.__get__(self, type(self))
        return value

    def __repr__(self) -> str:
        names = ", ".join(k for k in self.__dict__ if not k.startswith("_"))
        return f"{type(self).__name__}({names})"


class Metaobject(Composable):
    """A named bag of behaviour meant to be composed into receivers."""

    def __init__(self, _name: Optional[str] = None, /, **slots: Any) -> None:
        super().__init__(**slots)
        self._name = _name or "Metaobject"

    @classmethod
    def from_mapping(cls, slots: Mapping[str, Any], name: Optional[str] = None) -> "Metaobject":
        return cls(name, **dict(slots))

    @classmethod
    def from_class(cls, body: type, name: Optional[str] = None) -> "Metaobject":
        """Collect the public attributes of a class body into a metaobject."""
        slots: Dict[str, Any] = {
            k: v for k, v in vars(body).items() if not k.startswith("_")
        }
        return cls(name or body.__qualname__, **slots)

    def __repr__(self) -> str:
        names = ", ".join(k for k in self.__dict__ if not k.startswith("_"))
        return f"<Metaobject {self._name}: {names}>"


def metaobject(body: Optional[type] = None, *, name: Optional[str] = None):
    """Class decorator turning a class body into a :class:`Metaobject`.

    Usable bare (``@metaobject``) or with a name (``@metaobject(name="Counter")``).
    """
    def deco(cls: type) -> Metaobject:
        return Metaobject.from_class(cls, name=name)

    if body is not None:
        return deco(body)
    return deco
