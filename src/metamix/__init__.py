"""metamix: compose behaviour into objects by mixing, forwarding and delegation.

``apply`` copies behaviour by reference (early bound, runs on the receiver),
``forward`` installs trampolines that run the provider's current method on the
provider, and ``delegate`` installs trampolines that run the provider's
current method on the receiver.
"""

from .api import configure
from .delegate import delegate
from .errors import CompositionError, InvalidArgumentError, MissingMethodError
from .forward import forward
from .mixin import apply
from .model import Binding, Composable, Metaobject, MODE, metaobject
from .slots import behavior_names, locked, lookup
from .trampoline import Trampoline, bindings, is_trampoline

__all__ = [
    "apply","forward","delegate","configure",
    "Composable","Metaobject","metaobject","Trampoline","Binding","MODE",
    "bindings","is_trampoline","behavior_names","lookup","locked",
    "CompositionError","InvalidArgumentError","MissingMethodError",
]
