"""PEP 562 adapter that resolves unknown module attributes on demand.

A host package can expose lazily loaded symbols with::

    from symbol_autoloader.autoload.hooks import autoload_getattr
    __getattr__ = autoload_getattr()

``from host import Doku_Renderer_xhtml`` then resolves the name, loads the
defining unit and returns the attribute of the same name from it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from symbol_autoloader.autoload.models import LoadStatus
from symbol_autoloader.autoload.namespaces import SEPARATOR, normalize
from symbol_autoloader.autoload.resolver import Autoloader, get_autoloader


def symbol_attribute(name: str) -> str:
    return normalize(name).rsplit(SEPARATOR, 1)[-1]


def autoload_getattr(autoloader: Optional[Autoloader] = None) -> Callable[[str], Any]:
    def __getattr__(name: str) -> Any:
        if name.startswith('__'):
            raise AttributeError(name)
        loader = autoloader or get_autoloader()
        outcome = loader.resolve_outcome(name)
        result = outcome.result
        if not outcome.handled or result is None or result.status is not LoadStatus.LOADED:
            raise AttributeError(f"unable to autoload {name!r}")
        attr = symbol_attribute(name)
        try:
            return getattr(result.module, attr)
        except AttributeError:
            raise AttributeError(f"{result.path} does not define {attr!r}") from None

    return __getattr__
