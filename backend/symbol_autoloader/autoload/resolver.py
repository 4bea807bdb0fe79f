"""Resolution cascade: registry, namespace rules, flat plugin names.

``resolve(name)`` is the single callback a host hands unresolved names to. It
returns True when a file was found and processing attempted (whether or not
the unit raised) and False when nothing matched.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple

from symbol_autoloader.autoload import executor
from symbol_autoloader.autoload.diagnostics import DiagnosticsChannel
from symbol_autoloader.autoload.fault_boundary import guard
from symbol_autoloader.autoload.models import LoadResult, NamespaceCategory, ResolutionOutcome, Route
from symbol_autoloader.autoload.namespaces import NamespaceTranslator
from symbol_autoloader.autoload.plugin_names import parse as parse_plugin_name, plugin_path
from symbol_autoloader.autoload.registry import StaticRegistry
from symbol_autoloader.core.config import Settings
from symbol_autoloader.core.errors import MissingHostFile

_log = logging.getLogger(__name__)

Step = Callable[[str], Optional[ResolutionOutcome]]


class Autoloader:
    def __init__(
        self,
        settings: Settings,
        *,
        registry: Optional[StaticRegistry] = None,
        diagnostics: Optional[DiagnosticsChannel] = None,
    ):
        self.settings = settings
        self.registry = registry or StaticRegistry(settings)
        self.translator = NamespaceTranslator(settings)
        self.diagnostics = diagnostics or DiagnosticsChannel(settings.diagnostics_limit)
        self._steps: Tuple[Step, ...] = (
            self._from_registry,
            self._from_namespace,
            self._from_plugin_name,
        )

    def resolve(self, name: str) -> bool:
        return self.resolve_outcome(name).handled

    def resolve_outcome(self, name: str) -> ResolutionOutcome:
        if not name:
            raise ValueError("symbolic name must not be empty")
        for step in self._steps:
            outcome = step(name)
            if outcome is not None:
                return outcome
        _log.debug("unresolved symbol %s", name)
        return ResolutionOutcome(name=name, handled=False)

    def _from_registry(self, name: str) -> Optional[ResolutionOutcome]:
        path = self.registry.lookup(name)
        if path is None:
            return None
        result = executor.load(path)
        if not result.found:
            raise MissingHostFile(name, path)
        return ResolutionOutcome(name=name, handled=True, route=Route.REGISTRY, result=result)

    def _from_namespace(self, name: str) -> Optional[ResolutionOutcome]:
        # A matching category whose file is absent falls through to the next
        # matching category.
        for path, category in self.translator.candidates(name):
            result = self._load_category(name, path, category)
            if result.found:
                return ResolutionOutcome(
                    name=name, handled=True, route=Route.NAMESPACE, category=category, result=result,
                )
        return None

    def _load_category(self, name: str, path, category: NamespaceCategory) -> LoadResult:
        if not category.untrusted:
            return executor.load(path)
        subject = f"{category.value} {self.translator.rewritten_name(name, category)}"
        return guard(name, subject, path, self.diagnostics)

    def _from_plugin_name(self, name: str) -> Optional[ResolutionOutcome]:
        descriptor = parse_plugin_name(name)
        if descriptor is None:
            return None
        path = plugin_path(descriptor, self.settings.plugin_dir, self.settings.source_suffix)
        result = guard(name, f"plugin {descriptor.component}", path, self.diagnostics)
        handled = result.found or not self.settings.strict_plugin_existence
        return ResolutionOutcome(
            name=name, handled=handled, route=Route.PLUGIN, category=NamespaceCategory.PLUGIN, result=result,
        )


_default: Optional[Autoloader] = None
_default_lock = threading.Lock()


def get_autoloader() -> Autoloader:
    global _default
    loader = _default
    if loader is not None:
        return loader
    with _default_lock:
        if _default is None:
            from symbol_autoloader.core.config import settings
            _default = Autoloader(settings)
        return _default


def set_autoloader(loader: Optional[Autoloader]) -> None:
    """Replace the process-wide autoloader; ``None`` rebuilds it lazily."""
    global _default
    with _default_lock:
        _default = loader


def resolve(name: str) -> bool:
    return get_autoloader().resolve(name)
