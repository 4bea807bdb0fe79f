from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Optional


class NamespaceCategory(str, Enum):
    TEST_MOCK = 'test-mock'
    TEST = 'test'
    PLUGIN = 'plugin'
    TEMPLATE = 'template'
    INTERNAL = 'internal'

    @property
    def untrusted(self) -> bool:
        """Plugin and template code is not authored by the host."""
        return self in (NamespaceCategory.PLUGIN, NamespaceCategory.TEMPLATE)


class LoadStatus(str, Enum):
    LOADED = 'loaded'
    NOT_FOUND = 'not_found'
    LOADED_WITH_FAULT = 'loaded_with_fault'


class Route(str, Enum):
    REGISTRY = 'registry'
    NAMESPACE = 'namespace'
    PLUGIN = 'plugin'


@dataclass(frozen=True)
class PluginDescriptor:
    plugin_type: str
    component: str
    subcomponent: Optional[str] = None


@dataclass(frozen=True)
class FaultInfo:
    name: str
    message: str
    error_type: str
    traceback: str = ''
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    path: Path
    module: Optional[ModuleType] = None
    fault: Optional[FaultInfo] = None

    @property
    def found(self) -> bool:
        return self.status is not LoadStatus.NOT_FOUND

    @classmethod
    def not_found(cls, path: Path) -> 'LoadResult':
        return cls(status=LoadStatus.NOT_FOUND, path=path)


@dataclass(frozen=True)
class ResolutionOutcome:
    """What a single resolution request did.

    ``handled`` is the value reported to the host. It is true whenever a
    file was found and processing attempted, faulty or not, and also for a
    grammar-matching flat plugin name whose file is absent unless strict
    plugin existence is configured.
    """

    name: str
    handled: bool
    route: Optional[Route] = None
    category: Optional[NamespaceCategory] = None
    result: Optional[LoadResult] = None

    @property
    def status(self) -> Optional[LoadStatus]:
        return self.result.status if self.result else None

    @property
    def fault(self) -> Optional[FaultInfo]:
        return self.result.fault if self.result else None
