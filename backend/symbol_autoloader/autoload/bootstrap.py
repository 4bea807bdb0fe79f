"""Load the host's common libraries in their configured order.

These are host-authored units: a missing file or a fault raised while
loading one propagates to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from symbol_autoloader.autoload import executor
from symbol_autoloader.core.config import Settings
from symbol_autoloader.core.errors import MissingHostFile

_log = logging.getLogger(__name__)


def core_library_path(settings: Settings, name: str) -> Path:
    return Path(f"{settings.internal_dir}/{name}{settings.source_suffix}")


def load_core_libraries(settings: Settings, names: Optional[Iterable[str]] = None) -> List[Path]:
    loaded: List[Path] = []
    for name in (settings.core_libraries if names is None else names):
        path = core_library_path(settings, name)
        result = executor.load(path)
        if not result.found:
            raise MissingHostFile(name, path)
        loaded.append(path)
    _log.info("loaded %d core libraries from %s", len(loaded), settings.internal_dir)
    return loaded
