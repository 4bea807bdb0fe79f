"""Runs source units on demand and registers them in ``sys.modules``."""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
import threading
from pathlib import Path
from typing import Dict

from symbol_autoloader.autoload.models import LoadResult, LoadStatus

_log = logging.getLogger(__name__)

UNIT_PREFIX = 'symbol_autoloader.units'

# One re-entrant lock per unit, so a slow unit only blocks callers of that
# same unit. The guard is held just long enough to look up or create a lock.
_unit_locks: Dict[str, threading.RLock] = {}
_unit_locks_guard = threading.Lock()


def unit_name(path: Path) -> str:
    """Module name a source file is registered under in ``sys.modules``."""
    resolved = str(Path(path).resolve())
    digest = hashlib.sha1(resolved.encode('utf-8')).hexdigest()[:16]
    stem = ''.join(ch if ch.isalnum() else '_' for ch in Path(path).stem)
    return f"{UNIT_PREFIX}.{stem}_{digest}"


def _unit_lock(name: str) -> threading.RLock:
    with _unit_locks_guard:
        lock = _unit_locks.get(name)
        if lock is None:
            lock = _unit_locks[name] = threading.RLock()
        return lock


def _execute(path: Path, name: str):
    spec = importlib.util.spec_from_file_location(name, str(path))
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot build a module spec for {path}", path=str(path))
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


def load(path: Path) -> LoadResult:
    """Load the unit at *path* unless it is missing or already loaded.

    Faults raised while executing the unit propagate; wrapping them is the
    fault boundary's job.
    """
    path = Path(path)
    if not path.is_file():
        _log.debug("no unit at %s", path)
        return LoadResult.not_found(path)
    name = unit_name(path)
    # A module in sys.modules may still be executing in another thread, so
    # the check happens under the unit's lock.
    with _unit_lock(name):
        module = sys.modules.get(name)
        if module is None:
            module = _execute(path, name)
            _log.info("loaded %s", path)
    return LoadResult(status=LoadStatus.LOADED, path=path, module=module)
