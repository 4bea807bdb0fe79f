"""Static registry of well-known symbols and the files that define them."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from symbol_autoloader.core.config import Settings

_log = logging.getLogger(__name__)

# Paths are relative to the host base directory and carry no suffix; the
# configured source suffix is appended when the table is built.
CORE_SYMBOLS: Mapping[str, str] = MappingProxyType({
    'Diff': 'inc/DifferenceEngine',
    'UnifiedDiffFormatter': 'inc/DifferenceEngine',
    'TableDiffFormatter': 'inc/DifferenceEngine',
    'cache': 'inc/cache',
    'cache_parser': 'inc/cache',
    'cache_instructions': 'inc/cache',
    'cache_renderer': 'inc/cache',
    'Input': 'inc/Input.class',
    'JpegMeta': 'inc/JpegMeta',
    'SimplePie': 'inc/SimplePie',
    'FeedParser': 'inc/FeedParser',
    'SafeFN': 'inc/SafeFN.class',
    'Mailer': 'inc/Mailer.class',
    'Doku_Handler': 'inc/parser/handler',
    'Doku_Renderer': 'inc/parser/renderer',
    'Doku_Renderer_xhtml': 'inc/parser/xhtml',
    'Doku_Renderer_code': 'inc/parser/code',
    'Doku_Renderer_xhtmlsummary': 'inc/parser/xhtmlsummary',
    'Doku_Renderer_metadata': 'inc/parser/metadata',
})


def _with_suffix(relative: str, suffix: str) -> str:
    if suffix and relative.endswith(suffix):
        return relative
    return relative + suffix


class StaticRegistry:
    """Exact-match name to path table, built once on first use.

    Construction happens behind a one-time barrier: concurrent first callers
    wait for the single build and then all observe the same frozen table.
    Lookups after that take no lock.
    """

    def __init__(self, settings: Settings, entries: Optional[Mapping[str, str]] = None):
        self._settings = settings
        self._entries = CORE_SYMBOLS if entries is None else entries
        self._table: Optional[Mapping[str, Path]] = None
        self._lock = threading.Lock()
        self._build_count = 0

    def _build(self) -> Mapping[str, Path]:
        base = self._settings.base_dir
        suffix = self._settings.source_suffix
        merged: Dict[str, str] = dict(self._entries)
        merged.update(self._settings.registry_overrides)
        table = {name: base / _with_suffix(rel, suffix) for name, rel in merged.items()}
        _log.debug("static registry built with %d entries", len(table))
        return MappingProxyType(table)

    def table(self) -> Mapping[str, Path]:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                self._table = self._build()
                self._build_count += 1
            return self._table

    def lookup(self, name: str) -> Optional[Path]:
        return self.table().get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.table()

    def __len__(self) -> int:
        return len(self.table())
