"""Parser for flat plugin identifiers: ``<type>_plugin_<component>[_<sub>]``."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Pattern, Tuple

from symbol_autoloader.autoload.models import PluginDescriptor
from symbol_autoloader.autoload.namespaces import has_separator

PLUGIN_TYPES: Tuple[str, ...] = ('auth', 'admin', 'syntax', 'action', 'renderer', 'helper', 'remote', 'cli')

PLUGIN_NAME_PATTERN = r'[a-zA-Z0-9\x7f-\U0010ffff]+'


def compile_grammar(plugin_types: Iterable[str] = PLUGIN_TYPES) -> Pattern[str]:
    kinds = '|'.join(re.escape(t) for t in plugin_types)
    return re.compile(rf'^({kinds})_plugin_({PLUGIN_NAME_PATTERN})(?:_([^_]+))?$')


_GRAMMAR = compile_grammar()


def parse(name: str, grammar: Pattern[str] = _GRAMMAR) -> Optional[PluginDescriptor]:
    if not name or has_separator(name):
        return None
    m = grammar.match(name)
    if not m:
        return None
    return PluginDescriptor(plugin_type=m.group(1), component=m.group(2), subcomponent=m.group(3))


def plugin_path(descriptor: PluginDescriptor, plugin_root: Path, suffix: str) -> Path:
    tail = f"/{descriptor.subcomponent}" if descriptor.subcomponent else ''
    return Path(f"{plugin_root}/{descriptor.component}/{descriptor.plugin_type}{tail}{suffix}")
