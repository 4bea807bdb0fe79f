"""Namespace to file path translation.

A hierarchical symbolic name is matched against an ordered list of prefix
rules. Priority is decided purely from the lexical shape of the name; file
existence is checked later by the executor.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

from symbol_autoloader.autoload.models import NamespaceCategory
from symbol_autoloader.core.config import Settings

SEPARATOR = '/'
ALTERNATE_SEPARATORS: Tuple[str, ...] = ('\\', '.')

# plugin and template layouts keep test code in a directory with a leading
# underscore
TEST_SEGMENT = '/test/'
TEST_SEGMENT_ON_DISK = '/_test/'


def normalize(name: str) -> str:
    for sep in ALTERNATE_SEPARATORS:
        name = name.replace(sep, SEPARATOR)
    return name


def has_separator(name: str) -> bool:
    return SEPARATOR in normalize(name)


@dataclass(frozen=True)
class NamespaceRule:
    category: NamespaceCategory
    prefix: str
    root: Path
    rewrite_test_segment: bool = False

    def matches(self, name: str) -> bool:
        return name.startswith(self.prefix)

    def rewrite(self, name: str) -> str:
        if self.rewrite_test_segment:
            return name.replace(TEST_SEGMENT, TEST_SEGMENT_ON_DISK)
        return name

    def path_for(self, name: str, suffix: str) -> Path:
        """Build the candidate path for an already normalised, matching name."""
        remainder = self.rewrite(name)[len(self.prefix):]
        return Path(f"{self.root}/{remainder}{suffix}")


def build_rules(settings: Settings) -> Tuple[NamespaceRule, ...]:
    ns = settings.root_namespace.strip(SEPARATOR)
    return (
        NamespaceRule(NamespaceCategory.TEST_MOCK, f'{ns}/test/mock/', settings.test_mock_dir),
        NamespaceRule(NamespaceCategory.TEST, f'{ns}/test/', settings.test_dir),
        NamespaceRule(NamespaceCategory.PLUGIN, f'{ns}/plugin/', settings.plugin_dir, rewrite_test_segment=True),
        NamespaceRule(NamespaceCategory.TEMPLATE, f'{ns}/template/', settings.template_dir, rewrite_test_segment=True),
        NamespaceRule(NamespaceCategory.INTERNAL, f'{ns}/', settings.internal_dir),
    )


class NamespaceTranslator:
    def __init__(self, settings: Settings):
        self.suffix = settings.source_suffix
        self.rules = build_rules(settings)

    def candidates(self, name: str) -> Iterator[Tuple[Path, NamespaceCategory]]:
        """Yield every lexically matching rule's target, highest priority first."""
        normalized = normalize(name)
        for rule in self.rules:
            if rule.matches(normalized):
                yield rule.path_for(normalized, self.suffix), rule.category

    def translate(self, name: str) -> Optional[Tuple[Path, NamespaceCategory]]:
        return next(self.candidates(name), None)

    def rewritten_name(self, name: str, category: NamespaceCategory) -> str:
        """Normalised *name* as the rule for *category* sees it on disk."""
        normalized = normalize(name)
        for rule in self.rules:
            if rule.category is category:
                return rule.rewrite(normalized)
        return normalized
