"""Module docstrings stay reachable through ``__doc__``."""

import importlib

import pytest


@pytest.mark.parametrize('module_name', [
    'symbol_autoloader.autoload.bootstrap',
    'symbol_autoloader.autoload.diagnostics',
    'symbol_autoloader.autoload.executor',
    'symbol_autoloader.autoload.hooks',
    'symbol_autoloader.autoload.namespaces',
    'symbol_autoloader.autoload.plugin_names',
    'symbol_autoloader.autoload.registry',
    'symbol_autoloader.autoload.resolver',
    'symbol_autoloader.core.errors',
])
def test_module_docstring(module_name):
    module = importlib.import_module(module_name)
    assert module.__doc__ and module.__doc__.strip()
