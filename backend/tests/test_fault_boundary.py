"""Tests for the extension fault boundary."""

import logging

import pytest

from symbol_autoloader.autoload.diagnostics import DiagnosticsChannel
from symbol_autoloader.autoload.fault_boundary import guard
from symbol_autoloader.autoload.models import LoadStatus

from unit_helpers import BROKEN_SYNTAX_UNIT, FAILING_UNIT, write_unit


@pytest.fixture
def channel():
    return DiagnosticsChannel(limit=10)


def test_successful_load_passes_through(wiki_tree, probe, channel):
    path = write_unit(wiki_tree / 'lib' / 'plugins' / 'sample' / 'action.py')
    result = guard('action_plugin_sample', 'plugin sample', path, channel)
    assert result.status is LoadStatus.LOADED
    assert len(channel) == 0


def test_missing_file_passes_through(wiki_tree, channel):
    result = guard('action_plugin_nope', 'plugin nope', wiki_tree / 'lib' / 'plugins' / 'nope' / 'action.py', channel)
    assert result.status is LoadStatus.NOT_FOUND
    assert len(channel) == 0


def test_runtime_fault_is_captured(wiki_tree, channel, caplog):
    path = write_unit(wiki_tree / 'lib' / 'plugins' / 'sample' / 'action.py', FAILING_UNIT)
    with caplog.at_level(logging.ERROR, logger='symbol_autoloader.autoload.fault_boundary'):
        result = guard('action_plugin_sample', 'plugin sample', path, channel)

    assert result.status is LoadStatus.LOADED_WITH_FAULT
    assert result.path == path
    fault = result.fault
    assert fault.name == 'action_plugin_sample'
    assert fault.error_type == 'RuntimeError'
    assert fault.message == 'Error loading plugin sample: boom from extension'
    assert 'RuntimeError' in fault.traceback
    assert channel.recent() == [fault]
    assert any('Error loading plugin sample' in r.getMessage() for r in caplog.records)


def test_syntax_error_is_captured(wiki_tree, channel):
    path = write_unit(wiki_tree / 'lib' / 'tpl' / 'bootstrap' / 'Menu.py', BROKEN_SYNTAX_UNIT)
    result = guard('dokuwiki/template/bootstrap/Menu', 'template dokuwiki/template/bootstrap/Menu', path, channel)
    assert result.status is LoadStatus.LOADED_WITH_FAULT
    assert result.fault.error_type == 'SyntaxError'
    assert result.fault.message.startswith('Error loading template dokuwiki/template/bootstrap/Menu:')


def test_interrupts_are_not_absorbed(wiki_tree, channel):
    def interrupted(path):
        raise KeyboardInterrupt()

    with pytest.raises(KeyboardInterrupt):
        guard('action_plugin_sample', 'plugin sample', wiki_tree / 'x.py', channel, load=interrupted)
    assert len(channel) == 0


def test_system_exit_is_not_absorbed(wiki_tree, channel):
    path = write_unit(wiki_tree / 'lib' / 'plugins' / 'quitter' / 'action.py', "raise SystemExit(3)\n")
    with pytest.raises(SystemExit):
        guard('action_plugin_quitter', 'plugin quitter', path, channel)
