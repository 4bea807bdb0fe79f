"""Tests for flat plugin identifier parsing."""

from pathlib import Path

import pytest
from hypothesis import given, strategies as st

from symbol_autoloader.autoload.models import PluginDescriptor
from symbol_autoloader.autoload.plugin_names import PLUGIN_TYPES, compile_grammar, parse, plugin_path


class TestParse:

    @pytest.mark.parametrize('plugin_type', PLUGIN_TYPES)
    def test_every_known_type(self, plugin_type):
        assert parse(f'{plugin_type}_plugin_sample') == PluginDescriptor(plugin_type, 'sample', None)

    def test_subcomponent(self):
        assert parse('syntax_plugin_wrap_div') == PluginDescriptor('syntax', 'wrap', 'div')

    def test_component_with_digits_and_high_chars(self):
        assert parse('helper_plugin_data2') == PluginDescriptor('helper', 'data2', None)
        assert parse('action_plugin_caf\xe9') == PluginDescriptor('action', 'caf\xe9', None)

    def test_component_outside_latin1(self):
        assert parse('action_plugin_\u65e5\u8a18') == PluginDescriptor('action', '\u65e5\u8a18', None)
        assert parse('helper_plugin_\u0431\u043b\u043e\u0433_feed') == PluginDescriptor('helper', '\u0431\u043b\u043e\u0433', 'feed')

    @pytest.mark.parametrize('name', [
        'widget_plugin_sample',        # unknown type
        'Action_plugin_sample',        # type is case-sensitive
        'action_plugins_sample',
        'action_plugin_',
        'action_plugin_sample_',
        'action_plugin_a_b_c',         # subcomponent may not contain underscores
        'action_plugin_sam-ple',
        'xaction_plugin_sample',
        'cache_renderer',
        'Doku_Renderer_xhtml',
    ])
    def test_non_matching(self, name):
        assert parse(name) is None

    @pytest.mark.parametrize('name', [
        'dokuwiki/plugin/sample/action',
        'dokuwiki\\action_plugin_sample',
        'action_plugin_sample.helper',
    ])
    def test_names_with_separators_never_parse(self, name):
        assert parse(name) is None

    def test_empty(self):
        assert parse('') is None

    def test_custom_type_set(self):
        grammar = compile_grammar(('widget',))
        assert parse('widget_plugin_clock', grammar) == PluginDescriptor('widget', 'clock', None)
        assert parse('action_plugin_clock', grammar) is None


class TestPluginPath:

    def test_without_subcomponent(self):
        path = plugin_path(PluginDescriptor('action', 'sample'), Path('/srv/wiki/lib/plugins'), '.py')
        assert path == Path('/srv/wiki/lib/plugins/sample/action.py')

    def test_with_subcomponent(self):
        path = plugin_path(PluginDescriptor('syntax', 'wrap', 'div'), Path('/srv/wiki/lib/plugins'), '.py')
        assert path == Path('/srv/wiki/lib/plugins/wrap/syntax/div.py')


component = st.text(alphabet='abcdefghijklmnopqrstuvwxyz0123456789', min_size=1, max_size=10)


@given(kind=st.text(alphabet='abcdefghijklmnopqrstuvwxyz', min_size=1, max_size=10), name=component)
def test_unknown_types_never_match(kind, name):
    identifier = f'{kind}_plugin_{name}'
    if kind in PLUGIN_TYPES:
        assert parse(identifier) == PluginDescriptor(kind, name, None)
    else:
        assert parse(identifier) is None


@given(kind=st.sampled_from(PLUGIN_TYPES), name=component, sub=st.one_of(st.none(), component))
def test_parse_recovers_parts(kind, name, sub):
    identifier = f'{kind}_plugin_{name}' + (f'_{sub}' if sub else '')
    assert parse(identifier) == PluginDescriptor(kind, name, sub)
