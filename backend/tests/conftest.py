import sys
import pathlib
import types
import pytest

# Ensure backend root (containing the 'symbol_autoloader' package) is on sys.path
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from symbol_autoloader.autoload.executor import UNIT_PREFIX
from symbol_autoloader.autoload.resolver import Autoloader, set_autoloader
from symbol_autoloader.core.config import Settings

from unit_helpers import PROBE_MODULE


@pytest.fixture
def probe():
    """Module that loaded test units append their ``__file__`` to."""
    mod = types.ModuleType(PROBE_MODULE)
    mod.hits = []
    sys.modules[PROBE_MODULE] = mod
    yield mod
    sys.modules.pop(PROBE_MODULE, None)


@pytest.fixture(autouse=True)
def _forget_loaded_units():
    yield
    for key in [k for k in list(sys.modules) if k.startswith(UNIT_PREFIX + '.')]:
        sys.modules.pop(key, None)
    set_autoloader(None)


@pytest.fixture
def wiki_tree(tmp_path):
    """Empty host installation layout."""
    base = tmp_path / 'wiki'
    for rel in ('inc/parser', '_test/mock', '_test/tests', 'lib/plugins', 'lib/tpl'):
        (base / rel).mkdir(parents=True, exist_ok=True)
    return base


@pytest.fixture
def wiki_settings(wiki_tree):
    return Settings(base_dir=wiki_tree)


@pytest.fixture
def autoloader(wiki_settings):
    return Autoloader(wiki_settings)
