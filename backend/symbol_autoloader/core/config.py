from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
import os
import yaml
from symbol_autoloader import __version__
from symbol_autoloader.core.errors import LayoutFileError
# Optionally load a repo-level config.env file for local development so the
# host layout can be pinned without exporting variables by hand.
try:
    from dotenv import load_dotenv
    cfg_override = os.getenv('AUTOLOAD_CONFIG_FILE')
    candidates = []
    if cfg_override:
        candidates.append(Path(cfg_override))

    candidates.append(Path.cwd() / 'config.env')
    candidates.append(Path.cwd() / 'backend' / 'config.env')

    for p in candidates:
        try:
            if p and p.exists():
                load_dotenv(str(p))
                break
        except Exception:
            continue
except Exception:
    # If python-dotenv isn't available or load fails, fall back to env vars
    pass

"""Central configuration.

All directories derive from the host base directory unless overridden one by
one. The registry table and core library list can be extended through an
optional YAML layout file.

Env vars:
  AUTOLOAD_BASE_DIR                 - host installation root (default: cwd)
  AUTOLOAD_ROOT_NAMESPACE           - host root namespace (default: dokuwiki)
  AUTOLOAD_SOURCE_SUFFIX            - source file suffix (default: .py)
  AUTOLOAD_INTERNAL_DIR             - host's own library directory
  AUTOLOAD_TEST_DIR                 - host test directory
  AUTOLOAD_TEST_MOCK_DIR            - host test mock directory
  AUTOLOAD_PLUGIN_DIR               - plugin directory
  AUTOLOAD_TEMPLATE_DIR             - template directory
  AUTOLOAD_LAYOUT_FILE              - YAML file with extra registry entries
  AUTOLOAD_STRICT_PLUGIN_EXISTENCE  - missing flat plugin files count as unresolved
  AUTOLOAD_LOAD_CORE_LIBRARIES      - load core libraries on app start
  AUTOLOAD_DIAGNOSTICS_LIMIT        - retained extension faults
  AUTOLOAD_LOG_LEVEL                - logging level
"""

DEFAULT_CORE_LIBRARIES: List[str] = [
    # order matters for a few of these
    'defines', 'compatibility', 'actions', 'changelog', 'common', 'confutils',
    'pluginutils', 'form', 'fulltext', 'html', 'httputils', 'indexer',
    'infoutils', 'io', 'mail', 'media', 'pageutils', 'parserutils', 'search',
    'template', 'toolbar', 'utf8', 'auth', 'deprecated', 'legacy',
]


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if value and value.strip():
        return Path(value.strip())
    return default


def load_layout_file(path: Path) -> dict:
    """Read the optional YAML layout file.

    Recognised keys are ``registry`` (mapping of symbolic name to a path
    relative to the base directory) and ``core_libraries`` (list of names).
    """
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise LayoutFileError(f"unable to read layout file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise LayoutFileError(f"layout file {path} must contain a mapping")
    registry = raw.get('registry') or {}
    if not isinstance(registry, dict):
        raise LayoutFileError(f"'registry' in {path} must be a mapping")
    core = raw.get('core_libraries')
    if core is not None and not isinstance(core, list):
        raise LayoutFileError(f"'core_libraries' in {path} must be a list")
    return {
        'registry': {str(k): str(v) for k, v in registry.items() if k and v},
        'core_libraries': [str(c) for c in core] if core is not None else None,
    }


class Settings(BaseModel):
    app_name: str = 'Symbol Autoloader'
    api_v1_prefix: str = '/api/v1'
    version: str = __version__
    base_dir: Path = Field(default_factory=Path.cwd)
    root_namespace: str = 'dokuwiki'
    source_suffix: str = '.py'
    internal_dir: Optional[Path] = None
    test_dir: Optional[Path] = None
    test_mock_dir: Optional[Path] = None
    plugin_dir: Optional[Path] = None
    template_dir: Optional[Path] = None
    layout_file: Optional[Path] = None
    registry_overrides: Dict[str, str] = Field(default_factory=dict)
    core_libraries: List[str] = Field(default_factory=lambda: list(DEFAULT_CORE_LIBRARIES))
    # The flat plugin branch historically reports "handled" even when the
    # plugin file is absent; strict mode checks existence like every other branch.
    strict_plugin_existence: bool = False
    load_core_libraries: bool = False
    diagnostics_limit: int = 200
    log_level: str = 'INFO'

    def model_post_init(self, __context) -> None:
        base = self.base_dir
        if self.internal_dir is None:
            self.internal_dir = base / 'inc'
        if self.test_dir is None:
            self.test_dir = base / '_test' / 'tests'
        if self.test_mock_dir is None:
            self.test_mock_dir = base / '_test' / 'mock'
        if self.plugin_dir is None:
            self.plugin_dir = base / 'lib' / 'plugins'
        if self.template_dir is None:
            self.template_dir = base / 'lib' / 'tpl'
        if self.layout_file is not None:
            layout = load_layout_file(self.layout_file)
            merged = dict(layout['registry'])
            merged.update(self.registry_overrides)
            self.registry_overrides = merged
            if layout['core_libraries'] is not None:
                self.core_libraries = layout['core_libraries']

    @classmethod
    def from_env(cls) -> 'Settings':
        base = _env_path('AUTOLOAD_BASE_DIR', Path.cwd())
        layout = os.getenv('AUTOLOAD_LAYOUT_FILE')
        return cls(
            version=os.getenv('AUTOLOAD_VERSION', __version__),
            base_dir=base,
            root_namespace=os.getenv('AUTOLOAD_ROOT_NAMESPACE', 'dokuwiki').strip().strip('/') or 'dokuwiki',
            source_suffix=os.getenv('AUTOLOAD_SOURCE_SUFFIX', '.py'),
            internal_dir=_env_path('AUTOLOAD_INTERNAL_DIR', base / 'inc'),
            test_dir=_env_path('AUTOLOAD_TEST_DIR', base / '_test' / 'tests'),
            test_mock_dir=_env_path('AUTOLOAD_TEST_MOCK_DIR', base / '_test' / 'mock'),
            plugin_dir=_env_path('AUTOLOAD_PLUGIN_DIR', base / 'lib' / 'plugins'),
            template_dir=_env_path('AUTOLOAD_TEMPLATE_DIR', base / 'lib' / 'tpl'),
            layout_file=Path(layout) if layout else None,
            strict_plugin_existence=_env_flag('AUTOLOAD_STRICT_PLUGIN_EXISTENCE'),
            load_core_libraries=_env_flag('AUTOLOAD_LOAD_CORE_LIBRARIES'),
            diagnostics_limit=_env_int('AUTOLOAD_DIAGNOSTICS_LIMIT', 200),
            log_level=os.getenv('AUTOLOAD_LOG_LEVEL', 'INFO'),
        )


settings = Settings.from_env()
