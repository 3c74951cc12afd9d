"""
Per-extension plugin configuration for import sorting.

Glob-keyed configuration tables select the parser and style plugins for a
file extension; the defaults are merged with the project configuration and
the plugin references are resolved to module paths.
"""

from import_sort_config.plugin_config.config_discovery import ProjectConfig, ProjectConfigDiscovery
from import_sort_config.plugin_config.config_merger import ConfigMerger
from import_sort_config.plugin_config.config_resolver import DEFAULT_CONFIGS, ConfigResolver, get_config
from import_sort_config.plugin_config.config_selector import GlobConfigSelector
from import_sort_config.plugin_config.config_types import (
    ConfigFormatError,
    ConfigFragment,
    InlineReference,
    ResolvedConfig,
    ResolvedReference,
    ShortName,
)
from import_sort_config.plugin_config.module_locator import locate_module
from import_sort_config.plugin_config.module_resolver import ModuleResolver, PluginKind

__all__ = [
    'ConfigFormatError',
    'ConfigFragment',
    'ConfigMerger',
    'ConfigResolver',
    'DEFAULT_CONFIGS',
    'GlobConfigSelector',
    'InlineReference',
    'ModuleResolver',
    'PluginKind',
    'ProjectConfig',
    'ProjectConfigDiscovery',
    'ResolvedConfig',
    'ResolvedReference',
    'ShortName',
    'get_config',
    'locate_module',
]
