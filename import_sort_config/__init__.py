from import_sort_config.plugin_config import (
    DEFAULT_CONFIGS,
    ConfigFragment,
    ConfigResolver,
    ResolvedConfig,
    ResolvedReference,
    get_config,
)

__all__ = [
    "DEFAULT_CONFIGS",
    "ConfigFragment",
    "ConfigResolver",
    "ResolvedConfig",
    "ResolvedReference",
    "get_config",
]
