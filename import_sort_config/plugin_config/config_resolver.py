"""
Configuration resolver for getting the effective plugin configuration of a file extension.

The built-in defaults are merged with the project configuration found from
the target directory (project wins per field) and the resulting parser and
style references are resolved to module paths.
"""

from pathlib import Path
from typing import Optional, Union

from import_sort_config.log import get_logger
from import_sort_config.plugin_config.config_discovery import ProjectConfigDiscovery
from import_sort_config.plugin_config.config_merger import ConfigMerger
from import_sort_config.plugin_config.config_selector import GlobConfigSelector
from import_sort_config.plugin_config.config_types import ConfigFragment, GlobTable, ResolvedConfig
from import_sort_config.plugin_config.module_resolver import ModuleResolver

DEFAULT_CONFIGS: GlobTable = {
    ".js, .jsx, .es6, .es, .mjs, .ts, .tsx": {
        "parser": "babylon",
        "style": "eslint",
    },
}


class ConfigResolver:
    """
    Resolves the effective import-sort configuration for a file extension.

    This class orchestrates ProjectConfigDiscovery, GlobConfigSelector,
    ConfigMerger and ModuleResolver. Every collaborator can be replaced.
    """

    def __init__(
        self,
        discovery: Optional[ProjectConfigDiscovery] = None,
        selector: Optional[GlobConfigSelector] = None,
        merger: Optional[ConfigMerger] = None,
        module_resolver: Optional[ModuleResolver] = None
    ):
        self.merger = merger or ConfigMerger()
        self.discovery = discovery or ProjectConfigDiscovery()
        self.selector = selector or GlobConfigSelector(merger=self.merger)
        self.module_resolver = module_resolver or ModuleResolver()
        self.logger = get_logger()

    def get_config(
        self,
        extension: str,
        directory: Optional[Union[str, Path]] = None,
        default_configs: GlobTable = DEFAULT_CONFIGS
    ) -> Optional[ResolvedConfig]:
        """
        Get the effective configuration for an extension.

        This method:
        1. Selects the default fragment for the extension
        2. Selects the project fragment, if a directory is given and has a config
        3. Merges them, project fields winning
        4. Resolves the parser and style references

        Args:
            extension: Extension to configure, e.g. ``.ts``
            directory: Project directory used for config discovery and module lookup
            default_configs: Glob table of defaults

        Returns:
            ResolvedConfig, or None if no configuration applies to the extension
        """
        default_config = self.selector.select_for_extension(default_configs, extension)

        package_config: Optional[ConfigFragment] = None
        source_path: Optional[Path] = None
        if directory:
            project_config = self.discovery.load(Path(directory))
            if project_config:
                package_config = self.selector.select_for_extension(project_config.table, extension)
                if package_config and not package_config.is_empty():
                    source_path = project_config.path

        actual_config = self.merger.merge_configs([default_config, package_config])

        if actual_config is None:
            self.logger.debug("No import-sort configuration applies", extra={"extension": extension})
            return None

        resolved = self.resolve_config(actual_config, Path(directory) if directory else None)
        resolved.source_path = source_path

        self.logger.info(
            "Resolved import-sort configuration",
            extra={
                "directory": str(directory) if directory else None,
                "parser": resolved.parser.module if resolved.parser else None,
                "style": resolved.style.module if resolved.style else None,
                "source": str(source_path) if source_path else None,
            }
        )

        return resolved

    def resolve_config(self, config: ConfigFragment, directory: Optional[Path] = None) -> ResolvedConfig:
        """
        Resolve the plugin references of a merged fragment.

        The parser and style are resolved independently; a reference that
        cannot be located is left out of the result.

        Args:
            config: Merged configuration fragment
            directory: Project directory to search first

        Returns:
            ResolvedConfig carrying the fragment and the located plugins
        """
        resolved = ResolvedConfig(config=config)

        if config.parser:
            resolved.parser = self.module_resolver.resolve_parser(config.parser, directory)

        if config.style:
            resolved.style = self.module_resolver.resolve_style(config.style, directory)

        return resolved


def get_config(
    extension: str,
    directory: Optional[Union[str, Path]] = None,
    default_configs: GlobTable = DEFAULT_CONFIGS
) -> Optional[ResolvedConfig]:
    """
    Get the effective import-sort configuration for an extension.

    Args:
        extension: Extension to configure, e.g. ``.ts``
        directory: Project directory used for config discovery and module lookup
        default_configs: Glob table of defaults

    Returns:
        ResolvedConfig, or None if no configuration applies to the extension
    """
    return ConfigResolver().get_config(extension, directory, default_configs)
