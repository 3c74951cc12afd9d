"""
Resolution of parser and style plugin references to module paths.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from import_sort_config.config_loader import get_settings
from import_sort_config.log import get_logger
from import_sort_config.plugin_config.config_types import (
    InlineReference,
    Reference,
    ResolvedReference,
    parse_reference,
)
from import_sort_config.plugin_config.module_locator import locate_module

# Installation directory of this package, searched when the project directory yields nothing
DEFAULT_SEARCH_BASE = Path(__file__).resolve().parent.parent


class PluginKind(Enum):
    """The kinds of plugins a configuration refers to."""
    PARSER = "parser"
    STYLE = "style"

    @property
    def prefix(self) -> str:
        """Module name prefix used to expand short-names of this kind."""
        return get_settings().import_sort.get(f"{self.value}_prefix")


class ModuleResolver:
    """
    Resolves plugin references to concrete module paths.

    A reference ``name`` of kind ``style`` is looked up as
    ``import-sort-style-<name>`` first and as ``<name>`` second. Each name is
    searched from the project directory and then from this package's own
    installation directory; the first hit wins.
    """

    def __init__(
        self,
        locator: Callable[[str, Path], Optional[str]] = locate_module,
        default_search_base: Optional[Path] = None
    ):
        """
        Initialize the module resolver.

        Args:
            locator: Function ``locator(module_name, from_directory)`` returning a path or None
            default_search_base: Fallback search directory (default: package installation directory)
        """
        self.locator = locator
        self.default_search_base = Path(default_search_base) if default_search_base else DEFAULT_SEARCH_BASE
        self.logger = get_logger()

    def resolve_reference(
        self,
        reference: Union[Reference, str, dict],
        kind: PluginKind,
        base_directory: Optional[Path] = None
    ) -> Optional[ResolvedReference]:
        """
        Resolve one plugin reference.

        Args:
            reference: Short-name, inline reference, or their raw forms
            kind: Which kind of plugin is referenced
            base_directory: Project directory to search first

        Returns:
            ResolvedReference, or None if no candidate module could be located

        Raises:
            ConfigFormatError: If a raw reference is malformed
        """
        reference = parse_reference(reference)
        if isinstance(reference, InlineReference):
            module_name, options = reference.module_name, dict(reference.options)
        else:
            module_name, options = reference.name, {}

        candidate_names = (f"{kind.prefix}{module_name}", module_name)

        for name, search_base in self._attempts(candidate_names, base_directory):
            module_path = self.locator(name, search_base)
            if module_path:
                self.logger.debug(
                    f"Resolved {kind.value} plugin",
                    extra={"module_name": name, "search_base": str(search_base), "module_path": module_path}
                )
                return ResolvedReference(module=module_path, options=options)

        self.logger.debug(
            f"Could not locate {kind.value} plugin",
            extra={"module_name": module_name, "base_directory": str(base_directory) if base_directory else None}
        )
        return None

    def resolve_parser(self, reference: Any, base_directory: Optional[Path] = None) -> Optional[ResolvedReference]:
        return self.resolve_reference(reference, PluginKind.PARSER, base_directory)

    def resolve_style(self, reference: Any, base_directory: Optional[Path] = None) -> Optional[ResolvedReference]:
        return self.resolve_reference(reference, PluginKind.STYLE, base_directory)

    def _attempts(
        self,
        candidate_names: Tuple[str, ...],
        base_directory: Optional[Path]
    ) -> Iterator[Tuple[str, Path]]:
        """Yield (module name, search base) pairs in priority order."""
        for name in candidate_names:
            if base_directory:
                yield name, Path(base_directory)
            yield name, self.default_search_base
