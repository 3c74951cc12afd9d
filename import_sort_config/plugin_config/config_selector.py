"""
Selection of configuration fragments from a glob table by file extension.
"""

from typing import Callable, List, Optional

from import_sort_config.log import get_logger
from import_sort_config.plugin_config.config_merger import ConfigMerger
from import_sort_config.plugin_config.config_types import ConfigFormatError, ConfigFragment, GlobTable
from import_sort_config.plugin_config.glob_matcher import matches


def split_glob_group(joined_globs: str) -> List[str]:
    """
    Split a comma-joined glob group into its trimmed patterns.

    Commas inside brace groups belong to the pattern, so ``"*.{js,ts}, *.mjs"``
    yields ``["*.{js,ts}", "*.mjs"]``.
    """
    patterns = []
    depth = 0
    start = 0
    for idx, char in enumerate(joined_globs):
        if char == "{":
            depth += 1
        elif char == "}" and depth:
            depth -= 1
        elif char == "," and depth == 0:
            patterns.append(joined_globs[start:idx])
            start = idx + 1
    patterns.append(joined_globs[start:])

    return [pattern.strip() for pattern in patterns if pattern.strip()]


class GlobConfigSelector:
    """
    Selects and merges the fragments of a glob table that apply to an extension.

    Every key of the table is a comma-joined group of glob patterns. A key
    applies when the extension matches any of its patterns; all applicable
    fragments are merged in table order, later keys winning.
    """

    def __init__(
        self,
        matcher: Callable[[str, str], bool] = matches,
        merger: Optional[ConfigMerger] = None
    ):
        """
        Initialize the selector.

        Args:
            matcher: Predicate ``matcher(candidate, pattern)``
            merger: Merger used to combine matching fragments
        """
        self.matcher = matcher
        self.merger = merger or ConfigMerger()
        self.logger = get_logger()

    def select_for_extension(self, table: GlobTable, extension: str) -> Optional[ConfigFragment]:
        """
        Get the merged fragment for an extension.

        Args:
            table: Glob table to select from
            extension: Extension (or file name) to match, e.g. ``.ts``

        Returns:
            Merged fragment of all matching keys, or None if no key matches
        """
        found: List[ConfigFragment] = []

        for joined_globs, raw_fragment in table.items():
            if not isinstance(joined_globs, str):
                continue

            globs = split_glob_group(joined_globs)
            if not any(self.matcher(extension, glob) for glob in globs):
                continue

            try:
                found.append(ConfigFragment.from_dict(raw_fragment))
            except ConfigFormatError as e:
                self.logger.warning(
                    "Skipping malformed configuration fragment",
                    extra={"globs": joined_globs, "error": str(e)}
                )

        if not found:
            self.logger.debug("No configuration matches extension", extra={"extension": extension})

        return self.merger.merge_configs(found)
