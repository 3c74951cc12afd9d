"""
Configuration merger for combining configuration fragments.

Fragments are merged field by field: a later fragment replaces the
``parser``, ``style`` or ``options`` of the accumulated result whenever it
sets that field. Nested option mappings are never merged recursively.
"""

import dataclasses
from typing import Iterable, Optional

from import_sort_config.log import get_logger
from import_sort_config.plugin_config.config_types import ConfigFragment

MERGED_FIELDS = ("parser", "style", "options")


class ConfigMerger:
    """
    Merges an ordered sequence of configuration fragments.

    Merge rules:
    - Absent and empty fragments are ignored
    - Later fragments win on every field they set
    - ``options`` is replaced as a whole, never deep-merged
    """

    def __init__(self):
        self.logger = get_logger()

    def merge_configs(
        self,
        fragments: Iterable[Optional[ConfigFragment]]
    ) -> Optional[ConfigFragment]:
        """
        Merge fragments left to right.

        Args:
            fragments: Fragments in increasing order of precedence, None entries allowed

        Returns:
            The merged fragment, or None if no fragment carried any field
        """
        present = [fragment for fragment in fragments if fragment is not None and not fragment.is_empty()]

        if not present:
            return None

        merged = present[0]
        for fragment in present[1:]:
            merged = self.merge(merged, fragment)

        self.logger.debug(
            f"Merged {len(present)} configuration fragments",
            extra={"fragment_count": len(present)}
        )

        return merged

    def merge(self, base: ConfigFragment, overlay: ConfigFragment) -> ConfigFragment:
        """
        Overlay one fragment onto another.

        Args:
            base: Lower priority fragment
            overlay: Higher priority fragment

        Returns:
            New fragment, inputs are not modified
        """
        changes = {
            name: getattr(overlay, name)
            for name in MERGED_FIELDS
            if getattr(overlay, name)
        }
        return dataclasses.replace(base, **changes)
