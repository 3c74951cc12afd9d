"""
Discovery of project-local import-sort configuration.

Starting from a directory and walking up, the first configuration found
wins. A configuration is either a dedicated rc file or a field inside a
project manifest (``package.json`` or ``pyproject.toml``).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple
import json
import tomllib

import yaml

from import_sort_config.config_loader import get_settings
from import_sort_config.log import get_logger
from import_sort_config.plugin_config.config_types import ConfigFormatError, GlobTable


@dataclass(frozen=True)
class ProjectConfig:
    """
    A glob table loaded from a project configuration source.

    Attributes:
        table: The glob table
        path: File the table was read from
    """
    table: GlobTable
    path: Path


def _load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _load_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


class ProjectConfigDiscovery:
    """
    Finds and loads the project glob table for a directory.

    Search places, checked in order in every directory from the starting
    one upward:
    1. ``package.json``, field ``importSort``
    2. ``pyproject.toml``, table ``[tool.importsort]``
    3. ``.importsortrc`` (YAML or JSON)
    4. ``.importsortrc.json``, ``.importsortrc.yaml``, ``.importsortrc.yml``,
       ``.importsortrc.toml``

    Manifests without the field and empty rc files are skipped. The walk
    stops at the home directory, at the filesystem root or after
    ``max_depth`` parent steps.
    """

    def __init__(
        self,
        module_name: Optional[str] = None,
        package_prop: Optional[str] = None,
        max_depth: Optional[int] = None,
        stop_dir: Optional[Path] = None
    ):
        """
        Initialize the discovery.

        Args:
            module_name: Base name of rc files (default from settings)
            package_prop: Field read from ``package.json`` (default from settings)
            max_depth: Maximum number of parent directories to visit (default from settings)
            stop_dir: Directory where the upward walk ends (default: home directory,
                if it can be determined)
        """
        settings = get_settings().import_sort
        self.module_name = module_name or settings.module_name
        self.package_prop = package_prop or settings.package_prop
        self.max_depth = max_depth if max_depth is not None else settings.max_depth
        self.logger = get_logger()
        self.stop_dir = Path(stop_dir).resolve() if stop_dir else self._home_dir()

    def _home_dir(self) -> Optional[Path]:
        try:
            return Path.home().resolve()
        except (RuntimeError, KeyError, OSError) as e:
            self.logger.debug(
                "Home directory unavailable, searching up to the filesystem root",
                extra={"error": str(e)}
            )
            return None

    def search_places(self) -> List[Tuple[str, Callable[[Path], Any]]]:
        """
        Get the candidate file names and their loaders, in order of precedence.

        Returns:
            List of (file name, loader) pairs; each loader returns the glob table or None
        """
        rc_name = f".{self.module_name}rc"
        return [
            ("package.json", self._load_package_json),
            ("pyproject.toml", self._load_pyproject),
            (rc_name, _load_yaml),
            (f"{rc_name}.json", _load_json),
            (f"{rc_name}.yaml", _load_yaml),
            (f"{rc_name}.yml", _load_yaml),
            (f"{rc_name}.toml", _load_toml),
        ]

    def load(self, directory: Path) -> Optional[ProjectConfig]:
        """
        Load the project configuration that applies to a directory.

        Never raises: lookup and parse failures are logged and reported as
        no configuration.

        Args:
            directory: Directory to start the search from

        Returns:
            ProjectConfig if one was found and is well formed, None otherwise
        """
        try:
            return self._search(Path(directory).resolve())
        except Exception as e:
            self.logger.warning(
                "Failed to load project import-sort configuration",
                extra={"directory": str(directory), "error": str(e)}
            )
            return None

    def _search(self, start_dir: Path) -> Optional[ProjectConfig]:
        current_dir = start_dir
        depth = 0

        while True:
            if depth > self.max_depth:
                self.logger.warning(
                    f"Maximum config search depth ({self.max_depth}) reached",
                    extra={"directory": str(start_dir), "max_depth": self.max_depth}
                )
                return None

            for file_name, loader in self.search_places():
                config_path = current_dir / file_name
                if not config_path.is_file():
                    continue

                table = loader(config_path)
                if not table:
                    continue

                self.logger.debug("Found project configuration", extra={"config_path": str(config_path)})
                return ProjectConfig(table=self._validate_table(table, config_path), path=config_path)

            if self.stop_dir is not None and current_dir == self.stop_dir:
                return None

            parent = current_dir.parent
            if parent == current_dir:  # Reached filesystem root
                return None

            current_dir = parent
            depth += 1

    def _load_package_json(self, path: Path) -> Any:
        data = _load_json(path)
        if not isinstance(data, dict):
            return None
        return data.get(self.package_prop)

    def _load_pyproject(self, path: Path) -> Any:
        data = _load_toml(path)
        return data.get("tool", {}).get(self.module_name)

    def _validate_table(self, table: Any, config_path: Path) -> GlobTable:
        if not isinstance(table, dict):
            raise ConfigFormatError(
                f"Configuration in {config_path} must be a table of glob groups, got {type(table).__name__}"
            )
        for key in table:
            if not isinstance(key, str):
                raise ConfigFormatError(f"Glob group keys in {config_path} must be strings, got {key!r}")
        return table
