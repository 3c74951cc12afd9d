"""
Location of plugin modules on disk.

Module names are looked up as import roots in the starting directory and
each of its ancestors, so a module installed next to (or above) a project
is found the same way from any directory below it. Path references such as
``./styles/custom.py`` are resolved relative to the starting directory.
"""

from importlib.machinery import (
    BYTECODE_SUFFIXES,
    EXTENSION_SUFFIXES,
    SOURCE_SUFFIXES,
    ExtensionFileLoader,
    FileFinder,
    SourceFileLoader,
    SourcelessFileLoader,
)
from pathlib import Path
from typing import List, Optional, Union

from import_sort_config.log import get_logger

LOADER_DETAILS = (
    (ExtensionFileLoader, EXTENSION_SUFFIXES),
    (SourceFileLoader, SOURCE_SUFFIXES),
    (SourcelessFileLoader, BYTECODE_SUFFIXES),
)


def _is_path_reference(name: str) -> bool:
    return name.startswith(("./", "../")) or name in (".", "..") or Path(name).is_absolute()


def _locate_path(target: Path) -> Optional[str]:
    candidates = [target, target / "__init__.py"]
    if target.name:
        candidates.insert(1, target.with_name(target.name + ".py"))
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate.resolve())
    return None


def _find_spec(fullname: str, search_path: List[str]):
    # Fresh finders keep sys.path_importer_cache untouched
    for entry in search_path:
        spec = FileFinder(entry, *LOADER_DETAILS).find_spec(fullname)
        if spec is not None and (spec.loader is not None or spec.submodule_search_locations):
            return spec
    return None


def _find_in(import_name: str, search_root: Path) -> Optional[str]:
    parts = import_name.split(".")
    search_path = [str(search_root)]
    spec = None

    for idx in range(len(parts)):
        spec = _find_spec(".".join(parts[:idx + 1]), search_path)
        if spec is None:
            return None
        if idx < len(parts) - 1:
            if not spec.submodule_search_locations:
                return None
            search_path = list(spec.submodule_search_locations)

    if spec is None or not spec.has_location or not spec.origin:
        return None
    return spec.origin


def locate_module(name: str, from_directory: Union[str, Path]) -> Optional[str]:
    """
    Resolve a module reference to an absolute file path.

    Args:
        name: Module name (dashes are read as underscores) or path reference
        from_directory: Directory the lookup starts from

    Returns:
        Absolute path of the module file, or None if it cannot be found
    """
    directory = Path(from_directory).resolve()
    if not directory.is_dir():
        return None

    if _is_path_reference(name):
        return _locate_path(directory / name)

    import_name = name.replace("-", "_")
    if not all(part.isidentifier() for part in import_name.split(".")):
        get_logger().debug("Not a valid module name", extra={"module_name": name})
        return None

    for search_root in [directory, *directory.parents]:
        try:
            origin = _find_in(import_name, search_root)
        except (ImportError, OSError, ValueError):
            continue
        if origin:
            return str(Path(origin).resolve())

    return None
