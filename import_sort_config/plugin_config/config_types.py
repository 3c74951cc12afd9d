"""
Data model for glob-keyed import-sort plugin configuration.

A project (or the built-in defaults) maps groups of glob patterns to
configuration fragments. A fragment names a parser plugin, a style plugin
and an options mapping; once merged, the plugin references are resolved to
concrete module paths.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union


class ConfigFormatError(ValueError):
    """Raised when a raw configuration value does not have the expected shape."""


@dataclass(frozen=True)
class ShortName:
    """A plugin referenced by its bare short-name, e.g. ``"eslint"``."""
    name: str


@dataclass(frozen=True)
class InlineReference:
    """A plugin referenced by module name together with plugin options."""
    module_name: str
    options: Dict[str, Any] = field(default_factory=dict)


Reference = Union[ShortName, InlineReference]


def parse_reference(raw: Any) -> Reference:
    """
    Turn a raw ``parser`` / ``style`` value into a Reference.

    Args:
        raw: A short-name string, a mapping with a ``module`` (or ``moduleName``)
            key and optional ``options``, or an already parsed Reference

    Returns:
        The parsed Reference

    Raises:
        ConfigFormatError: If the value is neither form
    """
    if isinstance(raw, (ShortName, InlineReference)):
        return raw

    if isinstance(raw, str):
        if not raw.strip():
            raise ConfigFormatError("Plugin reference must not be an empty string")
        return ShortName(raw.strip())

    if isinstance(raw, Mapping):
        module_name = raw.get("module") or raw.get("moduleName")
        if not isinstance(module_name, str) or not module_name.strip():
            raise ConfigFormatError("Inline plugin reference requires a 'module' name")

        options = raw.get("options") or {}
        if not isinstance(options, Mapping):
            raise ConfigFormatError(
                f"Options of plugin '{module_name}' must be a mapping, got {type(options).__name__}"
            )
        return InlineReference(module_name.strip(), dict(options))

    raise ConfigFormatError(f"Unsupported plugin reference of type {type(raw).__name__}")


def reference_to_raw(reference: Reference) -> Union[str, Dict[str, Any]]:
    if isinstance(reference, ShortName):
        return reference.name
    return {"module": reference.module_name, "options": dict(reference.options)}


@dataclass(frozen=True)
class ConfigFragment:
    """
    A partial configuration record.

    Any of the fields may be unset. A fragment with no field set carries no
    information and is treated exactly like an absent fragment.

    Attributes:
        parser: Reference to the parser plugin
        style: Reference to the style plugin
        options: Opaque options mapping, replaced as a whole when merged
    """
    parser: Optional[Reference] = None
    style: Optional[Reference] = None
    options: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ConfigFragment":
        """
        Parse a raw fragment as found in a glob table.

        Unknown keys are ignored; falsy values count as unset.

        Raises:
            ConfigFormatError: If the fragment or one of its fields is malformed
        """
        if isinstance(raw, ConfigFragment):
            return raw
        if not isinstance(raw, Mapping):
            raise ConfigFormatError(f"Config fragment must be a mapping, got {type(raw).__name__}")

        parser = parse_reference(raw["parser"]) if raw.get("parser") else None
        style = parse_reference(raw["style"]) if raw.get("style") else None

        options = raw.get("options") or None
        if options is not None and not isinstance(options, Mapping):
            raise ConfigFormatError(f"Fragment options must be a mapping, got {type(options).__name__}")

        return cls(
            parser=parser,
            style=style,
            options=dict(options) if options is not None else None,
        )

    def is_empty(self) -> bool:
        return not (self.parser or self.style or self.options)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.parser:
            result["parser"] = reference_to_raw(self.parser)
        if self.style:
            result["style"] = reference_to_raw(self.style)
        if self.options:
            result["options"] = dict(self.options)
        return result


@dataclass(frozen=True)
class ResolvedReference:
    """A plugin module located on disk, with the options it should receive."""
    module: str
    options: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"module": self.module, "options": dict(self.options)}


@dataclass
class ResolvedConfig:
    """
    Represents the effective plugin configuration for one file extension.

    Attributes:
        config: The merged configuration fragment
        parser: Resolved parser plugin, None if unset or not locatable
        style: Resolved style plugin, None if unset or not locatable
        source_path: Project config file that contributed to the fragment, if any
    """
    config: ConfigFragment
    parser: Optional[ResolvedReference] = None
    style: Optional[ResolvedReference] = None
    source_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"config": self.config.to_dict()}
        if self.parser:
            result["parser"] = self.parser.to_dict()
        if self.style:
            result["style"] = self.style.to_dict()
        return result

    def get_applied_config_info(self) -> str:
        """
        Get a human-readable description of where the configuration came from.

        Returns:
            String describing the config sources
        """
        if self.source_path is None:
            return "Using default configuration only"
        return f"Applied configs: defaults → {self.source_path}"


# Mapping from comma-joined glob groups to fragments (parsed or raw)
GlobTable = Mapping[str, Union[ConfigFragment, Mapping[str, Any]]]
