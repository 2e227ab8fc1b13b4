"""
Configuration management for code generation.

Holds the generator settings and the generation request, and handles
loading requests from JSON files merged with overrides.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union, Tuple
from dataclasses import dataclass, field, fields

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_GENERATOR_NAME = "assemblyinfo"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all code generators."""

    # Identify the tool in the GeneratedCode marker attribute
    generator_name: str = DEFAULT_GENERATOR_NAME
    generator_version: str = "0.0.0"

    # Explicit namespace for the ThisAssembly class
    namespace: Optional[str] = None

    line_ending: str = "\n"


@dataclass(frozen=True)
class AdditionalField:
    """
    A caller-supplied ThisAssembly field.

    The value is given by exactly one of the ``String``, ``Boolean`` or
    ``Ticks`` metadata entries. ``EmitIfEmpty`` applies to ``String`` only.
    Metadata keys are matched case-insensitively.
    """

    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        """Look up a metadata value ignoring key case."""
        wanted = key.lower()
        for meta_key, value in self.metadata.items():
            if meta_key.lower() == wanted:
                return value
        return None

    def has(self, key: str) -> bool:
        wanted = key.lower()
        return any(meta_key.lower() == wanted for meta_key in self.metadata)


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate one version info source file."""

    code_language: str
    output_file: Optional[str] = None

    emit_non_version_custom_attributes: bool = False
    emit_this_assembly_class: bool = True

    assembly_name: Optional[str] = None
    assembly_version: Optional[str] = None
    assembly_file_version: Optional[str] = None
    assembly_informational_version: Optional[str] = None

    root_namespace: Optional[str] = None
    this_assembly_namespace: Optional[str] = None

    assembly_originator_key_file: Optional[str] = None
    assembly_key_container_name: Optional[str] = None

    assembly_title: Optional[str] = None
    assembly_product: Optional[str] = None
    assembly_copyright: Optional[str] = None
    assembly_company: Optional[str] = None
    assembly_configuration: Optional[str] = None

    public_release: bool = False
    prerelease_version: Optional[str] = None

    git_commit_id: Optional[str] = None
    git_commit_date_ticks: Optional[str] = None
    git_commit_author_date_ticks: Optional[str] = None

    additional_fields: Tuple[AdditionalField, ...] = ()


_BOOL_KEYS = {
    "emit_non_version_custom_attributes",
    "emit_this_assembly_class",
    "public_release",
}


class ConfigManager:
    """Loads generation requests from JSON files and overrides."""

    def get_request(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GenerationRequest:
        """
        Build a generation request.

        Args:
            custom_config: Values overriding the file contents
            config_file: Path to JSON request file

        Returns:
            Merged generation request

        Raises:
            ConfigError: If the file or values are invalid
        """
        base_config: Dict[str, Any] = {}

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(
                {k: v for k, v in custom_config.items() if v is not None}
            )

        return self._dict_to_request(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load request values from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug(f"Loaded configuration file {path}")
        return config

    def _dict_to_request(self, config_dict: Dict[str, Any]) -> GenerationRequest:
        """Convert dictionary to GenerationRequest instance."""
        known_fields = {f.name for f in fields(GenerationRequest)}

        request_args: Dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in known_fields:
                logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            request_args[key] = value

        if not request_args.get("code_language"):
            raise ConfigError("code_language is required")

        for key in _BOOL_KEYS & request_args.keys():
            request_args[key] = _coerce_bool(key, request_args[key])

        for key, value in list(request_args.items()):
            if key in _BOOL_KEYS or key == "additional_fields" or value is None:
                continue
            if isinstance(value, (dict, list)):
                raise ConfigError(f"{key} must be a scalar value")
            request_args[key] = _stringify(value)

        if "additional_fields" in request_args:
            request_args["additional_fields"] = parse_additional_fields(
                request_args["additional_fields"]
            )

        return GenerationRequest(**request_args)


def parse_additional_fields(raw: Any) -> Tuple[AdditionalField, ...]:
    """
    Convert JSON additional field definitions.

    Accepts a list of objects carrying a ``name`` key, or an object
    mapping field names to their metadata objects.
    """
    if raw is None:
        return ()

    if isinstance(raw, dict):
        items = [(name, meta) for name, meta in raw.items()]
    elif isinstance(raw, (list, tuple)):
        items = []
        for entry in raw:
            if isinstance(entry, AdditionalField):
                items.append((entry.name, entry.metadata))
                continue
            if not isinstance(entry, dict) or "name" not in entry:
                raise ConfigError(
                    "Each additional field must be an object with a 'name' key"
                )
            meta = {k: v for k, v in entry.items() if k != "name"}
            items.append((entry["name"], meta))
    else:
        raise ConfigError("additional_fields must be a list or an object")

    result = []
    for name, meta in items:
        if not isinstance(meta, dict):
            raise ConfigError(f"Metadata for additional field '{name}' must be an object")
        result.append(
            AdditionalField(
                name=str(name),
                metadata={str(k): _stringify(v) for k, v in meta.items()},
            )
        )
    return tuple(result)


def _stringify(value: Any) -> str:
    # JSON null counts as an empty value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_request(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GenerationRequest:
    """
    Convenience function to load a generation request.

    Args:
        custom_config: Values overriding the file contents
        config_file: Path to JSON request file

    Returns:
        Merged generation request
    """
    return get_config_manager().get_request(custom_config, config_file)


EXAMPLE_REQUEST = {
    "code_language": "c#",
    "assembly_version": "1.2",
    "assembly_file_version": "1.2.3.0",
    "assembly_informational_version": "1.2.3+a1b2c3d4",
    "root_namespace": "Contoso.Widgets",
    "public_release": True,
    "git_commit_id": "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678",
    "git_commit_date_ticks": "637450560000000000",
    "additional_fields": [
        {"name": "BuildAgent", "String": "ci-01"},
        {"name": "IsOfficialBuild", "Boolean": "true"},
    ],
}
