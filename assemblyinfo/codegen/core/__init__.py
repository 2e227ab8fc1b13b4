"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    AttributeKind,
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    FILE_HEADER_COMMENT,
    GENERATED_CODE_DEFINES,
    EXCLUDE_FROM_COVERAGE_DEFINES,
)
from .fields import (
    Field,
    FieldError,
    FieldType,
    Severity,
    build_fields,
    datetime_to_ticks,
    parse_ticks,
    ticks_to_datetime,
)
from .naming import NameSanitizer
from .config import (
    AdditionalField,
    ConfigError,
    ConfigManager,
    GenerationRequest,
    GeneratorConfig,
    load_request,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "AttributeKind",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "FILE_HEADER_COMMENT",
    "GENERATED_CODE_DEFINES",
    "EXCLUDE_FROM_COVERAGE_DEFINES",
    # Field model
    "Field",
    "FieldError",
    "FieldType",
    "Severity",
    "build_fields",
    "datetime_to_ticks",
    "parse_ticks",
    "ticks_to_datetime",
    # Naming utilities
    "NameSanitizer",
    # Configuration system
    "AdditionalField",
    "ConfigError",
    "ConfigManager",
    "GenerationRequest",
    "GeneratorConfig",
    "load_request",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
