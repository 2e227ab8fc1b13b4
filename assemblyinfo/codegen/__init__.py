"""
Assembly version info code generation.

Generates version attributes and a ThisAssembly class in C#, Visual Basic
or F# from build metadata.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    AttributeKind,
    CodeGenerator,
    GenerationResult,
    GeneratorError,
)
from .core.fields import Field, FieldError, FieldType, Severity, build_fields
from .core.config import (
    AdditionalField,
    ConfigError,
    ConfigManager,
    GenerationRequest,
    GeneratorConfig,
    load_request,
)
from .driver import GenerationDriver, assembly_attributes, generate


def quick_generate(language="c#", **options):
    """
    Quick code generation from keyword options.

    Args:
        language: Target language
        **options: GenerationRequest fields

    Returns:
        Generated code string
    """
    request = load_request(custom_config={"code_language": language, **options})
    result = generate(request)

    if result.success:
        return result.code
    else:
        raise GeneratorError(result.error_message)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "AttributeKind",
    "Field",
    "FieldError",
    "FieldType",
    "Severity",
    "build_fields",
    "AdditionalField",
    "ConfigError",
    "ConfigManager",
    "GenerationRequest",
    "GeneratorConfig",
    "load_request",
    "GenerationDriver",
    "assembly_attributes",
    "generate",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "get_registry",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
]
