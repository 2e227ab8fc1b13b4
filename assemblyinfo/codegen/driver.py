"""
Generation driver.

Builds the field list for a request, selects the generator for the
requested language and walks it through the emission sequence. The driver
does no I/O: it returns text and leaves writing it to the caller.
"""

from typing import List, Optional, Tuple

from .. import __version__
from ..keys import KeySource
from ..logging_config import get_logger
from .core.config import DEFAULT_GENERATOR_NAME, GenerationRequest, GeneratorConfig
from .core.fields import Field, Severity, build_fields
from .core.generator import (
    AttributeKind,
    CodeGenerator,
    FILE_HEADER_COMMENT,
    GenerationResult,
    GeneratorError,
)
from .core.templates import TemplateError
from .registry import GeneratorRegistry, get_registry

logger = get_logger(__name__)

# Namespace for languages that require one when the project has none
DEFAULT_NAMESPACE = "AssemblyInfo"


def assembly_attributes(request: GenerationRequest) -> List[Tuple[AttributeKind, str]]:
    """
    List the assembly-level attributes to declare for a request.

    The version attributes are always declared. The descriptive ones only
    when enabled and non-empty.
    """
    attributes = [
        (AttributeKind.VERSION, request.assembly_version or ""),
        (AttributeKind.FILE_VERSION, request.assembly_file_version or ""),
        (
            AttributeKind.INFORMATIONAL_VERSION,
            request.assembly_informational_version or "",
        ),
    ]

    if request.emit_non_version_custom_attributes:
        for kind, value in (
            (AttributeKind.TITLE, request.assembly_title),
            (AttributeKind.PRODUCT, request.assembly_product),
            (AttributeKind.COMPANY, request.assembly_company),
            (AttributeKind.COPYRIGHT, request.assembly_copyright),
        ):
            if value:
                attributes.append((kind, value))

    return attributes


class GenerationDriver:
    """Generates version info source files for supported languages."""

    def __init__(
        self,
        generator_name: str = DEFAULT_GENERATOR_NAME,
        generator_version: str = __version__,
        key_source: Optional[KeySource] = None,
        registry: Optional[GeneratorRegistry] = None,
        line_ending: str = "\n",
    ):
        """
        Initialize the driver.

        Args:
            generator_name: Tool name recorded in the GeneratedCode attribute
            generator_version: Tool version recorded in the GeneratedCode attribute
            key_source: Provider of public key information, if any
            registry: Generator registry (defaults to the global registry)
            line_ending: Line terminator of the generated file
        """
        self.generator_name = generator_name
        self.generator_version = generator_version
        self.key_source = key_source
        self.registry = registry or get_registry()
        self.line_ending = line_ending

    def create_generator(self, request: GenerationRequest) -> Optional[CodeGenerator]:
        """Return a fresh generator for the request language, or None."""
        if not request.code_language or not self.registry.is_supported(
            request.code_language
        ):
            return None

        config = GeneratorConfig(
            generator_name=self.generator_name,
            generator_version=self.generator_version,
            namespace=request.this_assembly_namespace or None,
            line_ending=self.line_ending,
        )
        return self.registry.create_generator(request.code_language, config)

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate the version info file for a request.

        Args:
            request: Generation request

        Returns:
            GenerationResult. On an unsupported language the result is
            unsuccessful and carries no code.
        """
        generator = self.create_generator(request)
        if generator is None:
            message = (
                f"No generator available for language: {request.code_language}. "
                "No version info will be embedded into the assembly."
            )
            logger.error(message)
            return GenerationResult.error(message)

        fields, diagnostics = build_fields(request, self.key_source)

        try:
            code = self._emit(generator, request, fields)
        except (GeneratorError, TemplateError) as e:
            logger.error(f"Code generation failed: {e}")
            return GenerationResult.error(
                f"Code generation failed: {e}", exception=e, diagnostics=diagnostics
            )

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "field_count": len(fields) if request.emit_this_assembly_class else 0,
            "fields": [f.name for f in fields] if request.emit_this_assembly_class else [],
            "has_errors": any(d.severity == Severity.ERROR for d in diagnostics),
        }
        logger.debug(
            f"Generated {generator.language_name} code with {len(fields)} fields"
        )
        return GenerationResult(code, diagnostics, metadata)

    def build_code(self, request: GenerationRequest) -> Optional[str]:
        """Return the generated code, or None if no generator is available."""
        return self.generate(request).code

    def _emit(
        self,
        generator: CodeGenerator,
        request: GenerationRequest,
        fields: List[Field],
    ) -> str:
        generator.add_comment(FILE_HEADER_COMMENT)
        generator.add_blank_line()
        generator.add_analysis_suppressions()
        generator.add_blank_line()
        generator.emit_namespace_if_required(request.root_namespace or DEFAULT_NAMESPACE)

        generator.start_assembly_attributes()
        for kind, value in assembly_attributes(request):
            generator.declare_attribute(kind, value)
        generator.end_assembly_attributes()

        if request.emit_this_assembly_class:
            generator.start_this_assembly_class()
            for field in fields:
                generator.add_member(field)
            generator.end_this_assembly_class()

        return generator.format_code(generator.get_code())


def generate(
    request: GenerationRequest, key_source: Optional[KeySource] = None
) -> GenerationResult:
    """Generate with a default driver."""
    return GenerationDriver(key_source=key_source).generate(request)
