"""
Base generator interface for all code generation targets.

Defines the emission calls that every language generator implements.
The driver issues them in a fixed order, so all languages produce
structurally parallel files for the same request.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig
from .fields import Field, FieldError, FieldType, Severity
from .naming import NameSanitizer
from .templates import TemplateEngine, create_template_engine

FILE_HEADER_COMMENT = """------------------------------------------------------------------------------
 <auto-generated>
     This code was generated by a tool.

     Changes to this file may cause incorrect behavior and will be lost if
     the code is regenerated.
 </auto-generated>
------------------------------------------------------------------------------
"""

# The GeneratedCode attribute does not exist on every target framework
GENERATED_CODE_DEFINES = "NETSTANDARD || NETFRAMEWORK || NETCOREAPP"
EXCLUDE_FROM_COVERAGE_DEFINES = (
    "NETFRAMEWORK || NETCOREAPP || NETSTANDARD2_0 || NETSTANDARD2_1"
)

# Informational versions such as "1.2.3-beta+abc" fail CA2243
SUPPRESSED_ANALYSIS_WARNINGS = ("CA2243",)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class AttributeKind(Enum):
    """Assembly-level attributes, by fully qualified type name."""

    VERSION = "System.Reflection.AssemblyVersionAttribute"
    FILE_VERSION = "System.Reflection.AssemblyFileVersionAttribute"
    INFORMATIONAL_VERSION = "System.Reflection.AssemblyInformationalVersionAttribute"
    TITLE = "System.Reflection.AssemblyTitleAttribute"
    PRODUCT = "System.Reflection.AssemblyProductAttribute"
    COMPANY = "System.Reflection.AssemblyCompanyAttribute"
    COPYRIGHT = "System.Reflection.AssemblyCopyrightAttribute"

    @property
    def type_name(self) -> str:
        return self.value


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._lines: List[str] = []
        self._template_engine = None
        self._setup_templates()
        self.sanitizer = self.create_sanitizer()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Returns:
            Path to template directory or None
        """
        return None

    def create_sanitizer(self) -> NameSanitizer:
        """Return the member name sanitizer for this language."""
        return NameSanitizer()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def namespace(self) -> Optional[str]:
        """Explicit namespace for the ThisAssembly class, if any."""
        return self.config.namespace or None

    # Emission calls, in the order the driver issues them

    @abstractmethod
    def add_comment(self, comment: str) -> None:
        """Emit ``comment`` as line comments."""
        pass

    def add_blank_line(self) -> None:
        self._append_line()

    @abstractmethod
    def add_analysis_suppressions(self) -> None:
        """Emit this language's suppression of SUPPRESSED_ANALYSIS_WARNINGS."""
        pass

    def emit_namespace_if_required(self, default_namespace: str) -> None:
        """
        Give languages that require a namespace a chance to emit one.

        Args:
            default_namespace: Namespace to use when none is configured
        """
        pass

    def start_assembly_attributes(self) -> None:
        pass

    @abstractmethod
    def declare_attribute(self, kind: AttributeKind, value: str) -> None:
        """Emit an assembly-level attribute with a single string argument."""
        pass

    def end_assembly_attributes(self) -> None:
        pass

    @abstractmethod
    def start_this_assembly_class(self) -> None:
        pass

    def add_member(self, field: Field) -> None:
        """
        Emit one ThisAssembly member for ``field``.

        Raises:
            GeneratorError: If the field value does not match its type
        """
        name = self.sanitizer.sanitize_name(field.name)

        if field.type == FieldType.STRING:
            if field.value is not None and not isinstance(field.value, str):
                raise GeneratorError(f"Field {field.name} is not a string")
            self.add_string_member(name, field.value or "")
        elif field.type == FieldType.BOOLEAN:
            if not isinstance(field.value, bool):
                raise GeneratorError(f"Field {field.name} is not a boolean")
            self.add_boolean_member(name, field.value)
        elif field.type == FieldType.TIMESTAMP:
            if isinstance(field.value, bool) or not isinstance(field.value, int):
                raise GeneratorError(f"Field {field.name} is not a tick count")
            self.add_timestamp_member(name, field.value)
        else:
            raise GeneratorError(
                f"No {self.language_name} emitter for field type {field.type!r} "
                f"of field {field.name}"
            )

    @abstractmethod
    def add_string_member(self, name: str, value: str) -> None:
        pass

    @abstractmethod
    def add_boolean_member(self, name: str, value: bool) -> None:
        pass

    @abstractmethod
    def add_timestamp_member(self, name: str, ticks: int) -> None:
        pass

    @abstractmethod
    def end_this_assembly_class(self) -> None:
        pass

    def get_code(self) -> str:
        """Return the accumulated code."""
        line_ending = self.config.line_ending
        return line_ending.join(self._lines) + line_ending if self._lines else ""

    # Helpers for subclasses

    def _append_line(self, line: str = "") -> None:
        self._lines.append(line)

    def _append_block(self, block: str) -> None:
        """Append a multi-line block, such as a rendered template."""
        self._lines.extend(block.splitlines())

    def _add_code_comment(self, comment: str, token: str) -> None:
        for line in comment.splitlines():
            self._append_line(f"{token}{line}")

    def _class_template_context(self, **extra: Any) -> Dict[str, Any]:
        """Template variables shared by the ThisAssembly class templates."""
        context = {
            "namespace": self.namespace,
            "generated_code_defines": GENERATED_CODE_DEFINES,
            "coverage_defines": EXCLUDE_FROM_COVERAGE_DEFINES,
            "generator_name": self.config.generator_name,
            "generator_version": self.config.generator_version,
        }
        context.update(extra)
        return context

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        line_ending = self.config.line_ending
        lines = [line.rstrip() for line in code.split(line_ending)]
        return line_ending.join(lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: Optional[str],
        diagnostics: List[FieldError] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            diagnostics: Per-field problems found while building fields
            metadata: Additional metadata about generation
        """
        self.code = code
        self.diagnostics = diagnostics or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def errors(self) -> List[FieldError]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[FieldError]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @classmethod
    def error(
        cls,
        message: str,
        exception: Exception = None,
        diagnostics: List[FieldError] = None,
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code=None, diagnostics=diagnostics)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result
