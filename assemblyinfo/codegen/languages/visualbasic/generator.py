"""
Visual Basic code generator implementation.

Generates assembly attributes and a ``Partial Friend NotInheritable Class
ThisAssembly`` holding the version constants.
"""

from pathlib import Path
from typing import Optional

from ...core.config import GeneratorConfig
from ...core.generator import (
    AttributeKind,
    CodeGenerator,
    EXCLUDE_FROM_COVERAGE_DEFINES,
    GENERATED_CODE_DEFINES,
    SUPPRESSED_ANALYSIS_WARNINGS,
)
from ...core.naming import NameSanitizer
from .naming import create_vb_sanitizer, vb_bool_literal, vb_string_literal

INDENT = "    "


def vb_condition(defines: str) -> str:
    """Translate a ``A || B`` define expression to ``A Or B``."""
    return " Or ".join(part.strip() for part in defines.split("||"))


class VisualBasicGenerator(CodeGenerator):
    """Code generator for Visual Basic."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "visualbasic"

    @property
    def file_extension(self) -> str:
        """Return Visual Basic file extension."""
        return ".vb"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Visual Basic templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_vb_sanitizer()

    def add_comment(self, comment: str) -> None:
        self._add_code_comment(comment, "'")

    def add_analysis_suppressions(self) -> None:
        self._append_line(
            f"#Disable Warning {', '.join(SUPPRESSED_ANALYSIS_WARNINGS)}"
        )

    def declare_attribute(self, kind: AttributeKind, value: str) -> None:
        self._append_line(f"<Assembly: {kind.type_name}({vb_string_literal(value)})>")

    def start_this_assembly_class(self) -> None:
        # The coverage defines are a subset of the generated-code defines,
        # so three branches cover every combination of marker attributes.
        context = self._class_template_context(
            generated_code_defines=vb_condition(GENERATED_CODE_DEFINES),
            coverage_defines=vb_condition(EXCLUDE_FROM_COVERAGE_DEFINES),
            generator_name=vb_string_literal(self.config.generator_name),
            generator_version=vb_string_literal(self.config.generator_version),
        )
        self._append_block(self.render_template("this_assembly.vb.j2", context))

    def add_string_member(self, name: str, value: str) -> None:
        self._append_line(
            f"{INDENT}Friend Const {name} As String = {vb_string_literal(value)}"
        )

    def add_boolean_member(self, name: str, value: bool) -> None:
        self._append_line(
            f"{INDENT}Friend Const {name} As Boolean = {vb_bool_literal(value)}"
        )

    def add_timestamp_member(self, name: str, ticks: int) -> None:
        self._append_line(
            f"{INDENT}Friend Shared ReadOnly {name} As System.DateTime = "
            f"New System.DateTime({ticks}L, System.DateTimeKind.Utc)"
        )

    def end_this_assembly_class(self) -> None:
        self._append_line("End Class")
        if self.namespace:
            self._append_line("End Namespace")


def create_vb_generator(config: Optional[GeneratorConfig] = None) -> VisualBasicGenerator:
    """Create a Visual Basic generator with default configuration."""
    return VisualBasicGenerator(config)
