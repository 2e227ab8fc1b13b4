"""
C# code generator implementation.

Generates assembly attributes and an ``internal static partial class
ThisAssembly`` holding the version constants.
"""

from pathlib import Path
from typing import Optional

from ...core.config import GeneratorConfig
from ...core.generator import (
    AttributeKind,
    CodeGenerator,
    SUPPRESSED_ANALYSIS_WARNINGS,
)
from ...core.naming import NameSanitizer
from .naming import create_csharp_sanitizer, csharp_bool_literal, csharp_string_literal

INDENT = "    "


class CSharpGenerator(CodeGenerator):
    """Code generator for C#."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_csharp_sanitizer()

    def add_comment(self, comment: str) -> None:
        self._add_code_comment(comment, "//")

    def add_analysis_suppressions(self) -> None:
        self._append_line(
            f"#pragma warning disable {', '.join(SUPPRESSED_ANALYSIS_WARNINGS)}"
        )

    def declare_attribute(self, kind: AttributeKind, value: str) -> None:
        self._append_line(
            f"[assembly: {kind.type_name}({csharp_string_literal(value)})]"
        )

    def start_this_assembly_class(self) -> None:
        context = self._class_template_context(
            generator_name=csharp_string_literal(self.config.generator_name),
            generator_version=csharp_string_literal(self.config.generator_version),
        )
        self._append_block(self.render_template("this_assembly.cs.j2", context))

    def add_string_member(self, name: str, value: str) -> None:
        self._append_line(
            f"{INDENT}internal const string {name} = {csharp_string_literal(value)};"
        )

    def add_boolean_member(self, name: str, value: bool) -> None:
        self._append_line(
            f"{INDENT}internal const bool {name} = {csharp_bool_literal(value)};"
        )

    def add_timestamp_member(self, name: str, ticks: int) -> None:
        self._append_line(
            f"{INDENT}internal static readonly System.DateTime {name} = "
            f"new System.DateTime({ticks}L, System.DateTimeKind.Utc);"
        )

    def end_this_assembly_class(self) -> None:
        self._append_line("}")
        if self.namespace:
            self._append_line("}")


def create_csharp_generator(config: Optional[GeneratorConfig] = None) -> CSharpGenerator:
    """Create a C# generator with default configuration."""
    return CSharpGenerator(config)
