"""
F# code generator implementation.

F# needs a namespace and top-level executable code, so the attribute and
class sections are each closed by a ``do()`` statement.
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
from .naming import create_fsharp_sanitizer, fsharp_bool_literal, fsharp_string_literal

INDENT = "  "
DEFAULT_NAMESPACE = "AssemblyInfo"


class FSharpGenerator(CodeGenerator):
    """Code generator for F#."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "fsharp"

    @property
    def file_extension(self) -> str:
        """Return F# file extension."""
        return ".fs"

    def get_template_directory(self) -> Optional[Path]:
        """Return the F# templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_fsharp_sanitizer()

    def add_comment(self, comment: str) -> None:
        self._add_code_comment(comment, "//")

    def add_analysis_suppressions(self) -> None:
        codes = " ".join(f'"{code}"' for code in SUPPRESSED_ANALYSIS_WARNINGS)
        self._append_line(f"#nowarn {codes}")

    def emit_namespace_if_required(self, default_namespace: str) -> None:
        self._append_line(
            f"namespace {self.namespace or default_namespace or DEFAULT_NAMESPACE}"
        )

    def declare_attribute(self, kind: AttributeKind, value: str) -> None:
        self._append_line(
            f"[<assembly: {kind.type_name}({fsharp_string_literal(value)})>]"
        )

    def end_assembly_attributes(self) -> None:
        self._append_line("do()")

    def start_this_assembly_class(self) -> None:
        context = self._class_template_context(
            generator_name=fsharp_string_literal(self.config.generator_name),
            generator_version=fsharp_string_literal(self.config.generator_version),
        )
        self._append_block(self.render_template("this_assembly.fs.j2", context))

    def add_string_member(self, name: str, value: str) -> None:
        self._append_line(
            f"{INDENT}static member internal {name} = {fsharp_string_literal(value)}"
        )

    def add_boolean_member(self, name: str, value: bool) -> None:
        self._append_line(
            f"{INDENT}static member internal {name} = {fsharp_bool_literal(value)}"
        )

    def add_timestamp_member(self, name: str, ticks: int) -> None:
        self._append_line(
            f"{INDENT}static member internal {name} = "
            f"new System.DateTime({ticks}L, System.DateTimeKind.Utc)"
        )

    def end_this_assembly_class(self) -> None:
        self._append_line("do()")


def create_fsharp_generator(config: Optional[GeneratorConfig] = None) -> FSharpGenerator:
    """Create an F# generator with default configuration."""
    return FSharpGenerator(config)
