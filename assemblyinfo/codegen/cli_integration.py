"""
CLI integration for code generation functionality.

Provides the command-line interface that writes a version info source file.
"""

import argparse
import dataclasses
import re
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from .. import __version__
from ..keys import StrongNameKeySource
from ..logging_config import get_logger, setup_logging
from ..utils import parse_date_to_ticks, write_text_with_retry
from . import (
    AdditionalField,
    ConfigError,
    GenerationDriver,
    GenerationResult,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_request,
)
from .core.config import DEFAULT_GENERATOR_NAME

logger = get_logger(__name__)

# NAME:KIND=VALUE where a trailing "!" on String means emit-if-empty
_FIELD_PATTERN = re.compile(r"^(?P<name>[^:=]+):(?P<kind>String!?|Boolean|Ticks)=(?P<value>.*)$")

# Rich lexer names for highlighted stdout output
_SYNTAX_LEXERS = {"csharp": "csharp", "visualbasic": "vbnet", "fsharp": "fsharp"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="assemblyinfo",
        description="Generate assembly version info source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  assemblyinfo -l c# --assembly-version 1.2 -o obj/AssemblyVersion.cs
  assemblyinfo -l vb --config version.json
  assemblyinfo -l f# --git-commit-date "2021-01-01T00:00:00Z" --field Agent:String=ci-01
  assemblyinfo --list-languages
  assemblyinfo --language-info fsharp
        """.strip(),
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Core generation options
    parser.add_argument("--language", "-l", help="Target language for code generation")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Request file path (JSON)")

    version_group = parser.add_argument_group("version information")
    version_group.add_argument("--assembly-version", metavar="VERSION")
    version_group.add_argument("--assembly-file-version", metavar="VERSION")
    version_group.add_argument("--assembly-informational-version", metavar="VERSION")
    version_group.add_argument(
        "--prerelease-version",
        metavar="SUFFIX",
        help="Prerelease suffix; marks the build as a prerelease when non-empty",
    )
    version_group.add_argument(
        "--public-release",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Mark the build as a public release",
    )
    version_group.add_argument("--git-commit-id", metavar="SHA")

    commit_date = version_group.add_mutually_exclusive_group()
    commit_date.add_argument(
        "--git-commit-date-ticks", metavar="TICKS", help="Commit date as .NET ticks"
    )
    commit_date.add_argument(
        "--git-commit-date", metavar="DATE", help="Commit date (ISO or human readable)"
    )

    author_date = version_group.add_mutually_exclusive_group()
    author_date.add_argument(
        "--git-commit-author-date-ticks",
        metavar="TICKS",
        help="Author date as .NET ticks",
    )
    author_date.add_argument(
        "--git-commit-author-date",
        metavar="DATE",
        help="Author date (ISO or human readable)",
    )

    assembly_group = parser.add_argument_group("assembly information")
    assembly_group.add_argument("--assembly-name", metavar="NAME")
    assembly_group.add_argument("--assembly-title", metavar="TEXT")
    assembly_group.add_argument("--assembly-product", metavar="TEXT")
    assembly_group.add_argument("--assembly-company", metavar="TEXT")
    assembly_group.add_argument("--assembly-copyright", metavar="TEXT")
    assembly_group.add_argument("--assembly-configuration", metavar="NAME")
    assembly_group.add_argument("--root-namespace", metavar="NAMESPACE")
    assembly_group.add_argument(
        "--this-assembly-namespace",
        metavar="NAMESPACE",
        help="Namespace for the ThisAssembly class",
    )
    assembly_group.add_argument("--key-file", metavar="FILE", help="Strong name key (.snk)")
    assembly_group.add_argument("--key-container", metavar="NAME")

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--emit-non-version-attributes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also declare title, product, company and copyright attributes",
    )
    output_group.add_argument(
        "--no-this-assembly-class",
        action="store_true",
        help="Don't generate the ThisAssembly class",
    )
    output_group.add_argument(
        "--field",
        "-f",
        action="append",
        default=[],
        metavar="NAME:KIND=VALUE",
        help="Additional ThisAssembly field; KIND is String, String!, Boolean or Ticks",
    )
    output_group.add_argument(
        "--generator-name",
        default=DEFAULT_GENERATOR_NAME,
        help="Tool name recorded in the GeneratedCode attribute",
    )
    output_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail when any field is rejected",
    )
    output_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    output_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        return _generate_and_output(args)

    except (CLIError, ConfigError) as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except OSError as e:
        err_console.print(f"[red]✗ I/O error:[/red] {e}")
        return 1


def parse_field_option(text: str) -> AdditionalField:
    """
    Parse a ``NAME:KIND=VALUE`` option into an additional field.

    Raises:
        CLIError: If the option is malformed
    """
    match = _FIELD_PATTERN.match(text)
    if not match:
        raise CLIError(
            f"Invalid --field '{text}'. Expected NAME:KIND=VALUE "
            "with KIND one of String, String!, Boolean, Ticks"
        )

    kind = match.group("kind")
    metadata = {}
    if kind == "String!":
        kind = "String"
        metadata["EmitIfEmpty"] = "true"
    metadata[kind] = match.group("value")
    return AdditionalField(name=match.group("name").strip(), metadata=metadata)


def _resolve_ticks(ticks: Optional[str], date_text: Optional[str], option: str):
    if date_text is None:
        return ticks
    parsed = parse_date_to_ticks(date_text)
    if parsed is None:
        raise CLIError(f"Could not parse {option} value: {date_text!r}")
    return str(parsed)


def build_request(args: argparse.Namespace):
    """Build the generation request from the config file and CLI options."""
    overrides = {
        "code_language": args.language,
        "output_file": args.output,
        "assembly_version": args.assembly_version,
        "assembly_file_version": args.assembly_file_version,
        "assembly_informational_version": args.assembly_informational_version,
        "prerelease_version": args.prerelease_version,
        "public_release": args.public_release,
        "git_commit_id": args.git_commit_id,
        "git_commit_date_ticks": _resolve_ticks(
            args.git_commit_date_ticks, args.git_commit_date, "--git-commit-date"
        ),
        "git_commit_author_date_ticks": _resolve_ticks(
            args.git_commit_author_date_ticks,
            args.git_commit_author_date,
            "--git-commit-author-date",
        ),
        "assembly_name": args.assembly_name,
        "assembly_title": args.assembly_title,
        "assembly_product": args.assembly_product,
        "assembly_company": args.assembly_company,
        "assembly_copyright": args.assembly_copyright,
        "assembly_configuration": args.assembly_configuration,
        "root_namespace": args.root_namespace,
        "this_assembly_namespace": args.this_assembly_namespace,
        "assembly_originator_key_file": args.key_file,
        "assembly_key_container_name": args.key_container,
        "emit_non_version_custom_attributes": args.emit_non_version_attributes,
    }
    if args.no_this_assembly_class:
        overrides["emit_this_assembly_class"] = False

    if not args.language and not args.config:
        raise CLIError("--language is required for code generation")

    request = load_request(custom_config=overrides, config_file=args.config)

    cli_fields = tuple(parse_field_option(text) for text in args.field)
    if cli_fields:
        request = dataclasses.replace(
            request, additional_fields=request.additional_fields + cli_fields
        )

    return request


def _generate_and_output(args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    request = build_request(args)
    logger.debug(f"Generation request: {request}")

    if not is_language_supported(request.code_language):
        err_console.print(
            f"[red]✗ No generator available for language '{request.code_language}'[/red]"
        )
        err_console.print(
            f"[dim]Supported languages: {', '.join(list_supported_languages())}[/dim]"
        )
        return 1

    driver = GenerationDriver(
        generator_name=args.generator_name,
        key_source=StrongNameKeySource(),
    )
    result = driver.generate(request)

    if not result.success:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            err_console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    _print_diagnostics(result)

    if args.strict and result.errors:
        err_console.print(
            f"[red]✗ {len(result.errors)} field(s) rejected; nothing written (--strict)[/red]"
        )
        return 1

    if request.output_file:
        output_path = write_text_with_retry(request.output_file, result.code)
        err_console.print(
            f"[green]✓[/green] Generated {result.metadata['language']} code saved to "
            f"[cyan]{output_path}[/cyan]"
        )
    elif sys.stdout.isatty():
        lexer = _SYNTAX_LEXERS.get(result.metadata["language"], "text")
        console.print(Syntax(result.code, lexer, theme="monokai"))
    else:
        # Piped output must be the exact file contents
        sys.stdout.write(result.code)
        sys.stdout.flush()

    if args.verbose and result.metadata:
        _print_metadata(result)

    return 0


def _print_diagnostics(result: GenerationResult) -> None:
    if result.warnings:
        err_console.print("[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")

    if result.errors:
        err_console.print("[red]✗ Rejected fields:[/red]")
        for error in result.errors:
            err_console.print(f"  [red]•[/red] {error}")


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    err_console.print()
    err_console.print(metadata_table)


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] assemblyinfo --language [cyan]LANGUAGE[/cyan] "
            "--assembly-version [dim]1.0[/dim] -o [dim]FILE[/dim]\n"
            "[bold]Info:[/bold] assemblyinfo --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not is_language_supported(language):
        err_console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        err_console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name']} generator", border_style="green")
    )

    examples_text = f"""Print to stdout:
[cyan]assemblyinfo -l {language} --assembly-version 1.0[/cyan]

Generate to file:
[cyan]assemblyinfo -l {language} --config version.json -o AssemblyVersion{info['file_extension']}[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
