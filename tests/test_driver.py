"""
Tests for the generation driver: emission order, determinism and failure
handling.
"""

from assemblyinfo.codegen.core.config import GenerationRequest
from assemblyinfo.codegen.core.fields import Severity
from assemblyinfo.codegen.core.generator import AttributeKind, GeneratorError
from assemblyinfo.codegen.driver import GenerationDriver, assembly_attributes, generate
from assemblyinfo.codegen.languages import CSharpGenerator
from assemblyinfo.codegen.registry import GeneratorRegistry
from assemblyinfo.keys import StrongNameKeySource

from conftest import additional, make_request


class TestAssemblyAttributes:
    def test_version_attributes_always(self):
        request = GenerationRequest(code_language="c#")
        assert assembly_attributes(request) == [
            (AttributeKind.VERSION, ""),
            (AttributeKind.FILE_VERSION, ""),
            (AttributeKind.INFORMATIONAL_VERSION, ""),
        ]

    def test_descriptive_order(self):
        request = make_request(
            emit_non_version_custom_attributes=True,
            assembly_title="T",
            assembly_product="P",
            assembly_company="Co",
            assembly_copyright="(c)",
        )
        kinds = [kind for kind, _ in assembly_attributes(request)][3:]
        assert kinds == [
            AttributeKind.TITLE,
            AttributeKind.PRODUCT,
            AttributeKind.COMPANY,
            AttributeKind.COPYRIGHT,
        ]


class TestGenerate:
    def test_deterministic(self, driver):
        request = make_request(
            additional_fields=(
                additional("Zeta", String="z"),
                additional("Alpha", Boolean="true"),
            )
        )
        first = driver.generate(request).code
        second = GenerationDriver(generator_version="1.0.0").generate(request).code
        assert first == second

    def test_unsupported_language(self, driver):
        result = driver.generate(make_request(code_language="cobol"))
        assert not result.success
        assert result.code is None
        assert "No generator available for language: cobol" in result.error_message
        assert driver.build_code(make_request(code_language="cobol")) is None

    def test_metadata(self, driver):
        result = driver.generate(make_request(code_language="vb"))
        assert result.metadata["language"] == "visualbasic"
        assert result.metadata["file_extension"] == ".vb"
        assert result.metadata["field_count"] == 8
        assert result.metadata["has_errors"] is False

    def test_diagnostics_do_not_fail(self, driver):
        request = make_request(
            additional_fields=(
                additional("Foo", String="a"),
                additional("Foo", String="b"),
                additional("Empty", String=""),
            )
        )
        result = driver.generate(request)
        assert result.success
        assert result.metadata["has_errors"] is True
        assert [e.field_name for e in result.errors] == ["Foo"]
        assert [w.field_name for w in result.warnings] == ["Empty"]
        assert result.code.count("internal const string Foo = ") == 1
        assert 'internal const string Foo = "a";' in result.code

    def test_bad_ticks_omitted(self, driver):
        result = driver.generate(make_request(git_commit_date_ticks="not-a-number"))
        assert result.success
        assert "GitCommitDate" not in result.code

    def test_generator_name(self):
        driver = GenerationDriver(generator_name="nbgv", generator_version="3.6")
        code = driver.generate(make_request()).code
        assert '[System.CodeDom.Compiler.GeneratedCode("nbgv","3.6")]' in code

    def test_crlf(self):
        driver = GenerationDriver(line_ending="\r\n")
        code = driver.generate(make_request()).code
        assert "\r\n" in code
        assert code.count("\n") == code.count("\r\n")

    def test_public_key_fields(self, driver, snk_file):
        driver.key_source = StrongNameKeySource()
        result = driver.generate(make_request(assembly_originator_key_file=str(snk_file)))
        assert "internal const string PublicKey = \"00240000" in result.code
        assert "internal const string PublicKeyToken = " in result.code

    def test_module_generate(self):
        result = generate(make_request(code_language="cs"))
        assert result.success
        assert result.code.startswith("//---")

    def test_diagnostic_severity_types(self, driver):
        result = driver.generate(make_request(additional_fields=(additional("1x", String="a"),)))
        assert result.diagnostics[0].severity == Severity.ERROR


class _BrokenStringGenerator(CSharpGenerator):
    def add_string_member(self, name: str, value: str) -> None:
        raise GeneratorError(f"cannot emit {name}")


class TestGenerationFailure:
    def test_emitter_error_aborts_with_diagnostics(self):
        registry = GeneratorRegistry()
        registry.register("broken", _BrokenStringGenerator)
        driver = GenerationDriver(generator_version="1.0.0", registry=registry)

        request = make_request(
            code_language="broken",
            additional_fields=(additional("Flag", Boolean="nope"),),
        )
        result = driver.generate(request)

        assert not result.success
        assert result.code is None
        assert "Code generation failed: cannot emit" in result.error_message
        assert isinstance(result.exception, GeneratorError)
        assert [e.field_name for e in result.errors] == ["Flag"]
        assert driver.build_code(request) is None
