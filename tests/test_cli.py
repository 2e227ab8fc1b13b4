"""
End-to-end tests for the command line, run in-process through main().
"""

import json
from pathlib import Path

import pytest

from assemblyinfo.codegen.cli_integration import CLIError, main, parse_field_option
from assemblyinfo.codegen.core.config import AdditionalField

from conftest import NEW_YEAR_2021_TICKS


class TestParseFieldOption:
    def test_string(self):
        assert parse_field_option("Agent:String=ci=01") == AdditionalField(
            "Agent", {"String": "ci=01"}
        )

    def test_emit_if_empty(self):
        assert parse_field_option("Empty:String!=") == AdditionalField(
            "Empty", {"EmitIfEmpty": "true", "String": ""}
        )

    def test_boolean(self):
        assert parse_field_option("Flag:Boolean=true").metadata == {"Boolean": "true"}

    @pytest.mark.parametrize("text", ["Agent", "Agent=x", "Agent:Number=1"])
    def test_malformed(self, text):
        with pytest.raises(CLIError):
            parse_field_option(text)


class TestGenerate:
    def test_writes_file(self, tmp_path: Path):
        output = tmp_path / "obj" / "AssemblyVersion.cs"
        code = main(
            [
                "-l", "c#",
                "--assembly-version", "1.2",
                "--git-commit-date", "2021-01-01T00:00:00Z",
                "--field", "Agent:String=ci-01",
                "-o", str(output),
            ]
        )
        assert code == 0
        text = output.read_text(encoding="utf-8")
        assert '[assembly: System.Reflection.AssemblyVersionAttribute("1.2")]' in text
        assert f"new System.DateTime({NEW_YEAR_2021_TICKS}L" in text
        assert '    internal const string Agent = "ci-01";' in text

    def test_stdout_is_exact(self, tmp_path: Path, capsys):
        output = tmp_path / "a.fs"
        assert main(["-l", "fsharp", "--assembly-version", "2.0", "-o", str(output)]) == 0
        capsys.readouterr()

        assert main(["-l", "fsharp", "--assembly-version", "2.0"]) == 0
        assert capsys.readouterr().out == output.read_text(encoding="utf-8")

    def test_config_file(self, tmp_path: Path):
        config = tmp_path / "version.json"
        config.write_text(
            json.dumps(
                {
                    "code_language": "vb",
                    "assembly_version": "3.0",
                    "additional_fields": [{"name": "Agent", "String": "file"}],
                }
            )
        )
        output = tmp_path / "a.vb"
        code = main(
            ["--config", str(config), "--field", "Extra:Boolean=true", "-o", str(output)]
        )
        assert code == 0
        text = output.read_text(encoding="utf-8")
        assert '<Assembly: System.Reflection.AssemblyVersionAttribute("3.0")>' in text
        assert '    Friend Const Agent As String = "file"' in text
        assert "    Friend Const Extra As Boolean = True" in text

    def test_flags_override_config_file(self, tmp_path: Path):
        config = tmp_path / "version.json"
        config.write_text(
            json.dumps(
                {
                    "code_language": "c#",
                    "public_release": True,
                    "emit_non_version_custom_attributes": True,
                    "assembly_title": "Widgets",
                }
            )
        )
        output = tmp_path / "a.cs"
        code = main(
            [
                "--config", str(config),
                "--no-public-release",
                "--no-emit-non-version-attributes",
                "-o", str(output),
            ]
        )
        assert code == 0
        text = output.read_text(encoding="utf-8")
        assert "internal const bool IsPublicRelease = false;" in text
        assert "AssemblyTitleAttribute" not in text

    def test_config_file_flags_kept_without_override(self, tmp_path: Path):
        config = tmp_path / "version.json"
        config.write_text(json.dumps({"code_language": "c#", "public_release": True}))
        output = tmp_path / "a.cs"
        assert main(["--config", str(config), "-o", str(output)]) == 0
        assert "internal const bool IsPublicRelease = true;" in output.read_text()

    def test_no_this_assembly_class(self, tmp_path: Path):
        output = tmp_path / "a.cs"
        assert main(["-l", "cs", "--no-this-assembly-class", "-o", str(output)]) == 0
        assert "ThisAssembly" not in output.read_text()

    def test_unsupported_language(self, tmp_path: Path, capsys):
        output = tmp_path / "a.cob"
        assert main(["-l", "cobol", "-o", str(output)]) == 1
        assert not output.exists()
        assert "No generator available" in capsys.readouterr().err

    def test_language_required(self, capsys):
        assert main(["--assembly-version", "1.0"]) == 1
        assert "--language is required" in capsys.readouterr().err

    def test_bad_date(self, capsys):
        assert main(["-l", "c#", "--git-commit-date", "qwertyuiop"]) == 1
        assert "Could not parse" in capsys.readouterr().err

    def test_rejected_field_still_succeeds(self, tmp_path: Path, capsys):
        output = tmp_path / "a.cs"
        code = main(["-l", "c#", "--field", "Flag:Boolean=maybe", "-o", str(output)])
        assert code == 0
        assert output.exists()
        assert "Flag" in capsys.readouterr().err

    def test_strict(self, tmp_path: Path):
        output = tmp_path / "a.cs"
        code = main(
            ["-l", "c#", "--strict", "--field", "Flag:Boolean=maybe", "-o", str(output)]
        )
        assert code == 1
        assert not output.exists()


class TestInformation:
    def test_list_languages(self, capsys):
        assert main(["--list-languages"]) == 0
        out = capsys.readouterr().out
        assert "csharp" in out
        assert "visualbasic" in out
        assert "fsharp" in out

    def test_language_info(self, capsys):
        assert main(["--language-info", "vb"]) == 0
        assert ".vb" in capsys.readouterr().out

    def test_language_info_unknown(self, capsys):
        assert main(["--language-info", "cobol"]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
