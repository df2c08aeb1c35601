"""Integration tests for CLI commands.

Record types are written to a temporary module and imported by the
commands the same way a user's own models would be.
"""

import sys
from textwrap import dedent

from click.testing import CliRunner
import pytest

from autocsv.cli import app

MODELS_MODULE = "autocsv_cli_models"
MODELS_SOURCE = dedent(
    """
    from dataclasses import dataclass
    from datetime import date

    from autocsv import column


    @dataclass
    class Person:
        first_name: str | None = column("FirstName", required=True)
        last_name: str | None = column("LastName", required=True)
        birth_date: date | None = column("BirthDate", date_format="dd/MM/yyyy")
        salary: float | None = column("Salary", number_format="#,##0.00")


    @dataclass
    class Broken:
        values: list | None = None


    NOT_A_CLASS = 42
    """
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def models_module(tmp_path, monkeypatch):
    (tmp_path / f"{MODELS_MODULE}.py").write_text(MODELS_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, MODELS_MODULE, raising=False)
    return MODELS_MODULE


def write_people(tmp_path, text):
    path = tmp_path / "people.csv"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.integration
class TestSchemaCommand:
    """Integration tests for the schema command."""

    def test_schema_help(self, runner):
        result = runner.invoke(app, ["schema", "--help"])

        assert result.exit_code == 0
        assert "RECORD_TYPE" in result.output
        assert "--date-format" in result.output

    def test_schema_table(self, runner):
        result = runner.invoke(app, ["schema", f"{MODELS_MODULE}:Person"])

        assert result.exit_code == 0, result.output
        assert "Schema: Person" in result.output
        assert "BirthDate" in result.output
        assert "dd/MM/yyyy" in result.output
        assert "4 columns, 2 required" in result.output

    def test_invalid_record_type(self, runner):
        result = runner.invoke(app, ["schema", f"{MODELS_MODULE}:Broken"])

        assert result.exit_code == 1
        assert "Unsupported type" in result.output

    @pytest.mark.parametrize(
        ("target", "message"),
        [
            ("Person", "expected MODULE:CLASS"),
            ("no_such_module_xyz:Person", "cannot import module"),
            (f"{MODELS_MODULE}:Missing", "has no attribute"),
            (f"{MODELS_MODULE}:NOT_A_CLASS", "is not a class"),
        ],
    )
    def test_bad_record_type_argument(self, runner, target, message):
        result = runner.invoke(app, ["schema", target])

        assert result.exit_code == 2
        assert message in result.output


@pytest.mark.integration
class TestCheckCommand:
    """Integration tests for the check command."""

    def test_check_help(self, runner):
        result = runner.invoke(app, ["check", "--help"])

        assert result.exit_code == 0
        assert "CSV_FILE" in result.output
        assert "--strict" in result.output

    def test_valid_file(self, runner, tmp_path):
        source = write_people(
            tmp_path,
            "FirstName,LastName,BirthDate,Salary\n"
            'John,Doe,01/01/2000,"3,500.00"\n'
            "Jane,Roe,,\n",
        )

        result = runner.invoke(app, ["check", f"{MODELS_MODULE}:Person", str(source)])

        assert result.exit_code == 0, result.output
        assert "2 valid Person records" in result.output

    def test_unknown_column_warns(self, runner, tmp_path):
        source = write_people(tmp_path, "FirstName,LastName,Notes\nJohn,Doe,x\n")

        result = runner.invoke(app, ["check", f"{MODELS_MODULE}:Person", str(source)])

        assert result.exit_code == 0, result.output
        assert "Notes" in result.output
        assert "1 valid Person records" in result.output

    def test_unknown_column_fails_with_strict(self, runner, tmp_path):
        source = write_people(tmp_path, "FirstName,LastName,Notes\nJohn,Doe,x\n")

        result = runner.invoke(
            app, ["check", f"{MODELS_MODULE}:Person", str(source), "--strict"]
        )

        assert result.exit_code == 1
        assert "is not valid for Person" in result.output

    def test_bad_value(self, runner, tmp_path):
        source = write_people(
            tmp_path, "FirstName,LastName,Salary\nJohn,Doe,1.00\nJane,Roe,abc\n"
        )

        result = runner.invoke(app, ["check", f"{MODELS_MODULE}:Person", str(source)])

        assert result.exit_code == 1
        assert "'abc'" in result.output
        assert "is not valid for Person" in result.output

    def test_delimiter_option(self, runner, tmp_path):
        source = write_people(tmp_path, "FirstName;LastName\nJohn;Doe\n")

        result = runner.invoke(
            app,
            ["check", f"{MODELS_MODULE}:Person", str(source), "--delimiter", ";"],
        )

        assert result.exit_code == 0, result.output
        assert "1 valid Person records" in result.output

    def test_invalid_delimiter(self, runner, tmp_path):
        source = write_people(tmp_path, "FirstName,LastName\nJohn,Doe\n")

        result = runner.invoke(
            app,
            ["check", f"{MODELS_MODULE}:Person", str(source), "--delimiter", "::"],
        )

        assert result.exit_code == 2

    def test_config_file_is_used(self, runner, tmp_path):
        (tmp_path / "autocsv.toml").write_text('[csv]\ndelimiter = "|"\n')
        source = write_people(tmp_path, "FirstName|LastName\nJohn|Doe\n")

        result = runner.invoke(app, ["check", f"{MODELS_MODULE}:Person", str(source)])

        assert result.exit_code == 0, result.output

    def test_missing_csv_file(self, runner, tmp_path):
        result = runner.invoke(
            app, ["check", f"{MODELS_MODULE}:Person", str(tmp_path / "nope.csv")]
        )

        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_verbose_prints_statistics(self, runner, tmp_path):
        source = write_people(tmp_path, "FirstName,LastName\nJohn,Doe\n")

        result = runner.invoke(
            app, ["check", f"{MODELS_MODULE}:Person", str(source), "-v"]
        )

        assert result.exit_code == 0, result.output
        assert "Conversion Statistics" in result.output
