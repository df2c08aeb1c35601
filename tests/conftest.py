from dataclasses import dataclass
from datetime import date
from enum import Enum
from io import StringIO

import pytest
from rich.console import Console

from autocsv import column
from autocsv.application.converter import ConverterDependencies, CSVConverter
from autocsv.infrastructure.io import CSVRowReader, CSVRowWriter, FrameAdapter
from autocsv.infrastructure.logging import ConsoleLogger, LogLevel


class Department(Enum):
    SALES = "sales"
    ENGINEERING = "engineering"


@dataclass
class Person:
    first_name: str | None = column("FirstName", required=True)
    last_name: str | None = column("LastName", required=True)
    birth_date: date | None = column("BirthDate", date_format="dd/MM/yyyy")
    salary: float | None = column("Salary", number_format="#,##0.00")
    internal_note: str | None = column(ignore=True)


@dataclass
class Employee:
    employee_id: int | None = column("Employee ID", required=True)
    name: str | None = column("Name", required=True)
    active: bool = column("Active", default=False)
    department: Department | None = column("Department")
    hired: date | None = column("Hired")
    rating: float | None = None


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests independent of AUTOCSV_* variables and a local autocsv.toml."""
    for name in (
        "AUTOCSV_DATE_FORMAT",
        "AUTOCSV_DELIMITER",
        "AUTOCSV_QUOTE_CHAR",
        "AUTOCSV_ESCAPE_CHAR",
        "AUTOCSV_ENCODING",
        "AUTOCSV_STRICT_HEADERS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def person_type() -> type[Person]:
    return Person


@pytest.fixture
def employee_type() -> type[Employee]:
    return Employee


@pytest.fixture
def department_type() -> type[Department]:
    return Department


@pytest.fixture
def log_buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def logger(log_buffer: StringIO) -> ConsoleLogger:
    console = Console(file=log_buffer, force_terminal=False, width=200)
    return ConsoleLogger(console=console, verbosity=LogLevel.DEBUG)


@pytest.fixture
def converter(logger: ConsoleLogger) -> CSVConverter:
    dependencies = ConverterDependencies(
        logger=logger,
        row_reader=CSVRowReader(),
        row_writer=CSVRowWriter(),
        frame_adapter=FrameAdapter(),
    )
    return CSVConverter(dependencies)
