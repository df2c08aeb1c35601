from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.entities.schema import RecordSchema


class SchemaPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, schema: RecordSchema) -> None:
        self.console.print()
        self.console.print(self._build_table(schema))
        required = len(schema.required_fields())
        self.console.print(
            f"[bold]{len(schema)}[/bold] columns, [bold]{required}[/bold] required"
        )

    @staticmethod
    def _build_table(schema: RecordSchema) -> Table:
        table = Table(title=f"Schema: {schema.type_name}", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Column", style="bold")
        table.add_column("Field")
        table.add_column("Type")
        table.add_column("Required", justify="center")
        table.add_column("Format")
        for position, descriptor in enumerate(schema, start=1):
            value_type = str(descriptor.value_type)
            if descriptor.enum_type is not None:
                value_type = f"{value_type} ({descriptor.enum_type.__name__})"
            fmt = ""
            if descriptor.value_type.is_temporal:
                fmt = descriptor.date_format
            elif descriptor.value_type.is_numeric:
                fmt = descriptor.number_format
            table.add_row(
                str(position),
                escape(descriptor.column_name),
                descriptor.field_name,
                escape(value_type),
                "[green]yes[/green]" if descriptor.required else "no",
                escape(fmt),
            )
        return table
