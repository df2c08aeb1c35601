import click

from .commands.check import check_command
from .commands.schema import schema_command


@click.group()
def app() -> None:
    pass


app.add_command(schema_command, name="schema")
app.add_command(check_command, name="check")
__all__ = ["app"]
