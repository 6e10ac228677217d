import click

from .commands.write import write_command


@click.group()
def app() -> None:
    pass


app.add_command(write_command, name="write")
__all__ = ["app"]
