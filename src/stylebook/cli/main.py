from typing import Optional

import typer

from stylebook import __version__
from stylebook.cli.commands import guides
from stylebook.cli.commands.inspect import inspect as inspect_cmd

app = typer.Typer(
    name="stylebook",
    help="stylebook - Browse AI-generated style guides section by section",
)

app.add_typer(guides.app, name="guides")
app.command("inspect")(inspect_cmd)


def version_callback(value: bool):
    if value:
        print(f"stylebook version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    pass


if __name__ == "__main__":
    app()
