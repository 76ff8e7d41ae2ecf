from pathlib import Path

import typer

from stylebook.guide.parser import SectionParser
from stylebook.guide.store import SectionStore
from stylebook.render.content import strip_heading
from stylebook.render.swatches import format_swatch


def inspect(
    file_path: Path = typer.Argument(..., help="Path to a markdown style guide"),
    all_colors: bool = typer.Option(
        False, "--all-colors", help="Capture every color on a line, not just the first"
    ),
):
    """Show the sections and color swatches of a local style guide."""
    if not file_path.exists():
        typer.echo(f"Error: File not found: {file_path}", err=True)
        raise typer.Exit(1)

    store = SectionStore(parser=SectionParser(multi_color_per_line=all_colors))
    store.load(file_path.read_text(encoding="utf-8"))

    if not store.sections:
        typer.echo("No sections found.")
        return

    for position, section in enumerate(store.sections, start=1):
        typer.echo(typer.style(f"{position}. {section.title}", bold=True) + f"  [{section.id}]")

        colors = store.colors_for(section.id)
        if colors:
            for entry in colors:
                typer.echo(f"   {format_swatch(entry)}")
        elif colors is not None:
            typer.echo("   (no colors found)")

        lines = [line for line in strip_heading(section.content).split("\n") if line.strip()]
        typer.echo(f"   {len(lines)} lines of content")
