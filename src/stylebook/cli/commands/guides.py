from pathlib import Path
from typing import Optional

import httpx
import typer

from stylebook.cli.config import get_api_key, get_api_url
from stylebook.guide.export import (
    DEFAULT_FILENAME,
    DownloadFile,
    filename_from_disposition,
    save_download,
)

app = typer.Typer(help="Style guide commands")


def get_headers() -> dict:
    return {"X-API-Key": get_api_key()}


def print_guide(guide: dict) -> None:
    typer.echo(f"ID:     {guide['id']}")
    active = guide.get("active_section_id")
    typer.echo(f"Active: {active or '-'}")

    sections = guide.get("sections", [])
    if not sections:
        typer.echo("No sections.")
        return

    typer.echo("")
    typer.echo(f"{'':<3} {'Section':<40} {'State':<8} {'Colors':<6}")
    typer.echo("-" * 60)
    for section in sections:
        marker = ">" if section["id"] == active else ""
        state = "open" if section["is_open"] else "closed"
        colors = section.get("colors")
        count = "" if colors is None else str(len(colors))
        typer.echo(f"{marker:<3} {section['id']:<40} {state:<8} {count:<6}")

    for section in sections:
        for color in section.get("colors") or []:
            tone = "dark" if color["is_dark"] else "light"
            typer.echo(f"    {color['color']}  {color['name']} ({tone})")


@app.command("add")
def add_guide(
    file_path: Path = typer.Argument(..., help="Path to the markdown style guide"),
):
    """Upload a style guide and print its sections."""
    if not file_path.exists():
        typer.echo(f"Error: File not found: {file_path}", err=True)
        raise typer.Exit(1)

    url = f"{get_api_url()}/guides"
    markdown = file_path.read_text(encoding="utf-8")
    response = httpx.post(url, headers=get_headers(), json={"markdown": markdown})

    if response.status_code != 201:
        typer.echo(f"Error: {response.text}", err=True)
        raise typer.Exit(1)

    guide = response.json()
    typer.echo(f"Guide created: {guide['id']}")
    print_guide(guide)


@app.command("show")
def show_guide(
    guide_id: str = typer.Argument(..., help="Guide ID"),
):
    """Show the sections of a guide and their state."""
    url = f"{get_api_url()}/guides/{guide_id}"
    response = httpx.get(url, headers=get_headers())

    if response.status_code != 200:
        typer.echo(f"Error: {response.text}", err=True)
        raise typer.Exit(1)

    print_guide(response.json())


def _section_action(guide_id: str, section_id: str, action: str) -> None:
    url = f"{get_api_url()}/guides/{guide_id}/sections/{section_id}/{action}"
    response = httpx.post(url, headers=get_headers())

    if response.status_code == 404:
        typer.echo("Error: Guide not found", err=True)
        raise typer.Exit(1)
    elif response.status_code != 200:
        typer.echo(f"Error: {response.text}", err=True)
        raise typer.Exit(1)

    print_guide(response.json())


@app.command("toggle")
def toggle_section(
    guide_id: str = typer.Argument(..., help="Guide ID"),
    section_id: str = typer.Argument(..., help="Section ID"),
):
    """Open or close a section."""
    _section_action(guide_id, section_id, "toggle")


@app.command("navigate")
def navigate_to_section(
    guide_id: str = typer.Argument(..., help="Guide ID"),
    section_id: str = typer.Argument(..., help="Section ID"),
):
    """Make a section active, opening it if needed."""
    _section_action(guide_id, section_id, "navigate")


@app.command("download")
def download_guide(
    guide_id: str = typer.Argument(..., help="Guide ID"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File or directory to save to"
    ),
    filename: Optional[str] = typer.Option(None, "--filename", help="Download file name"),
):
    """Save the original markdown of a guide."""
    url = f"{get_api_url()}/guides/{guide_id}/download"
    params = {"filename": filename} if filename else None
    response = httpx.get(url, headers=get_headers(), params=params)

    if response.status_code == 404:
        typer.echo("Error: Guide not found", err=True)
        raise typer.Exit(1)
    elif response.status_code != 200:
        typer.echo(f"Error: {response.text}", err=True)
        raise typer.Exit(1)

    download = DownloadFile(
        filename=filename or _filename_from_headers(response.headers),
        content=response.content,
    )
    try:
        path = save_download(download, output or Path.cwd())
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Saved to {path}")


def _filename_from_headers(headers) -> str:
    disposition = headers.get("content-disposition", "")
    return filename_from_disposition(disposition) or DEFAULT_FILENAME


@app.command("remove")
def remove_guide(
    guide_id: str = typer.Argument(..., help="Guide ID"),
):
    """Remove a guide."""
    url = f"{get_api_url()}/guides/{guide_id}"
    response = httpx.delete(url, headers=get_headers())

    if response.status_code == 204:
        typer.echo("Guide removed.")
    elif response.status_code == 404:
        typer.echo("Error: Guide not found", err=True)
        raise typer.Exit(1)
    else:
        typer.echo(f"Error: {response.text}", err=True)
        raise typer.Exit(1)
