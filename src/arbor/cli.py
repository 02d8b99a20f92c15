import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from arbor import __version__
from arbor.config import load_parser_config
from arbor.exceptions import ArborError, UnsupportedLanguageError
from arbor.normalizer import count_nodes
from arbor.summary import summarize_source

app = typer.Typer(
    help="Arbor - structured AST extraction for source files",
    no_args_is_help=True,
)

console = Console()


def _read_source(file_path: Path) -> str:
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


@app.command()
def parse(
    file_path: Path,
    language: str = typer.Option("python", "--language", "-l", help="Language tag of the file"),
):
    """Parse a file and report syntax diagnostics.

    Args:
        file_path: Path to the source file
    """
    try:
        source = _read_source(file_path)
        summary = summarize_source(source, language, load_parser_config())
    except (FileNotFoundError, UnsupportedLanguageError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except (ArborError, OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    result = summary.result
    console.print(f"{file_path}: {count_nodes(result.root)} nodes, {len(result.errors)} diagnostics", soft_wrap=True)
    for error in result.errors:
        style = "red" if error.severity == "error" else "yellow"
        console.print(f"  [{style}]{error.severity.value}[/{style}] {error.message}", soft_wrap=True)

    if result.has_errors:
        raise typer.Exit(code=1)


@app.command()
def entities(
    file_path: Path,
    language: str = typer.Option("python", "--language", "-l", help="Language tag of the file"),
):
    """Print functions, classes and imports of a file as JSON.

    Args:
        file_path: Path to the source file
    """
    try:
        source = _read_source(file_path)
        summary = summarize_source(source, language, load_parser_config())
    except (FileNotFoundError, UnsupportedLanguageError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except (ArborError, OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    output = {
        "functions": [asdict(f) for f in summary.functions],
        "classes": [asdict(c) for c in summary.classes],
        "imports": [asdict(i) for i in summary.imports],
    }

    typer.echo(json.dumps(output, indent=2))


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"arbor version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )):
    pass
