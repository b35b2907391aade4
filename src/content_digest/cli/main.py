"""
Main CLI application for Content Digest.

Developer tool around the engine. Provides commands for:
- Processing a scraped document file
- Classifying a document
- Viewing and initializing configuration
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from content_digest import __version__
from content_digest.config import Settings, load_config
from content_digest.config.loader import get_default_config_path
from content_digest.core.exceptions import ContentDigestError, EmptyContentError
from content_digest.core.models import Document, ProcessingResult
from content_digest.processor import ContentProcessor
from content_digest.utils.logging import setup_logging, get_logger

# Initialize Typer app
app = typer.Typer(
    name="content-digest",
    help="Content Digest - Classify, extract and summarize scraped pages",
    add_completion=False,
    no_args_is_help=True,
)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Content Digest[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Content Digest - heuristic summaries of scraped pages.

    Use 'content-digest --help' for command list.
    """
    log_level = "DEBUG" if verbose else "WARNING"
    setup_logging(level=log_level)


def _load_document(path: Path) -> Document:
    """
    Read a document file.

    JSON files hold a scraper record; any other file is taken as plain
    text with no URL or metadata.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {e}") from e
    if path.suffix.lower() != ".json":
        return Document(title=path.stem, raw_text=raw)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a JSON object")
    return Document.from_dict(data)


@app.command()
def process(
    file: Path = typer.Argument(
        ...,
        help="Scraped document (.json record or plain text)",
        exists=True,
        dir_okay=False,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """
    Process a document and show its summaries.

    Example:
        content-digest process page.json --json
    """
    document = _load_document(file)

    try:
        settings = load_config(config_file or get_default_config_path())
        result = ContentProcessor(settings=settings).process(document)
    except EmptyContentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ContentDigestError as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.exception("Processing failed")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    _show_result(document, result)


def _show_result(document: Document, result: ProcessingResult) -> None:
    """Render a processing result."""
    title = document.title or document.url or "Document"
    console.print(Panel(
        f"[bold]{escape(title)}[/bold]\n[dim]{result.content_type.value}[/dim]",
        border_style="blue",
    ))

    console.print("\n[bold]Summary:[/bold]")
    console.print(escape(result.summaries.short))

    console.print("\n[bold]Detailed:[/bold]")
    console.print(escape(result.summaries.detailed))

    structured = result.extracted_data.structured_data
    if structured:
        console.print("\n[bold]Structured Data:[/bold]")
        table = Table(show_header=False, box=None)
        table.add_column("Key", style="dim")
        table.add_column("Value")
        for key, value in structured.items():
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            text = str(value)
            shown = text[:120] + "..." if len(text) > 120 else text
            table.add_row(key, escape(shown))
        console.print(table)

    if result.key_points:
        console.print("\n[bold]Key Points:[/bold]")
        for point in result.key_points:
            console.print(f"  • {escape(point)}")

    if result.reviews:
        console.print(f"\n[bold]Reviews:[/bold] [dim]({len(result.reviews)})[/dim]")
        for review in result.reviews:
            console.print(f"  [dim]-[/dim] {escape(review)}")


@app.command()
def classify(
    file: Path = typer.Argument(
        ...,
        help="Scraped document (.json record or plain text)",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """
    Detect the content type of a document.

    Example:
        content-digest classify page.json
    """
    document = _load_document(file)
    processor = ContentProcessor(settings=load_config(get_default_config_path()))
    content_type = processor.classifier.classify(
        document.url, document.title, document.text, document.metadata)
    console.print(content_type.value)


@config_app.command("show")
def config_show(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Show current configuration."""
    settings = load_config(config_file or get_default_config_path())
    config_dict = settings.model_dump(mode="json")

    console.print(Panel(
        "[bold]Current Configuration[/bold]",
        border_style="blue",
    ))

    for section, values in config_dict.items():
        console.print(f"\n[bold cyan]{section}:[/bold cyan]")
        if isinstance(values, dict):
            for key, value in values.items():
                console.print(f"  {key}: [dim]{escape(str(value))}[/dim]")
        else:
            console.print(f"  {values}")


@config_app.command("init")
def config_init(
    output: Path = typer.Option(
        Path("content_digest.yaml"),
        "--output",
        "-o",
        help="Output path for config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing file",
    ),
) -> None:
    """Create a default configuration file."""
    import yaml

    if output.exists() and not force:
        if not typer.confirm(f"File {output} exists. Overwrite?"):
            raise typer.Exit(0)

    config_dict = Settings().model_dump(mode="json")
    with open(output, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    console.print(f"[green]✓[/green] Configuration saved to: {output}")


if __name__ == "__main__":
    app()
