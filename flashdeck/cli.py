"""CLI entry point for Flashdeck."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from flashdeck.config import FlashdeckConfig, load_config
from flashdeck.config.loader import DEFAULT_CONFIG_TEMPLATE
from flashdeck.errors import PipelineError
from flashdeck.extractor import Document, DocumentExtractor
from flashdeck.generator import GenerationResult
from flashdeck.log import configure_logging
from flashdeck.pipeline import FlashcardPipeline
from flashdeck.pipeline.classifier import TOO_LARGE_MESSAGE, ClassifiedError, ErrorCategory

app = typer.Typer(
    name="flashdeck",
    help="Turn documents into question/answer flashcards.",
)

config_app = typer.Typer(help="Manage Flashdeck configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: FlashdeckConfig | None = None


def _get_config() -> FlashdeckConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to flashdeck.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _build_pipeline(cfg: FlashdeckConfig) -> FlashcardPipeline:
    return FlashcardPipeline.from_config(cfg)


def _write_body(output: str | None, body: dict) -> None:
    if output:
        Path(output).write_text(json.dumps(body, indent=2), encoding="utf-8")


def _exit_with(error: ClassifiedError, output: str | None = None) -> NoReturn:
    """Report a classified failure the same way for every command."""
    _write_body(output, error.to_body())
    rprint(f"[red]Error ({error.status_code}):[/red] {error.message}")
    raise typer.Exit(1)


def _load_document(
    file: str,
    mime_type: str | None,
    max_file_size_mb: int,
    output: str | None = None,
) -> Document:
    """Read a file for the pipeline, enforcing the upload size ceiling."""
    path = Path(file)
    if not path.is_file():
        rprint(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)

    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > max_file_size_mb:
        rprint(f"[dim]File is {size_mb:.1f} MB. Maximum size is {max_file_size_mb} MB.[/dim]")
        _exit_with(
            ClassifiedError(
                category=ErrorCategory.TOO_LARGE,
                status_code=413,
                message=TOO_LARGE_MESSAGE,
            ),
            output,
        )

    return Document.from_path(path, mime_type=mime_type)


def _display_flashcards(result: GenerationResult) -> None:
    """Display generated cards as a Rich table."""
    table = Table(title=f"Flashcards ({len(result.flashcards)})", show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Answer", style="green")
    for i, card in enumerate(result.flashcards, start=1):
        table.add_row(str(i), card.question, card.answer)
    rprint(table)
    rprint(
        f"[dim]Processed {result.processed_chunks} of {result.total_chunks} "
        f"chunk(s)[/dim]"
    )


@app.command()
def generate(
    file: str = typer.Argument(..., help="Document to generate flashcards from"),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-m", help="Declared MIME type (default: guess from suffix)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON response body"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write the JSON response body to file"
    ),
) -> None:
    """Generate flashcards from a text, PDF, or Word document."""
    cfg = _get_config()
    document = _load_document(file, mime_type, cfg.extraction.max_file_size_mb, output)

    try:
        pipeline = _build_pipeline(cfg)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    response = asyncio.run(pipeline.process(document))

    if response.error is not None:
        _exit_with(response.error, output)

    _write_body(output, response.body)

    if as_json:
        typer.echo(json.dumps(response.body, indent=2))
    elif response.result is not None:
        _display_flashcards(response.result)

    if output:
        rprint(f"[green]Written to[/green] {output}")


@app.command()
def extract(
    file: str = typer.Argument(..., help="Document to extract text from"),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-m", help="Declared MIME type (default: guess from suffix)"
    ),
) -> None:
    """Show the text the pipeline would send to the model."""
    cfg = _get_config()
    document = _load_document(file, mime_type, cfg.extraction.max_file_size_mb)

    try:
        extracted = DocumentExtractor().extract(document)
    except PipelineError as e:
        rprint(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    typer.echo(extracted.text)
    rprint(
        Panel(
            f"[dim]Source:[/dim]  {document.filename}\n"
            f"[dim]Format:[/dim]  {extracted.format.name}\n"
            f"[dim]Chars:[/dim]   {extracted.char_count}",
            title="Extraction Result",
            border_style="green",
        )
    )


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default flashdeck.yaml in current directory."""
    target = Path("flashdeck.yaml")
    if target.exists() and not force:
        rprint("[yellow]flashdeck.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
