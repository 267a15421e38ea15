"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdrender.config import Settings, load_config
from mdrender.core.normalize.pipeline import normalize
from mdrender.core.pipeline import render_file, run_render
from mdrender.core.render.render import Renderer


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr")] = False,
    ):
    """Render Markdown with {: } attribute lists to HTML and outline JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def render_cmd(
    source_dir: Annotated[Path, typer.Argument(help="Directory of .md files")],
    dest_dir: Annotated[Path, typer.Argument(help="Directory for rendered output")],
    overwrite: Annotated[Optional[bool], typer.Option("--overwrite/--no-overwrite", help="Replace existing output files")] = None,
    toc: Annotated[Optional[bool], typer.Option("--toc/--no-toc", help="Write <name>.toc.json outlines")] = None,
    ):
    """Render every .md file in SOURCE_DIR into DEST_DIR."""
    settings = _settings(overrides={"overwrite": overwrite, "toc": toc})
    try:
        results = run_render(source_dir, dest_dir, settings)
    except (FileNotFoundError, RuntimeError) as e:
        _fail(str(e))

    for r in results:
        typer.echo(f"  {r.status}: {r.source} -> {r.destination}")
    written = sum(1 for r in results if r.status != "skipped")
    typer.echo(f"Rendered {written} of {len(results)} document(s) to {dest_dir}/")


def toc_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file")],
    ):
    """Print the outline of a single document as JSON."""
    settings = _settings()
    if not path.is_file():
        _fail(f"File does not exist: {path}")
    try:
        _, toc = render_file(Renderer(settings), path)
    except (OSError, ValueError, RuntimeError) as e:
        _fail(f"Cannot render {path}", e)
    typer.echo(toc.to_json())


def normalize_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file")],
    ):
    """Print the Markdown as handed to the renderer after normalization."""
    typer.echo(normalize(_read(path)), nl=False)
