"""Batch rendering: discover Markdown files, render each, write HTML and outline JSON"""

import logging
from pathlib import Path

from mdrender.config import Settings
from mdrender.core.models import RenderedFile
from mdrender.core.outline import TocBuilder
from mdrender.core.render.render import Renderer


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md files directly under the directory path."""
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix in MD_EXTENSIONS)


def render_file(renderer: Renderer, path: Path) -> tuple[str, TocBuilder]:
    """Render one file; return (html, toc)."""
    toc = TocBuilder()
    result = renderer.render(path.read_text(encoding='utf-8'), [toc])
    return result.html, toc


def run_render(source_dir: Path, dest_dir: Path, settings: Settings) -> list[RenderedFile]:
    """Render every .md file in source_dir into dest_dir.

    Existing outputs are left alone unless settings.overwrite is set.
    Raises FileNotFoundError if either directory is missing.
    """
    for label, d in (("Source", source_dir), ("Destination", dest_dir)):
        if not d.is_dir():
            raise FileNotFoundError(f"{label} directory does not exist: {d}")

    renderer = Renderer(settings)
    results = []
    for src in discover_files(source_dir):
        out_file = dest_dir / f"{src.stem}{settings.output_extension}"
        existed = out_file.exists()
        if existed and not settings.overwrite:
            logger.info("Skipping %s: %s exists", src, out_file)
            results.append(RenderedFile(source=str(src), destination=str(out_file), status="skipped"))
            continue
        try:
            html, toc = render_file(renderer, src)
            out_file.write_text(html, encoding='utf-8')
            toc_path = None
            if settings.toc:
                toc_path = dest_dir / f"{src.stem}.toc.json"
                toc_path.write_text(toc.to_json(), encoding='utf-8')
        except Exception as e:
            raise RuntimeError(f"Failed to render {src}: {e}") from e
        logger.info("Rendered %s -> %s", src, out_file)
        results.append(RenderedFile(
            source=str(src),
            destination=str(out_file),
            status="overwritten" if existed else "written",
            toc=str(toc_path) if toc_path else None,
        ))
    return results
