"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrender.cli.commands import main_callback, normalize_cmd, render_cmd, toc_cmd


app = typer.Typer(name="mdrender", no_args_is_help=True, help="Markdown to HTML with attribute lists and outlines")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="normalize")(normalize_cmd)
