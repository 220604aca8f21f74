"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdsite.cli.commands import convert_cmd


app = typer.Typer(name="mdsite", add_completion=False, help="Markdown docs/blog -> generated page modules + metadata indexes")

app.command(name="convert")(convert_cmd)
