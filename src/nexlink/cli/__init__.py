"""CLI commands for NexLink.

Provides command-line interface using Typer:
- nexlink ids encode / decode: Translate between keys and identifier tokens
- nexlink serve: Run the API server

Usage:
    nexlink --help
    nexlink ids encode 42
    nexlink ids decode NDI=
    nexlink serve --port 3000
"""

import typer

from nexlink.cli.ids_cmd import app as ids_app
from nexlink.cli.serve import app as serve_app

app = typer.Typer(
    name="nexlink",
    help="NexLink: professional networking platform API",
    no_args_is_help=True,
)

app.add_typer(ids_app, name="ids")
app.add_typer(serve_app, name="serve")


@app.callback()
def callback() -> None:
    """NexLink: professional networking platform API."""
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
