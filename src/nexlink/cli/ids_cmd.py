"""CLI commands for translating between internal keys and identifier tokens.

Usage:
    nexlink ids encode 42 1337
    nexlink ids decode NDI= MTMzNw==
    nexlink ids decode NDI= --format json
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from nexlink.core.ids import IdOutOfRange, InvalidToken, decode_id, encode_id

app = typer.Typer(help="Encode and decode opaque identifier tokens", no_args_is_help=True)

err_console = Console(stderr=True)


@app.command("encode")
def encode(
    ids: list[int] = typer.Argument(..., help="Internal integer keys to encode"),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json",
    ),
) -> None:
    """Print the token for each internal key."""
    pairs: list[tuple[int, str]] = []
    for value in ids:
        try:
            pairs.append((value, encode_id(value)))
        except IdOutOfRange as exc:
            err_console.print(f"[red]Cannot encode:[/red] {exc}")
            raise typer.Exit(code=2)

    if output_format == "json":
        typer.echo(json.dumps([{"id": value, "token": token} for value, token in pairs]))
    else:
        for _, token in pairs:
            typer.echo(token)


@app.command("decode")
def decode(
    tokens: list[str] = typer.Argument(..., help="Identifier tokens to decode"),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json",
    ),
) -> None:
    """Print the internal key for each token, one line per token in input order.

    An invalid token prints an empty line (null in JSON) and the command exits
    with code 1; nothing is guessed for it.
    """
    decoded: list[tuple[str, int | None]] = []
    for token in tokens:
        try:
            decoded.append((token, decode_id(token)))
        except InvalidToken as exc:
            decoded.append((token, None))
            err_console.print(f"[red]Invalid token[/red] {token!r}: {exc}")

    if output_format == "json":
        typer.echo(json.dumps([{"token": token, "id": value} for token, value in decoded]))
    else:
        for _, value in decoded:
            typer.echo("" if value is None else value)

    if any(value is None for _, value in decoded):
        raise typer.Exit(code=1)
