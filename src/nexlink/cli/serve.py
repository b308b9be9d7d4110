"""CLI command for running the NexLink API with uvicorn."""

from __future__ import annotations

import typer

from nexlink.config import settings

app = typer.Typer(help="Run the NexLink API server")


@app.callback(invoke_without_command=True)
def serve(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to listen on"),
    log_level: str = typer.Option(
        settings.log_level, "--log-level", "-l", help="Log level (defaults to NEXLINK_LOG_LEVEL)"
    ),
) -> None:
    """Serve the API from the application factory."""
    import uvicorn

    typer.echo(f"NexLink ({settings.env}) listening on http://{host}:{port}")
    uvicorn.run(
        "nexlink.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level.lower(),
    )
