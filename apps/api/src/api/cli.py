"""User registry CLI."""

import logging
from typing import Annotated, Sequence

import typer

from api import __version__
from api.config import get_settings
from api.shell import UserShell
from common.services.user_registry import InMemoryUserRegistry

logger = logging.getLogger(__name__)

app = typer.Typer(help="In-memory user registry", no_args_is_help=True)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "-v", "--version", is_eager=True, callback=version_callback
    )
) -> None:
    logging.basicConfig(level=get_settings().log_level.upper())


@app.command("shell")
def shell() -> None:
    """Run the interactive user menu."""
    typer.echo("===================================")
    typer.echo("        User Registry Shell")
    typer.echo("===================================")
    count = UserShell(InMemoryUserRegistry()).run()
    logger.info("Shell finished with %d user(s) registered", count)


@app.command("serve")
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Bind port")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Serve the user registry HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=host if host is not None else settings.api_host,
        port=port if port is not None else settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def main(argv: Sequence[str] | None = None) -> int:
    return app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
