#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import Settings, settings
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with authors and posts to serve instead of the built-in seed",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, seed_path: str | None, log_level: str) -> None:
    """Start the blogql API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting blogql API server",
        host=host,
        port=port,
        reload=reload,
        seed_path=seed_path,
        log_level=log_level,
    )

    # Environment covers reload subprocesses; the in-process settings object was
    # built at import and must be updated as well
    if log_level == "debug":
        os.environ["BLOGQL_DEBUG"] = "true"
        os.environ["BLOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BLOGQL_DEBUG", "false")
        os.environ.setdefault("BLOGQL_LOG_LEVEL", log_level)
    if seed_path:
        os.environ["BLOGQL_SEED_PATH"] = os.path.abspath(seed_path)

    env_settings = Settings()
    settings.debug = env_settings.debug
    settings.log_level = env_settings.log_level
    settings.seed_path = env_settings.seed_path

    try:
        uvicorn.run(
            "blogql.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from blogql.graphql.schema import export_schema as render_schema

    sdl = render_schema()
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(sdl + "\n")
        click.echo(f"Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
