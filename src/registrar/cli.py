#!/usr/bin/env python3
"""
Main CLI entry point for the Registrar API server.
"""

import json
import os
import sys
from dataclasses import asdict

import click
import uvicorn

from registrar import __version__
from registrar.config import settings
from registrar.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="registrar")
def cli() -> None:
    """Registrar CLI - run the GraphQL server and inspect its data."""
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
    show_default=True,
    type=int,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes; each one holds its own copy of the data (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Registrar API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Registrar API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reload and worker processes import the app themselves and read these
    if log_level == "debug":
        os.environ["REGISTRAR_DEBUG"] = "true"
        os.environ["REGISTRAR_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("REGISTRAR_DEBUG", "false")
        os.environ.setdefault("REGISTRAR_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "registrar.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from registrar.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema (SDL)."""
    from registrar.graphql.schema import print_schema

    sdl = print_schema()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


@cli.command()
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding courses.json, students.json and grades.json",
)
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def audit(data_dir: str | None, output_format: str) -> None:
    """Report students and grades pointing at missing courses or students."""
    from registrar.store import SeedDataError, load_store

    # Logs go to stderr so stdout stays machine-readable
    configure_logging(stream=sys.stderr)

    try:
        store = load_store(data_dir)
    except SeedDataError as e:
        logger.error("Failed to load seed data", error=str(e))
        click.echo(f"✗ Error loading seed data: {e}", err=True)
        sys.exit(1)

    dangling = store.find_dangling_references()

    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "records": store.counts(),
                    "dangling_references": [asdict(ref) for ref in dangling],
                },
                indent=2,
            )
        )
        return

    counts = store.counts()
    click.echo(
        f"Courses: {counts['courses']}  Students: {counts['students']}  "
        f"Grades: {counts['grades']}"
    )
    if not dangling:
        click.echo("✓ No dangling references found")
        return

    click.echo(f"⚠ Dangling references ({len(dangling)}):")
    for i, ref in enumerate(dangling, 1):
        click.echo(f"  {i}. {ref.kind} {ref.record_id}: {ref.field}={ref.missing_id} not found")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
