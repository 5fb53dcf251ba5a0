"""SoloSphere CLI: run the API server, prepare the database.

Usage:
    solosphere serve                    # uvicorn on SOLOSPHERE_HOST:SOLOSPHERE_PORT
    solosphere serve --port 8080 --reload
    solosphere create-tables            # create jobs/bids tables and exit
"""

import asyncio

import click

from solosphere.config import settings


@click.group()
def cli():
    """SoloSphere marketplace backend."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: SOLOSPHERE_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: SOLOSPHERE_PORT).")
@click.option("--reload", is_flag=True, help="Restart on code changes (development).")
def serve(host, port, reload):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "solosphere.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("create-tables")
def create_tables_cmd():
    """Create the database tables."""
    from solosphere.db.engine import create_tables, engine

    async def _run():
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    click.echo(f"Tables ready at {engine.url.render_as_string(hide_password=True)}")


def main():
    cli()


if __name__ == "__main__":
    main()
