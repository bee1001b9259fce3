"""Electoral API health check command."""

import asyncio

import click

from src.interfaces.cli.base import BaseCommand, with_error_handling


@click.command()
@with_error_handling
def health():
    """Check that the electoral API answers on /health."""
    asyncio.run(_run_health())


async def _run_health() -> None:
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    client = container.services.electoral_api_client()
    BaseCommand.show_progress(f"Consultando {client.root_url}/health ...")
    data = await client.health_check()

    BaseCommand.success("API en línea")
    for key, value in data.items():
        click.echo(f"  {key}: {value}")
