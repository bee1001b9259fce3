"""Electoral portal CLI command group."""

import click

from src.common.logging import setup_logging
from src.infrastructure.config import get_settings, init_sentry
from src.interfaces.cli.commands.electoral.candidates import candidates
from src.interfaces.cli.commands.electoral.health import health
from src.interfaces.cli.commands.electoral.locations import locations
from src.interfaces.cli.commands.electoral.results import results


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def electoral(verbose: bool):
    """Electoral voting portal commands."""
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_format == "json",
    )
    init_sentry(settings)


electoral.add_command(health)
electoral.add_command(candidates)
electoral.add_command(results)
electoral.add_command(locations)
