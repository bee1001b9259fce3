"""Candidate listing command."""

import asyncio

import click

from src.domain.constants import candidates_by_tier
from src.domain.entities.candidate import ElectionTier
from src.interfaces.cli.base import with_error_handling


@click.command()
@click.option(
    "--catalog",
    is_flag=True,
    help="Show the bundled candidate catalog instead of querying the API",
)
@with_error_handling
def candidates(catalog: bool):
    """List the candidates accepted by the electoral API."""
    if catalog:
        _print_catalog()
        return
    asyncio.run(_run_candidates())


def _print_catalog() -> None:
    for tier in ElectionTier:
        tier_candidates = candidates_by_tier(tier)
        click.echo(f"=== {tier.label} ({len(tier_candidates)}) ===")
        for candidate in tier_candidates:
            click.echo(f"  {candidate.id:>3}. {candidate.name} [{candidate.party}]")


async def _run_candidates() -> None:
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    usecase = container.use_cases.cast_vote_usecase()
    options = await usecase.load_candidates()

    if not options:
        click.echo("No hay candidatos registrados.")
        return

    click.echo(f"=== Candidatos ({len(options)}) ===")
    for option in options:
        click.echo(f"  {option.id:>3}. {option.label}")
