"""Live results command."""

import asyncio

import click

from src.domain.entities.candidate import ElectionTier
from src.domain.services.results_tally import tally_for_tier
from src.interfaces.cli.base import with_error_handling


@click.command()
@click.option(
    "--tier",
    type=click.Choice([t.value for t in ElectionTier]),
    default=None,
    help="Only show one race, with percentages of that race",
)
@with_error_handling
def results(tier: str | None):
    """Show current vote counts, most voted first."""
    asyncio.run(_run_results(tier))


async def _run_results(tier: str | None) -> None:
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    usecase = container.use_cases.load_results_usecase()
    output = await usecase.execute()

    rows = output.rows
    total = output.total_votes
    title = "Resultados"
    if tier is not None:
        election_tier = ElectionTier(tier)
        rows = tally_for_tier(rows, election_tier)
        total = sum(r.votes for r in rows)
        title = f"Resultados {election_tier.label}"

    click.echo(f"=== {title} (total: {total:,} votos) ===")
    if not rows:
        click.echo("Aún no hay votos registrados.")
        return
    for position, row in enumerate(rows, 1):
        click.echo(
            f"  {position:>3}. {row.name} [{row.party}]: "
            f"{row.votes:,} votos ({row.percentage}%)"
        )
    if output.timestamp:
        click.echo(f"\nActualizado: {output.timestamp}")
