"""Location lookup command."""

import click

from src.interfaces.cli.base import with_error_handling


@click.command()
@click.argument("departamento")
@click.argument("provincia", required=False)
@with_error_handling
def locations(departamento: str, provincia: str | None):
    """List provinces of DEPARTAMENTO, or districts of PROVINCIA."""
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    cascade = container.services.location_cascade()
    if provincia is None:
        names = cascade.provinces_for(departamento)
        title = f"Provincias de {departamento}"
    else:
        names = cascade.districts_for(departamento, provincia)
        title = f"Distritos de {provincia} ({departamento})"

    if not names:
        click.echo(f"Sin resultados para {title.lower()}.")
        return

    click.echo(f"=== {title} ({len(names)}) ===")
    for name in names:
        click.echo(f"  {name}")
