"""CLI commands for Weddingly site management."""

import asyncio
from pathlib import Path

import typer

from src.auth.dtos import EmailAlreadyRegisteredError, SessionDTO
from src.auth.repository.credential_store import SqlCredentialStore
from src.sites.dtos import RSVPListDTO, SiteDTO
from src.sites.features.export_rsvps.csv_export import export_filename, rsvps_to_csv
from src.sites.features.get_own_site.read_model import SqlOwnSiteReadModel
from src.sites.features.list_rsvps.read_model import SqlRSVPReadModel
from src.sites.features.save_site.write_model import SqlSiteWriteModel

app = typer.Typer(help="CLI commands for Weddingly site management")


async def _get_owner(email: str) -> SessionDTO:
    owner = await SqlCredentialStore().get_user_by_email(email)
    if owner is None:
        raise ValueError(f"User not found: {email}")
    return owner


@app.command()
def create_user(
    email: str = typer.Argument(..., help="Login email of the new account"),
    password: str = typer.Argument(..., help="Password of the new account"),
):
    """Create a site owner account."""
    try:
        identity = asyncio.run(SqlCredentialStore().create_user(email, password))
    except EmailAlreadyRegisteredError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("User created!", fg=typer.colors.GREEN)
    typer.secho(f"  Email: {identity.email}", fg=typer.colors.BLUE)
    typer.secho(f"  User ID: {identity.user_id}", fg=typer.colors.CYAN)


@app.command()
def publish(
    email: str = typer.Argument(..., help="Email of the site owner"),
    unpublish: bool = typer.Option(
        False,
        "--unpublish",
        "-u",
        help="Take the site offline instead",
    ),
):
    """Publish (or unpublish) an owner's wedding site."""
    async def _publish() -> SiteDTO:
        owner = await _get_owner(email)
        if await SqlOwnSiteReadModel().get_site(owner.user_id) is None:
            raise ValueError(f"{email} has no wedding site yet")
        return await SqlSiteWriteModel().save_site(
            owner.user_id, {"is_published": not unpublish}
        )

    try:
        site = asyncio.run(_publish())
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    state = "published" if site.is_published else "unpublished"
    typer.secho(f"Site {site.slug} {state}!", fg=typer.colors.GREEN)
    if site.has_password:
        typer.secho("  Guests need the site password to view it.", fg=typer.colors.YELLOW)


async def _list_rsvps(email: str) -> RSVPListDTO:
    owner = await _get_owner(email)
    return await SqlRSVPReadModel().list_rsvps(owner.user_id)


@app.command()
def show_rsvps(
    email: str = typer.Argument(..., help="Email of the site owner"),
):
    """Show the RSVPs an owner's site has collected."""
    try:
        result = asyncio.run(_list_rsvps(email))
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    analytics = result.analytics
    typer.secho(f"RSVPs for {result.slug or email}", fg=typer.colors.GREEN)
    typer.secho(
        f"  Total: {analytics.total}  Attending: {analytics.total_attending}  "
        f"Declined: {analytics.total_declined}",
        fg=typer.colors.CYAN,
    )
    for rsvp in result.rsvps:
        color = typer.colors.BLUE if rsvp.attending else typer.colors.MAGENTA
        answer = "yes" if rsvp.attending else "no"
        typer.secho(f"  - {rsvp.full_name} ({answer})", fg=color)
        if rsvp.dietary_restrictions:
            typer.secho(f"      Dietary: {rsvp.dietary_restrictions}", fg=typer.colors.YELLOW)


@app.command()
def export_rsvps(
    email: str = typer.Argument(..., help="Email of the site owner"),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write (defaults to rsvps-<slug>.csv)",
    ),
):
    """Export an owner's RSVPs to a CSV file."""
    try:
        result = asyncio.run(_list_rsvps(email))
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    if result.slug is None:
        typer.secho(f"{email} has no wedding site yet", fg=typer.colors.RED)
        raise typer.Exit(1)

    path = output or Path(export_filename(result.slug))
    path.write_text(rsvps_to_csv(result.rsvps), encoding="utf-8")
    typer.secho(f"Exported {result.analytics.total} RSVPs to {path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
