"""Domain management commands."""

import typer
from rich.table import Table

from glesysdns.commands.common import console, get_client, get_poller
from glesysdns.exceptions import ConvergenceTimeout, NotFound, RemoteCallFailure
from glesysdns.models import DomainOptions
from glesysdns.predicates import DomainCount

app = typer.Typer()


@app.command("list")
def list_domains() -> None:
    """List all domains on the account."""
    client = get_client()

    try:
        domains = client.list_domains()
    except RemoteCallFailure as e:
        console.print(f"[red]✗[/red] Failed to list domains: {e}")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Domain")
    table.add_column("Records")
    table.add_column("Created")

    for domain in sorted(domains, key=lambda d: d.domain_name):
        table.add_row(
            domain.domain_name,
            str(domain.record_count if domain.record_count is not None else "-"),
            str(domain.create_time or "-"),
        )

    console.print(table)


@app.command()
def show(domain_name: str = typer.Argument(..., help="Domain name")) -> None:
    """Show the details of a domain."""
    client = get_client()

    try:
        domain = client.get_domain(domain_name)
    except NotFound:
        console.print(f"[red]✗[/red] Domain not found: {domain_name}")
        raise typer.Exit(1)
    except RemoteCallFailure as e:
        console.print(f"[red]✗[/red] Failed to get domain: {e}")
        raise typer.Exit(1)

    console.print(f"[bold]{domain.domain_name}[/bold]")
    for label, value in [
        ("Created", domain.create_time),
        ("Primary nameserver", domain.primary_nameserver),
        ("Responsible person", domain.responsible_person),
        ("TTL", domain.ttl),
        ("Refresh", domain.refresh),
        ("Retry", domain.retry),
        ("Expire", domain.expire),
        ("Minimum", domain.minimum),
    ]:
        if value is not None:
            console.print(f"  {label}: {value}")


@app.command()
def create(
    domain_name: str = typer.Argument(..., help="Domain name"),
    responsible_person: str | None = typer.Option(
        None, "--responsible-person", help="SOA responsible person"
    ),
    ttl: int | None = typer.Option(None, "--ttl", help="Default TTL in seconds"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the domain is listed"),
) -> None:
    """Create a domain."""
    client = get_client()
    options = DomainOptions(responsible_person=responsible_person, ttl=ttl)

    try:
        before = len(client.list_domains()) if wait else 0
        client.add_domain(domain_name, options)
        if wait:
            get_poller(DomainCount(client)).require(before + 1, "Domain listing")
    except (RemoteCallFailure, ConvergenceTimeout) as e:
        console.print(f"[red]✗[/red] Failed to create domain: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Domain created: {domain_name}")


@app.command()
def edit(
    domain_name: str = typer.Argument(..., help="Domain name"),
    responsible_person: str | None = typer.Option(
        None, "--responsible-person", help="SOA responsible person"
    ),
    primary_nameserver: str | None = typer.Option(
        None, "--primary-nameserver", help="SOA primary nameserver"
    ),
    ttl: int | None = typer.Option(None, "--ttl", help="Default TTL in seconds"),
) -> None:
    """Change settings of a domain."""
    options = DomainOptions(
        responsible_person=responsible_person,
        primary_nameserver=primary_nameserver,
        ttl=ttl,
    )
    if not options.to_params():
        console.print("[yellow]Nothing to change[/yellow]")
        raise typer.Exit(1)

    client = get_client()

    try:
        client.edit_domain(domain_name, options)
    except RemoteCallFailure as e:
        console.print(f"[red]✗[/red] Failed to edit domain: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Domain updated: {domain_name}")


@app.command()
def delete(
    domain_name: str = typer.Argument(..., help="Domain name"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the domain is gone"),
) -> None:
    """Delete a domain and all of its records."""
    if not force:
        confirm = typer.confirm(f"Delete domain {domain_name}?")
        if not confirm:
            raise typer.Abort()

    client = get_client()

    try:
        before = len(client.list_domains()) if wait else 0
        client.delete_domain(domain_name)
        if wait:
            get_poller(DomainCount(client)).require(before - 1, "Domain listing")
    except (RemoteCallFailure, ConvergenceTimeout) as e:
        console.print(f"[red]✗[/red] Failed to delete domain: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Domain deleted: {domain_name}")
