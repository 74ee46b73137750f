"""DNS record commands."""

import typer
from rich.table import Table

from glesysdns.commands.common import console, get_client, get_poller
from glesysdns.exceptions import ConvergenceTimeout, RemoteCallFailure
from glesysdns.models import EditRecordOptions
from glesysdns.predicates import RecordCount

app = typer.Typer()


@app.command("list")
def list_records(domain_name: str = typer.Argument(..., help="Domain name")) -> None:
    """List all DNS records of a domain."""
    client = get_client()

    console.print(f"[bold]DNS records for {domain_name}[/bold]")

    try:
        records = client.list_records(domain_name)
    except RemoteCallFailure as e:
        console.print(f"[red]✗[/red] Failed to list records: {e}")
        raise typer.Exit(1)

    table = Table()
    table.add_column("ID")
    table.add_column("Host")
    table.add_column("Type")
    table.add_column("Data")
    table.add_column("TTL")

    for record in sorted(records, key=lambda r: (r.host, r.type, r.id)):
        table.add_row(
            record.id,
            record.host,
            record.type,
            record.data,
            str(record.ttl if record.ttl is not None else "-"),
        )

    console.print(table)


@app.command()
def add(
    domain_name: str = typer.Argument(..., help="Domain name"),
    host: str = typer.Argument(..., help="Record host (e.g. www or @)"),
    record_type: str = typer.Argument(..., metavar="TYPE", help="Record type (A, CNAME, MX, ...)"),
    data: str = typer.Argument(..., help="Record data"),
    ttl: int | None = typer.Option(None, "--ttl", help="TTL in seconds"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the record is listed"),
) -> None:
    """Add a DNS record to a domain."""
    client = get_client()

    try:
        before = len(client.list_records(domain_name)) if wait else 0
        client.add_record(domain_name, host, record_type.upper(), data, ttl=ttl)
        if wait:
            get_poller(RecordCount(client, domain_name)).require(
                before + 1, f"Record listing for {domain_name}"
            )
    except (RemoteCallFailure, ConvergenceTimeout) as e:
        console.print(f"[red]✗[/red] Failed to add record: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {record_type.upper()} record added: {host} → {data}")


@app.command()
def edit(
    record_id: str = typer.Argument(..., help="Record ID"),
    host: str | None = typer.Option(None, "--host", help="New host"),
    record_type: str | None = typer.Option(None, "--type", help="New record type"),
    data: str | None = typer.Option(None, "--data", help="New record data"),
    ttl: int | None = typer.Option(None, "--ttl", help="New TTL in seconds"),
) -> None:
    """Change fields of a DNS record."""
    options = EditRecordOptions(
        host=host,
        type=record_type.upper() if record_type else None,
        data=data,
        ttl=ttl,
    )
    if not options.to_params():
        console.print("[yellow]Nothing to change[/yellow]")
        raise typer.Exit(1)

    client = get_client()

    try:
        client.edit_record(record_id, options)
    except RemoteCallFailure as e:
        console.print(f"[red]✗[/red] Failed to edit record: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Record updated: {record_id}")


@app.command()
def delete(
    record_id: str = typer.Argument(..., help="Record ID"),
    domain_name: str | None = typer.Option(
        None, "--domain", "-d", help="Domain of the record (required with --wait)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the record is gone"),
) -> None:
    """Delete a DNS record."""
    if wait and not domain_name:
        console.print("[red]✗[/red] --wait requires --domain")
        raise typer.Exit(1)

    if not force:
        confirm = typer.confirm(f"Delete record {record_id}?")
        if not confirm:
            raise typer.Abort()

    client = get_client()

    try:
        before = len(client.list_records(domain_name)) if wait else 0
        client.delete_record(record_id)
        if wait:
            get_poller(RecordCount(client, domain_name)).require(
                before - 1, f"Record listing for {domain_name}"
            )
    except (RemoteCallFailure, ConvergenceTimeout) as e:
        console.print(f"[red]✗[/red] Failed to delete record: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Record deleted: {record_id}")
