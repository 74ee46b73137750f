"""CLI entry point for glesysdns."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from glesysdns import __version__
from glesysdns.commands import domain, record

app = typer.Typer(
    name="glesysdns",
    help="Manage GleSYS DNS domains and records.",
    no_args_is_help=True,
)
console = Console()

# Register sub-commands
app.add_typer(domain.app, name="domain", help="Manage domains")
app.add_typer(record.app, name="record", help="Manage DNS records")


def setup_logging(verbose: bool = False) -> None:
    """Send library logs through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def init() -> None:
    """Create a glesysdns.yaml and .env.example in the current directory."""
    from pathlib import Path

    from glesysdns.config import GlesysDnsConfig, dump_yaml

    config_path = Path.cwd() / "glesysdns.yaml"

    if config_path.exists():
        overwrite = typer.confirm("glesysdns.yaml already exists. Overwrite?")
        if not overwrite:
            raise typer.Abort()

    with open(config_path, "w") as f:
        dump_yaml(GlesysDnsConfig().model_dump(), f)

    env_example_path = Path.cwd() / ".env.example"
    env_example_path.write_text(
        """# glesysdns credentials
# Copy this to .env and fill in your API user and key

GLESYS_USERNAME=cl12345
GLESYS_API_KEY=your-api-key
# GLESYS_ENDPOINT=https://api.glesys.com
"""
    )

    console.print("[green]✓[/green] Created glesysdns.yaml")
    console.print("[green]✓[/green] Created .env.example")
    console.print()
    console.print("Next steps:")
    console.print("  1. Copy .env.example to .env and fill in your credentials")
    console.print("  2. Run [bold]glesysdns domain list[/bold]")


@app.command()
def version() -> None:
    """Show the glesysdns version."""
    console.print(f"glesysdns v{__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """glesysdns - GleSYS DNS management."""
    setup_logging(verbose)


if __name__ == "__main__":
    app()
