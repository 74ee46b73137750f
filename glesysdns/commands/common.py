"""Helpers shared by the CLI sub-commands."""

import typer
from rich.console import Console

from glesysdns.config import create_client, load_config, load_env_settings
from glesysdns.predicates import Condition, ConditionPoller
from glesysdns.providers.dns.base import DomainRecordClient

console = Console()


def get_client() -> DomainRecordClient:
    """Get a client for the configured account."""
    settings = load_env_settings()

    if not settings.has_credentials:
        console.print("[red]✗[/red] GleSYS credentials not configured")
        console.print("  Set GLESYS_USERNAME and GLESYS_API_KEY")
        raise typer.Exit(1)

    return create_client(settings)


def get_poller(condition: Condition) -> ConditionPoller:
    """Build a poller using the configured polling budget."""
    polling = load_config().polling
    return ConditionPoller(condition, max_attempts=polling.attempts, delay=polling.delay)
