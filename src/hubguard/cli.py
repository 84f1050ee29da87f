"""CLI — roles, capabilities, teams, verify, check."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from hubguard.audit import audited
from hubguard.capabilities import CAPABILITY_DOMAINS, UnknownCapabilityError, parse_capability
from hubguard.config import Config
from hubguard.guards import can_do
from hubguard.models import UserWithAccess
from hubguard.registry import DEFAULT_REGISTRY
from hubguard.roles import ROLE_DESCRIPTIONS, ROLE_LABELS, ROLE_RANKS, Role
from hubguard.teams import TEAM_DESCRIPTIONS, TEAM_RANKS, TEAM_SCOPES, Team, team_permissions


@click.group()
@click.version_option(package_name="hubguard")
@click.pass_context
def main(ctx: click.Context) -> None:
    """hubguard — who may do what, in which group."""
    config = Config.load()
    config.configure_logging()
    ctx.obj = config


@main.command()
def roles() -> None:
    """Show the role hierarchy."""
    table = Table(title="Roles")
    table.add_column("Role", style="cyan")
    table.add_column("Rank", style="magenta", justify="right")
    table.add_column("Label")
    table.add_column("Description")
    for role in Role:
        table.add_row(role.value, str(ROLE_RANKS[role]), ROLE_LABELS[role], ROLE_DESCRIPTIONS[role])
    Console().print(table)


@main.command()
@click.option("--role", type=click.Choice([r.value for r in Role]), default=None)
@click.option("--domain", type=click.Choice(list(CAPABILITY_DOMAINS)), default=None)
def capabilities(role: str | None, domain: str | None) -> None:
    """List capabilities, optionally those granted to one role or in one domain."""
    registry = DEFAULT_REGISTRY
    granted = registry.capabilities_for(role) if role else None

    table = Table(title=f"Capabilities ({role})" if role else "Capabilities")
    table.add_column("Domain", style="cyan")
    table.add_column("Capability", style="green")
    for name, caps in CAPABILITY_DOMAINS.items():
        if domain and name != domain:
            continue
        for capability in caps:
            if granted is not None and capability not in granted:
                continue
            table.add_row(name, capability.value)
    Console().print(table)


@main.command()
def teams() -> None:
    """Show teams, their scope and permissions."""
    table = Table(title="Teams")
    table.add_column("Team", style="cyan")
    table.add_column("Rank", style="magenta", justify="right")
    table.add_column("Scope")
    table.add_column("Permissions", style="green")
    for team in Team:
        perms = ", ".join(sorted(p.value for p in team_permissions(team)))
        table.add_row(team.value, str(TEAM_RANKS[team]), TEAM_SCOPES[team].value, perms)
    Console().print(table)
    for team in Team:
        click.echo(f"{team.value}: {TEAM_DESCRIPTIONS[team]}")


@main.command()
def verify() -> None:
    """Summarize the validated access registry.

    The tables are checked when hubguard is imported; broken tables stop the
    command before it runs, with each problem logged.
    """
    registry = DEFAULT_REGISTRY
    granted = sum(len(caps) for caps in registry.capability_map.values())
    Console().print(
        Panel(
            f"[green]✓[/green] {len(registry.capability_map)} roles, "
            f"{len(registry.team_permissions)} teams, "
            f"{len(registry.capabilities)} capabilities, {granted} role grants",
            title="Registry OK",
        )
    )


@main.command()
@click.argument("actor_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("group_id")
@click.argument("capability")
@click.pass_obj
def check(config: Config, actor_file: str, group_id: str, capability: str) -> None:
    """Check whether the actor in ACTOR_FILE may use CAPABILITY in GROUP_ID.

    Exits 0 when allowed, 1 when denied and 2 on invalid input.
    """
    try:
        with open(Path(actor_file), encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        user = UserWithAccess.model_validate(data)
        cap = parse_capability(capability)
    except (
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
        ValidationError,
        UnknownCapabilityError,
    ) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    guard = audited(can_do) if config.audit_denials else can_do
    if guard(user, group_id, cap):
        click.echo(f"allowed: {user.id} may {cap.value} in {group_id}")
        return
    click.echo(f"denied: {user.id} may not {cap.value} in {group_id}")
    sys.exit(1)


if __name__ == "__main__":
    main()
