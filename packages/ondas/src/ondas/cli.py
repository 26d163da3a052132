#!/usr/bin/env python3
"""Command-line interface for ondas.

This CLI is primarily for debugging and development.
For production use, import ondas as a library or run ondas-api.
"""

import json
import logging
import sys
from dataclasses import replace

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ondas.client import RadioBrowserClient
from ondas.config import SearchConfig
from ondas.exceptions import OndasError
from ondas.models.enums import ProfileId
from ondas.models.search import SearchResult
from ondas.profiles import RADIO_PROFILES, resolve_request
from ondas.services import StationFinder, plan_attempts

logger = logging.getLogger("ondas")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called more than once.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def format_bitrate(bitrate: int | None) -> str:
    """Format bitrate in kbps, or a dash when unknown."""
    return f"{bitrate} kbps" if bitrate else "-"


def print_result(console: Console, result: SearchResult) -> None:
    """Print search results as a station table followed by diagnostics."""
    table = Table(
        title=f"[bold]{result.label}[/bold]  [dim]({result.count} stations, "
        f"{result.attempts} attempts)[/dim]",
        title_justify="left",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="bold cyan", overflow="fold")
    table.add_column("Country")
    table.add_column("Codec")
    table.add_column("Bitrate", justify="right")
    table.add_column("Stream", overflow="fold")

    for i, station in enumerate(result.stations, 1):
        table.add_row(
            str(i),
            station.name,
            station.country_code or station.country or "-",
            station.codec or "-",
            format_bitrate(station.bitrate),
            station.stream_url,
        )

    console.print(table)

    if not result.stations:
        console.print("[yellow]No stations found[/yellow]")

    if result.errors:
        console.print()
        console.print(f"[red]Errors ({len(result.errors)} shown):[/red]")
        for error in result.errors:
            console.print(f"  [red]- {error}[/red]", markup=False, highlight=False)


profile_option = click.option(
    "-p",
    "--profile",
    type=click.Choice([p.value for p in ProfileId]),
    default=ProfileId.AGENCY.value,
    show_default=True,
    help="Search profile.",
)
tag_option = click.option("--tag", help="Single tag replacing the profile's tags.")
country_option = click.option(
    "--country", help="Single country code replacing the profile's countries."
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """ondas - find playable radio stations for signage screens."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@main.command(name="profiles")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def profiles_cmd(as_json: bool) -> None:
    """List built-in search profiles."""
    if as_json:
        data = [p.model_dump(mode="json", by_alias=True) for p in RADIO_PROFILES.values()]
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return

    table = Table(title="Profiles", title_justify="left")
    table.add_column("ID", style="bold cyan")
    table.add_column("Label")
    table.add_column("Tags", overflow="fold")
    table.add_column("Countries")
    table.add_column("Codecs")
    table.add_column("Min kbps", justify="right")

    for profile in RADIO_PROFILES.values():
        table.add_row(
            profile.id,
            profile.label,
            ", ".join(profile.tags),
            ", ".join(c or "*" for c in profile.country_priority),
            ", ".join(profile.codecs),
            str(profile.bitrate_min),
        )
    Console().print(table)


@main.command(name="plan")
@profile_option
@tag_option
@country_option
def plan_cmd(profile: str, tag: str | None, country: str | None) -> None:
    """Show the ordered queries a search would run (no network access).

    \b
    Examples:
      ondas plan -p focus
      ondas plan -p agency --country BR
    """
    request = resolve_request(profile, tag=tag, country=country)
    attempts = plan_attempts(request)

    table = Table(
        title=f"{request.profile.label}  [dim]({len(attempts)} attempts)[/dim]",
        title_justify="left",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Country")
    table.add_column("Tag", style="cyan")
    table.add_column("Codec")
    for i, attempt in enumerate(attempts, 1):
        table.add_row(str(i), attempt.countrycode or "*", attempt.tag, attempt.codec)
    Console().print(table)


@main.command(name="search")
@profile_option
@tag_option
@country_option
@click.option(
    "-n", "--limit", type=int, default=None, help="Number of stations (10-120)."
)
@click.option(
    "--mirror",
    "mirrors",
    multiple=True,
    help="Mirror base URL (repeatable). Defaults to the built-in list.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Per-request timeout in seconds.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    profile: str,
    tag: str | None,
    country: str | None,
    limit: int | None,
    mirrors: tuple[str, ...],
    timeout: float | None,
    as_json: bool,
) -> None:
    """Search the radio directory for a profile's stations.

    \b
    Examples:
      ondas search -p chill
      ondas search -p focus --tag jazz -n 20
      ondas search --mirror https://de1.api.radio-browser.info --json
    """
    console = Console()
    setup_logging(verbose=ctx.obj.get("verbose", False), console=console)

    config = SearchConfig()
    if mirrors:
        config = replace(config, mirrors=mirrors)
    if timeout is not None:
        config = replace(config, timeout=timeout)

    try:
        with StationFinder(RadioBrowserClient(config=config), config) as finder:
            with console.status("Searching stations..."):
                result = finder.search(profile, tag=tag, country=country, limit=limit)
    except OndasError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        data = result.model_dump(mode="json", by_alias=True, exclude_none=True)
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print_result(console, result)


if __name__ == "__main__":
    main()
