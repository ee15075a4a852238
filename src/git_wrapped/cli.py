"""CLI interface for Git Wrapped."""

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.logging import RichHandler

from git_wrapped import __version__
from git_wrapped.config import Config, get_config
from git_wrapped.exceptions import GitWrappedError
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.output.console import Console as OutputConsole
from git_wrapped.output.json_writer import write_json_report
from git_wrapped.sdk import PLATFORMS, GitWrapped
from git_wrapped.services.demo import DEMO_USERNAME
from git_wrapped.utils.rate_limiter import (
    check_and_report_rate_limit,
    check_rate_limit_from_api,
)

app = typer.Typer(
    name="git-wrapped",
    help="Your year in code, from GitHub or GitLab activity",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route library logging through rich at WARNING, INFO or DEBUG."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"git-wrapped version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Git Wrapped - Your year in code."""
    pass


@app.command()
def wrap(
    username: str = typer.Argument(..., help="Username to wrap (use 'demo' for sample data)"),
    platform: str = typer.Option(
        "github",
        "--platform",
        "-p",
        help="Platform: github or gitlab",
    ),
    year: Optional[int] = typer.Option(
        None,
        "--year",
        "-y",
        min=2008,
        help="Year to wrap (defaults to the current year)",
    ),
    tz: Optional[str] = typer.Option(
        None,
        "--timezone",
        "-t",
        help="IANA timezone for hour-of-day stats (e.g. Europe/Berlin)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path",
    ),
    json_only: bool = typer.Option(
        False,
        "--json-only",
        help="Write the JSON report without printing the summary",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output"),
):
    """Build a year-in-review for a GitHub or GitLab user.

    Examples:
        git-wrapped wrap torvalds --year 2024
        git-wrapped wrap my-user --platform gitlab
        git-wrapped wrap demo
    """
    configure_logging(verbose=verbose, debug=debug)

    platform = platform.lower()
    if platform not in PLATFORMS:
        console.print(f"[red]Unknown platform: {platform}. Use github or gitlab[/red]")
        raise typer.Exit(1)

    config = get_config()
    if tz:
        try:
            ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError):
            console.print(f"[red]Unknown timezone: {tz}[/red]")
            raise typer.Exit(1)
        config = replace(config, timezone=tz)

    output_console = OutputConsole(verbose=verbose, quiet=quiet or json_only)

    try:
        report = asyncio.run(
            _run_wrap(
                username=username,
                platform=platform,
                year=year,
                config=config,
                output_console=output_console,
            )
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(1)
    except GitWrappedError as e:
        console.print(f"[red]Error: {e}[/red]")
        if debug:
            console.print_exception()
        raise typer.Exit(1)

    if report is None:
        raise typer.Exit(1)

    output_console.print_report(report)
    output_file = write_json_report(report, output)
    output_console.print_output_path(str(output_file))
    if json_only and not quiet:
        console.print(str(output_file), soft_wrap=True)


async def _run_wrap(
    username: str,
    platform: str,
    year: Optional[int],
    config: Config,
    output_console: OutputConsole,
) -> Optional[WrappedReport]:
    """Collect the report; None when the GitHub budget is exhausted."""
    is_demo = username.lower() == DEMO_USERNAME

    if platform == "github" and not is_demo:
        if not config.is_authenticated:
            output_console.print_warning(
                "No GitHub token found. Using the public contribution calendar "
                "and unauthenticated access (60 requests/hour).\n"
                "Set GITHUB_TOKEN for private contributions and higher rate limits."
            )
        rate_info = await check_rate_limit_from_api(
            api_url=config.github_api_url,
            token=config.github_token,
        )
        if not check_and_report_rate_limit(rate_info, config.is_authenticated):
            return None

    async with GitWrapped(config=config) as client:
        with output_console.create_progress() as progress:
            progress.add_task(f"Wrapping {username} on {platform}...", total=None)
            report = await client.wrap(username, platform=platform, year=year)

    output_console.print_verbose(
        f"[dim]Collected {len(report.velocity)} days and "
        f"{len(report.top_repos)} ranked repositories[/dim]"
    )
    return report


@app.command()
def check_token():
    """Check GitHub and GitLab token configuration and rate limits."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print(f"Rate limit: {config.effective_rate_limit} requests/hour")
        console.print("Contribution calendar: GraphQL (includes private contributions)")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print(f"Rate limit: {config.effective_rate_limit} requests/hour")
        console.print("Contribution calendar: public calendar service")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print("Create a token at: https://github.com/settings/tokens")

    console.print()
    if config.has_gitlab_token:
        console.print("[green]GitLab token is configured[/green]")
        console.print(f"GitLab API: {config.gitlab_api_url}")
    else:
        console.print("[yellow]No GitLab token configured[/yellow]")
        console.print("GitLab wraps need a token with read_api scope:")
        console.print("  export GITLAB_TOKEN=your_token_here")


if __name__ == "__main__":
    app()
