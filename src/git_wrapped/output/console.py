"""Rich console output for wrapped reports."""

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.scoring.velocity import WEEKDAY_LABELS

BAR_WIDTH = 30


def _bar(value: int, maximum: int, width: int = BAR_WIDTH) -> str:
    if maximum <= 0:
        return ""
    return "█" * round(width * value / maximum)


def _format_hour(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12} {suffix}"


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_verbose(self, *args, **kwargs):
        """Print only in verbose mode."""
        if self.verbose and not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def create_progress(self) -> Progress:
        """Spinner shown while the report is collected."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
            disable=self.quiet,
        )

    def print_title(self, report: WrappedReport):
        name = escape(report.display_name or report.username)
        self.console.print()
        self.console.print(
            Panel(
                f"[bold magenta]{name}'s {report.year} Wrapped[/bold magenta]\n"
                f"[dim]{report.platform} · @{report.username}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_velocity(self, report: WrappedReport):
        table = Table(title="Velocity", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Total Commits", f"{report.total_commits:,}")
        table.add_row("Longest Streak", f"{report.longest_streak} days")
        table.add_row("Busiest Day", report.busiest_day)
        active_days = sum(1 for day in report.velocity if day.count > 0)
        table.add_row("Active Days", str(active_days))

        self.console.print(table)
        self.console.print()

    def print_routine(self, report: WrappedReport):
        table = Table(title="Weekly Routine", expand=False)
        table.add_column("Day")
        table.add_column("Commits", justify="right")
        table.add_column("")

        peak = max(report.weekday_stats, default=0)
        for label, count in zip(WEEKDAY_LABELS, report.weekday_stats):
            table.add_row(label, str(count), f"[green]{_bar(count, peak)}[/green]")

        self.console.print(table)
        self.console.print()

    def print_productivity(self, report: WrappedReport):
        productivity = report.productivity
        self.console.print(
            f"[bold]Peak hour:[/bold] {_format_hour(productivity.peak_hour)} "
            f"([cyan]{productivity.time_of_day.value}[/cyan])"
        )
        self.console.print()

    def print_composition(self, report: WrappedReport):
        breakdown = report.contribution_breakdown
        table = Table(title="Contribution Mix", expand=False)
        table.add_column("Type")
        table.add_column("Count", justify="right")
        table.add_column("Share", justify="right")

        for label, count in (
            ("Commits", breakdown.commits),
            ("Pull Requests", breakdown.prs),
            ("Issues", breakdown.issues),
            ("Code Reviews", breakdown.reviews),
        ):
            table.add_row(label, f"{count:,}", f"{breakdown.share(count) * 100:.1f}%")

        self.console.print(table)
        self.console.print()

    def print_community(self, report: WrappedReport):
        community = report.community
        table = Table(title="Community", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Followers", f"{community.followers:,}")
        table.add_row("Following", f"{community.following:,}")
        table.add_row("Total Stars", f"{community.total_stars:,}")
        table.add_row("Public Repos", str(community.public_repos))

        self.console.print(table)
        self.console.print()

    def print_languages(self, report: WrappedReport):
        table = Table(title="Top Languages", expand=False)
        table.add_column("Language")
        table.add_column("Share", justify="right")
        table.add_column("")

        for share in report.top_languages:
            table.add_row(
                f"[{share.color}]{share.name}[/]",
                f"{share.percentage}%",
                f"[{share.color}]{_bar(share.percentage, 100, 20)}[/]",
            )

        self.console.print(table)
        self.console.print()

    def print_top_repos(self, report: WrappedReport):
        table = Table(title="Top Repositories", expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Repository")
        table.add_column("Language")
        table.add_column("Stars", justify="right")
        table.add_column("Score", justify="right", style="dim")

        repos = report.top_repos or [report.top_repo]
        for rank, card in enumerate(repos, start=1):
            score = "-" if card.score is None else f"{card.score:.2f}"
            table.add_row(str(rank), card.name, card.language, f"{card.stars:,}", score)

        self.console.print(table)
        top = report.top_repo
        self.console.print(f"[dim]{escape(top.description)}[/dim]")
        self.console.print()

    def print_archetype(self, report: WrappedReport):
        self.console.print(
            Panel(
                f"[bold yellow]{report.archetype.title}[/bold yellow]",
                title="Your Archetype",
                expand=False,
            )
        )

    def print_report(self, report: WrappedReport):
        """Print every section of the report, slide by slide."""
        if self.quiet:
            return

        self.print_title(report)
        self.print_velocity(report)
        self.print_routine(report)
        self.print_productivity(report)
        self.print_composition(report)
        self.print_community(report)
        self.print_languages(report)
        self.print_top_repos(report)
        self.print_archetype(report)

    def print_output_path(self, path: str):
        if not self.quiet:
            self.console.print(f"\n[green]Report saved to:[/green] {path}", soft_wrap=True)
