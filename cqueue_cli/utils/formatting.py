"""Rich Formatting Utilities for CLI Output"""

from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

STATUS_STYLES = {
    "QUEUED": "yellow",
    "IN_PROGRESS": "cyan",
    "CONCLUDED": "green",
    "CANCELLED": "red",
}


def print_success(message: str):
    """Print success message with green styling"""
    console.print(f"[green]✓ {message}[/green]")


def print_error(message: str):
    """Print error message with red styling"""
    console.print(f"[red]✗ {message}[/red]")


def print_info(message: str):
    """Print info message with blue styling"""
    console.print(f"[blue]ℹ {message}[/blue]")


def create_job_panel(job: dict[str, Any], title: str = "Job") -> Panel:
    """Create formatted panel for a single job"""
    status = job.get("Status", "")
    style = STATUS_STYLES.get(status, "white")
    content = (
        f"• ID: [cyan]{job.get('ID', '—')}[/cyan]\n"
        f"• Type: [magenta]{job.get('Type', '—')}[/magenta]\n"
        f"• Status: [{style}]{status or '—'}[/{style}]"
    )
    return Panel(content, title=title, border_style=style)


def create_stats_table(stats: dict[str, Any]) -> Table:
    """Create a formatted table for job statistics"""
    table = Table(title="Job Statistics", box=box.ROUNDED)

    table.add_column("Status", justify="left", style="bold")
    table.add_column("Jobs", justify="right", style="cyan")

    rows = [
        ("Queued", "QUEUED"),
        ("InProgress", "IN_PROGRESS"),
        ("Concluded", "CONCLUDED"),
        ("Cancelled", "CANCELLED"),
    ]
    total = 0
    for key, status in rows:
        count = stats.get(key, 0)
        total += count
        style = STATUS_STYLES[status]
        table.add_row(f"[{style}]{status}[/{style}]", str(count))

    table.add_row("[bold]TOTAL[/bold]", f"[bold]{total}[/bold]")
    return table


def format_uptime(millis: int) -> str:
    """Render an uptime in milliseconds as e.g. '1h 02m 03s'"""
    seconds = millis // 1000
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    if hours:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    if minutes:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"
