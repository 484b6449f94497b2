"""cqueue CLI - Main Entry Point"""

import typer
from rich.console import Console
from rich.panel import Panel

from .commands import config, jobs, worker
from .utils.formatting import print_error, print_info
from .utils.config_manager import config as config_manager
from .client.endpoints import CQueueClient, CQueueError

console = Console()

app = typer.Typer(
    name="cqueue",
    help="📬 cqueue - in-memory job queue",
    rich_markup_mode="rich",
)

app.add_typer(jobs.app, name="jobs")
app.add_typer(worker.app, name="worker")
app.add_typer(config.app, name="config")


@app.command()
def status():
    """📊 Check API connectivity and queue depth"""
    base_url = config_manager.get("api.base_url")
    print_info(f"Checking connection to: {base_url}")

    try:
        with CQueueClient(base_url) as client:
            health = client.health_check()
    except CQueueError as e:
        print_error(f"Failed to connect: {e}")
        console.print(Panel(
            f"🚫 [red]Connection Failed[/red]\n\n"
            f"Make sure the cqueue API is running at:\n"
            f"[blue]{base_url}[/blue]\n\n"
            f"You can update the API URL with:\n"
            f"[cyan]cqueue config set api.base_url <url>[/cyan]",
            title="Connection Error",
            border_style="red"
        ))
        raise typer.Exit(1) from None

    queue = health.get("queue", {})
    console.print(Panel(
        f"🚀 [green]Connected Successfully![/green]\n\n"
        f"• Version: [cyan]{health.get('version', 'unknown')}[/cyan]\n"
        f"• Environment: [yellow]{health.get('environment', 'unknown')}[/yellow]\n"
        f"• Pending jobs: [magenta]{queue.get('pending', 0)}[/magenta]\n"
        f"• In progress: [magenta]{queue.get('in_progress', 0)}[/magenta]\n"
        f"• API URL: [blue]{base_url}[/blue]",
        title="System Status",
        border_style="green"
    ))


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"
    ),
):
    """🖥 Run the job queue API server"""
    import uvicorn

    from cqueue.config.logging import setup_logging
    from cqueue.config.settings import settings

    if log_level:
        level = log_level.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            print_error(f"Unknown log level: {log_level}")
            raise typer.Exit(1)
        settings.log_level = level
        setup_logging(level)

    uvicorn.run(
        "cqueue.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
        workers=settings.workers,
    )


@app.command()
def version():
    """📎 Show CLI version information"""
    from . import __version__

    console.print(Panel(
        f"📬 [bold cyan]cqueue CLI[/bold cyan]\n\n"
        f"• Version: [green]{__version__}[/green]",
        title="Version Info",
        border_style="cyan"
    ))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    show_version: bool = typer.Option(
        False, "--version", help="Show version and exit", is_eager=True
    ),
):
    """
    📬 cqueue CLI

    Submit jobs, run a worker and inspect the in-memory job queue.
    """
    if show_version:
        from . import __version__
        console.print(f"cqueue CLI v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
