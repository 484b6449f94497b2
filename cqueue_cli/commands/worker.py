"""Worker Commands - Drain the job queue"""

import typer
from rich.console import Console

from ..client.endpoints import CQueueClient, CQueueError
from ..utils.config_manager import config
from ..utils.formatting import print_error, print_success
from ..worker import QueueWorker

console = Console()
app = typer.Typer(name="worker", help="Queue worker commands")


@app.command("run")
def run_worker(
    max_jobs: int | None = typer.Option(
        None, "--max-jobs", "-m", min=1, help="Stop after N jobs"
    ),
    poll_interval: float | None = typer.Option(
        None, "--poll-interval", "-p", min=0.0, help="Seconds between empty polls"
    ),
    once: bool = typer.Option(
        False, "--once", help="Exit as soon as the queue is empty"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each job"),
):
    """⚙️ Dequeue jobs and conclude them until stopped"""
    if verbose:
        from cqueue.config.logging import setup_logging

        setup_logging("INFO")

    base_url = config.get("api.base_url")
    interval = (
        poll_interval
        if poll_interval is not None
        else float(config.get("worker.poll_interval", 1.0))
    )

    try:
        with CQueueClient(base_url) as client:
            worker = QueueWorker(client, poll_interval=interval)
            processed = worker.run(max_jobs=max_jobs, once=once)
    except KeyboardInterrupt:
        console.print("\n[yellow]Worker interrupted[/yellow]")
        raise typer.Exit(130) from None
    except CQueueError as e:
        print_error(f"Worker stopped: {e}")
        raise typer.Exit(1) from None

    print_success(
        f"Processed {processed} job(s): "
        f"{worker.concluded} concluded, {worker.cancelled} cancelled"
    )
