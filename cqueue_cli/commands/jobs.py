"""Job Commands - Submit, inspect and transition jobs"""

import typer
from rich.console import Console

from cqueue.v1.jobs.models import JobType

from ..client.endpoints import CQueueClient, CQueueError, QueueEmpty
from ..utils.config_manager import config
from ..utils.formatting import (
    create_job_panel,
    create_stats_table,
    format_uptime,
    print_error,
    print_info,
    print_success,
)

console = Console()
app = typer.Typer(name="jobs", help="Job queue commands")


@app.command("enqueue")
def enqueue_job(
    job_type: JobType = typer.Option(
        JobType.NOT_TIME_CRITICAL, "--type", "-t", help="Job type"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of jobs"),
):
    """📥 Submit one or more jobs"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            for _ in range(count):
                result = client.enqueue(job_type.value)
                print_success(f"Enqueued job {result['ID']} ({job_type.value})")
    except CQueueError as e:
        print_error(f"Failed to enqueue job: {e}")
        raise typer.Exit(1) from None


@app.command("dequeue")
def dequeue_job():
    """📤 Take the next pending job and mark it in progress"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            job = client.dequeue()
            console.print(create_job_panel(job, title="Dequeued Job"))
    except QueueEmpty:
        print_info("No jobs waiting in the queue")
    except CQueueError as e:
        print_error(f"Failed to dequeue job: {e}")
        raise typer.Exit(1) from None


@app.command("conclude")
def conclude_job(
    job_id: int = typer.Argument(..., help="Job ID to conclude"),
):
    """✅ Mark an in-progress job as concluded"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            job = client.conclude(job_id)
            console.print(create_job_panel(job, title="Concluded Job"))
    except CQueueError as e:
        print_error(f"Failed to conclude job {job_id}: {e}")
        raise typer.Exit(1) from None


@app.command("cancel")
def cancel_job(
    job_id: int = typer.Argument(..., help="Job ID to cancel"),
):
    """🛑 Cancel a queued or in-progress job"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            job = client.cancel(job_id)
            console.print(create_job_panel(job, title="Cancelled Job"))
    except CQueueError as e:
        print_error(f"Failed to cancel job {job_id}: {e}")
        raise typer.Exit(1) from None


@app.command("show")
def show_job(
    job_id: int = typer.Argument(..., help="Job ID to show"),
):
    """🔍 Show a job's current status"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            job = client.get_job(job_id)
            console.print(create_job_panel(job))
    except CQueueError as e:
        print_error(f"Failed to fetch job {job_id}: {e}")
        raise typer.Exit(1) from None


@app.command("stats")
def show_stats():
    """📊 Show job counts by status"""
    base_url = config.get("api.base_url")

    try:
        with CQueueClient(base_url) as client:
            stats = client.stats()
    except CQueueError as e:
        print_error(f"Failed to fetch stats: {e}")
        raise typer.Exit(1) from None

    console.print(create_stats_table(stats))
    console.print(f"\n⏱ Uptime: [cyan]{format_uptime(stats.get('UptimeMillis', 0))}[/cyan]")
