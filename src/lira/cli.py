"""Lira CLI entry point."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from lira.container import get_container
from lira.enums import QuantumHealth
from lira.exceptions import DispatchValidationError
from lira.logging import configure_logging
from lira.services import BatchExecutionResult

app = typer.Typer(name="lira", help="Agent registry and execution dispatcher")
console = Console()

STATUS_STYLES = {
    QuantumHealth.OPERATIONAL: "green",
    QuantumHealth.DEGRADED: "yellow",
    QuantumHealth.DOWN: "red",
}


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the HTTP API"""
    import uvicorn

    uvicorn.run(
        "lira.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Use structlog instead
    )


@app.command()
def execute(
    agent_ids: list[str] = typer.Argument(..., help="Agent IDs to run, in order"),
    input_data: str = typer.Option(..., "--input", "-i", help="Input shared by every agent"),
    timeout: float | None = typer.Option(None, help="Per-agent deadline in seconds"),
):
    """Run one or more agents against an input"""
    configure_logging()
    container = get_container()
    container.configure()

    async def run() -> BatchExecutionResult:
        try:
            return await container.dispatcher.run_batch(agent_ids, input_data, timeout=timeout)
        finally:
            await container.close()

    try:
        batch = asyncio.run(run())
    except DispatchValidationError as e:
        console.print(f"Invalid request: {e.message}", style="bold red")
        raise typer.Exit(code=2) from e

    table = Table(title="Execution results")
    table.add_column("Agent")
    table.add_column("Status")
    table.add_column("Confidence", justify="right")
    table.add_column("Output / reason")

    for result in batch.results:
        if result.succeeded:
            table.add_row(
                result.agent_id,
                "[green]succeeded[/green]",
                f"{result.confidence:.2f}",
                result.output or "",
            )
        else:
            table.add_row(result.agent_id, "[red]failed[/red]", "-", result.reason or "")

    console.print(table)
    console.print(f"{batch.succeeded_count} succeeded, {batch.failed_count} failed")

    if batch.failed_count:
        raise typer.Exit(code=1)


@app.command("quantum-status")
def quantum_status():
    """Probe the quantum oracle"""
    configure_logging()
    container = get_container()
    container.configure()

    async def probe():
        try:
            return await container.dispatcher.probe_quantum_status()
        finally:
            await container.close()

    status = asyncio.run(probe())
    style = STATUS_STYLES[status.status]
    console.print(f"Quantum oracle: {status.status.value}", style=f"bold {style}")
    console.print(f"Available qubits: {status.available_units}")
    console.print(f"Queue depth: {status.queue_depth}")
    console.print(f"Active jobs: {status.active_jobs}")
    console.print(f"Uptime: {status.uptime_fraction:.1%}")


if __name__ == "__main__":
    app()
