"""invoicegen CLI.

Commands:
- generate: Render the sample invoice to PDF
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import structlog
import typer
from rich.console import Console

from invoicegen.builder import InvoiceGenerationError, generate_invoice
from invoicegen.config import get_config
from invoicegen.core.logging import configure_logging
from invoicegen.layout import RowBuildError

app = typer.Typer(
    name="invoicegen",
    help="invoicegen - one-page invoice PDFs",
    no_args_is_help=True,
)

console = Console()
logger = structlog.get_logger()


@app.callback()
def main() -> None:
    """Render invoices with ReportLab."""


@app.command()
def generate(
    output: Path | None = typer.Option(None, "--output", "-o", help="Output PDF path"),
    logo: Path | None = typer.Option(None, "--logo", help="Logo image path"),
    total_mode: str | None = typer.Option(
        None, "--total-mode", help="fixed (configured amount) or computed (sum of items)"
    ),
):
    """Render the sample invoice to PDF."""
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {e}")
        raise typer.Exit(code=1)

    configure_logging(config.log_level, config.json_logs)

    if logo is not None:
        config = replace(config, assets=replace(config.assets, logo_path=logo))
    if total_mode is not None:
        if total_mode not in ("fixed", "computed"):
            console.print(f"[red]✗[/red] Unknown total mode: {total_mode}")
            raise typer.Exit(code=1)
        config = replace(config, invoice=replace(config.invoice, total_mode=total_mode))

    try:
        path = generate_invoice(config, output_path=output)
    except (InvoiceGenerationError, RowBuildError) as e:
        logger.error("invoice_generation_failed", error=str(e))
        console.print(f"[red]✗[/red] Failed: {e}")
        raise typer.Exit(code=1)

    console.print(f"[bold green]✓[/bold green] PDF saved to {path}")


if __name__ == "__main__":
    app()
