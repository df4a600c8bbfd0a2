"""CLI entry point for nbpopulate."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from nbpopulate.config import PopulateConfig, load_config
from nbpopulate.config.loader import DEFAULT_CONFIG_TEMPLATE
from nbpopulate.contents import ContentsError, LocalContents
from nbpopulate.sync import SyncOrchestrator, SyncReport

app = typer.Typer(
    name="nbpopulate",
    help="Populate a notebook workspace from bundled assets and a GitHub directory.",
)

config_app = typer.Typer(help="Manage nbpopulate configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: PopulateConfig | None = None


def _get_config() -> PopulateConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to nbpopulate.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as exc:
        rprint(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="[nbpopulate] %(levelname)s %(name)s: %(message)s",
    )


def _display_report(report: SyncReport) -> None:
    table = Table(title="Workspace Populate")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Written", str(len(report.written)))
    table.add_row("Skipped", str(len(report.skipped)))
    table.add_row("Errors", str(len(report.errors)))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)

    for err in report.errors:
        rprint(f"  [red]error:[/red] ({err.phase}) {err.path}: {err.error}")


@app.command()
def sync(
    contents_root: Annotated[
        str, typer.Option("--contents-root", "-r", help="Directory served as the content store")
    ] = "",
    no_remote: Annotated[
        bool, typer.Option("--no-remote", help="Only copy bundled assets")
    ] = False,
) -> None:
    """Copy bundled assets and remote notebooks into the workspace, keeping existing files."""
    cfg = _get_config()
    if no_remote:
        cfg = cfg.model_copy(
            update={"remote": cfg.remote.model_copy(update={"enabled": False})}
        )

    root = Path(contents_root or cfg.workspace.contents_root)
    if not root.is_dir():
        rprint(f"[red]Error:[/red] contents root not found: {root}")
        raise typer.Exit(1)

    orchestrator = SyncOrchestrator(LocalContents(root), cfg)
    try:
        report = asyncio.run(orchestrator.run())
    except ContentsError as exc:
        rprint(f"[red]Populate aborted:[/red] {exc}")
        raise typer.Exit(1) from exc

    _display_report(report)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default nbpopulate.yaml in current directory."""
    target = Path("nbpopulate.yaml")
    if target.exists() and not force:
        rprint("[yellow]nbpopulate.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
