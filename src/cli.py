"""CLI entry point for capture suites."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from src.loader import load_suites
from src.models.config import ProjectConfig
from src.models.suite import Suite
from src.url_utils import resolve_suite_url

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: str) -> ProjectConfig:
    try:
        return ProjectConfig.load(config)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config}[/red]")
        console.print("Run 'capture-suites init' to create a default config.")
        sys.exit(1)


def _load(cfg: ProjectConfig, paths: tuple[str, ...]) -> Suite:
    """Load suites, exiting with status 1 on any definition error."""
    try:
        return load_suites(paths or cfg.suite_paths, cfg)
    except (TypeError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]Invalid suite definition:[/red] {e}")
        sys.exit(1)


def _skip_label(suite: Suite, browser_ids: list[str]) -> str:
    skipped = [b for b in browser_ids if suite.should_skip(b)]
    if not skipped:
        return ""
    if len(skipped) == len(browser_ids):
        return "[yellow]all[/yellow]"
    return f"[yellow]{', '.join(skipped)}[/yellow]"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Declarative visual-regression suites"""
    setup_logging(verbose)


@cli.command()
@click.argument("paths", nargs=-1)
@click.option("--config", "-c", default="qa-config.json", help="Config file path")
def inspect(paths: tuple[str, ...], config: str) -> None:
    """Load suite files and show the suites, states and browsers they declare."""
    cfg = _load_config(config)
    root = _load(cfg, paths)

    table = Table(title="Suites")
    table.add_column("Suite", style="bold")
    table.add_column("URL")
    table.add_column("Tolerance")
    table.add_column("States")
    table.add_column("Browsers")
    table.add_column("Skipped")
    for suite in root.iter_suites():
        if suite.is_root:
            continue
        table.add_row(
            suite.full_name,
            resolve_suite_url(cfg.root_url, suite.url),
            "" if suite.tolerance is None else str(suite.tolerance),
            ", ".join(state.name for state in suite.states),
            ", ".join(suite.browsers),
            _skip_label(suite, suite.browsers),
        )
    console.print(table)


@cli.command()
@click.argument("paths", nargs=-1)
@click.option("--config", "-c", default="qa-config.json", help="Config file path")
def validate(paths: tuple[str, ...], config: str) -> None:
    """Check that suite files declare valid suites."""
    root = _load(_load_config(config), paths)
    console.print(f"[green]OK:[/green] {len(root.deep_states)} states declared")


@cli.command()
@click.option("--config", "-c", default="qa-config.json", help="Config file path")
def browsers(config: str) -> None:
    """List the configured browsers."""
    cfg = _load_config(config)

    table = Table(title="Browsers")
    table.add_column("Browser", style="bold")
    table.add_column("Window size")
    table.add_column("Capabilities")
    for browser_id, browser in cfg.browsers.items():
        table.add_row(
            browser_id,
            browser.window_size or "",
            ", ".join(f"{k}={v}" for k, v in browser.desired_capabilities.items()),
        )
    console.print(table)


@cli.command()
@click.option("--root-url", "-u", prompt="Root URL", help="Base URL of the site under test")
def init(root_url: str) -> None:
    """Create a default configuration file."""
    config_path = Path("qa-config.json")
    if config_path.exists():
        if not click.confirm("qa-config.json already exists. Overwrite?"):
            return

    cfg = ProjectConfig(root_url=root_url)
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nPut suite files under qa-suites/ and run:")
    console.print("  [blue]capture-suites inspect[/blue]")


if __name__ == "__main__":
    cli()
