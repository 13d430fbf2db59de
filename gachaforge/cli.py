"""Command line helpers for GachaForge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from random import Random

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import GachaForgeConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.pull_simulator import PullSimulator
from .domain.items import Rarity
from .loaders import load_catalog_from_json, validate_catalog_file
from .registry import GachaRegistry
from .validators import validate_registry

console = Console()


def run_simulator(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="GachaForge pull simulator")
    parser.add_argument("catalog", help="Path to catalog JSON file")
    parser.add_argument("banner_id", help="Banner identifier to simulate")
    parser.add_argument("--pulls", type=int, default=None, help="Number of pulls to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--pity", type=int, default=0, help="Starting pity counter")
    parser.add_argument("--gem-value", type=float, default=None, help="Real-money value of one gem")
    parser.add_argument("--active-users", type=int, default=None, help="Users for revenue projection")
    parser.add_argument("--verbose", action="store_true", help="Log individual pulls")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    config = GachaForgeConfig.from_env()
    registry = _load_registry(Path(args.catalog), config)

    seed = args.seed if args.seed is not None else config.rng_seed
    rng = Random(seed) if seed is not None else Random()
    banner = registry.banners.get_banner(args.banner_id)
    simulator = PullSimulator(registry.items_for(banner.banner_id), rng=rng)
    report = simulator.simulate(
        banner,
        pulls=args.pulls if args.pulls is not None else config.simulation.pulls,
        pity=args.pity,
        gem_value=args.gem_value if args.gem_value is not None else config.simulation.gem_value,
        active_users=(
            args.active_users if args.active_users is not None else config.simulation.active_users
        ),
    )

    table = Table(title=f"{banner.name}: {report.pulls} pulls")
    table.add_column("Rarity")
    table.add_column("Pulls", justify="right")
    table.add_column("Observed", justify="right")
    table.add_column("Base rate", justify="right")
    for rarity in reversed(Rarity):
        table.add_row(
            rarity.value,
            str(report.rarity_counts[rarity.value]),
            f"{report.rarity_rate(rarity):.2%}",
            f"{banner.rates.get(rarity):.2%}",
        )
    console.print(table)
    console.print(
        f"Pity triggers: {report.pity_triggers} ({report.pity_trigger_rate:.2%}), "
        f"final pity: {report.final_pity}"
    )
    console.print(f"New items: {report.uniques}, duplicates: {report.duplicates}")
    if report.revenue is not None:
        console.print(f"Projected revenue: [bold green]{report.revenue:,.2f}[/bold green]")


def run_validate(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="GachaForge catalog validator")
    parser.add_argument("catalog", help="Path to catalog JSON file")
    args = parser.parse_args(argv)

    path = Path(args.catalog)
    errors = validate_catalog_file(path)
    if not errors:
        errors = validate_registry(_load_registry(path, GachaForgeConfig.from_env()))
    if errors:
        console.print("[bold red]Catalog errors:[/bold red]")
        for err in errors:
            console.print(f"- {escape(err)}")
        sys.exit(1)
    console.print("Catalog is valid ✅")


def run_checklist(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="GachaForge balance checks")
    parser.add_argument("catalog", help="Path to catalog JSON file")
    args = parser.parse_args(argv)

    registry = _load_registry(Path(args.catalog), GachaForgeConfig.from_env())
    issues = [
        issue
        for banner in registry.banners.iter_banners()
        for issue in checklist_run(banner, registry.catalog)
    ]
    if not issues:
        console.print("No issues found ✅")
        return
    for issue in issues:
        style = "red" if issue.severity == "error" else "yellow"
        label = escape(f"[{issue.severity.upper()}]")
        console.print(f"[{style}]{label}[/{style}] {escape(issue.message)}")
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def _load_registry(path: Path, config: GachaForgeConfig) -> GachaRegistry:
    registry = GachaRegistry()
    load_catalog_from_json(registry, path, defaults=config.banner)
    return registry


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
