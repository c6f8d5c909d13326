"""Texas Hold'em equity calculator."""

import re
import threading
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from analysis.explain import explain_equity
from config.settings import DEFAULT_CONFIG, Config, load_config, save_config
from poker.cards import Card, parse_cards
from poker.errors import PokerError, SimulationCancelled
from poker.hand_evaluator import best_hand, evaluate as evaluate_cards
from recognition.parser import fill_community_cards, parse_recognized_cards
from simulation.equity import EquityResult, EquitySimulator, TiePolicy
from simulation.runner import run_parallel
from simulation.statistics import measure_stability, plot_convergence
from ui.display import (
    render_community_cards,
    render_equity_result,
    render_explanation,
    render_hole_cards,
    render_stability,
)
from utils.logging_setup import setup_logging

app = typer.Typer(
    name="holdem-equity",
    help="Texas Hold'em equity against one random opponent hand.",
)
console = Console()


def _split_cards(text: str | None) -> list[str]:
    """Split 'As Kd,Qh' style input into tokens."""
    if not text:
        return []
    return [token for token in re.split(r"[\s,]+", text) if token]


def _parse_or_exit(tokens: list[str]) -> list[Card]:
    try:
        return parse_cards(tokens)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


@app.command()
def equity(
    hole: list[str] = typer.Argument(..., help="Hole cards (e.g., As Kh)"),
    board: Optional[str] = typer.Option(None, "--board", "-b", help="Community cards (e.g., 'Qs Jd 2c')"),
    trials: Optional[int] = typer.Option(None, "--trials", "-n", help="Number of Monte Carlo trials"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Worker processes"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    split_ties: bool = typer.Option(False, "--split-ties", help="Count ties as half a win"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Explain the result"),
    repeat: int = typer.Option(0, "--repeat", "-r", help="Also run N independent estimates and compare"),
    plot: Optional[str] = typer.Option(None, "--plot", help="Save a convergence plot to this path"),
    max_seconds: Optional[float] = typer.Option(None, "--max-seconds", help="Cancel if the run takes longer"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Estimate equity for two hole cards and an optional board."""
    setup_logging(verbose)

    try:
        config = load_config(config_path) if config_path else Config()
        # Command-line options override the file; replace() re-runs validation
        sim = replace(
            config.simulation,
            trials=trials if trials is not None else config.simulation.trials,
            workers=workers if workers is not None else config.simulation.workers,
            seed=seed if seed is not None else config.simulation.seed,
            tie_policy=TiePolicy.SPLIT.value if split_ties else config.simulation.tie_policy,
        )
        if repeat < 0 or repeat == 1:
            raise ValueError(f"--repeat needs 0 or at least 2 runs, got {repeat}")
    except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    explain = explain or config.display.explain

    hole_cards = _parse_or_exit(hole)
    community = _parse_or_exit(_split_cards(board))

    try:
        best = best_hand(hole_cards, community)
    except PokerError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    record_every = sim.record_every
    if plot and not record_every:
        record_every = max(1, sim.trials // 200)

    cancel = threading.Event()
    timer = threading.Timer(max_seconds, cancel.set) if max_seconds is not None else None

    try:
        if timer is not None:
            timer.start()
        if sim.workers > 1:
            result = run_parallel(
                hole_cards,
                community,
                trials=sim.trials,
                workers=sim.workers,
                seed=sim.seed,
                tie_policy=sim.policy,
                show_progress=True,
                cancel=cancel,
            )
        else:
            simulator = EquitySimulator(trials=sim.trials, tie_policy=sim.policy, seed=sim.seed)
            with console.status(f"Simulating {sim.trials:,} trials..."):
                result = simulator.run(hole_cards, community, cancel=cancel, record_every=record_every)
    except SimulationCancelled as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(1)
    finally:
        if timer is not None:
            timer.cancel()

    console.print(render_equity_result(hole_cards, community, result, best))

    if explain:
        text = explain_equity(
            hole_cards,
            community,
            result.equity,
            max_listed=config.display.max_beating_hands,
        )
        console.print(render_explanation(text))

    if repeat:
        report = measure_stability(
            hole_cards, community, runs=repeat, trials=sim.trials, seed=sim.seed, tie_policy=sim.policy
        )
        console.print(render_stability(report))

    if plot:
        _save_plot(result, plot)


def _save_plot(result: EquityResult, path: str) -> None:
    if not result.history:
        console.print("[yellow]No convergence history recorded (parallel runs skip it).[/yellow]")
        return
    plot_convergence(result, save_path=path)
    console.print(f"Saved convergence plot to [cyan]{path}[/cyan]")


@app.command()
def evaluate(
    cards: list[str] = typer.Argument(..., help="2 to 7 cards (e.g., As Ks Qs Js Ts)"),
) -> None:
    """Show the best hand formable from the given cards."""
    parsed = _parse_or_exit(cards)
    try:
        strength = evaluate_cards(parsed)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"{render_hole_cards(parsed)}")
    console.print(f"[bold]{strength.label}[/bold]")
    console.print(f"[dim]Category {int(strength.category)} ({strength.category}), score {strength.score}[/dim]")


@app.command(name="parse-cards")
def parse_cards_cmd(
    path: Path = typer.Argument(..., help="Text file with one '<rank> of <suit>' line per card"),
) -> None:
    """Parse card-recognition output into board cards."""
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)

    recognized = parse_recognized_cards(path.read_text())
    if not recognized:
        console.print("[yellow]No cards recognized.[/yellow]")
        raise typer.Exit(1)

    community = fill_community_cards(recognized)
    console.print(f"Recognized {len(recognized)} card(s): {render_hole_cards(recognized)}")
    console.print(f"Board: {render_community_cards(community)}")
    console.print(" ".join(str(card) for card in community))


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("equity.yaml"), help="Where to write the config"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite).[/yellow]")
        raise typer.Exit(1)
    save_config(DEFAULT_CONFIG, path)
    console.print(f"Wrote default configuration to [cyan]{path}[/cyan]")


@app.command()
def info() -> None:
    """Show the default configuration."""
    console.print("\n[bold blue]Default Configuration[/bold blue]")
    console.print("=" * 50)

    config = Config()

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Simulation", "Trials", f"{config.simulation.trials:,}")
    table.add_row("Simulation", "Tie policy", config.simulation.tie_policy)
    table.add_row("Simulation", "Workers", str(config.simulation.workers))
    table.add_row("Simulation", "Seed", str(config.simulation.seed))
    table.add_row("Display", "Explain", str(config.display.explain))
    table.add_row("Display", "Max beating hands", str(config.display.max_beating_hands))

    console.print(table)


@app.command()
def benchmark(
    trials: int = typer.Option(15000, "--trials", "-n", help="Trials per run"),
    workers: int = typer.Option(1, "--workers", "-w", help="Worker processes"),
) -> None:
    """Benchmark simulation speed on a preflop hand."""
    console.print("\n[bold blue]Benchmark[/bold blue]")
    console.print("=" * 50)

    hole_cards = parse_cards(["As", "Kd"])
    console.print(f"Running {trials:,} trials with {workers} worker(s)...")

    start = time.time()
    result = run_parallel(hole_cards, [], trials=trials, workers=workers, seed=0)
    elapsed = time.time() - start

    console.print(f"\n[green]Completed in {elapsed:.2f}s[/green]")
    console.print(f"Trials per second: {trials / elapsed:,.0f}")
    console.print(f"Equity (AKo preflop): {result.equity * 100:.2f}%")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
