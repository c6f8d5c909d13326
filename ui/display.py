"""Display utilities for the terminal equity calculator."""

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker.cards import Card, Suit
from poker.hand_evaluator import HandStrength
from simulation.equity import EquityResult
from simulation.statistics import StabilityReport, confidence_interval


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_hole_cards(cards: Sequence[Card]) -> str:
    """Render hole cards."""
    return " ".join(render_card(card) for card in cards)


def render_community_cards(cards: Sequence[Card]) -> str:
    """Render community cards with placeholders for unknown cards."""
    rendered = []
    for i in range(5):
        if i < len(cards):
            rendered.append(render_card(cards[i]))
        else:
            rendered.append("[dim][ - ][/dim]")
    return " ".join(rendered)


def equity_color(equity: float) -> str:
    if equity >= 0.65:
        return "green"
    if equity >= 0.45:
        return "yellow"
    return "red"


def render_equity_result(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
    result: EquityResult,
    best: HandStrength,
) -> Panel:
    """Render the equity estimate with the hero's current best hand."""
    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="dim")
    info.add_column("Value", style="bold")

    color = equity_color(result.equity)
    low, high = confidence_interval(result)

    info.add_row("Hole", render_hole_cards(hole_cards))
    info.add_row("Board", render_community_cards(community))
    info.add_row("Best hand", f"[cyan]{best.label}[/cyan]")
    info.add_row("", "")  # Spacer
    info.add_row("Equity", f"[{color}]{result.equity * 100:.2f}%[/{color}]")
    info.add_row("95% CI", f"{low * 100:.2f}% - {high * 100:.2f}%")
    info.add_row(
        "W / T / L",
        f"{result.win_rate * 100:.1f}% / {result.tie_rate * 100:.1f}% / {result.loss_rate * 100:.1f}%",
    )
    info.add_row("Trials", f"{result.trials:,} ({result.tie_policy.value} ties)")

    return Panel(info, title="[bold blue]Equity[/bold blue]", border_style="blue")


def render_stability(report: StabilityReport) -> Table:
    """Render repeated-run agreement."""
    table = Table(title="Repeated Estimates")
    table.add_column("Run", justify="right")
    table.add_column("Equity", justify="right")

    for i, estimate in enumerate(report.estimates, start=1):
        table.add_row(str(i), f"{estimate * 100:.2f}%")

    table.add_section()
    table.add_row("Mean", f"{report.mean * 100:.2f}%")
    table.add_row("Std", f"{report.std * 100:.2f} pp")
    table.add_row("Spread", f"{report.spread * 100:.2f} pp")
    return table


def render_explanation(text: str) -> Panel:
    """Render an equity explanation."""
    return Panel(Text(text), title="Analysis", border_style="dim")
