"""Rich-powered console output for FortRaid."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from fortraid.strategy.base import RaidPlan, RaidStep


class Console:
    """Terminal output for FortRaid using Rich."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_graph_stats(self, forts: int, edges: int, components: int, forest: bool) -> None:
        table = Table(title="Fort Graph", border_style="cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right", style="cyan")
        table.add_row("Forts", str(forts))
        table.add_row("Edges", str(edges))
        table.add_row("Components", str(components))
        table.add_row("Forest", "yes" if forest else "no")
        self.console.print(table)

    def show_plan(self, plan: RaidPlan) -> None:
        """Display a plan's value and ordering."""
        self.console.print(
            Panel(
                f"[bold]Value:[/bold] [green]{plan.value:g}[/green]\n"
                f"[bold]Order:[/bold] {' '.join(plan.ordering)}",
                title=f"[bold]{plan.strategy}[/bold]",
                border_style="green",
            )
        )

    def show_steps(self, steps: list[RaidStep]) -> None:
        """Display a step-by-step replay of an ordering."""
        table = Table(title="Replay", border_style="cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Fort", style="bold")
        table.add_column("Value", justify="right")
        table.add_column("Alerted", justify="center")
        table.add_column("Stolen", justify="right", style="green")

        for i, step in enumerate(steps, start=1):
            alert = "[red]yes[/red]" if step.alerted else "[dim]no[/dim]"
            table.add_row(str(i), step.label, str(step.base_value), alert, f"{step.collected:g}")

        self.console.print(table)

    def show_comparison(self, plans: list[RaidPlan]) -> None:
        """Display several strategies' results side by side."""
        table = Table(title="Strategy Comparison", border_style="cyan")
        table.add_column("Strategy", style="bold")
        table.add_column("Value", justify="right", style="green")
        table.add_column("Order")

        best = max((p.value for p in plans), default=0.0)
        for plan in sorted(plans, key=lambda p: -p.value):
            marker = " [yellow]★[/yellow]" if plan.value == best else ""
            order = " ".join(plan.ordering)
            if len(order) > 60:
                order = order[:57] + "..."
            table.add_row(f"{plan.strategy}{marker}", f"{plan.value:g}", order)

        self.console.print(table)
