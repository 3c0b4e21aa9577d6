"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
status messages and the per-step results table. Supports verbosity levels
and the --no-color flag.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.scenario.runner import ScenarioReport, StepResult


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("All checks passed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def step_result(self, result: StepResult) -> None:
        """Display one step outcome as it completes (verbosity >= 1)."""
        if result.passed:
            self.info(f"  [green]✓[/green] {result.name} ({result.elapsed:.2f}s)")
        else:
            self.info(f"  [red]✗[/red] {result.name}: {escape(result.detail)}")

    def print_report(self, report: ScenarioReport) -> None:
        """Display the results table and overall status."""
        table = Table(title="Revue CRUD checks")
        table.add_column("#", justify="right")
        table.add_column("Step")
        table.add_column("Result")
        table.add_column("Time", justify="right")
        table.add_column("Detail", overflow="fold")

        for index, result in enumerate(report.results, start=1):
            status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
            table.add_row(
                str(index),
                result.name,
                status,
                f"{result.elapsed:.2f}s",
                escape(result.detail),
            )

        self.console.print(table)

        passed = len(report.passed)
        failed = len(report.failed)
        if not report.results:
            self.console.print("\n[yellow]No checks were run[/yellow]")
        elif failed:
            self.console.print(f"\n[red]{failed} check(s) failed[/red], {passed} passed")
        else:
            self.console.print(f"\n[green]All {passed} checks passed[/green]")
