"""Terminal reporter using rich output."""

from typing import Any, Optional

from rich.console import Console
from rich.table import Table

from trialbench.schema import TrialSummary


def format_ms(value: float) -> str:
    """Format a duration in milliseconds to three decimal places."""
    return f"{value:.3f}"


class TerminalReporter:
    """Render a TrialSummary as mean/min lines, optionally with per-trial times."""

    def __init__(self, console: Optional[Any] = None, show_trials: bool = False):
        self.console = console or Console(highlight=False)
        self.show_trials = show_trials

    def render(self, summary: TrialSummary, title: Optional[str] = None) -> None:
        """Print the summary lines (and per-trial table when enabled)."""
        if title:
            self.console.print(f"[bold]{title}[/bold]")
        if self.show_trials:
            self.console.print(self._trial_table(summary))
        for line in self.summary_lines(summary):
            self.console.print(line)

    @staticmethod
    def summary_lines(summary: TrialSummary) -> list[str]:
        return [
            f"Mean time: {format_ms(summary.mean_ms)} ms -> {format_ms(summary.mean_per_rep_ms)} ms / rep",
            f"Min time: {format_ms(summary.min_ms)} ms -> {format_ms(summary.min_per_rep_ms)} ms / rep",
        ]

    @staticmethod
    def _trial_table(summary: TrialSummary) -> Table:
        table = Table(title=f"{summary.trials} trials x {summary.reps} reps")
        table.add_column("Trial", justify="right")
        table.add_column("Time (ms)", justify="right")
        table.add_column("Per rep (ms)", justify="right")
        for i, elapsed in enumerate(summary.measurements_ms, start=1):
            table.add_row(str(i), format_ms(elapsed), format_ms(elapsed / summary.reps))
        return table
