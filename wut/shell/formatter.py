# wut/shell/formatter.py
"""
Rich terminal formatting for wut.
"""
from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from wut.corrector.models import Correction
from wut.utils.logging import get_logger

logger = get_logger(__name__)


class TerminalFormatter:
    """Renders corrections, flag explanations and tables."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the terminal formatter."""
        self._console = console or Console()
        self._logger = logger

    @property
    def console(self) -> Console:
        return self._console

    def print_command(self, command: str, title: Optional[str] = None, border_style: str = "green") -> None:
        """
        Display a command with syntax highlighting.

        Args:
            command: The command to display
            title: Optional title for the panel
            border_style: Panel border colour
        """
        syntax = Syntax(command, "bash", theme="monokai", word_wrap=True)
        self._console.print(Panel(syntax, title=title or "Command", border_style=border_style, expand=False))

    def print_correction(self, correction: Optional[Correction]) -> None:
        """Display a correction, or a note that the command looks fine."""
        if correction is None:
            self._console.print("[green]No correction needed.[/green]")
            return

        if correction.dangerous:
            body = Text(correction.explanation, style="bold red")
            body.append(f"\n\n{correction.original}", style="red")
            self._console.print(Panel(body, title="Dangerous command", border_style="red", expand=False))
            return

        self.print_command(correction.corrected, title="Suggested command")
        self._console.print(f"[blue]{correction.explanation}[/blue]")
        self._console.print(f"[dim]Confidence: {correction.confidence:.0%}[/dim]")

    def print_alternatives(self, root: str, alternatives: Sequence[str]) -> None:
        if not alternatives:
            return
        self._console.print(f"[cyan]Modern alternatives to {root}:[/cyan] {', '.join(alternatives)}")

    def print_flag_explanation(self, root: str, cluster: str, explanation: str) -> None:
        """Display the long-option meaning of a short-flag cluster."""
        if not explanation:
            self._console.print(f"[yellow]Cannot decode {cluster} for {root}.[/yellow]")
            return

        table = Table(title=f"{root} {cluster}", expand=False)
        table.add_column("Flag", style="bold cyan")
        table.add_column("Meaning", style="white")
        for part in explanation.split("  "):
            option, _, description = part.partition(" ")
            table.add_row(option, description.strip("()"))
        self._console.print(table)

    def print_typos(self, typos: Dict[str, str]) -> None:
        """Display the known-typo table."""
        table = Table(title="Known typos", expand=False)
        table.add_column("Typed", style="red")
        table.add_column("Meant", style="green")
        for typo, corrected in typos.items():
            table.add_row(typo, corrected)
        self._console.print(table)

    def print_error(self, message: str) -> None:
        self._console.print(f"[bold red]Error:[/bold red] {message}")
