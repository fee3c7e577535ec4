"""
SecureVault Console Output
===========================

Rich-based console formatters for password analyses and toolkit results:
a colour-segmented strength meter, metric tables, pattern flags, and
CIDR summaries.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import VaultConsole
from vault.core.models import (
    Analysis,
    CidrInfo,
    Commonality,
)


_LEVEL_COLOURS: dict[str, str] = {
    "Very Weak": "bold white on red",
    "Weak": "bold red",
    "Fair": "bold yellow",
    "Good": "bold green",
    "Strong": "bold bright_green",
    "Excellent": "bold bright_cyan",
}

_COMMONALITY_LABELS: dict[Commonality, tuple[str, str]] = {
    Commonality.UNIQUE: ("Not found in breach list", "green"),
    Commonality.SIMILAR_TO_BREACHED: ("Similar to a breached password", "yellow"),
    Commonality.BREACHED: ("Found in breach list", "bold red"),
}


class VaultConsoleOutput:
    """Console output formatters for SecureVault results.

    Usage::

        output = VaultConsoleOutput(VaultConsole())
        output.display_analysis(analysis)
        output.display_cidr(info)
    """

    def __init__(self, console: Optional[VaultConsole] = None) -> None:
        self.console = console or VaultConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: Analysis) -> None:
        """Display a password analysis with a visual strength meter."""
        self.console.section("Password Analysis")

        level_colour = _LEVEL_COLOURS.get(result.level.value, "white")

        meter_width = 40
        filled = max(0, min(meter_width, int((result.score / 100) * meter_width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(meter_width):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < meter_width * 0.25:
                meter.append("█", style="red")
            elif i < meter_width * 0.50:
                meter.append("█", style="yellow")
            elif i < meter_width * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(result.level.value.upper(), style=level_colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        common_label, common_style = _COMMONALITY_LABELS[result.commonality]
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Character Set", str(result.charset_size))
        tbl.add_row("Entropy", f"{result.entropy:.2f} bits")
        tbl.add_row("Complexity", f"{result.complexity}/4")
        tbl.add_row("Crack Time", result.crack_time)
        tbl.add_row("Breach Check", Text(common_label, style=common_style))
        self._rich.print(tbl)

        detected = result.patterns.detected()
        if detected:
            self._rich.print()
            self._rich.print("[bold]Patterns Detected:[/bold]")
            for name in detected:
                self._rich.print(f"  [yellow]⚠[/yellow] {name}")

        self._rich.print()
        self._rich.print("[bold]Suggestions:[/bold]")
        for suggestion in result.suggestions:
            self._rich.print(f"  [cyan]→[/cyan] {suggestion}")

    # ------------------------------------------------------------------ #
    #  Toolkit Results
    # ------------------------------------------------------------------ #

    def display_value(self, title: str, value: str) -> None:
        """Show a single generated or computed value in a panel."""
        self._rich.print(
            Panel(Text(value, overflow="fold"), title=title, border_style="cyan")
        )

    def display_cidr(self, info: CidrInfo) -> None:
        self.console.section(f"Network {info.cidr}")
        self.console.key_values(
            "CIDR Calculation",
            [
                ("Network Address", info.network_address),
                ("Broadcast Address", info.broadcast_address),
                ("Subnet Mask", info.subnet_mask),
                ("Usable Hosts", f"{info.host_count:,}"),
                ("Usable Range", info.usable_range),
            ],
        )
