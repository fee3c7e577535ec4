"""
SecureVault Console Interface
==============================

Rich-powered console abstraction providing one presentation layer for
every SecureVault command.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, severity-coloured messages, tables and
status spinners, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_VAULT_THEME = Theme(
    {
        "vault.banner": "bold bright_cyan",
        "vault.section": "bold bright_magenta",
        "vault.success": "bold green",
        "vault.warning": "bold yellow",
        "vault.error": "bold red",
        "vault.info": "bold bright_blue",
        "vault.dim": "dim white",
        "vault.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ___                          __   __         _ _
 / __| ___ __ _  _ _ _ ___     \ \ / /_ _ _  _| | |_
 \__ \/ -_) _| || | '_/ -_)     \ V / _` | || | |  _|
 |___/\___\__|\_,_|_| \___|      \_/\__,_|\_,_|_|\__|
[/bright_cyan]"""

_TAGLINE = "Password Strength & Cryptographic Utilities"


class VaultConsole:
    """Unified console interface for SecureVault commands.

    Usage::

        con = VaultConsole()
        con.banner()
        con.section("Password Analysis")
        con.success("Analysis complete")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_VAULT_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the SecureVault ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[vault.highlight]{_TAGLINE}[/vault.highlight]\n"
            f"[vault.dim]Version: {version}  |  {now}[/vault.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="vault.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[vault.success][✔] SUCCESS:[/vault.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[vault.warning][⚠] WARNING:[/vault.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[vault.error][✘] ERROR:[/vault.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[vault.info][ℹ] INFO:[/vault.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def key_values(self, title: str, pairs: Sequence[tuple[str, Any]]) -> None:
        """Render a two-column Property / Value table."""
        self.table(title, ("Property", "Value"), pairs, styles=("bold", ""))

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Generating RSA key pair..."):
                keys = signer.generate_key_pair()
        """
        with self._console.status(
            f"[vault.info]{message}[/vault.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

