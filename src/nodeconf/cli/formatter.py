#!/usr/bin/env python3
"""
NODECONF FORMATTER
------------------
Rich rendering for the CLI: header panel, entry table, export view
and error lines. User supplied text is escaped before it meets markup.

Author: NodeConf Team
Date: 2026-10-18
"""

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from nodeconf.core.models import NodeConfiguration

# Initialize the Rich console for high-quality terminal output
console = Console()


class NodeConfFormatter:
    """
    NodeConfFormatter: The visual side of the CLI.
    Responsible for rendering configurations, exports and errors.
    """

    def print_header(self, subtitle: str, version: str):
        console.print(Panel.fit(
            f"[bold cyan]NodeConf v{version}[/bold cyan]\n"
            "════════════════════════════════════════",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def print_configuration(self, conf: NodeConfiguration, source_label: str):
        """
        Builds the entry table followed by a one-line summary.
        """
        table = Table(title=f"Node Configuration: {escape(source_label)}", show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Descriptor", style="cyan")

        for entry in conf:
            table.add_row(str(entry.index), Text(entry.descriptor))

        console.print(table)

        if not len(conf):
            console.print("[bold yellow]⚠️  No node entries found.[/bold yellow]")
        else:
            console.print(f"[bold white]Total entries:[/bold white] {len(conf)}")

    def print_export(self, content: str, fmt: str):
        if not content:
            console.print("[dim]ℹ Nothing to export.[/dim]")
            return
        lexer = "yaml" if fmt == "yaml" else "text"
        console.print(Syntax(content.rstrip("\n"), lexer, theme="monokai", background_color="default"))

    def print_written(self, count: int, path: str):
        console.print(f"[bold green]✅ Wrote {count} entries to[/bold green] [white]{escape(path)}[/white]")

    def print_error(self, message: str):
        console.print(f"[bold red]Error:[/bold red] {escape(message)}")
