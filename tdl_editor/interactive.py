from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.syntax import Syntax
from rich.table import Table

from .catalog import list_entries
from .config import EditorConfig
from .errors import TDLEditorError
from .generator import GenerationRequest, object_kinds
from .logging_config import get_logger
from .reference import render_reference
from .session import EditorSession

logger = get_logger(__name__)


class InteractiveHandler:
    """Handle interactive mode: builder, templates and the document view."""

    def __init__(
        self, config: EditorConfig | None = None, console: Console | None = None
    ) -> None:
        """Initialize the handler with an empty session.

        Args:
            config: Editor configuration (defaults when omitted).
            console: Rich console instance (creates new if None).
        """
        self.config = config or EditorConfig()
        self.console = console or Console()
        self.session = EditorSession(self.config)
        logger.debug("InteractiveHandler initialized")

    def run(self) -> int:
        """Run the interactive editor loop.

        Returns:
            Exit code (always 0; errors are reported and the loop continues).
        """
        self.console.print("\n🧮 [bold green]Tally Prime TDL Editor[/bold green]")
        self.console.print(
            "[cyan]Create and customize Tally Definition Language (TDL) code "
            "for Tally Prime[/cyan]\n"
        )

        while True:
            self._show_main_menu()
            choice = Prompt.ask(
                "\n[bold]Choose an option[/bold]",
                choices=["1", "2", "3", "4", "5", "6", "q"],
                default="q",
            )

            if choice == "q":
                self.console.print("👋 [yellow]Goodbye![/yellow]")
                break
            elif choice == "1":
                self._interactive_builder()
            elif choice == "2":
                self._interactive_templates()
            elif choice == "3":
                self._show_document()
            elif choice == "4":
                self._download()
            elif choice == "5":
                self._copy()
            elif choice == "6":
                render_reference(self.console)

        return 0

    def _show_main_menu(self) -> None:
        """Display the main menu."""
        status = (
            f"[green]{escape(self.session.source)}[/green]"
            if self.session.has_document
            else "[dim]no document yet[/dim]"
        )
        menu_panel = Panel.fit(
            f"""[bold blue]📋 Main Menu[/bold blue]   Current: {status}

[cyan]1.[/cyan] 🛠  Builder
[cyan]2.[/cyan] 📑 Templates
[cyan]3.[/cyan] 📄 Generated Code
[cyan]4.[/cyan] 💾 Download TDL File
[cyan]5.[/cyan] 📋 Copy to Clipboard
[cyan]6.[/cyan] 📚 TDL Reference
[cyan]q.[/cyan] 🚪 Quit""",
            border_style="blue",
        )
        self.console.print(menu_panel)

    def _interactive_builder(self) -> None:
        """Collect a definition from prompts and generate it."""
        self.console.print("\n🛠  [bold]Builder[/bold]")

        kinds = object_kinds()
        default_kind = (
            self.config.default_kind
            if self.config.default_kind in kinds
            else kinds[0]
        )
        kind = Prompt.ask("Object Type", choices=kinds, default=default_kind)
        name = Prompt.ask("Object Name [dim](e.g., My Custom Report)[/dim]", default="")
        use_clause = Prompt.ask(
            "Use Clause (Optional) [dim](e.g., DSP Report)[/dim]", default=""
        )
        attributes = self._read_attribute_lines()

        request = GenerationRequest(
            kind=kind, name=name, use_clause=use_clause, attributes=attributes
        )
        try:
            self.session.generate(request)
        except TDLEditorError as e:
            self.console.print(
                f"⚠ [red]Please enter an object name ({escape(str(e))})[/red]"
            )
            logger.info("Builder generation rejected: %s", e)
            return

        self._show_document()

    def _read_attribute_lines(self) -> str:
        """Read attribute lines until an empty line is entered."""
        self.console.print(
            "Attributes (one per line, empty line to finish) "
            "[dim]e.g. Form : My Form[/dim]"
        )
        lines = []
        while True:
            line = self.console.input("  ")
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)

    def _interactive_templates(self) -> None:
        """List catalog entries and load the chosen one."""
        entries = list_entries()

        table = Table(title="📑 Templates", box=box.SIMPLE, header_style="bold cyan")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Description")
        for position, entry in enumerate(entries, start=1):
            table.add_row(str(position), entry.name, entry.description)
        self.console.print(table)

        choices = [str(i) for i in range(1, len(entries) + 1)] + ["b"]
        choice = Prompt.ask("Load which template? (b to go back)", choices=choices)
        if choice == "b":
            return

        entry = self.session.load_entry(choice)
        self.console.print(f"✅ [green]Loaded template: {escape(entry.name)}[/green]")
        self._show_document()

    def _show_document(self) -> None:
        """Show the current document, or the placeholder text."""
        text = self.session.display_text()
        if self.session.has_document:
            content = Syntax(text, "ini", theme="monokai", word_wrap=True)
        else:
            content = f"[dim]{text}[/dim]"

        self.console.print(
            Panel(content, title="📄 Generated Code", border_style="green")
        )

    def _download(self) -> None:
        """Save the current document to a file."""
        if not self.session.has_document:
            self.console.print("⚠ [red]No TDL code to download[/red]")
            return

        path = Prompt.ask("Save as", default=self.config.output_file)
        if not path.strip():
            path = self.config.output_file
        try:
            saved = self.session.download(path)
            self.console.print(f"✅ [green]Saved to: {escape(str(saved))}[/green]")
        except TDLEditorError as e:
            self.console.print(f"⚠ [red]{escape(str(e))}[/red]")

    def _copy(self) -> None:
        """Copy the current document to the clipboard."""
        try:
            self.session.copy()
            self.console.print("✅ [green]TDL code copied to clipboard![/green]")
        except TDLEditorError as e:
            self.console.print(f"⚠ [red]{escape(str(e))}[/red]")
            if self.session.has_document and Confirm.ask(
                "Show the code so you can copy it manually?", default=True
            ):
                self.console.print(self.session.document, markup=False, highlight=False)
