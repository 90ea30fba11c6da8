"""Quick reference for common TDL definitions.

Static content shown beside the editor: common objects and attributes,
how to install a generated file, and where Tally Prime looks for it.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table


@dataclass(frozen=True)
class ReferenceSection:
    """A titled list of ``(term, text)`` items; ``term`` may be ``None``."""

    title: str
    items: tuple[tuple[str | None, str], ...]


REFERENCE_SECTIONS: tuple[ReferenceSection, ...] = (
    ReferenceSection(
        "Common TDL Objects",
        (
            ("Report", "Main reporting structure"),
            ("Form", "Defines form layout and structure"),
            ("Part", "Container for lines and fields"),
            ("Line", "Single line in a form or report"),
            ("Field", "Data input/display element"),
            ("Collection", "Data set from Tally objects"),
            ("Menu", "Menu items and navigation"),
            ("Button", "Action triggers with key bindings"),
        ),
    ),
    ReferenceSection(
        "Common Attributes",
        (
            ("Use", "Inherit from existing definition"),
            ("Form", "Specify form to display"),
            ("Parts", "List of parts in a form"),
            ("Lines", "List of lines in a part"),
            ("Fields", "List of fields in a line"),
            ("Collection", "Data source"),
            ("Filter", "Filter criteria"),
            ("Set", "Set value or expression"),
        ),
    ),
    ReferenceSection(
        "How to Use",
        (
            (None, "1. Create TDL code using Builder or Templates"),
            (None, "2. Download the .tdl file"),
            (None, "3. Copy to Tally installation folder"),
            (None, "4. Restart Tally Prime"),
            (None, "5. Your customizations will be loaded"),
        ),
    ),
    ReferenceSection(
        "Installation Paths",
        (
            ("Windows", "C:\\Program Files\\Tally.ERP9\\"),
            ("Linux", "/opt/tallyprime/"),
            (None, "Place .tdl files in the installation directory"),
        ),
    ),
)


def find_section(title: str) -> ReferenceSection | None:
    """Return the section with the given title (case-insensitive)."""
    wanted = title.strip().lower()
    for section in REFERENCE_SECTIONS:
        if section.title.lower() == wanted:
            return section
    return None


def render_reference(console: Console | None = None) -> None:
    """Print every reference section as a table."""
    console = console or Console()
    console.print("\n📚 [bold]TDL Reference[/bold]")

    for section in REFERENCE_SECTIONS:
        table = Table(title=section.title, box=box.SIMPLE, show_header=False)
        table.add_column("Term", style="bold cyan", no_wrap=True)
        table.add_column("Description")
        for term, text in section.items:
            table.add_row(term or "", text)
        console.print(table)
