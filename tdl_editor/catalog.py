"""Catalog of ready-made TDL example documents.

The catalog is a fixed, ordered table built once at import time. Entries are
frozen and their bodies are handed out exactly as authored.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import CatalogError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """A named example document.

    Attributes:
        name: Unique display label.
        description: One-line summary shown next to the name.
        body: The TDL text loaded into the editor.
    """

    name: str
    description: str
    body: str


_ENTRIES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        name="Custom Report",
        description="Create a basic custom report",
        body="""[Report: My Custom Report]
    Use : DSP Report
    Form : My Custom Form

[Form: My Custom Form]
    Use : DSP Form
    Parts : My Custom Part

[Part: My Custom Part]
    Line : My Title Line

[Line: My Title Line]
    Use : Title Line
    Set : 1 : "My Custom Report\"""",
    ),
    CatalogEntry(
        name="Custom Menu",
        description="Add a custom menu item",
        body="""[Menu: Gateway of Tally]
    Add : Item : "My Custom Menu" : Call : My Custom Report

[Report: My Custom Report]
    Use : DSP Report
    Form : My Form""",
    ),
    CatalogEntry(
        name="Custom Field",
        description="Add a custom field to a voucher",
        body="""[Field: My Custom Field]
    Use : Name Field
    Storage : My Custom Field

[#Object: Voucher]
    My Custom Field : String : 100""",
    ),
    CatalogEntry(
        name="Custom Button",
        description="Add a custom button",
        body="""[Button: My Button]
    Key : F12 : My Button
    Action : Display : My Custom Report

[Report: My Custom Report]
    Use : DSP Report
    Form : My Form""",
    ),
    CatalogEntry(
        name="Field Validation",
        description="Add validation to a field",
        body="""[Field: Amount Field]
    Use : Amount Field
    Validate : ##Amount > 0
    Error : "Amount must be greater than zero\"""",
    ),
    CatalogEntry(
        name="Collection Object",
        description="Create a custom collection",
        body="""[Collection: My Collection]
    Type : Ledger
    Filter : MyFilter

[System: Formula]
    MyFilter : $Name = "Cash\"""",
    ),
)


def list_entries() -> tuple[CatalogEntry, ...]:
    """Return every catalog entry in authored order."""
    return _ENTRIES


def get_entry(index: int) -> CatalogEntry:
    """Return the entry at a zero-based position.

    Args:
        index: Position in :func:`list_entries`.

    Returns:
        The catalog entry.

    Raises:
        CatalogError: If the index is outside the catalog.
    """
    if not 0 <= index < len(_ENTRIES):
        logger.warning("Catalog index out of range: %s", index)
        raise CatalogError(
            f"No template at position {index} (catalog has {len(_ENTRIES)} entries)"
        )
    return _ENTRIES[index]


def find_entry(name: str) -> CatalogEntry:
    """Return the entry with the given display name (case-insensitive).

    Raises:
        CatalogError: If no entry has that name.
    """
    wanted = name.strip().lower()
    for entry in _ENTRIES:
        if entry.name.lower() == wanted:
            return entry

    available = ", ".join(entry.name for entry in _ENTRIES)
    logger.warning("Unknown catalog entry requested: %s", name)
    raise CatalogError(f"Unknown template: {name}. Available: {available}")


def resolve_entry(selector: int | str) -> CatalogEntry:
    """Look up an entry by zero-based index or by name.

    Strings made of digits are treated as 1-based positions, the way entries
    are numbered on screen.
    """
    if isinstance(selector, int):
        return get_entry(selector)

    text = selector.strip()
    if text.isdigit():
        return get_entry(int(text) - 1)
    return find_entry(text)
