"""Editor session holding the current TDL document."""

from __future__ import annotations

from pathlib import Path

from . import output
from .catalog import CatalogEntry, resolve_entry
from .config import EditorConfig
from .generator import GenerationRequest, generate
from .logging_config import get_logger

logger = get_logger(__name__)

PLACEHOLDER = (
    "// Your generated TDL code will appear here\n"
    "// Use the Builder tab to create TDL code or select a template"
)


class EditorSession:
    """Current document plus the actions the editor offers on it.

    The session is owned by one caller (a CLI run or an interactive loop);
    the generator and catalog it uses are stateless.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self.document = ""
        self.source: str | None = None

    @property
    def has_document(self) -> bool:
        return bool(self.document)

    def display_text(self) -> str:
        """The document, or a placeholder when nothing has been produced yet."""
        return self.document or PLACEHOLDER

    def generate(self, request: GenerationRequest) -> str:
        """Generate a document from a builder request and make it current.

        The session is left untouched when generation fails.

        Raises:
            MissingNameError: If the request has no usable name.
        """
        document = generate(request)
        self.document = document
        self.source = f"{request.kind}: {request.name}"
        logger.info("Session document generated from builder (%s)", self.source)
        return document

    def load_entry(self, selector: int | str) -> CatalogEntry:
        """Replace the current document with a catalog entry's body.

        Args:
            selector: Zero-based index, 1-based index string, or entry name.

        Raises:
            CatalogError: If the entry does not exist.
        """
        entry = resolve_entry(selector)
        self.document = entry.body
        self.source = entry.name
        logger.info("Session document loaded from template '%s'", entry.name)
        return entry

    def download(self, path: str | Path | None = None) -> Path:
        """Save the current document, to ``custom.tdl`` unless told otherwise.

        Raises:
            EmptyDocumentError: If there is no document.
            OutputError: If the file cannot be written.
        """
        return output.save_document(
            self.document, path, filename=self.config.output_file
        )

    def copy(self) -> None:
        """Copy the current document to the clipboard.

        Raises:
            EmptyDocumentError: If there is no document.
            ClipboardError: If the clipboard is unavailable.
        """
        output.copy_to_clipboard(self.document)

    def clear(self) -> None:
        self.document = ""
        self.source = None
        logger.debug("Session document cleared")
