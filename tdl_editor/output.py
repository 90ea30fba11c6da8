"""Save and clipboard collaborators for generated documents.

Both hand the document over exactly as generated: no re-encoding beyond
UTF-8, no newline translation, no formatting.
"""

from __future__ import annotations

from pathlib import Path

import pyperclip

from .errors import ClipboardError, EmptyDocumentError, OutputError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FILENAME = "custom.tdl"
MIME_TYPE = "text/plain"


def resolve_output_path(
    path: str | Path | None = None, filename: str = DEFAULT_FILENAME
) -> Path:
    """Work out where a document should be written.

    Args:
        path: Target file or existing directory. ``None`` means the current
            directory.
        filename: File name used when ``path`` is a directory or missing.

    Returns:
        Path of the file to write.
    """
    if path is None:
        return Path.cwd() / filename

    target = Path(path)
    if target.is_dir():
        return target / filename
    return target


def save_document(
    document: str, path: str | Path | None = None, filename: str = DEFAULT_FILENAME
) -> Path:
    """Write a document to disk verbatim.

    Args:
        document: Text to write.
        path: Target file or directory (see :func:`resolve_output_path`).
        filename: Default file name.

    Returns:
        Path of the written file.

    Raises:
        EmptyDocumentError: If there is nothing to write.
        OutputError: If the file cannot be written.
    """
    if not document:
        logger.warning("Save requested with no document")
        raise EmptyDocumentError("download")

    target = resolve_output_path(path, filename)
    logger.debug("Writing %d characters to %s", len(document), target)

    try:
        with target.open("w", encoding="utf-8", newline="") as f:
            f.write(document)
    except (OSError, UnicodeEncodeError) as e:
        logger.error("Failed to write %s: %s", target, e)
        raise OutputError(f"Could not write {target}: {e}") from e

    logger.info("Saved TDL document to %s", target)
    return target


def copy_to_clipboard(document: str) -> None:
    """Place a document on the system clipboard.

    Raises:
        EmptyDocumentError: If there is nothing to copy.
        ClipboardError: If no clipboard mechanism is available.
    """
    if not document:
        logger.warning("Copy requested with no document")
        raise EmptyDocumentError("copy")

    try:
        pyperclip.copy(document)
    except pyperclip.PyperclipException as e:
        logger.error("Clipboard unavailable: %s", e)
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e

    logger.info("Copied %d characters to clipboard", len(document))
