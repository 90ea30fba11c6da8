"""
Tally Prime TDL Editor

Builds TDL (Tally Definition Language) definition blocks from a few fields
or from a catalog of ready-made templates.
"""

__version__ = "0.1.0"

from .catalog import CatalogEntry, find_entry, get_entry, list_entries
from .errors import (
    CatalogError,
    ClipboardError,
    ConfigError,
    EmptyDocumentError,
    MissingNameError,
    OutputError,
    TDLEditorError,
    TemplateError,
    ValidationError,
)
from .generator import (
    GenerationRequest,
    GenerationResult,
    ObjectKind,
    generate,
    generate_document,
    object_kinds,
)
from .config import EditorConfig, load_config
from .session import EditorSession

__all__ = [
    "CatalogEntry",
    "list_entries",
    "get_entry",
    "find_entry",
    "GenerationRequest",
    "GenerationResult",
    "ObjectKind",
    "generate",
    "generate_document",
    "object_kinds",
    "EditorConfig",
    "load_config",
    "EditorSession",
    "TDLEditorError",
    "ValidationError",
    "MissingNameError",
    "EmptyDocumentError",
    "CatalogError",
    "ConfigError",
    "OutputError",
    "ClipboardError",
    "TemplateError",
]
