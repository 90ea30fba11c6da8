"""
Document generator for TDL definitions.

Turns a small form-like request into a single TDL definition block.
Generation is pure: equal requests always render byte-identical text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import MissingNameError, ValidationError
from .logging_config import get_logger
from .templates import clean_lines, get_default_template_engine

logger = get_logger(__name__)

INDENT = 4


class ObjectKind(Enum):
    """Documented TDL object kinds offered by the builder."""

    REPORT = "Report"
    FORM = "Form"
    PART = "Part"
    LINE = "Line"
    FIELD = "Field"
    COLLECTION = "Collection"
    MENU = "Menu"
    BUTTON = "Button"
    FUNCTION = "Function"
    OBJECT = "Object"

    def __str__(self) -> str:
        return self.value


DEFAULT_KIND = ObjectKind.REPORT.value


def object_kinds() -> list[str]:
    """Return the documented object kind labels in menu order."""
    return [kind.value for kind in ObjectKind]


def is_known_kind(kind: str) -> bool:
    """Whether ``kind`` is one of the documented labels (exact match)."""
    return kind in object_kinds()


@dataclass(frozen=True)
class GenerationRequest:
    """Input collected from the builder form.

    Attributes:
        kind: Object kind label. Any string is accepted.
        name: Object name; must contain a non-space character.
        use_clause: Optional definition to inherit from.
        attributes: Optional free text, one attribute per line.
    """

    kind: str
    name: str
    use_clause: str | None = None
    attributes: str | None = None


def validate_request(request: GenerationRequest) -> None:
    """Reject requests that cannot produce a document.

    Raises:
        MissingNameError: If the name is empty or whitespace only.
    """
    if not request.name or not request.name.strip():
        raise MissingNameError()


def generate(request: GenerationRequest) -> str:
    """Render a TDL definition block.

    The header is ``[kind: name]``; an optional ``Use : clause`` line and the
    non-blank attribute lines follow, each indented by four spaces and
    newline terminated.

    Args:
        request: Values collected from the builder.

    Returns:
        The generated document.

    Raises:
        MissingNameError: If the request has no usable name.
    """
    validate_request(request)

    document = get_default_template_engine().render_template(
        "definition",
        {
            "kind": request.kind,
            "name": request.name,
            "use_clause": request.use_clause,
            "attributes": clean_lines(request.attributes),
            "indent": " " * INDENT,
            "indent_size": INDENT,
        },
    )
    logger.debug("Generated %s definition '%s'", request.kind, request.name)
    return document


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(self, document: str, metadata: dict[str, Any] | None = None):
        self.document = document
        self.metadata = metadata or {}
        self.success = True
        self.error_message: str | None = None
        self.exception: Exception | None = None

    @classmethod
    def error(cls, message: str, exception: Exception | None = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(document="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_document(request: GenerationRequest) -> GenerationResult:
    """Generate a document, reporting validation failures as a result value.

    Args:
        request: Values collected from the builder.

    Returns:
        GenerationResult with the document and metadata, or with the
        validation error message when the request was rejected.
    """
    try:
        document = generate(request)
    except ValidationError as e:
        logger.info("Generation rejected: %s", e)
        return GenerationResult.error(str(e), exception=e)

    metadata = {
        "kind": request.kind,
        "name": request.name,
        "known_kind": is_known_kind(request.kind),
        "line_count": document.count("\n"),
    }
    return GenerationResult(document, metadata)
