"""Exception hierarchy for the TDL editor."""


class TDLEditorError(Exception):
    """Base exception for all TDL editor errors."""

    pass


class ValidationError(TDLEditorError):
    """Raised when a generation request is rejected."""

    pass


class MissingNameError(ValidationError):
    """Raised when a document is requested without an object name."""

    def __init__(self, message: str = "name required") -> None:
        super().__init__(message)


class EmptyDocumentError(TDLEditorError):
    """Raised when saving or copying is requested before any document exists."""

    def __init__(self, action: str = "export") -> None:
        self.action = action
        super().__init__(f"No TDL code to {action}")


class CatalogError(TDLEditorError):
    """Raised when a catalog entry cannot be found."""

    pass


class ConfigError(TDLEditorError):
    """Exception raised for configuration-related errors."""

    pass


class OutputError(TDLEditorError):
    """Raised when a document cannot be written out."""

    pass


class ClipboardError(OutputError):
    """Raised when the system clipboard is unavailable."""

    pass


class TemplateError(TDLEditorError):
    """Exception raised for template-related errors."""

    pass
