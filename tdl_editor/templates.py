"""
Template engine wrapper for TDL document rendering.

Provides a small interface over Jinja2 with the filters needed to lay out
TDL definitions.
"""

from typing import Any, Dict, List, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound

from .errors import TemplateError


class TemplateEngine:
    """Wrapper for Jinja2 with TDL layout utilities.

    Autoescaping is off: TDL bodies routinely contain quotes, ``#`` and ``$``
    that must come out exactly as typed.
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Initial in-memory templates, keyed by name
        """
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["indent_lines"] = self._indent_lines_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template with the given context.

        Args:
            template_name: Name of a registered template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound:
            raise TemplateError(f"Template not found: {template_name}")

        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def _indent_lines_filter(self, lines: List[str], spaces: int = 4) -> str:
        """Indent each line and terminate it with a newline."""
        indent = " " * spaces
        return "".join(f"{indent}{line}\n" for line in lines)


def clean_lines(text: Optional[str]) -> List[str]:
    """Split free text into stripped, non-empty lines, keeping their order."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


# Layout of a single TDL definition block
DEFINITION_TEMPLATE = (
    "[{{ kind }}: {{ name }}]\n"
    "{% if use_clause %}{{ indent }}Use : {{ use_clause }}\n{% endif %}"
    "{{ attributes | indent_lines(indent_size) }}"
)

# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine({"definition": DEFINITION_TEMPLATE})
    return _default_engine
