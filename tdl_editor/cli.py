"""
Command-line interface for the TDL editor.

Provides the ``tdl-editor`` command: generate definitions, browse the
template catalog, show the reference, or start the interactive editor.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from . import __version__
from .catalog import list_entries
from .config import EditorConfig, load_config, get_config_manager
from .errors import (
    CatalogError,
    ConfigError,
    EmptyDocumentError,
    MissingNameError,
    OutputError,
    TemplateError,
)
from .generator import GenerationRequest, is_known_kind, object_kinds
from .interactive import InteractiveHandler
from .logging_config import get_logger, setup_logging
from .reference import render_reference
from .session import EditorSession

logger = get_logger(__name__)

# Initialize rich consoles; status lines go to stderr when stdout carries a document
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tdl-editor",
        description="Create and customize Tally Definition Language (TDL) code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tdl-editor generate --kind Report --name "My Report" --use "DSP Report" --attr "Form : My Form"
  tdl-editor generate -k Field -n "My Field" --attributes-file attrs.txt -o custom.tdl
  tdl-editor templates list
  tdl-editor templates show "Custom Menu" --copy
  tdl-editor interactive
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: from config, WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")

    subparsers = parser.add_subparsers(dest="command")

    # generate
    gen = subparsers.add_parser(
        "generate",
        help="Generate a TDL definition from fields",
        description="Build a single [Kind: Name] definition block",
    )
    gen.add_argument(
        "--kind",
        "-k",
        help=f"Object type, e.g. {', '.join(object_kinds())} (default: from config)",
    )
    gen.add_argument("--name", "-n", default="", help="Object name")
    gen.add_argument("--use", "-u", dest="use_clause", help="Use clause (inheritance)")
    gen.add_argument(
        "--attr",
        "-a",
        action="append",
        default=[],
        metavar="LINE",
        help="Attribute line, repeatable (e.g. 'Form : My Form')",
    )
    gen.add_argument(
        "--attributes-file",
        metavar="FILE",
        help="Read attribute lines from FILE ('-' for stdin)",
    )
    _add_output_args(gen)
    gen.set_defaults(func=_handle_generate)

    # templates
    tpl = subparsers.add_parser("templates", help="Browse the template catalog")
    tpl_sub = tpl.add_subparsers(dest="templates_command")
    tpl_list = tpl_sub.add_parser("list", help="List templates")
    tpl_list.set_defaults(func=_handle_templates_list)
    tpl_show = tpl_sub.add_parser("show", help="Print or save one template")
    tpl_show.add_argument("entry", help="Template number (1-based) or name")
    _add_output_args(tpl_show)
    tpl_show.set_defaults(func=_handle_templates_show)
    tpl.set_defaults(func=_handle_templates_list)

    # kinds
    kinds = subparsers.add_parser("kinds", help="List documented object types")
    kinds.set_defaults(func=_handle_kinds)

    # reference
    ref = subparsers.add_parser("reference", help="Show the TDL quick reference")
    ref.set_defaults(func=_handle_reference)

    # interactive
    inter = subparsers.add_parser("interactive", help="Start the interactive editor")
    inter.set_defaults(func=_handle_interactive)

    return parser


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Save to PATH (a directory gets custom.tdl) instead of printing",
    )
    parser.add_argument(
        "--copy", "-c", action="store_true", help="Also copy the result to the clipboard"
    )


def _build_config(args: argparse.Namespace) -> EditorConfig:
    """Merge config file and command-line overrides."""
    overrides = {"log_level": args.log_level, "log_file": args.log_file}
    return load_config(custom_config=overrides, config_file=args.config)


def _read_attributes(args: argparse.Namespace) -> str | None:
    """Collect attribute text from --attributes-file and --attr options."""
    parts = []

    if args.attributes_file:
        source = args.attributes_file
        try:
            if source == "-":
                parts.append(sys.stdin.read())
            else:
                parts.append(Path(source).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise OutputError(f"Could not read attributes file {source}: {e}") from e

    parts.extend(args.attr)
    return "\n".join(parts) if parts else None


def _emit(session: EditorSession, args: argparse.Namespace) -> int:
    """Print or save the session document, then optionally copy it."""
    if args.output:
        saved = session.download(args.output)
        console.print(f"[green]✓[/green] TDL code saved to [cyan]{saved}[/cyan]")
    else:
        sys.stdout.write(session.document)
        sys.stdout.flush()
        if sys.stdout.isatty() and not session.document.endswith("\n"):
            sys.stderr.write("\n")

    if args.copy:
        session.copy()
        err_console.print("[green]✓[/green] TDL code copied to clipboard!")

    return 0


def _handle_generate(args: argparse.Namespace, config: EditorConfig) -> int:
    kind = args.kind or config.default_kind
    if not is_known_kind(kind):
        logger.info("Generating with undocumented object type: %s", kind)

    request = GenerationRequest(
        kind=kind,
        name=args.name,
        use_clause=args.use_clause,
        attributes=_read_attributes(args),
    )

    session = EditorSession(config)
    try:
        session.generate(request)
    except MissingNameError:
        console.print("[red]✗[/red] Please enter an object name (--name)")
        return 1

    return _emit(session, args)


def _handle_templates_list(args: argparse.Namespace, config: EditorConfig) -> int:
    table = Table(
        title="📑 TDL Templates",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Description", style="green")

    for position, entry in enumerate(list_entries(), start=1):
        table.add_row(str(position), entry.name, entry.description)

    console.print(table)
    console.print("[dim]Use 'tdl-editor templates show <#|name>' to load one[/dim]")
    return 0


def _handle_templates_show(args: argparse.Namespace, config: EditorConfig) -> int:
    session = EditorSession(config)
    session.load_entry(args.entry)
    return _emit(session, args)


def _handle_kinds(args: argparse.Namespace, config: EditorConfig) -> int:
    for kind in object_kinds():
        marker = " (default)" if kind == config.default_kind else ""
        console.print(f"• [cyan]{kind}[/cyan]{marker}")
    return 0


def _handle_reference(args: argparse.Namespace, config: EditorConfig) -> int:
    render_reference(console)
    return 0


def _handle_interactive(args: argparse.Namespace, config: EditorConfig) -> int:
    return InteractiveHandler(config, console).run()


def main(argv: list[str] | None = None) -> int:
    """Run the command line.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv``).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except ConfigError as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1

    try:
        setup_logging(config.log_level, config.log_file)
    except (ValueError, OSError) as e:
        console.print(f"[red]✗ Logging setup failed:[/red] {e}")
        return 1

    for warning in get_config_manager().validate_config(config):
        logger.warning("Config: %s", warning)

    handler: Any = getattr(args, "func", _handle_interactive)
    logger.debug("Running command: %s", args.command or "interactive")

    try:
        return handler(args, config)
    except EmptyDocumentError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1
    except CatalogError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1
    except OutputError as e:
        console.print(f"[red]✗ Output failed:[/red] {e}")
        return 1
    except TemplateError as e:
        console.print(f"[red]✗ Rendering failed:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]👋 Cancelled[/yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
