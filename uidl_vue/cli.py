"""
Command line interface.

    uidl-vue generate component.json -o UserCard.vue
    uidl-vue generate --url https://example.com/card.json --format js
    uidl-vue show-config --config vue.json
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import generate_from_uidl
from .codegen.core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .codegen.core.naming import component_file_stem
from .codegen.core.templates import TemplateError
from .logging_config import configure_logging, get_logger
from .utils import UIDLLoadError, load_uidl, load_uidl_from_text

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_WARNINGS = 2


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="uidl-vue",
        description="Generate Vue components from UIDL component descriptions",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate a component from a UIDL document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uidl-vue generate card.json
  uidl-vue generate card.json --output-dir src/components
  uidl-vue generate --stdin --format js < card.json
        """.strip(),
    )

    input_group = generate.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="UIDL JSON file")
    input_group.add_argument("--url", help="URL to fetch the UIDL document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the UIDL document from standard input"
    )

    output_group = generate.add_mutually_exclusive_group()
    output_group.add_argument("--output", "-o", help="Output file (default: stdout)")
    output_group.add_argument(
        "--output-dir", help="Directory to write <component-name>.vue/.js into"
    )

    generate.add_argument("--config", help="Configuration file path (JSON)")
    generate.add_argument("--format", choices=["sfc", "js"], help="Output format")
    generate.add_argument(
        "--template-dir", help="Directory with component.vue / component.js templates"
    )
    generate.add_argument("--indent", type=int, metavar="N", help="Spaces per indent level")
    generate.add_argument("--tabs", action="store_true", help="Indent with tabs")
    generate.add_argument("--quote", choices=["single", "double"], help="String quote style")
    generate.add_argument(
        "--semicolons", action="store_true", help="Terminate statements with semicolons"
    )
    generate.add_argument(
        "--no-comments", action="store_true", help="Omit the generated-file comment"
    )
    generate.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with code {EXIT_WARNINGS} when warnings were produced",
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    generate.set_defaults(func=_handle_generate)

    show_config = subparsers.add_parser(
        "show-config", help="Print the effective generator configuration"
    )
    show_config.add_argument("--config", help="Configuration file path (JSON)")
    show_config.set_defaults(func=_handle_show_config)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``uidl-vue`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return EXIT_ERROR

    try:
        return args.func(args)
    except (CLIError, ConfigError, TemplateError, UIDLLoadError, FileNotFoundError) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return EXIT_ERROR


def _build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect config overrides given on the command line."""
    overrides: Dict[str, Any] = {}

    if args.format:
        overrides["output_format"] = args.format
    if args.template_dir:
        overrides["template_dir"] = args.template_dir
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.tabs:
        overrides["use_tabs"] = True
    if args.quote:
        overrides["quote_style"] = args.quote
    if args.semicolons:
        overrides["semicolons"] = True
    if args.no_comments:
        overrides["add_comments"] = False
    if args.strict:
        overrides["fail_on_warnings"] = True
    if args.output:
        overrides["output_file"] = args.output

    return overrides


def _read_document(args: argparse.Namespace) -> tuple[str, Dict[str, Any]]:
    if args.stdin:
        return load_uidl_from_text(sys.stdin.read())
    if args.file or args.url:
        return load_uidl(file_path=args.file, url=args.url)
    raise CLIError("Input source required (file, --url, or --stdin)")


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    config = load_config(custom_config=_build_overrides(args), config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        logger.warning("Configuration: %s", warning)

    return config


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    source, document = _read_document(args)
    config = _build_config(args)

    logger.info("Generating component from %s", source)
    result = generate_from_uidl(document, config)

    if not result.success:
        err_console.print(f"[red]✗ {escape(result.error_message)}[/red]")
        return EXIT_ERROR

    if result.warnings:
        err_console.print(
            Panel(
                "\n".join(f"• {escape(w)}" for w in result.warnings),
                title=f"⚠️  {len(result.warnings)} warning(s)",
                border_style="yellow",
            )
        )

    _write_output(result.code, result.metadata, config, args)

    if args.verbose:
        _print_metadata(result.metadata)

    if result.warnings and config.fail_on_warnings:
        return EXIT_WARNINGS
    return EXIT_OK


def _write_output(
    code: str, metadata: Dict[str, Any], config: GeneratorConfig, args: argparse.Namespace
) -> None:
    output_path = None
    if args.output_dir:
        stem = component_file_stem(metadata["component"])
        output_path = Path(args.output_dir) / f"{stem}{metadata['file_extension']}"
    elif config.output_file:
        output_path = Path(config.output_file)

    if output_path is None:
        if sys.stdout.isatty():
            lexer = "vue" if metadata["file_extension"] == ".vue" else "javascript"
            console.print(Syntax(code, lexer, theme="monokai", line_numbers=False))
        else:
            sys.stdout.write(code)
        return

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8", newline="")
    except OSError as e:
        raise CLIError(f"Failed to write {output_path}: {e}") from e

    err_console.print(f"[green]✓[/green] Wrote {output_path}")


def _print_metadata(metadata: Dict[str, Any]) -> None:
    table = Table(title="Generation Result", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in metadata.items():
        table.add_row(key, str(value))
    err_console.print(table)


def _handle_show_config(args: argparse.Namespace) -> int:
    """Handle the show-config subcommand."""
    manager = get_config_manager()
    config = load_config(config_file=args.config)

    table = Table(
        title="⚙️  Generator Configuration", box=box.ROUNDED, header_style="bold cyan"
    )
    table.add_column("Setting", style="bold green", no_wrap=True)
    table.add_column("Value", style="cyan")
    for key, value in manager.to_dict(config).items():
        table.add_row(key, repr(value))
    console.print(table)

    warnings = manager.validate_config(config)
    for warning in warnings:
        console.print(f"[yellow]⚠️ {warning}[/yellow]")

    return EXIT_OK if not warnings else EXIT_WARNINGS


if __name__ == "__main__":
    sys.exit(main())
