"""CLI entrypoint for mapping Jest payloads to explorer trees."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.traceback import install as install_rich_traceback
from rich.tree import Tree

from jest_explorer.config import get_config
from jest_explorer.models import JestResponse, JestTotalResults, Node, ParseResult, SuiteNode
from jest_explorer.services import (
    TestReconciler,
    map_assertion_to_decoration,
    map_parse_to_tree,
    map_result_to_tree,
    parse_ids_to_filter,
)

logger = logging.getLogger(__name__)

_PARSE_RESULTS = TypeAdapter(list[ParseResult])


def _log_handler() -> RichHandler:
    # stdout carries --json payloads
    return RichHandler(console=Console(stderr=True), rich_tracebacks=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[_log_handler()],
    )


def _load_results(path: Path) -> JestTotalResults:
    return JestTotalResults.model_validate_json(path.read_bytes())


def _load_parse_results(path: Path) -> list[ParseResult]:
    return _PARSE_RESULTS.validate_json(path.read_bytes())


def _node_label(node: Node) -> str:
    if isinstance(node, SuiteNode):
        return f"[bold]{escape(node.label)}[/bold]"
    label = escape(node.label)
    if node.line is not None:
        label += f" [dim]:{node.line}[/dim]"
    if node.skipped:
        return f"[yellow]{label} (skipped)[/yellow]"
    return f"[green]{label}[/green]"


def _add_children(branch: Tree, children: list[Node]) -> None:
    for child in children:
        sub_branch = branch.add(_node_label(child))
        if isinstance(child, SuiteNode):
            _add_children(sub_branch, child.children)


def _render_tree(console: Console, root: SuiteNode) -> None:
    tree = Tree(_node_label(root), guide_style="dim")
    _add_children(tree, root.children)
    console.print(tree)


def _emit(console: Console, root: SuiteNode, as_json: bool) -> None:
    if as_json:
        console.print_json(data=root.to_payload())
    else:
        _render_tree(console, root)


def _cmd_tree(console: Console, args: argparse.Namespace) -> int:
    results = _load_results(args.results)
    reconciler = TestReconciler()
    reconciler.update_file_with_jest_status(results)
    root = map_result_to_tree(JestResponse(results=results), args.work_dir, reconciler)
    _emit(console, root, args.json)
    return 0


def _cmd_parse(console: Console, args: argparse.Namespace) -> int:
    root = map_parse_to_tree(_load_parse_results(args.parse_results), args.work_dir)
    _emit(console, root, args.json)
    return 0


def _cmd_filter(console: Console, args: argparse.Namespace) -> int:
    test_filter = parse_ids_to_filter(args.ids)
    console.print_json(data=test_filter.to_payload() if test_filter else None)
    return 0


def _cmd_decorations(console: Console, args: argparse.Namespace) -> int:
    results = _load_results(args.results)
    reconciler = TestReconciler()
    reconciler.update_file_with_jest_status(results)

    table = Table(title="Failure decorations", box=box.SIMPLE)
    table.add_column("File", style="bold")
    table.add_column("Line", justify="right")
    table.add_column("Message")
    for file_result in results.test_results:
        display_name = file_result.name
        if args.work_dir and display_name.startswith(args.work_dir):
            display_name = display_name[len(args.work_dir) :].lstrip("/\\")
        for assertion in file_result.assertion_results:
            for decoration in map_assertion_to_decoration(assertion, file_result.name, reconciler):
                if decoration.message:
                    table.add_row(escape(display_name), str(decoration.line), escape(decoration.message))

    if table.row_count:
        console.print(table)
    else:
        console.print(Panel("No failing assertions.", box=box.ROUNDED))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jest-explorer",
        description="Map Jest results and parse output to test explorer trees.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show detailed debug information",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree_parser = subparsers.add_parser("tree", help="Build the tree from `jest --json` output")
    tree_parser.add_argument("results", type=Path, help="Path to the JSON written by `jest --json`")
    tree_parser.set_defaults(handler=_cmd_tree)

    parse_parser = subparsers.add_parser("parse", help="Build the tree from static parse results")
    parse_parser.add_argument("parse_results", type=Path, help="Path to a JSON list of parse results")
    parse_parser.set_defaults(handler=_cmd_parse)

    for sub in (tree_parser, parse_parser):
        sub.add_argument(
            "--work-dir",
            help="Prefix stripped from file paths (default: $JEST_EXPLORER_WORK_DIR or cwd)",
        )
        sub.add_argument("--json", action="store_true", help="Print the node payload as JSON")

    filter_parser = subparsers.add_parser("filter", help="Turn selected test ids into runner patterns")
    filter_parser.add_argument("ids", nargs="+", help="Identifiers selected in the explorer")
    filter_parser.set_defaults(handler=_cmd_filter)

    decorations_parser = subparsers.add_parser("decorations", help="List failure decorations")
    decorations_parser.add_argument("results", type=Path, help="Path to the JSON written by `jest --json`")
    decorations_parser.add_argument("--work-dir", help="Prefix stripped from displayed file paths")
    decorations_parser.set_defaults(handler=_cmd_decorations)

    return parser


def run(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Parse ``argv`` and run the selected command; returns the exit status."""
    args = _build_parser().parse_args(argv)
    config = get_config()
    console = console or Console()

    _configure_logging("DEBUG" if args.debug else config.log_level)
    if args.debug:
        install_rich_traceback(show_locals=True)

    if hasattr(args, "work_dir") and args.work_dir is None:
        args.work_dir = config.work_dir
    logger.debug("Running %s with work dir %s", args.command, getattr(args, "work_dir", None))

    try:
        return args.handler(console, args)
    except (OSError, ValidationError) as exc:
        Console(stderr=True).print(Panel(escape(str(exc)), title="Error", style="red", box=box.ROUNDED))
        return 1


def main(argv: list[str] | None = None) -> None:
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()
