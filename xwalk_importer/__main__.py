"""CLI entry point: python -m xwalk_importer --input FILE [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from xwalk_importer import settings
from xwalk_importer.importer import DocumentLoadError, import_file, import_page
from xwalk_importer.items import ImportResult

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xwalk-importer",
        description=(
            "Convert the our-stories page snapshot into xwalk block tables.\n"
            "Emits Hero, Hero (video), Cards and Cards (news) blocks."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--input", required=True, metavar="FILE",
                        help="Page snapshot to import ('-' reads stdin)")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Source URL recorded on the result")
    parser.add_argument("--format", choices=settings.OUTPUT_FORMATS,
                        default=settings.DEFAULT_OUTPUT_FORMAT,
                        help=f"Output format (default: {settings.DEFAULT_OUTPUT_FORMAT})")
    parser.add_argument("--out", default=None, metavar="FILE",
                        help="Write output to FILE instead of stdout")
    parser.add_argument("--parser", choices=sorted(settings.PARSER_FEATURES),
                        default="xml",
                        help=("Input parser: snapshot XML, or plain HTML where links are <a> "
                              "elements (default: xml)"))
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    parser.add_argument("--quiet", action="store_true", default=False,
                        help="Do not print the banner and section summary")
    return parser


def _print_banner(console: Console, args: argparse.Namespace) -> None:
    console.print(
        Panel.fit(
            f"[bold cyan]xwalk importer[/bold cyan]\n"
            f"Input:   [green]{args.input}[/green]\n"
            f"URL:     {args.url or '—'}\n"
            f"Parser:  {args.parser}\n"
            f"Format:  {args.format}\n"
            f"Output:  [yellow]{args.out or 'stdout'}[/yellow]",
            border_style="cyan",
            title="[bold]Configuration[/bold]",
        ),
    )


def _print_summary(console: Console, result: ImportResult) -> None:
    tbl = Table(
        title=f"[bold green]Sections ({len(result.found_sections)}/{len(result.sections)})[/bold green]",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    tbl.add_column("#",     style="dim",  justify="right", width=3, no_wrap=True)
    tbl.add_column("Section", style="cyan",                         no_wrap=True)
    tbl.add_column("Block", style="green",                          no_wrap=True)
    tbl.add_column("Found", justify="center",                       no_wrap=True)
    tbl.add_column("Rows",  justify="right",                        no_wrap=True)

    for i, s in enumerate(result.sections, 1):
        tbl.add_row(
            str(i),
            s.name,
            s.block,
            "[green]yes[/green]" if s.found else "[yellow]no[/yellow]",
            str(s.rows) if s.found else "-",
        )
    console.print(tbl)


def _render(result: ImportResult, fmt: str) -> str:
    if fmt == "html":
        return result.html
    if fmt == "json":
        return result.model_dump_json(indent=2)
    return result.markdown


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    console = Console(stderr=True)
    if not args.quiet:
        _print_banner(console, args)

    features = settings.PARSER_FEATURES[args.parser]
    try:
        if args.input == "-":
            result = import_page(sys.stdin.buffer.read(), args.url, features=features)
        else:
            result = import_file(args.input, args.url, features=features)
    except DocumentLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not result.found_sections:
        logger.warning("No known sections found in %s", args.input)

    output = _render(result, args.format)
    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"ERROR: Cannot write {out_path}: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote %s output to %s", args.format, out_path)
    else:
        sys.stdout.write(output + "\n")

    if not args.quiet:
        _print_summary(console, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
