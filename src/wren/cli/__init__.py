"""Wren CLI — compose pages from a JSON site snapshot.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — page composition for multi-site content management.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error", "critical"),
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Compose the page at a URL")
    resolve_parser.add_argument("url", help="Full page URL (e.g. https://example.com/blog)")
    resolve_parser.add_argument(
        "--data",
        required=True,
        help="JSON file with the site snapshot",
    )
    resolve_parser.add_argument("--user", default=None, help="Requesting user id")
    resolve_parser.add_argument(
        "--strict-paths",
        action="store_true",
        help="Fail on duplicate full paths instead of keeping the last page",
    )
    resolve_parser.add_argument("--indent", type=int, default=2, help="JSON indent width")

    # -- wren pages -------------------------------------------------------
    pages_parser = subparsers.add_parser("pages", help="List the full paths of a site")
    pages_parser.add_argument("domain", help="Site domain (e.g. example.com)")
    pages_parser.add_argument(
        "--data",
        required=True,
        help="JSON file with the site snapshot",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from wren.cli._commands import run_resolve

        run_resolve(args)
    elif args.command == "pages":
        from wren.cli._commands import run_pages

        run_pages(args)
