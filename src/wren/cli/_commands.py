"""``wren resolve`` and ``wren pages`` — compose against a JSON snapshot.

Exit codes:

- ``0`` — success, JSON (resolve) or one path per line (pages) on stdout
- ``1`` — the site, page, or a layout was not found
- ``2`` — unreadable snapshot, invalid URL, or inconsistent data
"""

import argparse
import json
import logging
import sys
from functools import partial
from typing import NoReturn

import anyio

from wren.compose.assembler import PageComposer
from wren.config import ComposerConfig
from wren.errors import DataIntegrityError, InvalidUrl, NotFound
from wren.memory import MemoryStore
from wren.models import ANONYMOUS, UserIdentity

logger = logging.getLogger("wren.cli")


def configure_logging(config: ComposerConfig) -> None:
    """Send wren's log records to stderr at the configured level."""
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_store(path: str) -> MemoryStore:
    try:
        return MemoryStore.from_json_file(path)
    except (OSError, ValueError, TypeError, KeyError) as exc:
        print(f"Error: cannot load {path}: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


def _fail(exc: Exception, code: int) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(code) from exc


def run_resolve(args: argparse.Namespace) -> None:
    """Compose ``args.url`` and print the bundle as JSON."""
    config = ComposerConfig(strict_paths=args.strict_paths, log_level=args.log_level)
    configure_logging(config)
    store = _load_store(args.data)
    composer = PageComposer(store.services(), config)
    identity = UserIdentity(user_id=args.user) if args.user else ANONYMOUS

    try:
        bundle = anyio.run(partial(composer.compose_url, args.url, identity))
    except NotFound as exc:
        _fail(exc, 1)
    except InvalidUrl as exc:
        _fail(exc, 2)
    except DataIntegrityError as exc:
        logger.exception("Cannot compose %s", args.url)
        _fail(exc, 2)
    else:
        print(json.dumps(bundle.to_dict(), indent=args.indent or None))


def run_pages(args: argparse.Namespace) -> None:
    """Print every full path of the site serving ``args.domain``."""
    config = ComposerConfig(log_level=args.log_level)
    configure_logging(config)
    store = _load_store(args.data)
    composer = PageComposer(store.services(), config)

    try:
        summaries = anyio.run(composer.list_pages, args.domain)
    except NotFound as exc:
        _fail(exc, 1)
    except DataIntegrityError as exc:
        logger.exception("Cannot list pages of %s", args.domain)
        _fail(exc, 2)
    else:
        for summary in summaries:
            print(f"{summary.full_path or '(root)'}\t{summary.page.title}")
