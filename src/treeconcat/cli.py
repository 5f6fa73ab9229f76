from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, NoReturn, Optional, Sequence

from treeconcat.core.errors import OutputError, TreeConcatError
from treeconcat.core.models import WalkOptions
from treeconcat.core.report import RunReport
from treeconcat.io.walker import TreeWalker
from treeconcat.logging.factory import DefaultLoggerFactory
from treeconcat.logging.helpers import get_logger
from treeconcat.parsing.parser import _build_parser


logger = get_logger('treeconcat')


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('treeconcat')


@contextmanager
def _open_sink(output: Optional[str]) -> Iterator[BinaryIO]:
    """Yield the output sink; a file is created (truncated) and closed afterwards."""
    if not output:
        yield sys.stdout.buffer
        return
    try:
        fh = open(output, 'wb')
    except OSError as exc:
        raise OutputError(f'cannot create output file {output}: {exc}') from exc
    with fh:
        yield fh


class TreeConcat:
    """Top-level façade for command-style execution."""

    @staticmethod
    def options_from_namespace(ns: argparse.Namespace) -> WalkOptions:
        skip = [ns.output] if ns.output else []
        return WalkOptions.build(
            ns.path,
            ns.extensions,
            include_binary=ns.include_binary,
            use_gitignore=ns.use_gitignore,
            skip_paths=skip,
        )

    @staticmethod
    def run(argv: Sequence[str]) -> RunReport:
        """Parse *argv*, walk the tree and write the result; return the run report."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('TREECONCAT_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        options = TreeConcat.options_from_namespace(ns)
        walker = TreeWalker(options)
        walker.check_root()
        with _open_sink(ns.output) as sink:
            return walker.write_all(sink)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `treeconcat` script and `python -m treeconcat`."""
    try:
        TreeConcat.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout at shutdown.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(0)
    except TreeConcatError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
