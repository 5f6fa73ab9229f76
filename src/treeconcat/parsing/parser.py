# treeconcat/parsing/parser.py
from __future__ import annotations

import argparse

from treeconcat.constants import DEFAULT_ROOT


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Extensions are trailing positionals; they may follow a literal ``--`` so
    that an extension spelled like a flag is never mistaken for one.
    """
    from treeconcat import __version__

    p = argparse.ArgumentParser(
        prog="treeconcat",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [--] [EXT ...]",
        description=(
            "treeconcat – concatenate a directory tree into one marker-delimited stream\n"
            "Every accepted file is written as\n"
            "  <<<START_FILE:{path}>>\n  {contents}\n  <<<END_FILE:{path}>>"
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_loc.add_argument(
        "-p",
        "--path",
        metavar="DIR",
        dest="path",
        default=DEFAULT_ROOT,
        help="Initial path to start searching for files (default: current directory).",
    )
    g_loc.add_argument(
        "--no-gitignore",
        action="store_false",
        dest="use_gitignore",
        help="Do not consult the .gitignore file found at the root.",
    )
    g_loc.add_argument(
        "extensions",
        metavar="EXT",
        nargs="*",
        help=(
            "File extensions to include, without the leading dot and matched "
            "case-insensitively. With none given every file is included."
        ),
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        default=None,
        help="Write to FILE (created or truncated) instead of standard output.",
    )
    g_out.add_argument(
        "-b",
        "--include-binary",
        action="store_true",
        dest="include_binary",
        help="Include non-UTF-8 files as base64 encoded strings.",
    )

    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log skipped files and a closing summary to stderr.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON lines (also TREECONCAT_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
