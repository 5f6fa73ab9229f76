#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates the sample tree used by the treeconcat test-suite.

Idempotent. Run directly to materialize the tree for manual inspection:

    python tests/tools/build_fixtures.py /tmp/tc-fixtures
"""
from __future__ import annotations

import sys
import textwrap
from pathlib import Path

BINARY_BLOB = b"\x89PNG\r\n\x1a\n\x00\xff\xfe\x81binary\x00"

GITIGNORE = """
    # build output
    build/
    *.log
    !keep.log
    /top_only.txt
    secret.txt
"""


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


# ───────────────────── source files ─────────────────────
def _populate_sources(root: Path) -> None:
    _write(root / "src/module/alpha.py", """
        import os

        def alpha():
            return 1
    """)
    _write(root / "src/module/beta.PY", """
        def beta():
            return 2
    """)
    _write(root / "src/module/charlie.js", """
        export const charlie = () => 3;
    """)
    _write(root / "src/other/notes.txt", "plain notes\n")
    _write(root / "README.md", "# fixture readme\n")
    _write(root / "Makefile", "all:\n\techo ok\n")
    _write(root / "top_only.txt", "anchored at root\n")
    _write(root / "nested/top_only.txt", "not anchored here\n")


def _populate_ignored(root: Path) -> None:
    _write(root / "build/out.py", "print('generated')\n")
    _write(root / "build/deep/more.txt", "generated too\n")
    _write(root / "logs/run.log", "noise\n")
    _write(root / "logs/keep.log", "kept by negation\n")
    _write(root / "nested/secret.txt", "hidden by basename rule\n")


def _populate_binary(root: Path) -> None:
    _write_bytes(root / "assets/logo.png", BINARY_BLOB)


def build(root: Path) -> Path:
    """Create the full fixture tree under *root* and return it."""
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    _populate_sources(root)
    _populate_ignored(root)
    _populate_binary(root)
    _write(root / ".gitignore", GITIGNORE)
    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("test-fixtures")
    print(build(target))
