from __future__ import annotations

__version__ = '0.1.0'

from treeconcat.constants import BINARY_PREFIX, END_MARKER, START_MARKER
from treeconcat.core.errors import OutputError, RootPathError, TreeConcatError
from treeconcat.core.models import FileBlock, WalkOptions
from treeconcat.core.report import RunReport
from treeconcat.io.ignore import GitIgnoreMatcher, load_gitignore
from treeconcat.io.walker import TreeWalker, concat_tree
from treeconcat.rendering.renderer import render_block
from treeconcat.cli import TreeConcat, main

__all__ = [
    'BINARY_PREFIX',
    'END_MARKER',
    'START_MARKER',
    'FileBlock',
    'GitIgnoreMatcher',
    'OutputError',
    'RootPathError',
    'RunReport',
    'TreeConcat',
    'TreeConcatError',
    'TreeWalker',
    'WalkOptions',
    'concat_tree',
    'load_gitignore',
    'main',
    'render_block',
]
