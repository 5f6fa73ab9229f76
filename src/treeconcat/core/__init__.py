from __future__ import annotations

"""Public surface for treeconcat.core.

Value types, the run report, fatal error classes and the protocol seams are
importable from here:

    from treeconcat.core import WalkOptions, FileBlock, RunReport
"""

from treeconcat.core.errors import OutputError, RootPathError, TreeConcatError
from treeconcat.core.models import FileBlock, WalkOptions, normalize_extensions
from treeconcat.core.report import RunReport
from treeconcat.core.interfaces import (
    IgnoreMatcherProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    WalkerProtocol,
)

__all__ = [
    'FileBlock',
    'IgnoreMatcherProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'OutputError',
    'RootPathError',
    'RunReport',
    'TreeConcatError',
    'WalkOptions',
    'WalkerProtocol',
    'normalize_extensions',
]
