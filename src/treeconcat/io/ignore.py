from __future__ import annotations

"""
Gitignore evaluation for a single scan root.

Only the `.gitignore` found directly at the root is consulted. Loading never
fails a run: a missing, unreadable or malformed file yields an empty matcher
that ignores nothing.
"""

from pathlib import Path
from typing import Iterable, Optional

import pathspec

from treeconcat.constants import GITIGNORE_NAME
from treeconcat.core.interfaces import IgnoreMatcherProtocol, LoggerLikeProtocol
from treeconcat.logging.helpers import get_logger


class GitIgnoreMatcher(IgnoreMatcherProtocol):
    """Thin wrapper over `pathspec.GitIgnoreSpec`."""

    def __init__(self, spec: Optional[pathspec.GitIgnoreSpec] = None, *, source: Optional[Path] = None) -> None:
        self._spec = spec
        self.source = source

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, source: Optional[Path] = None) -> 'GitIgnoreMatcher':
        """Compile gitignore lines; raises ValueError on an invalid pattern."""
        spec = pathspec.GitIgnoreSpec.from_lines(lines)
        return cls(spec if len(spec) else None, source=source)

    @classmethod
    def empty(cls) -> 'GitIgnoreMatcher':
        return cls(None)

    def __bool__(self) -> bool:
        return self._spec is not None

    def matches(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Return True when *rel_path* (POSIX, relative to the root) is ignored.

        Directories are tested with a trailing slash so directory-only
        patterns such as ``build/`` apply to them and not to files.
        """
        if self._spec is None:
            return False
        candidate = rel_path.rstrip('/')
        if not candidate or candidate == '.':
            return False
        if is_dir:
            candidate += '/'
        return self._spec.match_file(candidate)


def load_gitignore(root: Path, *, logger: Optional[LoggerLikeProtocol] = None) -> GitIgnoreMatcher:
    """Build the matcher for *root*, falling back to an empty one."""
    log = logger or get_logger('io.ignore')
    path = Path(root) / GITIGNORE_NAME
    if not path.is_file():
        log.debug('no %s at %s, nothing is ignored', GITIGNORE_NAME, root)
        return GitIgnoreMatcher.empty()
    try:
        with path.open('r', encoding='utf-8-sig') as fh:
            matcher = GitIgnoreMatcher.from_lines(fh, source=path)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        log.warning('⚠  could not parse %s (%s), ignoring nothing', path, exc)
        return GitIgnoreMatcher.empty()
    log.debug('loaded ignore rules from %s', path)
    return matcher
