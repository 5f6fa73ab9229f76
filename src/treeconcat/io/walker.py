from __future__ import annotations

"""
Depth-first directory traversal producing marker-delimited file blocks.

Entries are visited in name order. Directories are expanded through an
explicit work-list rather than recursion, so deep trees never hit the
interpreter recursion limit. Symlinked directories are not followed.
"""

import os
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple

from treeconcat.core.errors import OutputError, RootPathError
from treeconcat.core.interfaces import IgnoreMatcherProtocol, LoggerLikeProtocol, WalkerProtocol
from treeconcat.core.models import FileBlock, WalkOptions
from treeconcat.core.report import RunReport
from treeconcat.io.ignore import GitIgnoreMatcher, load_gitignore
from treeconcat.io.reader import BlockContentReader
from treeconcat.logging.helpers import get_logger
from treeconcat.rendering.renderer import BlockWriter

# Entry kinds. Symlinked directories and special files are reported, never entered or read.
_DIR = 'dir'
_FILE = 'file'
_SYMLINKED_DIR = 'symlinked-dir'
_SPECIAL = 'special'

# (display path, root-relative POSIX path, kind)
_Entry = Tuple[str, str, str]


def extension_of(name: str) -> str:
    """Lower-cased extension without the dot; '' for '.gitignore' or 'Makefile'."""
    return os.path.splitext(name)[1][1:].lower()


class TreeWalker(WalkerProtocol):
    def __init__(
        self,
        options: WalkOptions,
        *,
        ignore: Optional[IgnoreMatcherProtocol] = None,
        reader: Optional[BlockContentReader] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._opts = options
        self._log = logger or get_logger('io.walker')
        self._ignore = ignore
        self._reader = reader or BlockContentReader(include_binary=options.include_binary, logger=self._log)
        self.report = RunReport()

    def check_root(self) -> None:
        """Raise RootPathError unless the root is an existing directory."""
        root = self._opts.root
        if not os.path.exists(root):
            raise RootPathError(f'{root} does not exist')
        if not os.path.isdir(root):
            raise RootPathError(f'{root} is not a directory')

    def _resolve_ignore(self) -> IgnoreMatcherProtocol:
        if self._ignore is not None:
            return self._ignore
        if not self._opts.use_gitignore:
            return GitIgnoreMatcher.empty()
        return load_gitignore(Path(self._opts.root), logger=get_logger('io.ignore'))

    def _list_dir(self, path: str, rel: str) -> List[_Entry]:
        entries: List[_Entry] = []
        with os.scandir(path) as it:
            for entry in it:
                child_rel = f'{rel}/{entry.name}' if rel else entry.name
                entries.append((entry.path, child_rel, self._kind_of(entry)))
        entries.sort(key=lambda e: e[1])
        return entries

    @staticmethod
    def _kind_of(entry: os.DirEntry) -> str:
        try:
            if entry.is_dir(follow_symlinks=False):
                return _DIR
            if entry.is_symlink():
                return _SYMLINKED_DIR if entry.is_dir() else _FILE
            if entry.is_file():
                return _FILE
        except OSError:
            return _FILE
        return _SPECIAL

    def _extension_allowed(self, name: str) -> bool:
        allowed = self._opts.extensions
        if not allowed:
            return True
        ext = extension_of(name)
        return bool(ext) and ext in allowed

    def _is_skipped_path(self, path: str) -> bool:
        if not self._opts.skip_paths:
            return False
        return Path(path).resolve() in self._opts.skip_paths

    def iter_blocks(self) -> Iterator[FileBlock]:
        self.check_root()
        ignore = self._resolve_ignore()
        try:
            root_entries = self._list_dir(self._opts.root, '')
        except OSError as exc:
            raise RootPathError(f'cannot read {self._opts.root}: {exc}') from exc
        self.report.dirs_visited += 1

        stack: List[_Entry] = list(reversed(root_entries))
        while stack:
            path, rel, kind = stack.pop()
            if ignore and ignore.matches(rel, is_dir=kind == _DIR):
                self.report.skipped_ignored += 1
                self._log.debug('ignored: %s', path)
                continue

            if kind == _SYMLINKED_DIR:
                self._log.debug('not following symlinked directory %s', path)
                continue
            if kind == _SPECIAL:
                self._log.debug('skipping special file %s', path)
                continue

            if kind == _DIR:
                try:
                    children = self._list_dir(path, rel)
                except OSError as exc:
                    self._log.error('⚠  could not read directory %s (%s)', path, exc)
                    self.report.add_error(f'{path}: {exc}')
                    continue
                self.report.dirs_visited += 1
                stack.extend(reversed(children))
                continue

            if self._is_skipped_path(path):
                self._log.debug('skipping output file %s', path)
                continue
            if not self._extension_allowed(os.path.basename(path)):
                self.report.skipped_extension += 1
                continue

            try:
                contents, binary, size = self._reader.read(path)
            except OSError as exc:
                self._log.error('Error processing file %s: %s', path, exc)
                self.report.add_error(f'{path}: {exc}')
                continue
            if contents is None:
                self.report.skipped_binary += 1
                continue
            yield FileBlock(path=path, contents=contents, binary=binary, size=size)

    def write_all(self, sink: BinaryIO) -> RunReport:
        writer = BlockWriter(sink)
        for block in self.iter_blocks():
            try:
                written = writer.write(block)
            except BrokenPipeError:
                raise
            except OSError as exc:
                raise OutputError(f'cannot write output: {exc}') from exc
            self.report.add_block(written)
        try:
            writer.flush()
        except BrokenPipeError:
            raise
        except OSError as exc:
            raise OutputError(f'cannot write output: {exc}') from exc
        self.report.finish()
        self._log.debug(
            'wrote %d file(s), %d byte(s) in %.3fs (ignored=%d, extension=%d, binary=%d, errors=%d)',
            self.report.files_written,
            self.report.bytes_written,
            self.report.duration_s or 0.0,
            self.report.skipped_ignored,
            self.report.skipped_extension,
            self.report.skipped_binary,
            len(self.report.errors),
        )
        return self.report


def concat_tree(options: WalkOptions, sink: BinaryIO, *, logger: Optional[LoggerLikeProtocol] = None) -> RunReport:
    """Walk ``options.root`` and write every accepted block to *sink*."""
    return TreeWalker(options, logger=logger).write_all(sink)
