from __future__ import annotations

"""
Turn a file on disk into block contents.

UTF-8 files are passed through untouched. Anything else is either skipped
or, when binary inclusion is on, base64-encoded behind BINARY_PREFIX.
"""

import base64
from pathlib import Path
from typing import Optional, Tuple

from treeconcat.constants import BINARY_PREFIX
from treeconcat.core.interfaces import LoggerLikeProtocol
from treeconcat.logging.helpers import get_logger, trace_io


def decode_utf8(data: bytes) -> Optional[str]:
    """Return *data* as text when it is valid UTF-8, else None."""
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return None


def encode_binary(data: bytes) -> str:
    return f'{BINARY_PREFIX}\n{base64.b64encode(data).decode("ascii")}'


class BlockContentReader:
    def __init__(self, *, include_binary: bool = False, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._include_binary = include_binary
        self._log = logger or get_logger('io.reader')

    def read(self, path: str | Path) -> Tuple[Optional[str], bool, int]:
        """Read *path* and return ``(contents, is_binary, size)``.

        ``contents`` is None when the file is not UTF-8 and binary inclusion
        is off. OSError propagates to the caller.
        """
        data = Path(path).read_bytes()
        trace_io(self._log, 'read', path=str(path), size=len(data))
        text = decode_utf8(data)
        if text is not None:
            return (text, False, len(data))
        if not self._include_binary:
            self._log.debug('✘ %s: non-UTF-8 file skipped.', path)
            return (None, True, len(data))
        return (encode_binary(data), True, len(data))
