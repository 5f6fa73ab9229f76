from __future__ import annotations

"""Marker rendering and sink writing for file blocks."""

from typing import BinaryIO

from treeconcat.constants import END_MARKER, START_MARKER
from treeconcat.core.models import FileBlock


def render_block(block: FileBlock) -> str:
    """Return the full text of *block*, trailing newline included.

    The layout is fixed::

        <<<START_FILE:{path}>>
        {contents}
        <<<END_FILE:{path}>>
    """
    return (
        START_MARKER.format(path=block.path) + '\n'
        + block.contents + '\n'
        + END_MARKER.format(path=block.path) + '\n'
    )


class BlockWriter:
    """Encodes rendered blocks as UTF-8 onto a binary sink.

    Undecodable path bytes captured by the OS layer as surrogates are written
    back verbatim (``surrogateescape``).
    """

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink

    def write(self, block: FileBlock) -> int:
        data = render_block(block).encode('utf-8', errors='surrogateescape')
        self._sink.write(data)
        return len(data)

    def flush(self) -> None:
        self._sink.flush()
