from __future__ import annotations
from typing import BinaryIO, Iterator, Protocol, runtime_checkable

from treeconcat.core.models import FileBlock
from treeconcat.core.report import RunReport


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract tree walker producing marker-delimited blocks."""

    def iter_blocks(self) -> Iterator[FileBlock]:
        """Lazily yield one block per accepted file, depth-first."""
        ...

    def write_all(self, sink: BinaryIO) -> RunReport:
        """Drive the traversal, writing every block to *sink*."""
        ...
