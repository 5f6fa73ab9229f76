from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Tuple


def normalize_extensions(extensions: Iterable[str] | None) -> FrozenSet[str]:
    """Lower-case extension tokens and drop a leading dot; blanks are ignored."""
    if not extensions:
        return frozenset()
    out = set()
    for raw in extensions:
        token = (raw or '').strip().lower()
        if token.startswith('.'):
            token = token[1:]
        if token:
            out.add(token)
    return frozenset(out)


@dataclass(frozen=True)
class WalkOptions:
    """Everything a single traversal needs to know."""
    root: str = '.'
    extensions: FrozenSet[str] = frozenset()
    include_binary: bool = False
    use_gitignore: bool = True
    skip_paths: Tuple[Path, ...] = ()

    @classmethod
    def build(
        cls,
        root: str | Path = '.',
        extensions: Iterable[str] | None = None,
        *,
        include_binary: bool = False,
        use_gitignore: bool = True,
        skip_paths: Iterable[str | Path] = (),
    ) -> 'WalkOptions':
        return cls(
            root=str(root),
            extensions=normalize_extensions(extensions),
            include_binary=bool(include_binary),
            use_gitignore=bool(use_gitignore),
            skip_paths=tuple(Path(p).resolve() for p in skip_paths),
        )


@dataclass(frozen=True)
class FileBlock:
    path: str
    contents: str
    binary: bool = False
    size: int = field(default=0, compare=False)
