from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class IgnoreMatcherProtocol(Protocol):
    """Gitignore-style exclusion test over root-relative POSIX paths."""

    def matches(self, rel_path: str, *, is_dir: bool = False) -> bool:
        ...

    def __bool__(self) -> bool:
        """False when no rule is loaded (the matcher ignores nothing)."""
        ...
