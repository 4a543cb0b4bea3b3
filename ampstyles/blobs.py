"""In-memory CSS text tagged with the file it will become."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath


@dataclass(frozen=True)
class CssBlob:
    path: str
    contents: str
    history: tuple[str, ...] = field(default=())

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    def renamed(self, path: str) -> CssBlob:
        """Copy moved to ``path``; the old path goes to history."""
        return replace(self, path=path, history=(*self.history, self.path))

    def with_contents(self, contents: str) -> CssBlob:
        return replace(self, contents=contents)

    def all_names(self) -> list[str]:
        """Base names of the current path and every earlier one."""
        return [PurePosixPath(p).name for p in (*self.history, self.path)]


Stage = Callable[[list[CssBlob]], list[CssBlob]]
