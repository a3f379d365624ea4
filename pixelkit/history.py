"""Command-line history with prefix search, persisted to a file."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Deque, Optional, Union


@dataclass
class History:
    """History of entered commands; the most recent entry comes first."""

    path: Path
    capacity: int
    entries: Deque[str] = field(default_factory=deque, init=False)
    cursor: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> None:
        """Add every line of the history file; a missing file is ignored."""
        try:
            f = open(self.path, encoding="utf-8", newline="")
        except OSError:
            return
        with f:
            for line in f:
                line = line[:-1] if line.endswith("\n") else line
                line = line[:-1] if line.endswith("\r") else line
                self.add(line)

    def save(self) -> None:
        """Write the history to its file, oldest entry first."""
        if self.is_empty():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.writelines(entry + "\n" for entry in reversed(self.entries))

    def add(self, entry: Union[str, object]) -> None:
        """Add an entry unless it repeats the most recent one."""
        entry = str(entry)
        if not self.entries or self.entries[0] != entry:
            self.entries.appendleft(entry)
            while len(self.entries) > self.capacity:
                self.entries.pop()

    def reset(self) -> None:
        self.cursor = None

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    @staticmethod
    def _matches(entry: str, prefix: str) -> bool:
        return entry.startswith(prefix) and entry != prefix

    def next(self, prefix: str) -> Optional[str]:
        """Move towards newer entries, returning the next one matching ``prefix``."""
        size = len(self.entries)
        first = min(self.cursor if self.cursor is not None else size, size) - 1
        for index in range(first, -1, -1):
            if self._matches(self.entries[index], prefix):
                self.cursor = index
                return self.entries[index]
        self.cursor = None
        return None

    def prev(self, prefix: str) -> Optional[str]:
        """Move towards older entries, returning the next one matching ``prefix``."""
        start = self.cursor + 1 if self.cursor is not None else 0
        for index in range(start, len(self.entries)):
            if self._matches(self.entries[index], prefix):
                self.cursor = index
                return self.entries[index]
        return None

    def get(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None