from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based; line/column are 1-based for user-facing messages.
    Positions are values: the scanner hands out a fresh one per token.
    """

    offset: int
    line: int
    column: int

    def format(self, file: str = "<memory>") -> str:
        return f"{file}:{self.line}:{self.column}"

