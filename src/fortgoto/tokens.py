from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .positions import Position


class TokenKind(str, Enum):
    # Keywords
    GO = "GO"
    TO = "TO"

    # Identifiers and literals
    INTEGER = "INTEGER"
    IDENTIFIER = "IDENTIFIER"

    # Punctuation
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","

    EOF = "EOF"


KEYWORDS: dict[str, TokenKind] = {
    "GO": TokenKind.GO,
    "TO": TokenKind.TO,
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str | None
    position: Position

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.position.line}:{self.position.column})"
