from __future__ import annotations

from dataclasses import dataclass

from .errors import LexicalError, invalid_character
from .positions import Position
from .tokens import KEYWORDS, Token, TokenKind


_SINGLE: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


def is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def pos(self) -> Position:
        return Position(offset=self.i, line=self.line, column=self.col)

    def at_comment(self) -> bool:
        # Fixed-form comment card: C or c in column 1.
        return self.col == 1 and self.peek() in ("C", "c")

    def skip_line(self) -> None:
        while not self.eof() and self.peek() != "\n":
            self.advance()
        self.advance()


def tokenize(src: str) -> list[Token] | LexicalError:
    """Scan ``src`` into tokens terminated by ``EOF``.

    Returns the first ``LexicalError`` instead of a token list when the text
    holds a character outside the alphabet, or a digit run glued to a letter.
    """
    cur = _Cursor(src=src)
    tokens: list[Token] = []

    while not cur.eof():
        if cur.at_comment():
            cur.skip_line()
            continue

        ch = cur.peek()

        if ch.isspace():
            cur.advance()
            continue

        start = cur.pos()

        if is_digit(ch):
            j = cur.i
            while is_digit(cur.peek()):
                cur.advance()
            lex = src[j : cur.i]
            nxt = cur.peek()
            if nxt and is_alpha(nxt):
                return invalid_character(
                    cur.pos(),
                    nxt,
                    hint=f"a number cannot run into a name; separate {lex!r} from what follows",
                )
            tokens.append(Token(TokenKind.INTEGER, lex, start))
            continue

        if is_alpha(ch):
            j = cur.i
            while is_alpha(cur.peek()) or is_digit(cur.peek()):
                cur.advance()
            lex = src[j : cur.i].upper()
            tokens.append(Token(KEYWORDS.get(lex, TokenKind.IDENTIFIER), lex, start))
            continue

        k = _SINGLE.get(ch)
        if k is not None:
            cur.advance()
            tokens.append(Token(k, ch, start))
            continue

        return invalid_character(
            start,
            ch,
            hint="a branch statement holds only letters, digits, '(', ')' and ','",
        )

    tokens.append(Token(TokenKind.EOF, None, cur.pos()))
    return tokens
