from __future__ import annotations

from dataclasses import dataclass

from .errors import (
    Diagnostic,
    StatementSyntaxError,
    invalid_identifier,
    invalid_label,
    missing_expression,
    missing_token,
    unexpected_end_of_input,
    unexpected_token,
)
from .statements import Assigned, Computed, Failure, ParseResult, Unconditional
from .tokens import Token, TokenKind
from .validation import is_valid_identifier, is_valid_label


BRANCH_TARGETS = "INTEGER, IDENTIFIER or ("


def _found(tok: Token) -> str:
    if tok.kind is TokenKind.EOF:
        return "end of input"
    return tok.kind.value


@dataclass(slots=True)
class Parser:
    """Recursive-descent parser for one branch statement.

    Grammar::

        statement  := GO TO target EOF
        target     := "(" labels ")" "," (INTEGER | IDENTIFIER)   computed
                    | INTEGER                                     unconditional
                    | IDENTIFIER                                  assigned
        labels     := INTEGER ("," INTEGER)*

    One token of lookahead picks the target. Every production returns either
    its value or the first diagnostic; nothing after that is looked at.
    """

    tokens: list[Token]
    i: int = 0

    def __post_init__(self) -> None:
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")

    def peek(self) -> Token:
        return self.tokens[self.i]

    def at(self, kind: TokenKind) -> bool:
        return self.peek().kind is kind

    def advance(self) -> Token:
        tok = self.tokens[self.i]
        if tok.kind is not TokenKind.EOF:
            self.i += 1
        return tok

    def parse(self) -> ParseResult:
        for kw in (TokenKind.GO, TokenKind.TO):
            if not self.at(kw):
                tok = self.peek()
                return Failure(missing_token(tok.position, f"keyword {kw.value}", _found(tok)))
            self.advance()

        if self.at(TokenKind.LPAREN):
            out = self._computed()
        elif self.at(TokenKind.INTEGER):
            out = self._unconditional()
        elif self.at(TokenKind.IDENTIFIER):
            out = self._assigned()
        else:
            return Failure(self._unexpected(BRANCH_TARGETS))

        if isinstance(out, Failure):
            return out

        tok = self.peek()
        if tok.kind is not TokenKind.EOF:
            return Failure(unexpected_token(tok.position, "end of statement", tok.kind.value))
        return out

    # Productions

    def _unconditional(self) -> ParseResult:
        tok = self.advance()
        if not is_valid_label(tok.text):
            return Failure(invalid_label(tok.position, tok.text))
        return Unconditional(line=tok.position.line, column=tok.position.column, label=tok.text)

    def _assigned(self) -> ParseResult:
        tok = self.advance()
        if not is_valid_identifier(tok.text):
            return Failure(invalid_identifier(tok.position, tok.text))
        return Assigned(line=tok.position.line, column=tok.position.column, expression=tok.text)

    def _computed(self) -> ParseResult:
        lparen = self.advance()

        labels: list[str] = []
        label = self._label("label (integer)")
        if isinstance(label, Diagnostic):
            return Failure(label)
        labels.append(label)
        while self.at(TokenKind.COMMA):
            self.advance()
            label = self._label("label after comma")
            if isinstance(label, Diagnostic):
                return Failure(label)
            labels.append(label)

        for kind, expected in ((TokenKind.RPAREN, "')'"), (TokenKind.COMMA, "',' after the label list")):
            if not self.at(kind):
                return Failure(self._unexpected(expected))
            self.advance()

        tok = self.peek()
        if tok.kind not in (TokenKind.INTEGER, TokenKind.IDENTIFIER):
            return Failure(missing_expression(tok.position, _found(tok)))
        self.advance()

        return Computed(
            line=lparen.position.line,
            column=lparen.position.column,
            labels=tuple(labels),
            expression=tok.text,
        )

    # Helpers

    def _label(self, expected: str) -> str | Diagnostic:
        tok = self.peek()
        if tok.kind is not TokenKind.INTEGER:
            return self._unexpected(expected)
        self.advance()
        if not is_valid_label(tok.text):
            return invalid_label(tok.position, tok.text)
        return tok.text

    def _unexpected(self, expected: str) -> StatementSyntaxError:
        tok = self.peek()
        if tok.kind is TokenKind.EOF:
            return unexpected_end_of_input(tok.position, expected)
        return unexpected_token(tok.position, expected, tok.kind.value)
