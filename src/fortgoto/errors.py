"""Diagnostics for branch statements.

A diagnostic is a value: the scanner and the parser return the first one they
hit instead of raising. ``ParseError`` wraps a diagnostic for callers that want
an exception.

All diagnostics are built through the factory functions at the bottom of this
module so wording stays consistent and every one carries a position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .positions import Position


class DiagnosticKind(str, Enum):
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: ClassVar[DiagnosticKind]

    position: Position
    message: str
    hint: str | None = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "kind": self.kind.value,
            "error": self.message,
            "line": self.position.line,
            "column": self.position.column,
        }


@dataclass(frozen=True, slots=True)
class LexicalError(Diagnostic):
    """A character outside the statement alphabet."""

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.LEXICAL

    char: str = ""

    def to_dict(self) -> dict[str, Any]:
        out = Diagnostic.to_dict(self)
        out["char"] = self.char
        return out


@dataclass(frozen=True, slots=True)
class StatementSyntaxError(Diagnostic):
    """The parser required a token that is not there."""

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.SYNTAX

    expected: str = ""
    found: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out = Diagnostic.to_dict(self)
        out["expected"] = self.expected
        out["found"] = self.found
        return out


@dataclass(frozen=True, slots=True)
class SemanticError(Diagnostic):
    """Well-formed tokens that break a domain rule (label range, name shape)."""

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.SEMANTIC

    details: dict[str, str] = field(default_factory=dict, hash=False)

    def to_dict(self) -> dict[str, Any]:
        out = Diagnostic.to_dict(self)
        out["details"] = dict(self.details)
        return out


@dataclass(slots=True)
class ParseError(Exception):
    diagnostic: Diagnostic
    file: str = "<memory>"

    def __str__(self) -> str:
        d = self.diagnostic
        base = f"{d.position.format(self.file)}: {d.message}"
        if d.hint:
            return f"{base}\nhint: {d.hint}"
        return base


# Factory


def unexpected_token(position: Position, expected: str, found: str) -> StatementSyntaxError:
    return StatementSyntaxError(
        position=position,
        message=f"unexpected token: expected {expected}, found {found}",
        expected=expected,
        found=found,
    )


def missing_token(position: Position, expected: str, found: str | None = None) -> StatementSyntaxError:
    msg = f"missing {expected}"
    if found is not None:
        msg += f", found {found}"
    return StatementSyntaxError(position=position, message=msg, expected=expected, found=found)


def unexpected_end_of_input(
    position: Position, expected: str = "continuation of statement"
) -> StatementSyntaxError:
    return StatementSyntaxError(
        position=position,
        message=f"unexpected end of input, expected {expected}",
        expected=expected,
        found="end of input",
    )


def missing_expression(position: Position, found: str | None = None) -> StatementSyntaxError:
    return StatementSyntaxError(
        position=position,
        message="missing expression after comma",
        hint="a computed GO TO ends with an index: an integer or a variable name",
        expected="expression (label or variable)",
        found=found,
    )


def invalid_label(position: Position, label: str) -> SemanticError:
    return SemanticError(
        position=position,
        message=f"invalid label {label}: a label must be an integer from 1 to 99999",
        hint="labels are one to five digits without a leading zero",
        details={"label": label},
    )


def invalid_identifier(position: Position, name: str) -> SemanticError:
    return SemanticError(
        position=position,
        message=f"invalid identifier {name}: a variable name is a letter followed by at most five letters or digits",
        details={"identifier": name},
    )


def invalid_character(position: Position, char: str, hint: str | None = None) -> LexicalError:
    return LexicalError(
        position=position,
        message=f"invalid character {char!r}",
        hint=hint,
        char=char,
    )
