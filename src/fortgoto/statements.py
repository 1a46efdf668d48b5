from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from .errors import Diagnostic, ParseError


@dataclass(frozen=True, slots=True)
class Statement:
    """A recognized branch statement.

    ``line``/``column`` point at the branch target (the token after ``GO TO``).
    They are left out of equality: two spellings of the same statement compare
    equal.
    """

    tag: ClassVar[str]

    line: int = field(compare=False)
    column: int = field(compare=False)

    @property
    def success(self) -> bool:
        return True

    def unwrap(self) -> Statement:
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "type": self.tag,
            "line": self.line,
            "column": self.column,
        }


@dataclass(frozen=True, slots=True)
class Unconditional(Statement):
    """GO TO 100"""

    tag: ClassVar[str] = "unconditional"

    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        out = Statement.to_dict(self)
        out["label"] = self.label
        return out


@dataclass(frozen=True, slots=True)
class Computed(Statement):
    """GO TO (10, 20, 30), I"""

    tag: ClassVar[str] = "computed"

    labels: tuple[str, ...] = ()
    expression: str = ""

    def to_dict(self) -> dict[str, Any]:
        out = Statement.to_dict(self)
        out["labels"] = list(self.labels)
        out["expression"] = self.expression
        return out


@dataclass(frozen=True, slots=True)
class Assigned(Statement):
    """GO TO VAR"""

    tag: ClassVar[str] = "assigned"

    expression: str = ""

    def to_dict(self) -> dict[str, Any]:
        out = Statement.to_dict(self)
        out["expression"] = self.expression
        return out


@dataclass(frozen=True, slots=True)
class Failure:
    diagnostic: Diagnostic

    @property
    def success(self) -> bool:
        return False

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column

    def unwrap(self) -> Statement:
        raise ParseError(self.diagnostic)

    def to_dict(self) -> dict[str, Any]:
        return self.diagnostic.to_dict()


ParseResult = Unconditional | Computed | Assigned | Failure
