from __future__ import annotations

from .api import is_comment, parse_document, parse_file, parse_statement, parse_statement_or_raise
from .errors import (
    Diagnostic,
    DiagnosticKind,
    LexicalError,
    ParseError,
    SemanticError,
    StatementSyntaxError,
)
from .format import format_statement
from .report import DocumentReport, LineResult, Statistics, report_to_csv, report_to_json
from .statements import Assigned, Computed, Failure, ParseResult, Statement, Unconditional

__all__ = [
    "Assigned",
    "Computed",
    "Diagnostic",
    "DiagnosticKind",
    "DocumentReport",
    "Failure",
    "LexicalError",
    "LineResult",
    "ParseError",
    "ParseResult",
    "SemanticError",
    "Statement",
    "StatementSyntaxError",
    "Statistics",
    "Unconditional",
    "format_statement",
    "is_comment",
    "parse_document",
    "parse_file",
    "parse_statement",
    "parse_statement_or_raise",
    "report_to_csv",
    "report_to_json",
]
