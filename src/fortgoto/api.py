from __future__ import annotations

import logging
from pathlib import Path

from .errors import ParseError
from .lexer import tokenize
from .parser import Parser
from .report import DocumentReport, LineResult
from .statements import Failure, ParseResult, Statement


logger = logging.getLogger(__name__)


def parse_statement(line: str) -> ParseResult:
    """Parse one trimmed statement line.

    Never raises for bad input: a lexical, syntax or semantic problem comes
    back as a ``Failure`` holding the first diagnostic found.
    """
    toks = tokenize(line)
    if not isinstance(toks, list):
        return Failure(toks)
    return Parser(toks).parse()


def parse_statement_or_raise(line: str, *, file: str = "<memory>") -> Statement:
    out = parse_statement(line)
    if isinstance(out, Failure):
        raise ParseError(out.diagnostic, file=file)
    return out


def is_comment(line: str) -> bool:
    return line[:1] in ("C", "c")


def parse_document(text: str, *, file: str = "<memory>") -> DocumentReport:
    """Parse every statement of a multi-line text.

    Blank lines are dropped, comment lines are recorded but not parsed.
    Entries keep input order and carry their 1-based line number.
    """
    entries: list[LineResult] = []
    for number, raw in enumerate(text.split("\n"), start=1):
        raw = raw.removesuffix("\r")
        line = raw.strip()
        indent = len(raw) - len(raw.lstrip())
        if not line:
            continue
        if is_comment(line):
            entries.append(LineResult(number=number, text=line, result=None, indent=indent))
            continue
        res = parse_statement(line)
        if isinstance(res, Failure):
            logger.debug("%s:%d: %s", file, number, res.diagnostic.message)
        else:
            logger.debug("%s:%d: %s", file, number, res.tag)
        entries.append(LineResult(number=number, text=line, result=res, indent=indent))

    report = DocumentReport(file=file, entries=tuple(entries))
    st = report.statistics()
    logger.info(
        "%s: %d statements, %d ok, %d errors, %d comments",
        file,
        st.processed,
        st.successful,
        st.errors,
        st.comments,
    )
    return report


def parse_file(path: str | Path) -> DocumentReport:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding="utf-8")
    return parse_document(src, file=str(p))
