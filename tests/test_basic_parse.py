from __future__ import annotations

import pytest

from fortgoto import (
    Assigned,
    Computed,
    DiagnosticKind,
    Failure,
    LexicalError,
    ParseError,
    SemanticError,
    StatementSyntaxError,
    Unconditional,
    parse_statement,
    parse_statement_or_raise,
)
from fortgoto.lexer import tokenize
from fortgoto.parser import Parser


def _fail(src: str) -> Failure:
    out = parse_statement(src)
    assert isinstance(out, Failure), out
    return out


def test_unconditional() -> None:
    out = parse_statement("GO TO 100")
    assert out == Unconditional(line=1, column=7, label="100")
    assert out.to_dict() == {
        "success": True,
        "type": "unconditional",
        "label": "100",
        "line": 1,
        "column": 7,
    }


def test_computed() -> None:
    out = parse_statement("GO TO (10, 20, 30), I")
    assert isinstance(out, Computed)
    assert out.labels == ("10", "20", "30")
    assert out.expression == "I"
    assert (out.line, out.column) == (1, 7)
    assert out.to_dict() == {
        "success": True,
        "type": "computed",
        "labels": ["10", "20", "30"],
        "expression": "I",
        "line": 1,
        "column": 7,
    }


def test_assigned() -> None:
    out = parse_statement("GO TO VAR")
    assert out == Assigned(line=1, column=7, expression="VAR")
    assert out.to_dict()["type"] == "assigned"


@pytest.mark.parametrize(
    "src, expected",
    [
        ("go to 200", Unconditional(line=1, column=7, label="200")),
        ("Go To 300", Unconditional(line=1, column=7, label="300")),
        ("GO TO (100, 200), 2", Computed(line=1, column=7, labels=("100", "200"), expression="2")),
        ("GO TO VAR123", Assigned(line=1, column=7, expression="VAR123")),
        ("GO TO (100), X", Computed(line=1, column=7, labels=("100",), expression="X")),
        ("GO TO ( 10 , 20 , 30 ), I", Computed(line=1, column=7, labels=("10", "20", "30"), expression="I")),
        ("GO TO(10,10),k", Computed(line=1, column=6, labels=("10", "10"), expression="K")),
        ("GO TO 99999", Unconditional(line=1, column=7, label="99999")),
        ("GO TO 1", Unconditional(line=1, column=7, label="1")),
        ("go to abc", Assigned(line=1, column=7, expression="ABC")),
    ],
)
def test_valid_statements(src: str, expected: object) -> None:
    assert parse_statement(src) == expected


def test_equality_ignores_position() -> None:
    a = parse_statement("GO    TO   100")
    b = parse_statement("GO TO 100")
    assert a == b
    assert a.column != b.column


def test_missing_to() -> None:
    out = _fail("GO 100")
    d = out.diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert (d.line, d.column) == (1, 4)
    assert d.expected == "keyword TO"
    assert d.found == "INTEGER"
    assert "missing keyword TO" in d.message
    assert out.to_dict() == {
        "success": False,
        "kind": "syntax",
        "error": d.message,
        "line": 1,
        "column": 4,
        "expected": "keyword TO",
        "found": "INTEGER",
    }


def test_missing_go() -> None:
    d = _fail("TO 100").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "keyword GO"
    assert (d.line, d.column) == (1, 1)


def test_goto_spelled_as_one_word_is_missing_go() -> None:
    d = _fail("GOTO 100").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.found == "IDENTIFIER"


def test_empty_statement() -> None:
    d = _fail("").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "keyword GO"
    assert d.found == "end of input"


def test_missing_target() -> None:
    d = _fail("GO TO").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert "end of input" in d.message
    assert "INTEGER, IDENTIFIER or (" in d.expected
    assert (d.line, d.column) == (1, 6)


def test_bad_target_token() -> None:
    d = _fail("GO TO , 10").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "INTEGER, IDENTIFIER or ("
    assert d.found == ","


@pytest.mark.parametrize("label", ["0", "00", "0100", "100000", "123456"])
def test_invalid_unconditional_label(label: str) -> None:
    d = _fail(f"GO TO {label}").diagnostic
    assert isinstance(d, SemanticError)
    assert d.kind is DiagnosticKind.SEMANTIC
    assert d.details == {"label": label}
    assert label in d.message
    assert (d.line, d.column) == (1, 7)


def test_label_zero_record() -> None:
    rec = _fail("GO TO 0").to_dict()
    assert rec["success"] is False
    assert rec["kind"] == "semantic"
    assert rec["details"] == {"label": "0"}


def test_missing_comma_between_labels() -> None:
    d = _fail("GO TO (10, 20 30), I").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "')'"
    assert d.found == "INTEGER"
    assert (d.line, d.column) == (1, 15)


def test_missing_comma_before_expression() -> None:
    d = _fail("GO TO (10, 20, 30) I").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "',' after the label list"
    assert d.found == "IDENTIFIER"


def test_empty_label_list() -> None:
    d = _fail("GO TO (), I").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "label (integer)"
    assert d.found == ")"
    assert (d.line, d.column) == (1, 8)


def test_elided_label() -> None:
    d = _fail("GO TO (10, ,20), I").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "label after comma"
    assert d.found == ","


def test_unclosed_paren() -> None:
    d = _fail("GO TO (10, 20, 30, I").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "label after comma"
    assert d.found == "IDENTIFIER"


def test_unclosed_paren_at_end_of_input() -> None:
    d = _fail("GO TO (10").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.found == "end of input"
    assert d.expected == "')'"


def test_missing_expression() -> None:
    d = _fail("GO TO (10, 20),").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.message == "missing expression after comma"
    assert d.expected == "expression (label or variable)"
    assert d.found == "end of input"


def test_missing_expression_before_other_token() -> None:
    d = _fail("GO TO (10), (").diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.message == "missing expression after comma"
    assert d.found == "("


def test_invalid_label_inside_list() -> None:
    d = _fail("GO TO (10, 0, 30), I").diagnostic
    assert isinstance(d, SemanticError)
    assert d.details == {"label": "0"}
    assert (d.line, d.column) == (1, 12)


def test_computed_expression_value_is_not_checked() -> None:
    out = parse_statement("GO TO (10), 0")
    assert isinstance(out, Computed)
    assert out.expression == "0"
    out = parse_statement("GO TO (10), LONGNAME")
    assert isinstance(out, Computed)
    assert out.expression == "LONGNAME"


def test_assigned_identifier_too_long() -> None:
    d = _fail("GO TO VARIABLE").diagnostic
    assert isinstance(d, SemanticError)
    assert d.details == {"identifier": "VARIABLE"}


@pytest.mark.parametrize(
    "src", ["GO TO 100 EXTRA", "GO TO VAR 1", "GO TO (10), I J", "GO TO 100,", "GO TO 10 (20)"]
)
def test_trailing_tokens(src: str) -> None:
    d = _fail(src).diagnostic
    assert isinstance(d, StatementSyntaxError)
    assert d.expected == "end of statement"


def test_lexical_errors_come_through_unchanged() -> None:
    out = _fail("GO TO 123VAR")
    assert isinstance(out.diagnostic, LexicalError)
    rec = out.to_dict()
    assert rec["kind"] == "lexical"
    assert rec["char"] == "V"
    assert (rec["line"], rec["column"]) == (1, 10)


def test_parse_statement_or_raise() -> None:
    assert parse_statement_or_raise("GO TO 5") == Unconditional(line=1, column=7, label="5")
    with pytest.raises(ParseError) as e:
        parse_statement_or_raise("GO TO 0", file="prog.f")
    assert str(e.value).startswith("prog.f:1:7: invalid label 0")
    assert "hint:" in str(e.value)


def test_failure_unwrap_raises() -> None:
    out = parse_statement("GO TO #")
    with pytest.raises(ParseError) as e:
        out.unwrap()
    assert e.value.diagnostic is out.diagnostic


def test_parser_requires_eof() -> None:
    toks = tokenize("GO TO 10")
    assert isinstance(toks, list)
    with pytest.raises(ValueError):
        Parser(toks[:-1])


def test_calls_are_independent() -> None:
    first = parse_statement("GO TO #")
    second = parse_statement("GO TO 10")
    assert isinstance(first, Failure)
    assert second == Unconditional(line=1, column=7, label="10")


def test_results_are_hashable() -> None:
    failures = {parse_statement("GO TO 0"), parse_statement("GO TO 0"), parse_statement("GO TO TOOLONG")}
    assert len(failures) == 2
    assert hash(parse_statement("GO TO (1, 2), I")) == hash(parse_statement("go to (1,2),i"))
