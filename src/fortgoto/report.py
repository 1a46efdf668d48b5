from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from typing import Any

from .statements import Assigned, Computed, Failure, ParseResult, Unconditional


@dataclass(frozen=True, slots=True)
class LineResult:
    number: int
    text: str
    result: ParseResult | None  # None for comment lines
    indent: int = 0  # leading whitespace stripped from the source line

    @property
    def is_comment(self) -> bool:
        return self.result is None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "line": self.number,
            "input": self.text,
            "comment": self.is_comment,
            "indent": self.indent,
        }
        if self.result is not None:
            out["result"] = self.result.to_dict()
        return out


@dataclass(frozen=True, slots=True)
class Statistics:
    total: int
    successful: int
    errors: int
    comments: int

    @property
    def processed(self) -> int:
        return self.total - self.comments

    @property
    def success_rate(self) -> float:
        """Percentage of parsed (non-comment) lines that succeeded."""
        if not self.processed:
            return 0.0
        return self.successful / self.processed * 100


@dataclass(frozen=True, slots=True)
class DocumentReport:
    file: str
    entries: tuple[LineResult, ...]

    def statements(self) -> list[LineResult]:
        return [e for e in self.entries if not e.is_comment]

    def failures(self) -> list[LineResult]:
        return [e for e in self.entries if isinstance(e.result, Failure)]

    @property
    def ok(self) -> bool:
        return not self.failures()

    def statistics(self) -> Statistics:
        comments = sum(1 for e in self.entries if e.is_comment)
        errors = len(self.failures())
        return Statistics(
            total=len(self.entries),
            successful=len(self.entries) - comments - errors,
            errors=errors,
            comments=comments,
        )


def report_payload(report: DocumentReport) -> dict[str, Any]:
    st = report.statistics()
    return {
        "metadata": {
            "file": report.file,
            "total_lines": st.total,
            "successful": st.successful,
            "errors": st.errors,
            "comments": st.comments,
        },
        "results": [e.to_dict() for e in report.entries],
    }


def report_to_json(report: DocumentReport) -> str:
    return json.dumps(report_payload(report), indent=2, ensure_ascii=False)


CSV_HEADER = ("line", "input", "type", "result", "label", "labels", "expression", "error")


def report_to_csv(report: DocumentReport, *, header: bool = True) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    if header:
        w.writerow(CSV_HEADER)
    for e in report.entries:
        res = e.result
        if res is None:
            w.writerow([e.number, e.text, "", "COMMENT", "", "", "", ""])
        elif isinstance(res, Failure):
            w.writerow([e.number, e.text, "", "ERROR", "", "", "", res.diagnostic.message])
        else:
            label = res.label if isinstance(res, Unconditional) else ""
            labels = ",".join(res.labels) if isinstance(res, Computed) else ""
            expression = res.expression if isinstance(res, (Computed, Assigned)) else ""
            w.writerow([e.number, e.text, res.tag, "SUCCESS", label, labels, expression, ""])
    return buf.getvalue()
