from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import parse_document, parse_file
from .format import format_statement
from .report import DocumentReport, report_payload, report_to_csv
from .statements import Failure


logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        stream=sys.stderr,
    )


def _load(path: str) -> DocumentReport:
    if path == "-":
        return parse_document(sys.stdin.read(), file="<stdin>")
    return parse_file(path)


def _print_text(report: DocumentReport, *, stats: bool) -> None:
    for e in report.statements():
        res = e.result
        if isinstance(res, Failure):
            print(f"{report.file}:{e.number}:{res.column + e.indent}: error: {res.diagnostic.message}")
        else:
            print(f"{report.file}:{e.number}: ok {res.tag} {format_statement(res)}")
    if stats:
        st = report.statistics()
        print(
            f"{report.file}: processed {st.processed}, ok {st.successful}, "
            f"errors {st.errors} ({st.success_rate:.1f}%)"
        )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="fortgoto", description="Check Fortran GO TO statements")
    ap.add_argument("files", nargs="+", metavar="FILE", help="Source files ('-' reads stdin)")
    fmt = ap.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="Print results as JSON")
    fmt.add_argument("--csv", action="store_true", help="Print results as CSV")
    fmt.add_argument("--stats", action="store_true", help="Print results with per-file statistics")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every statement to stderr")
    args = ap.parse_args(argv)

    _setup_logging(args.verbose)

    reports: list[DocumentReport] = []
    for path in args.files:
        try:
            reports.append(_load(path))
        except (OSError, UnicodeDecodeError) as e:
            print(f"{path}: error: {e}", file=sys.stderr)
            return 2

    if args.json:
        payload = [report_payload(r) for r in reports]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2, ensure_ascii=False))
    elif args.csv:
        for i, r in enumerate(reports):
            sys.stdout.write(report_to_csv(r, header=i == 0))
    else:
        for r in reports:
            _print_text(r, stats=args.stats)

    failed = [r.file for r in reports if not r.ok]
    if failed:
        logger.debug("statements failed in: %s", ", ".join(failed))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
