from __future__ import annotations

from .statements import Assigned, Computed, Failure, ParseResult, Unconditional


def format_statement(res: ParseResult) -> str:
    """Canonical text of a parsed statement.

    Parsing the returned text gives back an equal result.
    """
    if isinstance(res, Unconditional):
        return f"GO TO {res.label}"
    if isinstance(res, Computed):
        return f"GO TO ({', '.join(res.labels)}), {res.expression}"
    if isinstance(res, Assigned):
        return f"GO TO {res.expression}"
    if isinstance(res, Failure):
        raise ValueError(f"cannot format a failed parse: {res.diagnostic.message}")
    raise TypeError(f"not a parse result: {type(res)!r}")
