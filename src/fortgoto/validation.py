"""Domain rules checked on otherwise well-formed tokens."""

from __future__ import annotations

import re


MIN_LABEL = 1
MAX_LABEL = 99999

_LABEL_RE = re.compile(r"[1-9][0-9]{0,4}")
_IDENT_RE = re.compile(r"[A-Z][A-Z0-9]{0,5}", re.IGNORECASE | re.ASCII)


def is_valid_label(text: str) -> bool:
    """One to five digits, no leading zero, value in [1, 99999]."""
    if not _LABEL_RE.fullmatch(text):
        return False
    return MIN_LABEL <= int(text) <= MAX_LABEL


def is_valid_identifier(text: str) -> bool:
    """A letter followed by zero to five letters or digits."""
    return _IDENT_RE.fullmatch(text) is not None
