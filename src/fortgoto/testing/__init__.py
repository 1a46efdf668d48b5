from __future__ import annotations

from .corpus import generate_document, generate_invalid_statements, generate_statements

__all__ = [
    "generate_document",
    "generate_invalid_statements",
    "generate_statements",
]
