"""Build JSDoc blocks for generated client methods."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import Operation, parse_operation
from .types import get_data_type

DOC_OPEN = "/**"
DOC_CLOSE = " */"


def build_operation_doc_comments(operation: Operation | Mapping[str, Any]) -> list[str]:
    """Return the doc-comment lines for an operation.

    Described parameters are documented with their unqualified type. An
    operation with nothing to describe yields no lines at all.
    """
    operation = parse_operation(operation)
    comments: list[str] = []

    if operation.description:
        comments.append(f" * {operation.description}")
    if operation.description2:
        comments.append(f" * {operation.description2}")

    described = [p for p in operation.parameters if p.description]
    for param in described:
        data_type = get_data_type(param.data_type)
        comments.append(f" * @param {{{data_type}}} {param.name} - {param.description}")

    if not comments:
        return []
    return [DOC_OPEN, *comments, DOC_CLOSE]
