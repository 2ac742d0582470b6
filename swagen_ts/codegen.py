"""Render a TypeScript client interface from generated fragments.

Takes the header, doc comments and method signatures built by this
package and lays them out with the client.ts.j2 template.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import jinja2

from .doc_comments import build_operation_doc_comments
from .header import build_header
from .models import Definition, Operation, Profile
from .signature import MethodSignatureOptions, get_method_signature, parse_options

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def build_methods(
    operations: Mapping[str, Operation | Mapping[str, Any]]
    | Iterable[tuple[str, Operation | Mapping[str, Any]]],
    options: MethodSignatureOptions | Mapping[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Build the template context entry of every operation, in order."""
    options = parse_options(options)
    items = operations.items() if isinstance(operations, Mapping) else operations

    methods = []
    for name, operation in items:
        methods.append({
            "name": name,
            "doc_comments": build_operation_doc_comments(operation),
            "signature": get_method_signature(name, operation, options),
        })
    return methods


def render_client(
    profile: Profile | Mapping[str, Any],
    definition: Definition | Mapping[str, Any] | None,
    operations: Mapping[str, Operation | Mapping[str, Any]]
    | Iterable[tuple[str, Operation | Mapping[str, Any]]],
    options: MethodSignatureOptions | Mapping[str, Any] | None = None,
    interface_name: str = "ApiClient",
) -> str:
    """Render the client interface source text."""
    template = _environment().get_template("client.ts.j2")
    return template.render(
        header=build_header(profile, definition),
        interface_name=interface_name,
        methods=build_methods(operations, options),
    )
