"""Map property descriptions to TypeScript type names.

Handles:
- Primitive kinds through a fixed table (string refined by subType)
- Complex and enum names, optionally prefixed with a models namespace
- Array suffixing, applied last to whichever name was resolved
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import UnrecognizedPrimitiveKind
from .models import PrimitiveType, Property, parse_property

ARRAY_SUFFIX = "[]"

# primitive kind -> TypeScript type
_PRIMITIVE_TYPES: dict[str, str] = {
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "file": "any",
    "object": "any",
}

# string subType -> TypeScript type; anything else stays "string"
_STRING_SUB_TYPES: dict[str, str] = {
    "date-time": "Date",
    "uuid": "string",
    "byte": "number",
}


def _primitive_type_name(prop: PrimitiveType) -> str | None:
    if not isinstance(prop.kind, str):
        return None
    if prop.kind == "string":
        if not isinstance(prop.sub_type, str):
            return "string"
        return _STRING_SUB_TYPES.get(prop.sub_type, "string")
    if prop.kind in _PRIMITIVE_TYPES:
        return _PRIMITIVE_TYPES[prop.kind]
    return None


def prefix_namespace(name: str, ns: str | None = None) -> str:
    """Qualify a type name with ``ns.`` when a namespace is given."""
    return f"{ns}.{name}" if ns else name


def get_data_type(prop: Property | Mapping[str, Any], ns: str | None = None) -> str:
    """Return the TypeScript type of a property description.

    ``ns`` prefixes complex and enum names only; primitives are never
    qualified.

    Raises:
        UnresolvableTypeKind: none of primitive, complex or enum is set.
        UnrecognizedPrimitiveKind: the primitive kind is not in the table.
    """
    resolved = parse_property(prop)
    if isinstance(resolved, PrimitiveType):
        type_name = _primitive_type_name(resolved)
        if type_name is None:
            dump = dict(prop) if isinstance(prop, Mapping) else resolved.to_dict()
            raise UnrecognizedPrimitiveKind(dump)
    else:
        type_name = prefix_namespace(resolved.name, ns)

    return type_name + ARRAY_SUFFIX if resolved.is_array else type_name
