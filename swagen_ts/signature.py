"""Compose TypeScript method signatures from operations.

  getUser(id: number): Models.User

Parameters keep their declared order and are qualified with the models
namespace. The return type comes from the first 2xx response carrying a
data type, scanned in ascending numeric status order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidOptionError
from .models import Operation, ResponseSpec, parse_operation
from .types import get_data_type

DEFAULT_VOID_TYPE = "void"

# Spellings accepted for an operation without a typed success response
VOID_TYPES: tuple[str, ...] = ("void", "any", "string", "Object", "object", "{}")

ReturnTypeTransformer = Callable[[str], str]


@dataclass(frozen=True)
class ReturnTypeOptions:
    """Options shared by return type and signature generation."""

    models_ns: str | None = None
    void_type: str | None = None

    def __post_init__(self) -> None:
        if self.void_type and self.void_type not in VOID_TYPES:
            raise InvalidOptionError("void_type", self.void_type, VOID_TYPES)

    @property
    def resolved_void_type(self) -> str:
        return self.void_type or DEFAULT_VOID_TYPE


@dataclass(frozen=True)
class MethodSignatureOptions(ReturnTypeOptions):
    # applied to the return type only, never to parameter types
    return_type_transformer: ReturnTypeTransformer | None = None


# Accepted option keys, in the casing of the normalized definition and in Python casing
_OPTION_KEYS: dict[str, str] = {
    "modelsNs": "models_ns",
    "models_ns": "models_ns",
    "voidType": "void_type",
    "void_type": "void_type",
    "returnTypeTransformer": "return_type_transformer",
    "return_type_transformer": "return_type_transformer",
}


def parse_options(
    options: ReturnTypeOptions | Mapping[str, Any] | None,
) -> MethodSignatureOptions | ReturnTypeOptions:
    """Normalize caller options into an options dataclass.

    Unknown keys are ignored.
    """
    if isinstance(options, ReturnTypeOptions):
        return options
    if not options:
        return MethodSignatureOptions()

    kwargs = {_OPTION_KEYS[k]: v for k, v in options.items() if k in _OPTION_KEYS}
    return MethodSignatureOptions(**kwargs)


def _status_code(key: str) -> float | None:
    try:
        return float(key)
    except ValueError:
        return None


def _is_integer_key(key: str) -> bool:
    return key.isascii() and key.isdigit() and str(int(key)) == key


def _ordered_responses(
    responses: tuple[tuple[str, ResponseSpec], ...],
) -> list[tuple[str, ResponseSpec]]:
    """Order integer status keys ascending, then any other keys as declared."""
    numeric = sorted(
        (item for item in responses if _is_integer_key(item[0])),
        key=lambda item: int(item[0]),
    )
    others = [item for item in responses if not _is_integer_key(item[0])]
    return numeric + others


def get_return_type(
    operation: Operation | Mapping[str, Any],
    options: ReturnTypeOptions | Mapping[str, Any] | None = None,
) -> str:
    """Return the TypeScript type produced by an operation's success response."""
    operation = parse_operation(operation)
    options = parse_options(options)

    if operation.responses is None:
        return options.resolved_void_type

    for status_key, response in _ordered_responses(operation.responses):
        status_code = _status_code(status_key)
        if status_code is None or not 200 <= status_code < 300:
            continue
        if response.data_type:
            return get_data_type(response.data_type, options.models_ns)

    return options.resolved_void_type


def get_method_signature(
    operation_name: str,
    operation: Operation | Mapping[str, Any],
    options: MethodSignatureOptions | Mapping[str, Any] | None = None,
) -> str:
    """Return ``name(param: type, ...): returnType`` for an operation."""
    operation = parse_operation(operation)
    options = parse_options(options)

    parameters = ", ".join(
        f"{param.name}: {get_data_type(param.data_type, options.models_ns)}"
        for param in operation.parameters
    )

    return_type = get_return_type(operation, options)
    transformer = getattr(options, "return_type_transformer", None)
    if callable(transformer):
        return_type = transformer(return_type)

    return f"{operation_name}({parameters}): {return_type}"
