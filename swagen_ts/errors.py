"""Exceptions raised while resolving generated TypeScript fragments."""

from __future__ import annotations

import json
from typing import Any


class SwagenError(Exception):
    """Base exception for generation-time errors."""


class TypeResolutionError(SwagenError):
    """Raised when a property description cannot be turned into a type name."""

    def __init__(self, message: str, prop: dict[str, Any]) -> None:
        self.property = prop
        super().__init__(f"{message}: {json.dumps(prop, indent=4, default=str)}")


class UnresolvableTypeKind(TypeResolutionError):
    """Raised when a property sets none of primitive, complex or enum."""

    def __init__(self, prop: dict[str, Any]) -> None:
        super().__init__("Cannot understand type of property in definition", prop)


class UnrecognizedPrimitiveKind(TypeResolutionError):
    """Raised when a primitive kind has no TypeScript mapping."""

    def __init__(self, prop: dict[str, Any]) -> None:
        self.kind = prop.get("primitive")
        super().__init__("Cannot translate primitive type", prop)


class InvalidOptionError(SwagenError, ValueError):
    """Raised for generation options outside the supported values."""

    def __init__(self, option: str, value: Any, allowed: tuple[str, ...]) -> None:
        self.option = option
        self.value = value
        choices = ", ".join(repr(a) for a in allowed)
        super().__init__(f"Option '{option}' must be one of {choices}, got {value!r}")
