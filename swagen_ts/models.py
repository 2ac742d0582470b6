"""Immutable descriptors consumed by the fragment builders.

Callers usually hold the normalized definition as plain dicts, so every
descriptor here has a ``parse_*`` counterpart that accepts the dict shape:

  {"primitive": "string", "subType": "uuid", "isArray": False}
  {"complex": "User", "isArray": True}
  {"name": "id", "description": "...", "dataType": {...}}
  {"description": "...", "parameters": [...], "responses": {"200": {"dataType": {...}}}}

Property data types on parameters and responses are kept as given and
resolved on use, so a malformed type only fails when something needs it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import UnresolvableTypeKind


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    kind: str
    sub_type: str | None = None
    is_array: bool = False

    def __post_init__(self) -> None:
        if not self.kind:
            raise UnresolvableTypeKind(self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"primitive": self.kind}
        if self.sub_type:
            data["subType"] = self.sub_type
        data["isArray"] = self.is_array
        return data


@dataclass(frozen=True, slots=True)
class ComplexType:
    name: str
    is_array: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise UnresolvableTypeKind(self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return {"complex": self.name, "isArray": self.is_array}


@dataclass(frozen=True, slots=True)
class EnumType:
    name: str
    is_array: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise UnresolvableTypeKind(self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return {"enum": self.name, "isArray": self.is_array}


Property = Union[PrimitiveType, ComplexType, EnumType]


@dataclass(frozen=True, slots=True)
class Profile:
    generator: str
    mode: str | None = None


@dataclass(frozen=True, slots=True)
class Metadata:
    title: str | None = None
    description: str | None = None
    base_url: str | None = None


@dataclass(frozen=True, slots=True)
class Definition:
    metadata: Metadata | None = None


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    data_type: Property | Mapping[str, Any]
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ResponseSpec:
    data_type: Property | Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class Operation:
    """One API operation.

    ``responses`` keeps the status keys in the order they were declared;
    ``None`` means the operation declares no responses at all.
    """

    description: str | None = None
    description2: str | None = None
    parameters: tuple[Parameter, ...] = ()
    responses: tuple[tuple[str, ResponseSpec], ...] | None = None


def parse_property(value: Property | Mapping[str, Any]) -> Property:
    """Turn a property dict into one of the three type variants.

    Ambiguous input that sets several kinds resolves as
    primitive, then complex, then enum.
    """
    if isinstance(value, (PrimitiveType, ComplexType, EnumType)):
        return value

    is_array = bool(value.get("isArray", False))
    if value.get("primitive"):
        return PrimitiveType(value["primitive"], value.get("subType") or None, is_array)
    if value.get("complex"):
        return ComplexType(value["complex"], is_array)
    if value.get("enum"):
        return EnumType(value["enum"], is_array)
    raise UnresolvableTypeKind(dict(value))


def parse_parameter(value: Parameter | Mapping[str, Any]) -> Parameter:
    if isinstance(value, Parameter):
        return value
    return Parameter(
        name=value["name"],
        data_type=value.get("dataType") or {},
        description=value.get("description") or None,
    )


def _parse_response(value: ResponseSpec | Mapping[str, Any] | None) -> ResponseSpec:
    if isinstance(value, ResponseSpec):
        return value
    if not value:
        return ResponseSpec()
    return ResponseSpec(data_type=value.get("dataType") or None)


def parse_operation(value: Operation | Mapping[str, Any]) -> Operation:
    if isinstance(value, Operation):
        return value

    responses = value.get("responses")
    if responses is None:
        parsed_responses = None
    else:
        items = responses.items() if isinstance(responses, Mapping) else responses
        parsed_responses = tuple((str(status), _parse_response(r)) for status, r in items)

    return Operation(
        description=value.get("description") or None,
        description2=value.get("description2") or None,
        parameters=tuple(parse_parameter(p) for p in value.get("parameters") or ()),
        responses=parsed_responses,
    )


def parse_profile(value: Profile | Mapping[str, Any]) -> Profile:
    if isinstance(value, Profile):
        return value
    return Profile(generator=value["generator"], mode=value.get("mode") or None)


def parse_definition(value: Definition | Mapping[str, Any] | None) -> Definition | None:
    if value is None or isinstance(value, Definition):
        return value

    metadata = value.get("metadata")
    if not metadata:
        return Definition()
    if isinstance(metadata, Metadata):
        return Definition(metadata)
    return Definition(
        Metadata(
            title=metadata.get("title") or None,
            description=metadata.get("description") or None,
            base_url=metadata.get("baseUrl") or None,
        )
    )
