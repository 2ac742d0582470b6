"""Tests for parsing normalized definition dicts into descriptors."""

import pytest

from swagen_ts.errors import UnresolvableTypeKind
from swagen_ts.models import (
    ComplexType,
    Definition,
    EnumType,
    Metadata,
    Operation,
    Parameter,
    PrimitiveType,
    Profile,
    ResponseSpec,
    parse_definition,
    parse_operation,
    parse_profile,
    parse_property,
)


class TestParseProperty:
    """Test property dicts → type variants."""

    def test_primitive(self):
        prop = parse_property({"primitive": "string", "subType": "uuid", "isArray": True})
        assert prop == PrimitiveType("string", "uuid", is_array=True)

    def test_complex(self):
        assert parse_property({"complex": "User"}) == ComplexType("User")

    def test_enum(self):
        assert parse_property({"enum": "Role", "isArray": True}) == EnumType("Role", True)

    def test_passthrough(self):
        prop = EnumType("Role")
        assert parse_property(prop) is prop

    def test_no_kind(self):
        with pytest.raises(UnresolvableTypeKind):
            parse_property({"subType": "uuid"})

    def test_to_dict(self):
        assert PrimitiveType("string", "byte").to_dict() == {
            "primitive": "string",
            "subType": "byte",
            "isArray": False,
        }
        assert ComplexType("User", True).to_dict() == {"complex": "User", "isArray": True}


class TestParseOperation:
    """Test operation dicts → Operation descriptors."""

    def test_full(self, get_user_operation):
        op = parse_operation(get_user_operation)
        assert op.description == "Returns a single user."
        assert op.description2 is None
        assert op.parameters == (
            Parameter("id", {"primitive": "integer"}, "User ID"),
        )
        assert op.responses == (
            ("200", ResponseSpec({"complex": "User"})),
            ("404", ResponseSpec()),
        )

    def test_absent_responses_stay_none(self):
        assert parse_operation({}).responses is None

    def test_response_pairs(self):
        op = parse_operation({"responses": [(200, {"dataType": {"enum": "E"}})]})
        assert op.responses == (("200", ResponseSpec({"enum": "E"})),)

    def test_empty_description_dropped(self):
        assert parse_operation({"description": ""}) == Operation()


class TestParseProfileAndDefinition:
    """Test profile and definition parsing for the header."""

    def test_profile(self):
        assert parse_profile({"generator": "ts/fetch"}) == Profile("ts/fetch")

    def test_profile_missing_generator(self):
        with pytest.raises(KeyError):
            parse_profile({"mode": "x"})

    def test_definition(self):
        definition = parse_definition({"metadata": {"title": "T", "baseUrl": "/api"}})
        assert definition == Definition(Metadata(title="T", base_url="/api"))

    def test_definition_none(self):
        assert parse_definition(None) is None
        assert parse_definition({}) == Definition()
