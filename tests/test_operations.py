"""
Unit tests for the tool model: argument validation, request building,
schema generation and result helpers.
"""

import json

import pytest

from ghl_mcp.base import (
    Operation,
    ToolParameter,
    error_result,
    optional,
    required,
    text_result,
    validate_arguments,
)
from ghl_mcp.errors import InvalidArgumentsError
from ghl_mcp.tools import contacts, locations, payments, products

LOCATION = "loc-default"


def resolve(override=None):
    return override or LOCATION


def find(module, name) -> Operation:
    return next(op for op in module.OPERATIONS if op.name == name)


@pytest.fixture
def params():
    return [
        required("name", "string", "Name"),
        optional("count", "number", "Count", default=10),
        optional("status", "string", "Status", enum=["open", "closed"]),
        optional("active", "boolean", "Active"),
        optional("tags", "array", "Tags"),
    ]


class TestValidateArguments:

    def test_defaults_applied(self, params):
        assert validate_arguments("t", params, {"name": "x"}) == {"name": "x", "count": 10}

    def test_none_values_dropped(self, params):
        assert validate_arguments("t", params, {"name": "x", "status": None, "count": 3}) == {
            "name": "x", "count": 3,
        }

    def test_missing_required(self, params):
        with pytest.raises(InvalidArgumentsError) as exc:
            validate_arguments("t", params, {"count": 1})
        assert exc.value.tool_name == "t"
        assert "name" in exc.value.message

    def test_required_given_as_none(self, params):
        with pytest.raises(InvalidArgumentsError):
            validate_arguments("t", params, {"name": None})

    @pytest.mark.parametrize("args", [
        {"name": 1},
        {"name": "x", "count": "3"},
        {"name": "x", "count": True},
        {"name": "x", "active": "yes"},
        {"name": "x", "tags": "a,b"},
    ])
    def test_wrong_types(self, params, args):
        with pytest.raises(InvalidArgumentsError):
            validate_arguments("t", params, args)

    def test_enum(self, params):
        assert validate_arguments("t", params, {"name": "x", "status": "open"})["status"] == "open"
        with pytest.raises(InvalidArgumentsError):
            validate_arguments("t", params, {"name": "x", "status": "pending"})

    def test_unknown_arguments_pass_through(self, params):
        assert validate_arguments("t", params, {"name": "x", "extra": 1})["extra"] == 1


class TestBuildRequest:

    def test_get_sends_arguments_and_location_in_query(self):
        op = find(products, "list_products")
        args = validate_arguments(op.name, op.all_parameters(), {"limit": 5, "search": "mug"})

        assert op.build_request(args, resolve) == (
            "GET", "/products/", {"limit": 5, "search": "mug", "locationId": LOCATION}, None,
        )

    def test_post_sends_arguments_and_location_in_body(self):
        op = find(contacts, "create_contact")

        method, path, query, body = op.build_request({"firstName": "Ann", "tags": ["vip"]}, resolve)

        assert (method, path, query) == ("POST", "/contacts/", None)
        assert body == {"firstName": "Ann", "tags": ["vip"], "locationId": LOCATION}

    def test_location_override(self):
        op = find(products, "get_product")
        _, path, query, _ = op.build_request({"productId": "p1", "locationId": "other"}, resolve)

        assert path == "/products/p1"
        assert query == {"locationId": "other"}

    def test_alt_id_and_extra_fields(self):
        op = find(products, "list_inventory")
        _, _, query, body = op.build_request({"limit": 5}, resolve)

        assert query == {"altType": "location", "limit": 5, "altId": LOCATION}
        assert body is None

    def test_location_in_path(self):
        op = find(locations, "get_location_tag")

        assert op.build_request({"tagId": "t1"}, resolve) == (
            "GET", f"/locations/{LOCATION}/tags/t1", None, None,
        )
        _, path, _, _ = op.build_request({"tagId": "t1", "locationId": "loc-2"}, resolve)
        assert path == "/locations/loc-2/tags/t1"

    def test_delete_with_body(self):
        op = find(contacts, "remove_contact_tags")

        assert op.build_request({"contactId": "c1", "tags": ["a"]}, resolve) == (
            "DELETE", "/contacts/c1/tags", None, {"tags": ["a"]},
        )

    def test_location_forced_into_query_on_post(self):
        op = find(payments, "create_custom_provider_config")
        _, _, query, body = op.build_request({"live": {}, "test": {}}, resolve)

        assert query == {"locationId": LOCATION}
        assert body == {"live": {}, "test": {}}

    def test_path_values_are_escaped(self):
        op = find(contacts, "get_contact")
        _, path, _, _ = op.build_request({"contactId": "a/b c"}, resolve)
        assert path == "/contacts/a%2Fb%20c"

    def test_named_query_fields(self):
        op = Operation(
            "update_thing", "Update a thing", "PUT", "/things/{id}",
            [required("id", "string", "ID"), optional("mode", "string", "Mode"), optional("name", "string", "Name")],
            location=None, query=["mode"],
        )
        assert op.build_request({"id": "1", "mode": "fast", "name": "n"}, resolve) == (
            "PUT", "/things/1", {"mode": "fast"}, {"name": "n"},
        )


class TestDefinitions:

    def test_location_parameter_added_first(self):
        definition = find(products, "get_product").to_definition("product")
        props = list(definition.input_schema["properties"])

        assert props[0] == "locationId"
        assert definition.input_schema["required"] == ["productId"]
        assert definition.category == "product"

    def test_no_location_parameter_when_unused(self):
        definition = find(contacts, "get_contact").to_definition("contact")
        assert "locationId" not in definition.input_schema["properties"]

    def test_parameter_schema(self):
        param = ToolParameter("tags", "array", "Tags", enum=None, default=None)
        assert param.to_json_schema() == {"type": "array", "description": "Tags", "items": {"type": "string"}}

        param = optional("status", "string", "Status", enum=["a", "b"], default="a")
        assert param.to_json_schema() == {
            "type": "string", "description": "Status", "enum": ["a", "b"], "default": "a",
        }


class TestResults:

    def test_text_result_serializes_json(self):
        result = text_result({"name": "Café", "n": 1})

        assert not result.is_error
        assert json.loads(result.text) == {"name": "Café", "n": 1}
        assert "Café" in result.text
        assert result.to_dict()["content"][0]["type"] == "text"

    def test_text_result_keeps_strings(self):
        assert text_result("plain").text == "plain"

    def test_error_result(self):
        result = error_result("bad thing")
        assert result.is_error
        assert result.to_dict() == {
            "content": [{"type": "text", "text": "Error: bad thing"}],
            "isError": True,
        }
