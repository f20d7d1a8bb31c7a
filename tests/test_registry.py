"""
Unit tests for the tool registry and the category catalog.
"""

from itertools import combinations
from unittest.mock import patch

import pytest

from ghl_mcp.base import Operation, ResourceModule, required
from ghl_mcp.errors import DuplicateToolError, ToolNotFoundError
from ghl_mcp.registry import ToolRegistry, discover_modules

from conftest import DEFAULT_LOCATION

EXPECTED_CATEGORIES = [
    "contact", "conversation", "blog", "opportunity", "calendar", "email",
    "location", "email_isv", "social_media", "media", "object", "association",
    "custom_field", "workflow", "survey", "store", "product", "payment", "invoice",
]


def make_module(category, names, client=None):
    operations = [Operation(name, f"{name} tool", "GET", f"/{category}/{name}") for name in names]
    return ResourceModule(category, operations, client)


class TestCatalog:
    """The real catalog, loaded the way startup loads it."""

    def test_categories_load_in_canonical_order(self, registry):
        assert [m.category for m in registry.modules] == EXPECTED_CATEGORIES

    def test_category_name_sets_are_disjoint(self, registry):
        for a, b in combinations(registry.modules, 2):
            assert not (a.names() & b.names()), f"{a.category} and {b.category} overlap"

    def test_registry_size_matches_modules(self, registry):
        assert len(registry) == sum(len(m.names()) for m in registry.modules)
        assert sum(registry.category_counts().values()) == len(registry)

    def test_every_name_has_exactly_one_owner(self, registry):
        for name in registry.names():
            owners = [m.category for m in registry.modules if m.owns(name)]
            assert len(owners) == 1, f"{name} owned by {owners}"

    def test_schemas_are_well_formed(self, registry):
        for definition in registry.list_all():
            schema = definition.input_schema
            assert schema["type"] == "object"
            assert set(schema["required"]) <= set(schema["properties"])
            assert definition.description

    def test_create_contact_requires_first_name(self, registry):
        schema = registry.get("create_contact").input_schema
        assert schema["required"] == ["firstName"]
        assert "locationId" in schema["properties"]

    def test_product_tools_present(self, registry):
        names = {d.name for d in registry.tools_by_category("product")}
        assert {"get_product", "list_products", "create_price", "list_inventory"} <= names

    def test_discover_modules_share_client(self, stub_client):
        modules = discover_modules(stub_client)
        assert all(m._client is stub_client for m in modules)


class TestListing:

    def test_list_all_is_stable(self, registry):
        first = [d.to_dict() for d in registry.list_all()]
        second = [d.to_dict() for d in registry.list_all()]
        assert first == second
        assert len(first) == len(registry)

    def test_list_all_preserves_registration_order(self):
        registry = ToolRegistry()
        registry.register(make_module("b", ["b1", "b2"]))
        registry.register(make_module("a", ["a1"]))
        assert [d.name for d in registry.list_all()] == ["b1", "b2", "a1"]

    def test_list_all_fails_as_a_whole(self):
        registry = ToolRegistry()
        good = make_module("good", ["g1"])
        bad = make_module("bad", ["b1"])
        registry.register(good)
        registry.register(bad)

        with patch.object(bad, "definitions", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                registry.list_all()


class TestRegistration:

    def test_duplicate_across_modules_rejected(self):
        registry = ToolRegistry()
        registry.register(make_module("first", ["shared"]))

        with pytest.raises(DuplicateToolError) as exc:
            registry.register(make_module("second", ["shared"]))

        assert "shared" in exc.value.message
        assert "first" in exc.value.message

    def test_failed_registration_leaves_registry_unchanged(self):
        registry = ToolRegistry()
        registry.register(make_module("first", ["shared"]))

        with pytest.raises(DuplicateToolError):
            registry.register(make_module("second", ["fresh", "shared"]))

        assert "fresh" not in registry
        assert len(registry) == 1
        assert [m.category for m in registry.modules] == ["first"]

    def test_duplicate_within_module_rejected(self):
        with pytest.raises(DuplicateToolError):
            make_module("dup", ["same", "same"])


class TestDispatch:

    @pytest.mark.asyncio
    async def test_exact_match_routing(self, registry, stub_client):
        await registry.dispatch("get_contact", {"contactId": "c1"})
        await registry.dispatch("get_contact_tasks", {"contactId": "c1"})

        paths = [call.args[1] for call in stub_client.request.await_args_list]
        assert paths == ["/contacts/c1", "/contacts/c1/tasks"]

    @pytest.mark.asyncio
    async def test_prefix_is_not_a_match(self, registry, stub_client):
        with pytest.raises(ToolNotFoundError) as exc:
            await registry.dispatch("get_cont", {})

        assert exc.value.tool_name == "get_cont"
        stub_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_location_applied(self, registry, stub_client):
        await registry.dispatch("get_pipelines", {})

        stub_client.request.assert_awaited_once_with(
            "GET", "/opportunities/pipelines",
            params={"locationId": DEFAULT_LOCATION}, json=None,
        )

    @pytest.mark.asyncio
    async def test_unknown_name_in_module(self, stub_client):
        module = make_module("solo", ["only"], stub_client)
        with pytest.raises(ToolNotFoundError):
            await module.execute("other", {})

    def test_path_placeholders_must_be_required(self):
        with pytest.raises(ValueError):
            Operation("broken", "broken", "GET", "/things/{thingId}")
        # declared and required is fine
        Operation("fine", "fine", "GET", "/things/{thingId}", [required("thingId", "string", "id")])
