"""
Tests for the tool catalog and its closure with the dispatch table.

Tool names and schemas are what agents bind to, so these pin the public
contract: names, order, required fields, and side-effect annotations.
"""

import pytest

from synter_mcp.protocol import tools_list_result
from synter_mcp.tools import DISPATCH, TOOL_NAMES, TOOLS
from synter_mcp.tools.catalog import PLATFORMS


def _tool(name):
    return next(t for t in TOOLS if t.name == name)


# ═══════════════════════════════════════════════════════════════════════════
# Test Catalog Structure
# ═══════════════════════════════════════════════════════════════════════════


class TestCatalogStructure:
    """Catalog shape and ordering."""

    def test_catalog_order(self):
        """Tools come out in their declared order."""
        assert TOOL_NAMES == (
            "list_campaigns",
            "create_search_campaign",
            "create_display_campaign",
            "create_pmax_campaign",
            "pause_campaign",
            "update_campaign_budget",
            "get_performance",
            "get_daily_spend",
            "add_keywords",
            "add_negative_keywords",
            "create_conversion",
            "list_conversions",
            "diagnose_tracking",
            "generate_image",
            "generate_video",
            "create_meta_campaign",
            "create_linkedin_campaign",
            "create_reddit_campaign",
            "list_ad_accounts",
            "upload_image",
            "run_tool",
        )

    def test_names_are_unique(self):
        assert len(set(TOOL_NAMES)) == len(TOOL_NAMES)

    def test_tools_have_descriptions(self):
        for tool in TOOLS:
            assert tool.description
            assert len(tool.description) > 20

    def test_tools_have_object_schemas(self):
        for tool in TOOLS:
            schema = tool.inputSchema
            assert schema["type"] == "object"
            assert "properties" in schema
            for field in schema.get("required", []):
                assert field in schema["properties"], f"{tool.name}.{field}"

    def test_every_tool_is_annotated(self):
        """Each tool declares exactly one of read-only / destructive."""
        for tool in TOOLS:
            hints = tool.annotations
            assert hints is not None
            assert bool(hints.readOnlyHint) != bool(hints.destructiveHint), tool.name

    @pytest.mark.parametrize("name", [
        "list_campaigns", "get_performance", "get_daily_spend",
        "list_conversions", "diagnose_tracking", "list_ad_accounts",
    ])
    def test_read_only_tools(self, name):
        assert _tool(name).annotations.readOnlyHint is True

    def test_listing_is_stable(self):
        """Two tools/list payloads are identical."""
        assert tools_list_result(TOOLS) == tools_list_result(TOOLS)


# ═══════════════════════════════════════════════════════════════════════════
# Test Schemas
# ═══════════════════════════════════════════════════════════════════════════


class TestSchemas:
    """Required fields and enums that callers depend on."""

    def test_create_search_campaign_required(self):
        assert _tool("create_search_campaign").inputSchema["required"] == [
            "campaign_name", "daily_budget", "keywords",
            "headlines", "descriptions", "final_url",
        ]

    def test_create_pmax_campaign_required(self):
        assert _tool("create_pmax_campaign").inputSchema["required"] == [
            "campaign_name", "daily_budget", "headlines", "long_headline",
            "descriptions", "business_name", "final_url",
        ]

    def test_pause_campaign_requires_platform(self):
        schema = _tool("pause_campaign").inputSchema
        assert schema["required"] == ["campaign_id", "platform"]
        assert schema["properties"]["platform"]["enum"] == PLATFORMS

    def test_upload_image_platforms_are_narrower(self):
        platform = _tool("upload_image").inputSchema["properties"]["platform"]
        assert platform["enum"] == ["google", "meta", "linkedin"]

    def test_array_fields_declare_string_items(self):
        keywords = _tool("add_keywords").inputSchema["properties"]["keywords"]
        assert keywords["type"] == "array"
        assert keywords["items"] == {"type": "string"}

    def test_generate_video_duration_enum(self):
        duration = _tool("generate_video").inputSchema["properties"]["duration"]
        assert duration["enum"] == [6, 8, 15, 30]

    def test_run_tool_only_requires_script_name(self):
        assert _tool("run_tool").inputSchema["required"] == ["script_name"]

    def test_empty_schemas(self):
        for name in ("list_conversions", "list_ad_accounts"):
            schema = _tool(name).inputSchema
            assert schema["properties"] == {}
            assert "required" not in schema


# ═══════════════════════════════════════════════════════════════════════════
# Test Catalog / Dispatch Closure
# ═══════════════════════════════════════════════════════════════════════════


class TestDispatchClosure:
    """Every listed tool is callable and nothing callable is unlisted."""

    def test_no_orphans_either_direction(self):
        assert set(DISPATCH) == set(TOOL_NAMES)

    def test_only_run_tool_has_dynamic_script(self):
        dynamic = [name for name, entry in DISPATCH.items() if entry.script is None]
        assert dynamic == ["run_tool"]

    def test_dispatch_table_is_read_only(self):
        with pytest.raises(TypeError):
            DISPATCH["new_tool"] = DISPATCH["run_tool"]


# ═══════════════════════════════════════════════════════════════════════════
# Test Wire Format
# ═══════════════════════════════════════════════════════════════════════════


class TestWireFormat:
    """tools/list serialization."""

    def test_serialized_tool_fields(self):
        listed = tools_list_result(TOOLS)["tools"]
        first = listed[0]
        assert first["name"] == "list_campaigns"
        assert first["annotations"] == {"readOnlyHint": True}
        assert first["inputSchema"]["properties"]["limit"]["type"] == "number"

    def test_serialization_drops_unset_fields(self):
        for entry in tools_list_result(TOOLS)["tools"]:
            assert None not in entry.values()
            assert {"name", "description", "inputSchema", "annotations"} <= set(entry)
