"""Tests for the FastMCP tool layer. No transport is started."""
from __future__ import annotations

import asyncio

import pytest
from fastmcp.exceptions import ToolError

from tools import mcp_server


class TestToolWrappers:
    def test_math_calculator(self):
        result = mcp_server.math_calculator(operation="add", a=2, b=3)
        assert result == {"operation": "add", "input": {"a": 2, "b": 3}, "result": 5}

    def test_unit_converter_maps_from(self):
        result = mcp_server.unit_converter(value=1, from_unit="kilometer", to="mile", category="distance")
        assert result["from"] == "kilometer"
        assert result["result"] == 0.62

    def test_text_analyzer(self):
        assert mcp_server.text_analyzer(text="one two")["words"] == 2

    def test_random_generator_defaults(self):
        result = mcp_server.random_generator(type="number")
        assert 0 <= result["value"] <= 100

    def test_operation_error_becomes_tool_error(self):
        with pytest.raises(ToolError, match="DivisionByZero"):
            mcp_server.math_calculator(operation="divide", a=1, b=0)

    def test_unknown_string_operation(self):
        with pytest.raises(ToolError, match="UnsupportedOperation"):
            mcp_server.string_utility(text="x", operation="shout")


class TestServer:
    def test_name(self):
        assert mcp_server.mcp.name == "utility-tools"

    def test_every_operation_is_a_tool(self):
        tools = asyncio.run(mcp_server.mcp.get_tools())
        assert set(tools) == set(mcp_server.registry.names())

    def test_unit_converter_exposes_from_parameter(self):
        tools = asyncio.run(mcp_server.mcp.get_tools())
        properties = tools["unit-converter"].parameters["properties"]
        assert "from" in properties
        assert "from_unit" not in properties
