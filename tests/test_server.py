"""
Tests for the XtalLink MCP server handlers
"""

import asyncio
import json
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from xtal_mcp.server import XtalMCPServer


@pytest.fixture
def server():
    return XtalMCPServer()


def call(server, name, arguments=None):
    result = asyncio.run(server.handle_tool(name, arguments or {}))
    assert len(result) == 1
    return result[0].text


def test_tool_list(server):
    names = {tool.name for tool in server.get_tools()}
    assert names == {"xtal_validate", "xtal_nearest", "xtal_list", "xtal_derive", "xtal_get_status"}


def test_validate_known(server):
    assert call(server, "xtal_validate", {"frequency": "14.318181 MHz"}) == "Known crystal: 14.318181 MHz"


def test_validate_unknown_is_not_fatal(server):
    text = call(server, "xtal_validate", {"frequency": 14_318_180, "context": "sound board"})
    assert text == "Unknown crystal value 14318180.  Did you mean 14314000 or 14318181? Context: sound board"


def test_nearest(server):
    data = json.loads(call(server, "xtal_nearest", {"frequency": 14_318_180}))
    assert data == {
        "frequency": 14_318_180.0,
        "match": False,
        "in_table_range": True,
        "low": 14_314_000.0,
        "high": 14_318_181.0
    }

    data = json.loads(call(server, "xtal_nearest", {"frequency": "32.768 kHz"}))
    assert data["match"] is True
    assert data["low"] is None


def test_nearest_outside_table(server):
    data = json.loads(call(server, "xtal_nearest", {"frequency": "1 GHz"}))
    assert data["match"] is False
    assert data["in_table_range"] is False
    assert data["low"] == 200_000_000.0
    assert data["high"] is None

    data = json.loads(call(server, "xtal_nearest", {"frequency": 1_000}))
    assert data["in_table_range"] is False
    assert data["high"] == 32_768.0


def test_list_range(server):
    data = json.loads(call(server, "xtal_list", {"min_frequency": "14 MHz", "max_frequency": "14.32 MHz"}))
    assert data["count"] == 7
    assert data["truncated"] is False
    assert data["frequencies"][-1] == 14_318_181.0


def test_list_limit(server):
    data = json.loads(call(server, "xtal_list", {"limit": 5}))
    assert data["count"] == 316
    assert data["truncated"] is True
    assert data["frequencies"] == [32_768.0, 38_400.0, 384_000.0, 400_000.0, 430_000.0]


def test_list_bad_range(server):
    text = call(server, "xtal_list", {"min_frequency": 2e6, "max_frequency": 1e6})
    assert text == "min_frequency must not exceed max_frequency"


def test_derive(server):
    data = json.loads(call(server, "xtal_derive", {"frequency": 14_318_181, "divisor": 4}))
    assert data["base"] == 14_318_181.0
    assert data["derived_hz"] == 3_579_545
    assert data["display"] == "3.57954525 MHz"


def test_derive_unknown_crystal(server):
    text = call(server, "xtal_derive", {"frequency": 40_500_000, "divisor": 2})
    assert text.startswith("Unknown crystal value 40500000.")
    assert text.endswith("Context: xtal_derive")


def test_derive_divide_by_zero(server):
    assert call(server, "xtal_derive", {"frequency": 8_000_000, "divisor": 0}).startswith("Error:")


def test_bad_frequency(server):
    assert call(server, "xtal_validate", {"frequency": "fast"}).startswith("Error:")
    assert call(server, "xtal_validate", {}).startswith("Error:")


def test_unknown_tool(server):
    assert call(server, "xtal_explode") == "Unknown tool: xtal_explode"


def test_status(server):
    call(server, "xtal_validate", {"frequency": 8_000_000})
    call(server, "xtal_validate", {"frequency": 8_000_000})
    stats = json.loads(call(server, "xtal_get_status"))
    assert stats["cache_hits"] == 1
    assert stats["searches"] == 1
    assert stats["requests"] == 3


def test_resources(server):
    table = json.loads(server.read_resource("xtal://table"))
    assert table["count"] == 316
    assert table["min"] == 32_768.0
    assert table["max"] == 200_000_000.0

    status = json.loads(server.read_resource("xtal://status"))
    assert status["table_size"] == 316

    assert server.read_resource("xtal://nothing") == "Unknown resource: xtal://nothing"


def test_servers_do_not_share_state():
    first = XtalMCPServer()
    second = XtalMCPServer()
    call(first, "xtal_validate", {"frequency": 8_000_000})
    assert second.validator.last_confirmed is None
