#!/usr/bin/env python3
"""
XtalLink MCP Server - Known crystal lookup and clock validation
"""

import asyncio
import json
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict

# MCP imports
from mcp.server import Server
from mcp.types import Tool, TextContent, Resource
import mcp.server.stdio

from .crystals.table import KNOWN_XTALS, table_range, xtals_between
from .crystals.validator import XtalValidator
from .crystals.xtal import XTAL, format_failure
from .utils.validators import parse_frequency, format_frequency, validate_frequency

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Constants
SERVER_NAME = "xtal-mcp"
DEFAULT_LIST_LIMIT = 100
DEFAULT_CONTEXT = "xtal-mcp request"


@dataclass
class NearestResult:
    """Lookup result for a single frequency"""
    frequency: float
    match: bool
    in_table_range: bool = True
    low: Optional[float] = None
    high: Optional[float] = None


class XtalMCPServer:
    """MCP Server for crystal validation"""

    def __init__(self, validator: Optional[XtalValidator] = None):
        self.server = Server(SERVER_NAME)
        # Own validator so requests never share cache state with the host process
        self.validator = validator if validator is not None else XtalValidator()
        self.request_count = 0

        self.setup_handlers()

    def setup_handlers(self):
        """Setup MCP server handlers"""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            """List available crystal tools"""
            return self.get_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            """Handle tool calls"""
            return await self.handle_tool(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> List[Resource]:
            """List available resources"""
            return [
                Resource(
                    uri="xtal://table",
                    name="Known Crystals",
                    mimeType="application/json",
                    description="All known crystal frequencies in Hz, ascending"
                ),
                Resource(
                    uri="xtal://status",
                    name="Validator Status",
                    mimeType="application/json",
                    description="Validation cache and counters"
                )
            ]

        @self.server.read_resource()
        async def read_resource(uri: str) -> str:
            """Read resource content"""
            return self.read_resource(str(uri))

    def get_tools(self) -> List[Tool]:
        frequency_schema = {
            "oneOf": [
                {"type": "number", "description": "Frequency in Hz"},
                {"type": "string", "description": "Frequency with unit, e.g. '14.318181 MHz'"}
            ]
        }
        return [
            Tool(
                name="xtal_validate",
                description="Check that a clock is a known, manufactured crystal frequency",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "frequency": frequency_schema,
                        "context": {
                            "type": "string",
                            "description": "Where the clock is used (device, driver), echoed in errors"
                        }
                    },
                    "required": ["frequency"]
                }
            ),
            Tool(
                name="xtal_nearest",
                description="Find the known crystals bracketing a frequency",
                inputSchema={
                    "type": "object",
                    "properties": {"frequency": frequency_schema},
                    "required": ["frequency"]
                }
            ),
            Tool(
                name="xtal_list",
                description="List known crystal frequencies within a range",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "min_frequency": frequency_schema,
                        "max_frequency": frequency_schema,
                        "limit": {
                            "type": "integer",
                            "description": "Maximum number of entries returned",
                            "default": DEFAULT_LIST_LIMIT
                        }
                    }
                }
            ),
            Tool(
                name="xtal_derive",
                description="Validate a crystal and compute the clock derived from it",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "frequency": frequency_schema,
                        "multiplier": {"type": "number", "default": 1},
                        "divisor": {"type": "number", "default": 1}
                    },
                    "required": ["frequency"]
                }
            ),
            Tool(
                name="xtal_get_status",
                description="Get validator statistics",
                inputSchema={"type": "object", "properties": {}}
            )
        ]

    def nearest(self, frequency: float) -> NearestResult:
        if self.validator.check(frequency):
            return NearestResult(frequency=frequency, match=True)
        bracket = self.validator.bracket
        in_range = validate_frequency(frequency, *table_range())
        return NearestResult(
            frequency=frequency,
            match=False,
            in_table_range=in_range,
            low=bracket.low,
            high=bracket.high
        )

    async def handle_tool(self, name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Dispatch a tool call, reporting errors as text"""
        self.request_count += 1
        logger.debug(f"Tool call {name}: {arguments}")

        try:
            if name == "xtal_validate":
                freq = parse_frequency(arguments["frequency"])
                context = arguments.get("context") or DEFAULT_CONTEXT
                if self.validator.check(freq):
                    return [TextContent(type="text", text=f"Known crystal: {format_frequency(freq)}")]
                message = format_failure(freq, context, self.validator.bracket)
                return [TextContent(type="text", text=message)]

            elif name == "xtal_nearest":
                freq = parse_frequency(arguments["frequency"])
                result = self.nearest(freq)
                return [TextContent(type="text", text=json.dumps(asdict(result), indent=2))]

            elif name == "xtal_list":
                low, high = table_range()
                min_freq = parse_frequency(arguments.get("min_frequency", low))
                max_freq = parse_frequency(arguments.get("max_frequency", high))
                limit = int(arguments.get("limit", DEFAULT_LIST_LIMIT))
                if min_freq > max_freq:
                    return [TextContent(type="text", text="min_frequency must not exceed max_frequency")]

                found = xtals_between(min_freq, max_freq)
                data = {
                    "count": int(len(found)),
                    "truncated": bool(len(found) > limit),
                    "frequencies": found[:limit].tolist()
                }
                return [TextContent(type="text", text=json.dumps(data, indent=2))]

            elif name == "xtal_derive":
                freq = parse_frequency(arguments["frequency"])
                multiplier = arguments.get("multiplier", 1)
                divisor = arguments.get("divisor", 1)
                xtal = XTAL(freq)
                if not xtal.check(self.validator):
                    message = format_failure(freq, "xtal_derive", self.validator.bracket)
                    return [TextContent(type="text", text=message)]

                derived = xtal * multiplier / divisor
                data = {
                    "base": derived.base(),
                    "derived": derived.dvalue(),
                    "derived_hz": derived.value(),
                    "display": format_frequency(derived.dvalue())
                }
                return [TextContent(type="text", text=json.dumps(data, indent=2))]

            elif name == "xtal_get_status":
                stats = self.validator.get_statistics()
                stats["requests"] = self.request_count
                return [TextContent(type="text", text=json.dumps(stats, indent=2))]

            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    def read_resource(self, uri: str) -> str:
        if uri == "xtal://table":
            low, high = table_range()
            data = {
                "count": int(len(KNOWN_XTALS)),
                "min": low,
                "max": high,
                "frequencies": KNOWN_XTALS.tolist()
            }
            return json.dumps(data, indent=2)

        elif uri == "xtal://status":
            return json.dumps(self.validator.get_statistics(), indent=2)

        else:
            return f"Unknown resource: {uri}"

    async def run(self):
        """Run the MCP server"""
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


async def main():
    """Main entry point"""
    server = XtalMCPServer()
    await server.run()


def run_main():
    """Console script entry point"""
    asyncio.run(main())


if __name__ == "__main__":
    run_main()
