#!/usr/bin/env python3
"""
Simple direct test of XtalLink server functionality
"""

import asyncio
from xtal_mcp.server import XtalMCPServer
from xtal_mcp.crystals import XTAL, XtalFatalError


async def simple_test():
    """Exercise the server by calling the tool handler directly"""

    print("XtalLink MCP Server - Simple Direct Test")
    print("=" * 50)

    server = XtalMCPServer()

    print("\n1. Validating known crystals...")
    for freq in ("3.579545 MHz", "14.318181 MHz", "32.768 kHz"):
        result = await server.handle_tool("xtal_validate", {"frequency": freq})
        print(f"  {freq}: {result[0].text}")

    print("\n2. Validating a mistyped crystal...")
    result = await server.handle_tool("xtal_validate", {"frequency": 14_318_180, "context": "servertest"})
    print(f"  {result[0].text}")

    print("\n3. Deriving a CPU clock...")
    result = await server.handle_tool("xtal_derive", {"frequency": 14_318_181, "divisor": 3})
    print(result[0].text)

    print("\n4. Validator status...")
    result = await server.handle_tool("xtal_get_status", {})
    print(result[0].text)

    print("\n5. Fatal path...")
    try:
        XTAL(14_318_180).validate("servertest", server.validator)
    except XtalFatalError as e:
        print(f"  Caught fatal error: {e}")

    print("\nBasic functionality test passed!")


if __name__ == "__main__":
    asyncio.run(simple_test())
