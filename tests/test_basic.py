"""
Basic tests for XtalLink
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_import():
    """Test that the package can be imported"""
    import xtal_mcp
    assert xtal_mcp.__version__ == "0.1.0"


def test_lazy_server_import():
    """Test that the server is reachable from the package"""
    import xtal_mcp
    from xtal_mcp.server import XtalMCPServer
    assert xtal_mcp.XtalMCPServer is XtalMCPServer


def test_server_creation():
    """Test that server can be created"""
    from xtal_mcp.server import XtalMCPServer
    server = XtalMCPServer()
    assert server is not None
    assert server.server.name == "xtal-mcp"


def test_default_validator_is_shared():
    """Test that the process-wide validator is a single instance"""
    from xtal_mcp import default_validator
    assert default_validator() is default_validator()


def test_unknown_attribute():
    import xtal_mcp
    with pytest.raises(AttributeError):
        xtal_mcp.does_not_exist


if __name__ == "__main__":
    pytest.main([__file__])
