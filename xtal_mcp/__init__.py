"""
XtalLink - Known crystal frequency validation with a Model Context Protocol server
"""

from .crystals import XTAL, XtalValidator, XtalFatalError, default_validator

__version__ = "0.1.0"

# Lazy imports so the validator can be used without the MCP server stack loaded
__all__ = [
    "XTAL",
    "XtalValidator",
    "XtalFatalError",
    "default_validator",
    "XtalMCPServer",
    "main",
    "__version__"
]

def __getattr__(name):
    """Lazy import of the server"""
    if name in ("XtalMCPServer", "main"):
        from .server import XtalMCPServer, main
        return XtalMCPServer if name == "XtalMCPServer" else main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
