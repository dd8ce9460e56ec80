"""
Holiday Calendar MCP package initialization.
"""

from fastmcp import FastMCP

from .tools import get_holidays, is_holiday

# Initialize FastMCP instance
mcp = FastMCP(
    name="Holiday Calendar",
    instructions="A holiday calendar that checks single dates and date ranges for public holidays using the Kalendarium holiday service.",
)

# Register tools
mcp.tool(is_holiday)
mcp.tool(get_holidays)

__all__ = [
    "mcp",
    "is_holiday",
    "get_holidays",
]
