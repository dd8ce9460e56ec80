"""
Entry point for the holiday calendar MCP server.
"""

import logging
import os

from . import mcp

logger = logging.getLogger(__name__)


def main():
    """Starts the server for local development."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = os.getenv("MCP_HOST", "0.0.0.0")
    port = int(os.getenv("MCP_PORT", "8000"))
    logger.info("Server running at http://%s:%s", host, port)

    # Start the FastMCP server with HTTP transport
    mcp.run(transport="streamable-http", host=host, port=port)


if __name__ == "__main__":
    main()
