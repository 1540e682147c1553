# =============================================================================
# main.py  -  Entry Point for the Utility Tools Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                     # stdio (for MCP clients)
#   TOOLS_TRANSPORT=http uv run python main.py  # HTTP on HOST:PORT
#
# WHAT HAPPENS:
#   1. Loads environment variables from .env (if present)
#   2. Imports the FastMCP server, which reads the settings
#      (tools/settings.py), configures logging and registers the seven
#      tools (tools/mcp_server.py)
#   3. Runs the server on the configured transport
# =============================================================================

import logging

from dotenv import load_dotenv

# Load .env BEFORE importing the server: tools/mcp_server.py reads the
# settings at import time.
load_dotenv()

from tools.mcp_server import mcp, registry, settings  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the tool server with the configured transport."""
    logger.info("Registered tools: %s", ", ".join(registry.names()))

    if settings.transport == "http":
        logger.info("Server running on http://%s:%d/mcp", settings.host, settings.port)
        mcp.run(transport="http", host=settings.host, port=settings.port)
    else:
        logger.info("Server running on stdio")
        mcp.run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
