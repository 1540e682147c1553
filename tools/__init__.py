# =============================================================================
# tools/__init__.py
# =============================================================================
# This package exposes the core/ operations as FastMCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  It:
#     1. Declares one typed, documented tool per operation
#     2. Forwards each call to core.registry and returns the result dict
#     3. Turns typed operation errors into MCP tool errors
#     4. Reads server configuration from the environment (settings.py)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT compute anything (that's in core/)
#   - They do NOT hold state between calls
# =============================================================================
