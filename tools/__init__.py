# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP translation layer between FastMCP and core/.
#
#   requests.py    → the typed request for each tool (and its JSON schema)
#   tmdb_tools.py  → the tool implementations (core/ calls + formatting)
#   mapper.py      → catalog, decode, dispatch and result encoding
#   mcp_server.py  → the FastMCP server built from the catalog
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP (that's core/tmdb_client.py)
#   - They do NOT read the environment (that's core/config.py via main.py)
# =============================================================================
