# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL TMDB-facing logic: data models, configuration,
# the HTTP transport, the API client and text formatting.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP type.  The client can
#   be driven from a bare Python REPL (or a test with a stub transport)
#   without a server running.
# =============================================================================
