# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK coaching agent.  It holds no goals logic of its own: it
# decides which read-only tool to call (via MCP) and explains the results.
# =============================================================================
