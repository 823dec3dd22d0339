# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.  The tools translate MCP calls into
# dispatcher calls and log them; filtering and formatting live in core/.
# =============================================================================
