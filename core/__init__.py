# =============================================================================
# core/__init__.py
# =============================================================================
# Goals dataset logic: models, loader, filters, serialization and the query
# dispatcher.  Nothing here imports FastMCP or Google ADK.
# =============================================================================
