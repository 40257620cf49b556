# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the agent framework and core/.
#   Each tool:
#     1. Parses its arguments into core/ types (dates, Destination)
#     2. Calls core/ functions
#     3. Serializes the result (dataclasses → dicts for JSON)
#     4. Turns precondition errors into {"error": ...} responses
#
#   No packing rules live here.
# =============================================================================
