# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the conversation.  It:
#     1. Collects destination, dates, and activities from the traveler
#     2. Calls tools (via MCP) for suggestions, forecasts, and the list
#     3. Presents the packing list grouped by category
#
#   It does NOT contain packing rules (core/) or tool code (tools/).
# =============================================================================
