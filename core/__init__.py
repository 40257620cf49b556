# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the packing advisor.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is plain Python.
#
#   Pure pipeline (no I/O, no environment, no logging):
#     trip.py → weather.py → rules.py → packing_list.py
#
#   Collaborators (network, configured through config.Settings):
#     forecast.py, destinations.py
# =============================================================================
