# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL computation for the utility tools: the engines
# (math, strings, units, text analysis, random values, dates, greetings) and
# the operation registry that dispatches to them.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any transport.  Every module
#   here is plain Python and can be used from a REPL or a test without a
#   server.  Randomness and time are passed in (core/sources.py), never read
#   from globals.
# =============================================================================
