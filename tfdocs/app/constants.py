"""Limits for the command tree."""

MAX_TRACE_DEPTH = 100  # Maximum depth for attribute tracing
