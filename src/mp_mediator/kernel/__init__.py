"""Kernel – errors, context and the request contract (no I/O, no framework)."""
