"""Domain layer — the naming engine.

This layer depends only on stdlib. It must never import from services,
config, output, or commands. Every function here is pure: no I/O, no
shared mutable state, no logging.
"""
