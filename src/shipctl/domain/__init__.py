"""Domain layer — business-day calendar arithmetic.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
