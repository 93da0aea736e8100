"""Infrastructure layer — the outside world the engine reads from.

Currently just the reference-timezone clock.
"""
