"""Domain layer — date/time resolution, target computation, value types.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
