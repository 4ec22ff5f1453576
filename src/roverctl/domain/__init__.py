"""Domain layer — headings, state, sensors, operations, and the rover.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
