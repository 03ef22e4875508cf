"""Domain layer: calendrical algorithms and text codecs.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
