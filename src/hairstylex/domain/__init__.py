"""Domain layer — entities, identity rules, and filter predicates.

This layer depends only on stdlib and pydantic.
It must never import from store, services, infrastructure, commands, or config.
"""
