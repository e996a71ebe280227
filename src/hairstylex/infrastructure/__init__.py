"""Infrastructure layer — durable storage for store snapshots.

This layer depends on stdlib, pydantic, and the domain models it serializes.
It must never import from store, services, commands, or output.
"""
