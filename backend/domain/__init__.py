"""Domain layer for the cellar.

Entities, value objects, ports and domain services, independent of the
HTTP layer and of any storage technology.
"""
