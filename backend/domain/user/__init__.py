"""User domain module.

Cellar owners. Authentication is handled outside this package; a user
here is only an id, an email and timestamps.
"""
