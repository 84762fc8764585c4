"""Resolver package for GraphQL schema.

Root query and mutation fields, and computed object fields, delegate to the
plain functions defined in sibling modules.
"""

# Intentionally empty; functions are defined in sibling modules.
