"""Resolver package for GraphQL schema.

Resolver functions referenced by the GraphQL types, queries, and mutations.
Each one reads or changes the entity store found in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
