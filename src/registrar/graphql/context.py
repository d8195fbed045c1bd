"""
Access to per-request GraphQL context values
"""

from typing import Any

import strawberry

from ..store import EntityStore


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    """Return the entity store carried by the GraphQL context."""
    context: Any = info.context
    if isinstance(context, dict):
        store = context.get("store")
    else:
        store = getattr(context, "store", None)

    if store is None:
        raise RuntimeError("GraphQL context has no entity store")
    return store
