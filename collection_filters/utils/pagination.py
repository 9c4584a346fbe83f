"""Cursor pagination helpers for Storefront API connections."""

from typing import Any, Dict, List, Mapping, Optional, Union


def get_pagination_variables(
    params: Mapping[str, str],
    page_by: int,
) -> Dict[str, Union[int, Optional[str]]]:
    """
    Build connection variables from the ``cursor`` and ``direction`` query params.

    ``direction=previous`` pages backwards from the cursor; anything else pages
    forwards.
    """
    cursor = params.get("cursor") or None
    if params.get("direction") == "previous":
        return {"last": page_by, "startCursor": cursor}
    return {"first": page_by, "endCursor": cursor}


def flatten_connection(connection: Optional[Mapping[str, Any]]) -> List[Any]:
    """Return the nodes of a GraphQL connection given as ``nodes`` or ``edges``."""
    if not isinstance(connection, Mapping):
        return []
    if "nodes" in connection:
        nodes = connection["nodes"]
        return list(nodes) if isinstance(nodes, list) else []
    edges = connection.get("edges")
    if not isinstance(edges, list):
        return []
    # Edges missing a node are skipped.
    return [edge["node"] for edge in edges if isinstance(edge, Mapping) and "node" in edge]
