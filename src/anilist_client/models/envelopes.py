"""Normalizers for GraphQL connection envelopes.

AniList wraps lists of related objects in one of two shapes::

    {"nodes": [node, ...]}
    {"edges": [{"node": node, "role": "MAIN", ...}, ...]}

The helpers here flatten both into an ordered list of validated models. Extra
fields carried by an edge are copied onto the node before it is validated, so
a character reached through an anime's edge carries its role in that anime.

An element that fails validation is replaced by the model's placeholder; the
rest of the list still decodes. A missing envelope gives ``None``.
"""

import logging
from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .base import AniListModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=AniListModel)


def decode_each(items: List[Any], model: Type[M]) -> List[M]:
    """Validate every item, substituting ``model.placeholder()`` on failure."""
    decoded: List[M] = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            decoded.append(item)
            continue
        try:
            decoded.append(model.model_validate(item))
        except ValidationError as e:
            logger.debug(
                f"Substituting placeholder for {model.__name__} at index {index}: "
                f"{e.error_count()} validation error(s)"
            )
            decoded.append(model.placeholder())
    return decoded


def from_nodes(value: Any, model: Type[M]) -> Optional[List[M]]:
    """Flatten ``{"nodes": [...]}``."""
    if value is None:
        return None
    if not isinstance(value, Mapping):
        logger.debug(f"Ignoring malformed {model.__name__} node envelope: {type(value).__name__}")
        return None
    nodes = value.get("nodes")
    if nodes is None:
        return None
    if not isinstance(nodes, list):
        logger.debug(f"Ignoring non-list {model.__name__} nodes: {type(nodes).__name__}")
        return None
    return decode_each(nodes, model)


def from_edges(
    value: Any, model: Type[M], extras: Optional[Mapping[str, str]] = None
) -> Optional[List[M]]:
    """Flatten ``{"edges": [{"node": ..., <extra>: ...}]}``.

    Args:
        value: The raw connection object.
        model: Model each node is validated into.
        extras: Edge field name -> node field name (API spelling) to copy
            onto the node. Absent or null edge fields are not copied.
    """
    if value is None:
        return None
    if not isinstance(value, Mapping):
        logger.debug(f"Ignoring malformed {model.__name__} edge envelope: {type(value).__name__}")
        return None
    edges = value.get("edges")
    if edges is None:
        return None
    if not isinstance(edges, list):
        logger.debug(f"Ignoring non-list {model.__name__} edges: {type(edges).__name__}")
        return None
    return decode_each([_merge_edge(edge, extras or {}) for edge in edges], model)


def from_connection(
    value: Any, model: Type[M], extras: Optional[Mapping[str, str]] = None
) -> Optional[List[M]]:
    """Flatten whichever envelope shape ``value`` has.

    Edges win over nodes when both are present. A bare list is decoded as-is,
    which lets callers build models from already flattened data.
    """
    if isinstance(value, list):
        return decode_each(value, model)
    if isinstance(value, Mapping) and value.get("edges") is not None:
        return from_edges(value, model, extras)
    return from_nodes(value, model)


def _merge_edge(edge: Any, extras: Mapping[str, str]) -> Any:
    # Malformed edges are passed through so they turn into placeholders.
    if not isinstance(edge, Mapping):
        return edge
    node = edge.get("node")
    if isinstance(node, BaseModel):
        node = node.model_dump(by_alias=True)
    if not isinstance(node, Mapping):
        return node
    merged = dict(node)
    for edge_field, node_field in extras.items():
        if edge.get(edge_field) is not None:
            merged[node_field] = edge[edge_field]
    return merged
