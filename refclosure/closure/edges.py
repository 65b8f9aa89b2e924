"""Edge values found on a reference node."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Union

from .taxonomy import EdgeKind, EdgeShape


@dataclass(frozen=True)
class Unresolved:
    """An edge value given as an id, still to be looked up"""
    id: int


@dataclass(frozen=True)
class Inline:
    """An edge value embedded as an object"""
    node: Dict[str, Any]


EdgeRef = Union[Unresolved, Inline]


def is_node_id(value: Any) -> bool:
    """True for integers usable as node ids (bool is not an id)."""
    return isinstance(value, int) and not isinstance(value, bool)


def node_id(node: Dict[str, Any]) -> Optional[int]:
    """Return the node's id, or None for anonymous nodes."""
    value = node.get('id')
    return value if is_node_id(value) else None


def _follow_path(node: Dict[str, Any], path) -> Any:
    value = node
    for field in path:
        if not isinstance(value, dict):
            return None
        value = value.get(field)
        if value is None:
            return None
    return value


def to_edge_ref(value: Any, kind: EdgeKind) -> Optional[EdgeRef]:
    """Classify one edge value, or None when the kind does not follow it."""
    if is_node_id(value):
        return Unresolved(value) if kind.accepts_ids() else None
    if isinstance(value, dict):
        return Inline(value) if kind.accepts_inline() else None
    return None


def iter_edge_refs(node: Dict[str, Any], kind: EdgeKind) -> Iterator[EdgeRef]:
    """
    Yield the references a node holds through one edge kind, in field order.

    Missing fields and values of the wrong shape yield nothing.
    """
    value = _follow_path(node, kind.path)
    if value is None:
        return

    if kind.shape == EdgeShape.SEQUENCE:
        if not isinstance(value, list):
            return
        for item in value:
            ref = to_edge_ref(item, kind)
            if ref is not None:
                yield ref
    else:
        ref = to_edge_ref(value, kind)
        if ref is not None:
            yield ref
