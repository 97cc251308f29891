"""Depth-first search."""

from __future__ import annotations

import enum
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
)

if TYPE_CHECKING:
    # pylint: disable=cyclic-import
    from digraphs.graph import Graph

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Color(enum.Enum):
    """Visit state of a node during one search."""

    WHITE = enum.auto()  # unvisited
    GRAY = enum.auto()  # in progress
    BLACK = enum.auto()  # done


class DfsProps(Generic[T]):

    """Book-keeping for one node during a depth-first search."""

    def __init__(self):
        self.parent: Optional[T] = None
        self.discovery_time = -1
        self.finish_time = -1
        self.color = Color.WHITE

    def __repr__(self) -> str:
        return (
            f"DfsProps(parent={self.parent!r}, discovery={self.discovery_time}, "
            f"finish={self.finish_time}, color={self.color.name})"
        )


class DfsResult(NamedTuple):

    """Result of visiting from one node."""

    # Time after the visit.
    time: int
    # Nodes reached, in discovery order.
    visited: List[Any]


def init_props(graph: Graph[T]) -> Dict[T, DfsProps[T]]:
    """Return fresh props for every node in the graph."""
    return {node: DfsProps() for node in graph.nodes()}


def visit(
    graph: Graph[T], node: T, props: Dict[T, DfsProps[T]], time: int
) -> DfsResult:
    """Visit all unvisited nodes reachable from node.

    The node must be WHITE. Time is the time before the visit; each discovery
    and each finish advances it by one. Successors are explored in natural
    order, and every node discovered from another gets it as its parent.

    This uses an explicit stack rather than recursion, so long chains do not
    exceed the interpreter's recursion limit. The numbering is the same as for
    the recursive formulation.
    """
    visited: List[T] = []

    def discover(node: T, parent: Optional[T]) -> Iterator[T]:
        nonlocal time
        time += 1
        node_props = props[node]
        node_props.parent = parent
        node_props.discovery_time = time
        node_props.color = Color.GRAY
        visited.append(node)
        return iter(graph.successors_of(node))

    stack: List[Tuple[T, Iterator[T]]] = [(node, discover(node, None))]
    while stack:
        current, successors = stack[-1]
        for neighbor in successors:
            if props[neighbor].color is Color.WHITE:
                stack.append((neighbor, discover(neighbor, current)))
                break
        else:
            stack.pop()
            time += 1
            props[current].finish_time = time
            props[current].color = Color.BLACK
    return DfsResult(time, visited)


def root_order(graph: Graph[T], key: Callable[[T], Any] = None) -> List[T]:
    """Return the order in which dfs tries nodes as roots.

    Nodes are sorted by key, with ties in natural order.
    """
    nodes = graph.nodes()
    if key is not None:
        nodes.sort(key=key)
    return nodes


def dfs(graph: Graph[T], key: Callable[[T], Any] = None) -> Dict[T, DfsProps[T]]:
    """Depth-first search of the whole graph.

    Roots are tried in the order given by key (natural order by default). The
    clock is shared by all roots, so discovery and finish times are unique
    across the forest.
    """
    props = init_props(graph)
    time = 0
    roots = 0
    for node in root_order(graph, key):
        if props[node].color is Color.WHITE:
            time, _ = visit(graph, node, props, time)
            roots += 1
    logger.debug("dfs visited %d nodes from %d roots", len(props), roots)
    return props


def dfs_forest(graph: Graph[T], key: Callable[[T], Any] = None) -> Graph[T]:
    """Return the depth-first forest of the graph.

    The forest has the same nodes as the graph and an edge from each node's
    DFS parent to the node.
    """
    props = dfs(graph, key)
    forest = graph.copy_and_clear()
    for node, node_props in props.items():
        if node_props.parent is not None:
            forest.add_edge(node_props.parent, node)
    return forest
