"""Generic directed graph structure."""

from __future__ import annotations

import logging
import sys
from bisect import bisect_left
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)

from digraphs import components, dot, traversal
from digraphs.config import DotConfig
from digraphs.errors import (
    CorruptGraphError,
    DuplicateNodeError,
    MismatchedNodeSetError,
    UnknownNodeError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

NodePrinter = Callable[[T], str]


def _contains(items: Tuple[T, ...], item: T) -> bool:
    """Binary search in a sorted tuple."""
    i = bisect_left(items, item)
    return i < len(items) and items[i] == item


def _inserted(items: Tuple[T, ...], item: T) -> Tuple[T, ...]:
    """Return a copy of the sorted tuple with item inserted in order."""
    i = bisect_left(items, item)
    return items[:i] + (item,) + items[i:]


class Graph(Generic[T]):

    """A directed graph.

    Vertices are objects of type T. They must be hashable and totally ordered
    by <, and None is reserved (it marks "no parent" in depth-first search).

    The graph stores every edge twice: once in the successor map and once in
    the predecessor map. Both maps have a key for every node, and every
    adjacency tuple is sorted and free of duplicates. This makes equality
    independent of the order in which edges were added.

    The printer maps nodes to display labels. It is only needed for export.
    """

    def __init__(self, printer: Optional[NodePrinter] = None):
        self.printer = printer
        self._nodes: set = set()
        self._succ: Dict[T, Tuple[T, ...]] = {}
        self._pred: Dict[T, Tuple[T, ...]] = {}

    def __repr__(self) -> str:
        return f"Graph(N={len(self._nodes)}, E={self.edge_count()})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[T]:
        """Iterate over nodes in natural order."""
        return iter(self.nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._nodes == other._nodes
            and self._succ == other._succ
            and self._pred == other._pred
        )

    __hash__ = None  # type: ignore

    def equals(self, other: Graph[T]) -> bool:
        """Structural equality: same nodes, successors, and predecessors."""
        return self == other

    # Mutation

    def add_node(self, node: T):
        """Add a node with no edges.

        Raises DuplicateNodeError if the node is already present.
        """
        if node is None:
            raise TypeError("None cannot be a graph node")
        if node in self._nodes:
            raise DuplicateNodeError(node)
        self._nodes.add(node)
        self._succ[node] = ()
        self._pred[node] = ()

    def add_nodes(self, nodes: Iterable[T]):
        for node in nodes:
            self.add_node(node)

    def add_edge(self, src: T, dst: T) -> bool:
        """Add an edge from src to dst.

        Raises UnknownNodeError if either endpoint is missing. If the edge
        already exists, logs a warning and leaves the graph unchanged. Returns
        True if the edge was added.
        """
        if src not in self._nodes:
            raise UnknownNodeError(src, "from")
        if dst not in self._nodes:
            raise UnknownNodeError(dst, "to")
        if not self._insert_edge(src, dst):
            logger.warning("edge %r -> %r already exists, ignoring", src, dst)
            return False
        return True

    def add_edges(self, edges: Iterable[Tuple[T, T]]):
        for src, dst in edges:
            self.add_edge(src, dst)

    def _insert_edge(self, src: T, dst: T) -> bool:
        """Insert an edge between existing nodes unless it is already there."""
        if self.exists_edge(src, dst):
            return False
        self._succ[src] = _inserted(self._succ[src], dst)
        self._pred[dst] = _inserted(self._pred[dst], src)
        return True

    # Queries

    def exists_edge(self, src: T, dst: T) -> bool:
        """Return True if there is an edge from src to dst."""
        if src not in self._nodes:
            raise UnknownNodeError(src, "from")
        if dst not in self._nodes:
            raise UnknownNodeError(dst, "to")
        forward = _contains(self._succ[src], dst)
        backward = _contains(self._pred[dst], src)
        if forward != backward:
            raise CorruptGraphError(src, dst)
        return forward

    def node_set(self) -> FrozenSet[T]:
        return frozenset(self._nodes)

    def nodes(self) -> List[T]:
        """Return the nodes in natural order."""
        return sorted(self._nodes)

    def succ_map(self) -> Mapping[T, Tuple[T, ...]]:
        """Read-only view of the successor map."""
        return MappingProxyType(self._succ)

    def pred_map(self) -> Mapping[T, Tuple[T, ...]]:
        """Read-only view of the predecessor map."""
        return MappingProxyType(self._pred)

    def successors_of(self, node: T) -> Tuple[T, ...]:
        if node not in self._nodes:
            raise UnknownNodeError(node)
        return self._succ[node]

    def predecessors_of(self, node: T) -> Tuple[T, ...]:
        if node not in self._nodes:
            raise UnknownNodeError(node)
        return self._pred[node]

    def edges(self) -> Iterator[Tuple[T, T]]:
        """Iterate over edges ordered by source, then destination."""
        for src in self.nodes():
            for dst in self._succ[src]:
                yield src, dst

    def edge_count(self) -> int:
        return sum(len(succ) for succ in self._succ.values())

    # Transforms

    def copy_and_clear(self) -> Graph[T]:
        """Return a graph with the same nodes and printer but no edges."""
        result: Graph[T] = Graph(self.printer)
        result._nodes = set(self._nodes)
        result._succ = {node: () for node in self._nodes}
        result._pred = {node: () for node in self._nodes}
        return result

    def copy(self) -> Graph[T]:
        result: Graph[T] = Graph(self.printer)
        result._nodes = set(self._nodes)
        result._succ = dict(self._succ)
        result._pred = dict(self._pred)
        return result

    def transpose(self) -> Graph[T]:
        """Return the graph with every edge reversed."""
        succ: Dict[T, List[T]] = {node: [] for node in self._nodes}
        pred: Dict[T, List[T]] = {node: [] for node in self._nodes}
        # Visiting edges in natural order appends in sorted order.
        for src, dst in self.edges():
            succ[dst].append(src)
            pred[src].append(dst)
        result = self.copy_and_clear()
        result._succ = {node: tuple(nodes) for node, nodes in succ.items()}
        result._pred = {node: tuple(nodes) for node, nodes in pred.items()}
        return result

    def union(self, other: Graph[T]) -> Graph[T]:
        """Return a graph with the edges of both graphs.

        Raises MismatchedNodeSetError unless both graphs have the same nodes.
        Edges present in both graphs appear once.
        """
        if self._nodes != other._nodes:
            raise MismatchedNodeSetError(self._nodes, other._nodes)
        result = self.copy_and_clear()
        for graph in (self, other):
            for src, dst in graph.edges():
                result._insert_edge(src, dst)
        return result

    def __add__(self, other: object) -> Graph[T]:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.union(other)

    # Export

    def to_dot(self, cfg: DotConfig = None) -> str:
        """Render the graph in Graphviz dot format."""
        return dot.render(self, cfg)

    def dump(self, out: TextIO = sys.stdout, cfg: DotConfig = None):
        """Dump a textual representation of this graph to out."""
        dot.dump(self, out, cfg)

    # Algorithms

    def dfs(self, key: Callable[[T], Any] = None) -> Dict[T, traversal.DfsProps[T]]:
        return traversal.dfs(self, key)

    def dfs_forest(self, key: Callable[[T], Any] = None) -> Graph[T]:
        return traversal.dfs_forest(self, key)

    def strongly_connected_components(self) -> List[List[T]]:
        return components.strongly_connected_components(self)

    scc = strongly_connected_components
