"""Strongly connected components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Sequence, TypeVar

from digraphs.traversal import (
    Color,
    dfs,
    dfs_forest,
    init_props,
    root_order,
    visit,
)

if TYPE_CHECKING:
    # pylint: disable=cyclic-import
    from digraphs.graph import Graph

logger = logging.getLogger(__name__)

T = TypeVar("T")


def strongly_connected_components(graph: Graph[T]) -> List[List[T]]:
    """Partition the graph into strongly connected components.

    Uses Kosaraju's algorithm:

    1. Search the graph and record finish times.
    2. Search the transpose, trying roots in decreasing order of finish time.
       Each tree of the resulting forest is one component.
    3. Extract the trees by visiting the forest from each root in turn.

    Components come out in decreasing order of their root's finish time, so
    the component finished last in step 1 is first. Within a component, nodes
    are in discovery order.
    """
    props = dfs(graph)

    def decreasing_finish(node: T) -> int:
        return -props[node].finish_time

    transpose = graph.transpose()
    forest = dfs_forest(transpose, key=decreasing_finish)

    # Each root comes before its descendants in this order, so the first
    # remaining node is always the root of the next tree.
    # The trees are disjoint, so a single props map serves every extraction.
    work_list = root_order(forest, key=decreasing_finish)
    forest_props = init_props(forest)
    sccs: List[List[T]] = []
    for node in work_list:
        if forest_props[node].color is not Color.WHITE:
            continue
        _, visited = visit(forest, node, forest_props, 0)
        sccs.append(visited)
    logger.debug("found %d components in %r", len(sccs), graph)
    return sccs


def component_map(sccs: Sequence[Sequence[T]]) -> Dict[T, int]:
    """Map each node to the index of its component."""
    return {node: i for i, scc in enumerate(sccs) for node in scc}


def condensation(graph: Graph[T]) -> Graph[int]:
    """Return the condensation of the graph.

    The condensation has one node per component, numbered in the order
    returned by strongly_connected_components, and an edge i -> j whenever an
    edge of the graph leads from component i to component j. It is acyclic.
    """
    # pylint: disable=import-outside-toplevel
    from digraphs.graph import Graph

    sccs = strongly_connected_components(graph)
    index = component_map(sccs)
    result: Graph[int] = Graph(lambda i: f"scc{i}")
    result.add_nodes(range(len(sccs)))
    for src, dst in graph.edges():
        i, j = index[src], index[dst]
        if i != j and not result.exists_edge(i, j):
            result.add_edge(i, j)
    return result
