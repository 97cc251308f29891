"""Generic directed graphs with strongly connected components."""

from digraphs.components import (
    component_map,
    condensation,
    strongly_connected_components,
)
from digraphs.config import DotConfig
from digraphs.errors import (
    CorruptGraphError,
    DuplicateNodeError,
    GraphError,
    MismatchedNodeSetError,
    MissingPrinterError,
    UnknownNodeError,
)
from digraphs.graph import Graph
from digraphs.traversal import Color, DfsProps, dfs, dfs_forest

__all__ = [
    "Color",
    "CorruptGraphError",
    "DfsProps",
    "DotConfig",
    "DuplicateNodeError",
    "Graph",
    "GraphError",
    "MismatchedNodeSetError",
    "MissingPrinterError",
    "UnknownNodeError",
    "component_map",
    "condensation",
    "dfs",
    "dfs_forest",
    "strongly_connected_components",
]
