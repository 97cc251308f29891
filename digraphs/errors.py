"""Graph errors."""

from typing import AbstractSet, Any


class GraphError(Exception):
    """Base class for all errors raised by this package."""


class DuplicateNodeError(GraphError):

    """Raised when adding a node that is already in the graph."""

    def __init__(self, node: Any):
        super().__init__(f"node {node!r} already exists")
        self.node = node


class UnknownNodeError(GraphError):

    """Raised when an operation names a node that is not in the graph.

    The endpoint attribute is "from" or "to" when the node was an endpoint of
    an edge, and None otherwise.
    """

    def __init__(self, node: Any, endpoint: str = None):
        if endpoint:
            msg = f"{endpoint} node {node!r} does not exist"
        else:
            msg = f"node {node!r} does not exist"
        super().__init__(msg)
        self.node = node
        self.endpoint = endpoint


class MismatchedNodeSetError(GraphError):

    """Raised by union when the two graphs have different node sets."""

    def __init__(self, left: AbstractSet[Any], right: AbstractSet[Any]):
        self.only_left = left - right
        self.only_right = right - left
        super().__init__(
            "union requires identical node sets "
            f"(only in left: {sorted(self.only_left)!r}, "
            f"only in right: {sorted(self.only_right)!r})"
        )


class MissingPrinterError(GraphError):
    """Raised when exporting a graph that has no node printer."""

    def __init__(self):
        super().__init__("cannot export graph without a node printer")


class CorruptGraphError(GraphError):

    """Raised when the successor and predecessor maps disagree.

    This never happens through the public API. It indicates a bug.
    """

    def __init__(self, src: Any, dst: Any):
        super().__init__(
            f"successor and predecessor maps disagree on {src!r} -> {dst!r}"
        )
        self.src = src
        self.dst = dst
