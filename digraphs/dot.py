"""Export graphs in Graphviz dot format."""

from __future__ import annotations

import hashlib
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Dict, TextIO, TypeVar

from jinja2 import Environment, PackageLoader

from digraphs.config import DotConfig
from digraphs.errors import MissingPrinterError

if TYPE_CHECKING:
    # pylint: disable=cyclic-import
    from digraphs.graph import Graph

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def environment() -> Environment:
    # Labels are written verbatim, so autoescaping must stay off.
    return Environment(loader=PackageLoader("digraphs", "templates"), autoescape=False)


def node_id(label: str) -> str:
    """Return a stable identifier for a node label.

    The identifier is a 64-bit BLAKE2b hash in decimal. Different labels can
    collide in principle, but the same label always gets the same identifier.
    """
    digest = hashlib.blake2b(label.encode("utf-8"), digest_size=8).digest()
    return str(int.from_bytes(digest, "big"))


def render(graph: Graph[T], cfg: DotConfig = None) -> str:
    """Render the graph as a dot digraph.

    Nodes appear in natural order, followed by edges ordered by source and
    then destination. Raises MissingPrinterError if the graph has no printer.
    """
    if graph.printer is None:
        raise MissingPrinterError()
    if cfg is None:
        cfg = DotConfig.default()
    ids: Dict[T, str] = {}
    nodes = []
    for node in graph.nodes():
        label = graph.printer(node)
        ids[node] = node_id(label)
        nodes.append((ids[node], label))
    edges = [(ids[src], ids[dst]) for src, dst in graph.edges()]
    logger.debug("rendering %d nodes and %d edges", len(nodes), len(edges))
    template = environment().get_template("digraph.dot.jinja")
    return template.render(
        graph_name=cfg["graph_name"],
        node_shape=cfg["node_shape"],
        nodes=nodes,
        edges=edges,
    )


def dump(graph: Graph[T], out: TextIO, cfg: DotConfig = None):
    """Write the rendered graph to out, followed by a newline."""
    print(render(graph, cfg), file=out)
