"""
Provider protocol and the shared default graph.

Color space modules never import each other. Each one exposes a
provider with a ``register(graph)`` hook, and the composition root
(``colorgraph.spaces.DEFAULT_PROVIDERS``) lists them in a fixed order.
That order is the registration order, and with it the tie-breaking
order of path resolution.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Protocol, runtime_checkable

from colorgraph.core.graph import ConversionGraph, DuplicateEdgePolicy

logger = logging.getLogger(__name__)


@runtime_checkable
class ConversionProvider(Protocol):
    """Anything that can add its color space and edges to a graph."""

    def register(self, graph: ConversionGraph) -> None:
        ...


_default_graph: ConversionGraph | None = None
_default_lock = threading.Lock()


def build_graph(
    providers: Iterable[ConversionProvider] | None = None,
    name: str = "default",
    duplicate_policy: DuplicateEdgePolicy | str = DuplicateEdgePolicy.REPLACE,
) -> ConversionGraph:
    """
    Create a graph and register providers into it.

    Args:
        providers: Providers in registration order (defaults to
            DEFAULT_PROVIDERS)
        name: Name for the graph
        duplicate_policy: Policy for edges registered twice

    Returns:
        The populated graph
    """
    if providers is None:
        from colorgraph.spaces import DEFAULT_PROVIDERS

        providers = DEFAULT_PROVIDERS

    graph = ConversionGraph(name=name, duplicate_policy=duplicate_policy)
    count = graph.register_all(providers)
    logger.debug("Built %r from %d providers", graph, count)
    return graph


def default_graph() -> ConversionGraph:
    """
    Get the shared graph holding every built-in color space.

    Built on first use; later calls return the same instance.
    """
    global _default_graph

    graph = _default_graph
    if graph is not None:
        return graph

    with _default_lock:
        if _default_graph is None:
            _default_graph = build_graph()
        return _default_graph


def reset_default_graph() -> None:
    """Discard the shared graph so the next call rebuilds it (useful for testing)."""
    global _default_graph

    with _default_lock:
        _default_graph = None
