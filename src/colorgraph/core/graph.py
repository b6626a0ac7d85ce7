"""
Conversion graph and path resolution.

Color spaces are nodes, registered converters are directed edges.
Conversions between spaces without a direct edge are answered by
finding the shortest chain of edges and composing it into a single
cached callable.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Type, Union

from colorgraph.core.color import Color, ColorSpaceId, ColorSpaceInfo, space_id_of
from colorgraph.core.exceptions import (
    DuplicateEdgeError,
    NoConversionPathError,
    UnknownColorSpaceError,
)

logger = logging.getLogger(__name__)

ConvertFunc = Callable[[Any], Any]
SpaceRef = Union[ColorSpaceId, Type[Color], ColorSpaceInfo]


class DuplicateEdgePolicy(str, Enum):
    """What add_edge does when the (source, target) pair already exists."""

    REPLACE = "replace"  # last registration wins
    REJECT = "reject"


@dataclass(frozen=True)
class ConversionEdge:
    """
    A directed, pure conversion between two color spaces.

    Attributes:
        source: Id of the space converted from
        target: Id of the space converted to
        convert: Function mapping a source value to a target value
    """

    source: ColorSpaceId
    target: ColorSpaceId
    convert: ConvertFunc

    def __repr__(self) -> str:
        return f"ConversionEdge({self.source!r} -> {self.target!r})"


class ComposedConverter:
    """
    A resolved path flattened into one callable.

    Calling it feeds the value through every edge in order. An empty
    path is the identity conversion.
    """

    __slots__ = ("source", "target", "path", "_funcs")

    def __init__(
        self,
        source: ColorSpaceId,
        target: ColorSpaceId,
        path: tuple[ConversionEdge, ...],
    ) -> None:
        self.source = source
        self.target = target
        self.path = path
        self._funcs = tuple(edge.convert for edge in path)

    def __call__(self, value: Any) -> Any:
        for func in self._funcs:
            value = func(value)
        return value

    def __len__(self) -> int:
        return len(self.path)

    def __repr__(self) -> str:
        hops = " -> ".join([self.source] + [edge.target for edge in self.path])
        return f"ComposedConverter({hops})"


class ConversionGraph:
    """
    Directed graph of color spaces and the converters between them.

    Providers register their nodes and edges once at startup; afterwards
    the graph is read-mostly. Any number of threads may call ``convert``
    concurrently. Adding an edge clears the composed-converter cache, but
    conversions already in flight keep using the converter they looked up.

    Attributes:
        name: Optional name for the graph
        duplicate_policy: Behaviour when an edge is registered twice

    Usage:
        graph = ConversionGraph()
        graph.register_all([LinearSrgb, CieXyz])
        xyz = graph.convert(LinearSrgb(1.0, 1.0, 1.0), CieXyz)
    """

    def __init__(
        self,
        name: str = "default",
        duplicate_policy: DuplicateEdgePolicy | str = DuplicateEdgePolicy.REPLACE,
    ) -> None:
        self.name = name
        self.duplicate_policy = DuplicateEdgePolicy(duplicate_policy)
        self._spaces: dict[ColorSpaceId, ColorSpaceInfo] = {}
        self._adjacency: dict[ColorSpaceId, list[ConversionEdge]] = {}
        self._cache: dict[tuple[ColorSpaceId, ColorSpaceId], ComposedConverter] = {}
        self._lock = threading.RLock()
        self._generation = 0

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_space(self, space: SpaceRef) -> ColorSpaceInfo:
        """
        Register a color space as a node.

        Re-registering an id keeps its edges; metadata is updated when
        the new registration carries more of it.

        Args:
            space: Space id, Color subclass, or ColorSpaceInfo

        Returns:
            The stored metadata

        Raises:
            TypeError: If no color space id can be derived
        """
        if isinstance(space, ColorSpaceInfo):
            info = space
        elif isinstance(space, type):
            space_id_of(space)
            info = ColorSpaceInfo.from_class(space)
        else:
            space_id = space_id_of(space)
            info = ColorSpaceInfo(space_id=space_id, name=space_id)

        with self._lock:
            existing = self._spaces.get(info.space_id)
            if existing is None or existing.color_class is None:
                self._spaces[info.space_id] = info
            self._adjacency.setdefault(info.space_id, [])
            return self._spaces[info.space_id]

    def add_edge(
        self,
        source: SpaceRef,
        target: SpaceRef,
        convert: ConvertFunc,
    ) -> ConversionEdge:
        """
        Insert a directed conversion edge.

        Unknown endpoints are added as nodes. With the REPLACE policy a
        second edge for the same pair takes the place of the first and
        keeps its position in the adjacency list.

        Args:
            source: Space converted from
            target: Space converted to
            convert: Pure function from a source value to a target value

        Returns:
            The inserted edge

        Raises:
            DuplicateEdgeError: If the pair exists and the policy is REJECT
        """
        src_id = self._node_id(source)
        dst_id = self._node_id(target)
        edge = ConversionEdge(src_id, dst_id, convert)

        with self._lock:
            for ref, space_id in ((source, src_id), (target, dst_id)):
                if space_id not in self._spaces:
                    self.add_space(ref)

            outgoing = self._adjacency[src_id]
            for index, existing in enumerate(outgoing):
                if existing.target == dst_id:
                    if self.duplicate_policy is DuplicateEdgePolicy.REJECT:
                        raise DuplicateEdgeError(src_id, dst_id)
                    outgoing[index] = edge
                    logger.debug("Replaced edge %s -> %s", src_id, dst_id)
                    break
            else:
                outgoing.append(edge)
                logger.debug("Added edge %s -> %s", src_id, dst_id)

            self._generation += 1
            self._cache.clear()

        return edge

    def register_all(self, providers: Iterable[Any]) -> int:
        """
        Call each provider's ``register(graph)`` hook once, in order.

        Repeated calls are not deduplicated; callers guard against
        registering the same providers twice.

        Args:
            providers: Objects or classes with a ``register(graph)`` method

        Returns:
            Number of providers registered
        """
        count = 0
        for provider in providers:
            provider.register(self)
            count += 1
            logger.debug(
                "Registered provider %s",
                getattr(provider, "__name__", type(provider).__name__),
            )
        return count

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve_path(
        self, source: SpaceRef, target: SpaceRef
    ) -> tuple[ConversionEdge, ...]:
        """
        Find the shortest chain of edges from source to target.

        Breadth-first over edges in registration order, so among equally
        short paths the one reached through earlier registrations wins.

        Args:
            source: Space converted from
            target: Space converted to

        Returns:
            Tuple of edges; empty when source and target are the same

        Raises:
            UnknownColorSpaceError: If either space is not a node
            NoConversionPathError: If no directed path exists
        """
        src_id = self._require(source)
        dst_id = self._require(target)

        if src_id == dst_id:
            return ()

        # Snapshot adjacency so concurrent inserts can't change lists mid-walk
        with self._lock:
            adjacency = {key: tuple(edges) for key, edges in self._adjacency.items()}

        came_from: dict[ColorSpaceId, ConversionEdge | None] = {src_id: None}
        queue = deque([src_id])

        while queue:
            current = queue.popleft()
            for edge in adjacency.get(current, ()):
                if edge.target in came_from:
                    continue
                came_from[edge.target] = edge
                if edge.target == dst_id:
                    return self._walk_back(came_from, dst_id)
                queue.append(edge.target)

        raise NoConversionPathError(src_id, dst_id)

    @staticmethod
    def _walk_back(
        came_from: dict[ColorSpaceId, ConversionEdge | None],
        target: ColorSpaceId,
    ) -> tuple[ConversionEdge, ...]:
        path = []
        edge = came_from[target]
        while edge is not None:
            path.append(edge)
            edge = came_from[edge.source]
        path.reverse()
        return tuple(path)

    def get_converter(self, source: SpaceRef, target: SpaceRef) -> ComposedConverter:
        """
        Get the cached composed converter for a pair, building it on a miss.

        Concurrent misses for the same pair may both resolve the path,
        but only the first converter published is kept and returned. A
        converter resolved while an edge was being added is discarded and
        the path resolved again.
        """
        key = (self._node_id(source), self._node_id(target))
        converter = self._cache.get(key)
        if converter is not None:
            return converter

        while True:
            generation = self._generation
            path = self.resolve_path(*key)
            converter = ComposedConverter(key[0], key[1], path)
            with self._lock:
                if self._generation == generation:
                    converter = self._cache.setdefault(key, converter)
                    break
            logger.debug("Graph changed while resolving %s -> %s", *key)

        logger.debug("Cached converter %r", converter)
        return converter

    def convert(self, value: Color, target: SpaceRef) -> Any:
        """
        Convert a color value to another registered color space.

        Args:
            value: Color instance; its class names the source space
            target: Target space id or Color subclass

        Returns:
            Color in the target space

        Raises:
            TypeError: If the value has no color space id
            UnknownColorSpaceError: If either space is not a node
            NoConversionPathError: If no directed path exists
        """
        if not isinstance(value, Color):
            raise TypeError(f"Expected a Color value, got {type(value).__name__}")
        return self.get_converter(space_id_of(value), target)(value)

    def clear_cache(self) -> None:
        """Drop all composed converters."""
        with self._lock:
            self._cache.clear()

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def get_space(self, space: SpaceRef) -> ColorSpaceInfo:
        """
        Get metadata for a registered space.

        Raises:
            UnknownColorSpaceError: If the space is not a node
        """
        return self._spaces[self._require(space)]

    def spaces(self) -> list[ColorSpaceId]:
        """List registered space ids in registration order."""
        return list(self._spaces)

    def edges(self, source: SpaceRef | None = None) -> list[ConversionEdge]:
        """
        List edges, either all of them or those leaving one space.

        Raises:
            UnknownColorSpaceError: If ``source`` is given and unknown
        """
        with self._lock:
            if source is not None:
                return list(self._adjacency[self._require(source)])
            return [edge for edges in self._adjacency.values() for edge in edges]

    def has_edge(self, source: SpaceRef, target: SpaceRef) -> bool:
        """Check whether a direct edge exists."""
        dst_id = self._node_id(target)
        return any(
            edge.target == dst_id
            for edge in self._adjacency.get(self._node_id(source), ())
        )

    def _node_id(self, space: SpaceRef) -> ColorSpaceId:
        if isinstance(space, ColorSpaceInfo):
            return space.space_id
        return space_id_of(space)

    def _require(self, space: SpaceRef) -> ColorSpaceId:
        space_id = self._node_id(space)
        if space_id not in self._spaces:
            raise UnknownColorSpaceError(space_id)
        return space_id

    def __len__(self) -> int:
        """Number of color spaces in the graph."""
        return len(self._spaces)

    def __iter__(self) -> Iterator[ColorSpaceInfo]:
        """Iterate over space metadata in registration order."""
        return iter(list(self._spaces.values()))

    def __contains__(self, space: object) -> bool:
        """Check if a space id, class or value is a node."""
        try:
            return self._node_id(space) in self._spaces  # type: ignore[arg-type]
        except TypeError:
            return False

    def __repr__(self) -> str:
        edge_count = sum(len(edges) for edges in self._adjacency.values())
        return (
            f"ConversionGraph(name={self.name!r}, spaces={len(self._spaces)}, "
            f"edges={edge_count})"
        )
