"""
Color value base type and color space identity.

Each concrete color space is a frozen dataclass deriving from Color.
The class attribute ``space_id`` is the stable key that names the
representation in the conversion graph: one id per class, shared by
all of its instances.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields, is_dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Type, TypeVar, Union

from colorgraph.core.vector import Vector3

if TYPE_CHECKING:
    from colorgraph.core.graph import ConversionGraph

ColorSpaceId = str

C = TypeVar("C", bound="Color")


@dataclass(frozen=True)
class ColorSpaceInfo:
    """
    Metadata about a registered color space.

    Attributes:
        space_id: Graph node key
        name: Human-readable name
        components: Component names in order
        color_class: Value class for this space, if any
    """

    space_id: ColorSpaceId
    name: str = ""
    components: tuple[str, ...] = ()
    color_class: Type[Color] | None = None

    @classmethod
    def from_class(cls, color_class: Type[Color]) -> ColorSpaceInfo:
        """Build metadata from a Color subclass."""
        return cls(
            space_id=color_class.space_id,
            name=color_class.name or color_class.__name__,
            components=color_class.component_names(),
            color_class=color_class,
        )


class Color:
    """
    Base class for immutable color values.

    Subclasses are frozen dataclasses with float components and must set
    ``space_id``. Conversion functions never mutate a color; they always
    build a new one.

    Usage:
        @dataclass(frozen=True)
        class MySpace(Color):
            space_id = "my-space"
            a: float
            b: float
            c: float

            @classmethod
            def register(cls, graph):
                super().register(graph)
                graph.add_edge(cls.space_id, "cie-xyz", my_space_to_xyz)
                graph.add_edge("cie-xyz", cls.space_id, xyz_to_my_space)
    """

    space_id: ClassVar[ColorSpaceId] = ""
    name: ClassVar[str] = ""

    @classmethod
    def component_names(cls) -> tuple[str, ...]:
        """Names of the numeric components, in order."""
        if not is_dataclass(cls):
            return ()
        return tuple(f.name for f in fields(cls))

    @property
    def components(self) -> tuple[float, ...]:
        """Component values, in order."""
        return astuple(self)

    def to_vector(self) -> Vector3:
        """
        Convert to the neutral 3-component vector.

        Raises:
            TypeError: If this space is not 3-dimensional
        """
        values = self.components
        if len(values) != 3:
            raise TypeError(f"{type(self).__name__} is not a 3-component color")
        return Vector3(*values)

    @classmethod
    def from_vector(cls: Type[C], vector: Vector3) -> C:
        """Create a color from a vector, components taken in order."""
        if len(cls.component_names()) != 3:
            raise TypeError(f"{cls.__name__} is not a 3-component color")
        return cls(*vector)

    def convert(
        self,
        target: Union[ColorSpaceId, Type[C]],
        graph: ConversionGraph | None = None,
    ) -> Any:
        """
        Convert this color to another registered color space.

        Args:
            target: Target space id or Color subclass
            graph: Graph to use (defaults to the shared default graph)

        Returns:
            Color in the target space
        """
        if graph is None:
            from colorgraph.core.registry import default_graph

            graph = default_graph()
        return graph.convert(self, target)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        """
        Add this space and its outgoing edges to a graph.

        The base implementation only registers the node. Subclasses
        extend it with their edges to and from a hub space.
        """
        graph.add_space(cls)


def space_id_of(obj: Any) -> ColorSpaceId:
    """
    Get the color space id for an id, a Color subclass, or a Color value.

    Raises:
        TypeError: If no id can be derived
    """
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type) and issubclass(obj, Color):
        space_id = obj.space_id
    elif isinstance(obj, Color):
        space_id = type(obj).space_id
    else:
        raise TypeError(f"Cannot derive a color space id from {obj!r}")

    if not space_id:
        name = obj.__name__ if isinstance(obj, type) else type(obj).__name__
        raise TypeError(f"{name} does not define a space_id")
    return space_id
