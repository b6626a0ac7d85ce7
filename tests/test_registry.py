"""
Tests for providers and the shared default graph.
"""

from dataclasses import dataclass

import pytest

from colorgraph.core.color import Color, ColorSpaceInfo, space_id_of
from colorgraph.core.exceptions import NoConversionPathError, UnknownColorSpaceError
from colorgraph.core.graph import DuplicateEdgePolicy
from colorgraph.core.registry import (
    ConversionProvider,
    build_graph,
    default_graph,
    reset_default_graph,
)
from colorgraph.spaces import DEFAULT_PROVIDERS, CieXyz, LinearSrgb, Oklab, Srgb
from colorgraph.spaces.xyz import cie_xyz_to_linear_srgb


@dataclass(frozen=True)
class OneWay(Color):
    """Space that only knows how to reach XYZ."""

    space_id = "one-way"

    x: float
    y: float
    z: float

    @classmethod
    def register(cls, graph):
        super().register(graph)
        graph.add_edge(cls, CieXyz, lambda c: CieXyz(c.x, c.y, c.z))


@pytest.fixture(autouse=True)
def fresh_default_graph():
    """Each test starts without a shared graph."""
    reset_default_graph()
    yield
    reset_default_graph()


class TestDefaultGraph:
    """Tests for the lazily built shared graph."""

    def test_contains_builtin_spaces(self):
        graph = default_graph()
        assert graph.spaces() == [provider.space_id for provider in DEFAULT_PROVIDERS]

    def test_singleton(self):
        assert default_graph() is default_graph()

    def test_reset(self):
        first = default_graph()
        reset_default_graph()
        assert default_graph() is not first

    def test_color_convert_uses_default(self):
        xyz = LinearSrgb(1.0, 1.0, 1.0).convert(CieXyz)

        assert isinstance(xyz, CieXyz)
        assert xyz.y == pytest.approx(1.0, abs=1e-6)

    def test_color_convert_by_id(self):
        lab = Srgb(1.0, 1.0, 1.0).convert("oklab")
        assert isinstance(lab, Oklab)


class TestBuildGraph:
    """Tests for explicit graph construction."""

    def test_subset_of_providers(self):
        graph = build_graph([LinearSrgb, CieXyz])

        assert graph.spaces() == ["linear-srgb", "cie-xyz"]
        assert "oklab" not in graph

    def test_missing_space_is_unknown(self):
        graph = build_graph([LinearSrgb, CieXyz])

        with pytest.raises(UnknownColorSpaceError):
            graph.convert(Oklab(0.5, 0.0, 0.0), LinearSrgb)

    def test_name_and_policy(self):
        graph = build_graph([LinearSrgb], name="small", duplicate_policy="reject")

        assert graph.name == "small"
        assert graph.duplicate_policy is DuplicateEdgePolicy.REJECT

    def test_builtin_providers_register_no_duplicates(self):
        """Built-in providers never register the same edge twice."""
        graph = build_graph(duplicate_policy=DuplicateEdgePolicy.REJECT)
        assert len(graph) == len(DEFAULT_PROVIDERS)

    def test_providers_satisfy_protocol(self):
        for provider in DEFAULT_PROVIDERS:
            assert isinstance(provider, ConversionProvider)


class TestDirectedEdges:
    """A one-way space is reachable only along its edge direction."""

    @pytest.fixture
    def graph(self):
        return build_graph([LinearSrgb, CieXyz, OneWay])

    def test_one_way_forward(self, graph):
        rgb = graph.convert(OneWay(0.5, 0.5, 0.5), LinearSrgb)
        expected = cie_xyz_to_linear_srgb(CieXyz(0.5, 0.5, 0.5))

        assert rgb == expected

    def test_one_way_reverse_has_no_path(self, graph):
        with pytest.raises(NoConversionPathError):
            graph.convert(LinearSrgb(1.0, 1.0, 1.0), OneWay)

    def test_no_implicit_reverse_edge(self, graph):
        assert graph.has_edge(OneWay, CieXyz)
        assert not graph.has_edge(CieXyz, OneWay)


class TestSpaceIds:
    """Tests for color space identity."""

    def test_space_id_of(self):
        assert space_id_of("cie-xyz") == "cie-xyz"
        assert space_id_of(CieXyz) == "cie-xyz"
        assert space_id_of(CieXyz(0.0, 0.0, 0.0)) == "cie-xyz"

    def test_missing_space_id(self):
        @dataclass(frozen=True)
        class Anonymous(Color):
            v: float

        with pytest.raises(TypeError):
            space_id_of(Anonymous)
        with pytest.raises(TypeError):
            space_id_of(Anonymous(1.0))

    def test_not_a_color(self):
        with pytest.raises(TypeError):
            space_id_of(3.0)

    def test_info_from_class(self):
        info = ColorSpaceInfo.from_class(LinearSrgb)

        assert info.space_id == "linear-srgb"
        assert info.name == "Linear sRGB"
        assert info.components == ("r", "g", "b")
        assert info.color_class is LinearSrgb

    def test_same_class_same_id(self):
        assert space_id_of(Srgb(0.1, 0.2, 0.3)) == space_id_of(Srgb(0.9, 0.8, 0.7))
