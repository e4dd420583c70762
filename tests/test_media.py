"""File containing tests of pyrefract media module"""

import pytest

from config import SEED

from pyrefract.atmosphere import Planet, earth, Atmosphere
from pyrefract.geometry import Cylinder
from pyrefract.media import (ActiveVolume, all_space, ActiveBox,
                             SphericalShell, IndexVolume, UniformMedium, Slab,
                             Sphere, ConvexLens, HotRoad,
                             ExponentialAtmosphere, StandardAtmosphere)

import numpy as np



class TestActiveVolumes:
    """Tests for ActiveVolume classes"""
    def test_all_space(self):
        """Test that all space contains every point"""
        np.random.seed(SEED)
        for _ in range(10):
            assert all_space.contains(np.random.normal(size=3)*1e6)
        assert isinstance(all_space, ActiveVolume)

    def test_box_half_open(self):
        """Test that boxes include their min corner but not max corner"""
        box = ActiveBox([0, 0, 0], [1, 2, 3])
        assert box.contains([0, 0, 0])
        assert box.contains([0.5, 1.9, 2.9])
        assert not box.contains([1, 1, 1])
        assert not box.contains([0.5, 2, 0.5])
        assert not box.contains([-1e-9, 0.5, 0.5])

    def test_box_no_volume(self):
        """Test that boxes without volume raise an error"""
        with pytest.raises(ValueError):
            ActiveBox([0, 0, 0], [1, 0, 1])
        with pytest.raises(ValueError):
            ActiveBox([0, 0, 0], [1, -1, 1])

    def test_spherical_shell(self):
        """Test containment in a spherical shell"""
        shell = SphericalShell([1, 0, 0], 1, 2)
        assert shell.contains([2, 0, 0])
        assert shell.contains([1, 1.5, 0])
        assert not shell.contains([3, 0, 0])
        assert not shell.contains([1, 0, 0.5])



class TestIndexVolume:
    """Tests for IndexVolume base class"""
    def test_index_not_implemented(self):
        """Test that the base class has no index of refraction"""
        volume = IndexVolume()
        with pytest.raises(NotImplementedError):
            volume.index([0, 0, 0])

    def test_qualified_index(self):
        """Test that the index is None outside of the active volume"""
        medium = UniformMedium(1.5, active_volume=ActiveBox([0, 0, 0],
                                                            [1, 1, 1]))
        assert medium.index_at([0.5, 0.5, 0.5]) == 1.5
        assert medium.index_at([1.5, 0.5, 0.5]) is None
        assert medium.index([1.5, 0.5, 0.5]) == 1.5

    def test_non_finite_index(self):
        """Test that non-finite index values are disqualified"""
        medium = UniformMedium(np.nan)
        assert medium.index_at([0, 0, 0]) is None

    def test_numerical_gradient(self):
        """Test the default central difference gradient"""
        class LinearMedium(IndexVolume):
            def index(self, point):
                return 1 + np.dot([0.1, -0.2, 0.3], point)
        medium = LinearMedium()
        grad = medium.gradient([1, 2, 3], 1e-3)
        assert np.allclose(grad, [0.1, -0.2, 0.3])



class TestUniformMedium:
    """Tests for UniformMedium class"""
    def test_index(self):
        """Test the constant index of refraction"""
        medium = UniformMedium(1.000273)
        assert medium.nu == 1.000273
        assert medium.index_at([1e3, -1e3, 0]) == 1.000273

    def test_gradient(self):
        """Test that the gradient is zero"""
        medium = UniformMedium(1.000273)
        assert np.array_equal(medium.gradient([1, 2, 3], 0.1), [0, 0, 0])



@pytest.fixture
def slab():
    """Fixture for forming basic Slab object"""
    return Slab(normal=[2, 0, 0], beg_dot=4, end_dot=6,
                index_before=1.0, index_inside=1.5, index_after=1.25)

class TestSlab:
    """Tests for Slab class"""
    def test_creation(self, slab):
        """Test initialization of slab"""
        assert np.array_equal(slab.normal, [1, 0, 0])
        assert slab.beg_dot == 4
        assert slab.end_dot == 6
        assert slab.active_volume is all_space

    def test_zero_normal(self):
        """Test that a slab without a normal raises an error"""
        with pytest.raises(ValueError):
            Slab([0, 0, 0], 0, 1)

    def test_index_regions(self, slab):
        """Test the index of refraction in each region"""
        assert slab.index_at([3.9, 5, 5]) == 1.0
        assert slab.index_at([4, -5, 5]) == 1.5
        assert slab.index_at([5.99, 5, 5]) == 1.5
        assert slab.index_at([6, 5, 5]) == 1.25
        assert slab.index_at([100, 5, 5]) == 1.25

    def test_gradient(self, slab):
        """Test the gradient within and at the faces of the slab"""
        assert np.array_equal(slab.gradient([5, 5, 5], 0.1), [0, 0, 0])
        grad = slab.gradient([4, 5, 5], 0.1)
        assert grad[0] == pytest.approx(0.5/0.1)
        assert grad[1] == 0 and grad[2] == 0
        grad = slab.gradient([6, 5, 5], 0.1)
        assert grad[0] == pytest.approx(-0.25/0.1)



class TestSphere:
    """Tests for Sphere class"""
    def test_index(self):
        """Test the radial index of refraction"""
        sphere = Sphere([1, 1, 1], 2, index_center=1.5, index_edge=1.0)
        assert sphere.index_at([1, 1, 1]) == pytest.approx(1.5)
        assert sphere.index_at([2, 1, 1]) == pytest.approx(1.25)
        assert sphere.index_at([1, 1, 3]) == pytest.approx(1.0)
        assert sphere.index_at([10, 1, 1]) == pytest.approx(1.0)

    def test_gradient(self):
        """Test the analytic gradient points along the index change"""
        sphere = Sphere([0, 0, 0], 2, index_center=1.5, index_edge=1.0)
        grad = sphere.gradient([0, 1, 0], 0.1)
        assert np.allclose(grad, [0, -0.25, 0])
        assert np.array_equal(sphere.gradient([0, 3, 0], 0.1), [0, 0, 0])

    def test_gradient_matches_numerical(self):
        """Test the analytic gradient against central differences"""
        sphere = Sphere([0, 0, 0], 2, index_center=1.5, index_edge=1.0)
        point = np.array([0.3, -0.4, 0.5])
        numerical = IndexVolume.gradient(sphere, point, 1e-4)
        assert np.allclose(sphere.gradient(point, 1e-4), numerical)



class TestConvexLens:
    """Tests for ConvexLens class"""
    def test_index(self):
        """Test the index of refraction inside and outside of the lens"""
        lens = ConvexLens([-10, 0, 0], 11, [20, 0, 1], 21)
        assert lens.contains([0, 0, 0])
        assert lens.index_at([0, 0, 0]) == 1.5
        assert not lens.contains([2, 0, 0])
        assert lens.index_at([2, 0, 0]) == 1.0
        assert not lens.contains([-2, 0, 0])
        assert lens.index_at([0, 0, 8]) == 1.0



@pytest.fixture
def hot_road():
    """Fixture for forming basic HotRoad object"""
    return HotRoad(Cylinder([0, 0, 0], [1, 0, 0], length=1000, radius=10))

class TestHotRoad:
    """Tests for HotRoad class"""
    def test_creation(self, hot_road):
        """Test default index values of hot road"""
        assert hot_road.index_edge == earth.index_ground
        assert hot_road.index_axis == pytest.approx(0.5*earth.index_ground)

    def test_not_cylinder(self):
        """Test that a hot road requires a cylinder"""
        with pytest.raises(ValueError):
            HotRoad([0, 0, 0])

    def test_index(self, hot_road):
        """Test the index of refraction inside and outside of the tube"""
        edge = earth.index_ground
        assert hot_road.index_at([500, 0, 0]) == pytest.approx(0.5*edge)
        assert hot_road.index_at([500, 0, 5]) == pytest.approx(0.75*edge)
        assert hot_road.index_at([500, 0, 10]) == pytest.approx(edge)
        assert hot_road.index_at([-1, 0, 0]) == pytest.approx(edge)
        assert hot_road.index_at([1000, 0, 0]) == pytest.approx(edge)



@pytest.fixture
def exp_atmosphere():
    """Fixture for forming basic ExponentialAtmosphere object"""
    return ExponentialAtmosphere()

class TestExponentialAtmosphere:
    """Tests for ExponentialAtmosphere class"""
    def test_creation(self, exp_atmosphere):
        """Test initialization of the atmosphere"""
        assert exp_atmosphere.planet is earth
        assert exp_atmosphere.beta > 0
        assert exp_atmosphere.alpha > 0

    def test_boundary_indices(self, exp_atmosphere):
        """Test the index of refraction at the ground and space"""
        ground = [0, 0, earth.radius_ground]
        space = [earth.radius_space, 0, 0]
        assert (exp_atmosphere.index(ground) ==
                pytest.approx(earth.index_ground, rel=1e-12))
        assert (exp_atmosphere.index(space) ==
                pytest.approx(earth.index_space, rel=1e-12))

    def test_active_volume(self, exp_atmosphere):
        """Test that the index is only defined within the atmosphere"""
        assert exp_atmosphere.index_at([0, 0, earth.radius_ground]) is not None
        assert exp_atmosphere.index_at([0, 0, earth.radius_ground-1]) is None
        assert exp_atmosphere.index_at([0, earth.radius_space, 0]) is None

    def test_gradient(self, exp_atmosphere):
        """Test that the gradient points toward the center of the planet"""
        point = np.array([0, 0, earth.radius_ground + 1000])
        grad = exp_atmosphere.gradient(point, 1)
        expected = (-exp_atmosphere.beta * exp_atmosphere.index(point))
        assert grad[2] == pytest.approx(expected, rel=1e-4)
        assert abs(grad[0]) < 1e-6*abs(expected)
        assert abs(grad[1]) < 1e-6*abs(expected)
        assert np.array_equal(exp_atmosphere.gradient([0, 0, 0], 1),
                              [0, 0, 0])

    def test_planet_change(self, exp_atmosphere):
        """Test that parameters are recalculated for a new planet"""
        beta = exp_atmosphere.beta
        exp_atmosphere.planet = Planet(1.5, 1.0, 10, 20)
        assert exp_atmosphere.beta != beta
        assert exp_atmosphere.beta == pytest.approx(np.log(1.5)/10)

    def test_sample_indices(self, exp_atmosphere):
        """Test sampling of indices through the atmosphere"""
        radii, indices = exp_atmosphere.sample_indices(11)
        assert len(radii) == 11
        assert radii[0] == earth.radius_ground
        assert radii[-1] == earth.radius_space
        assert indices[0] == pytest.approx(earth.index_ground, rel=1e-12)
        assert np.all(np.diff(indices) < 0)



class TestStandardAtmosphere:
    """Tests for StandardAtmosphere class"""
    def test_index(self):
        """Test the index of refraction at tabulated heights"""
        medium = StandardAtmosphere()
        point = [0, earth.radius_ground, 0]
        assert medium.height(point) == pytest.approx(0)
        assert medium.index_at(point) == pytest.approx(1+277.19e-6, rel=1e-12)

    def test_outside_table(self):
        """Test that the index is None outside of the tabulated heights"""
        medium = StandardAtmosphere()
        assert medium.index_at([0, 0, earth.radius_ground+30e3]) is None
        assert medium.index_at([0, 0, earth.radius_ground-2e3]) is None

    def test_custom_atmosphere(self):
        """Test a standard atmosphere with custom tabulated values"""
        atmosphere = Atmosphere([(0, 300, 1000, 1.2), (100, 300, 1000, 1.0)])
        medium = StandardAtmosphere(atmosphere, planet=Planet(1.2, 1, 10, 110))
        assert medium.index_at([0, 0, 60]) == pytest.approx(1.1)
        grad = medium.gradient([0, 0, 60], 1)
        assert np.allclose(grad, [0, 0, -0.002])
