"""File containing tests of pyrefract internal_functions module"""

import pytest

from config import SEED

from pyrefract.internal_functions import (normalize, is_valid, get_from_enum,
                                          lazy_property, LazyMutableClass)
from pyrefract.ray_tracing import DirChange

import numpy as np



class Test_normalize:
    """Tests for normalize function"""
    def test_normalization(self):
        """Test that vectors are successfully normalized"""
        np.random.seed(SEED)
        for _ in range(1000):
            vector = np.random.normal(size=3)
            if np.array_equal(vector, [0, 0, 0]):
                continue
            unit = normalize(vector)
            quotient = vector/unit
            assert np.linalg.norm(unit) == pytest.approx(1)
            assert quotient[0] == pytest.approx(quotient[1])
            assert quotient[0] == pytest.approx(quotient[2])

    def test_zero(self):
        """Test that the zero vector doesn't cause problems"""
        unit = normalize([0, 0, 0])
        assert np.array_equal(unit, [0, 0, 0])

    def test_integer_input(self):
        """Test that integer vectors are normalized as floats"""
        unit = normalize([0, 3, 4])
        assert unit.dtype == float
        assert np.array_equal(unit, [0, 0.6, 0.8])



class Test_is_valid:
    """Tests for is_valid function"""
    def test_none(self):
        """Test that None is not valid"""
        assert not is_valid(None)

    def test_finite(self):
        """Test that finite scalars and vectors are valid"""
        assert is_valid(1.5)
        assert is_valid(0)
        assert is_valid([1, 2, 3])

    def test_non_finite(self):
        """Test that non-finite scalars and vectors are not valid"""
        assert not is_valid(np.nan)
        assert not is_valid(np.inf)
        assert not is_valid([1, np.nan, 3])
        assert not is_valid(np.array([-np.inf, 0, 0]))



class Test_get_from_enum:
    """Tests for get_from_enum function"""
    def test_get_value(self):
        """Test that getting value directly from value works"""
        assert get_from_enum(DirChange.converged, DirChange) == DirChange.converged
        assert get_from_enum(DirChange.stopped, DirChange) == DirChange.stopped

    def test_get_int(self):
        """Test that getting value from integer works"""
        assert get_from_enum(1, DirChange) == DirChange.unaltered
        assert get_from_enum(4, DirChange) == DirChange.reflected
        assert get_from_enum(6, DirChange) == DirChange.started

    def test_get_str(self):
        """Test that getting value from name works"""
        assert get_from_enum("unset", DirChange) == DirChange.unset
        assert get_from_enum("diverged", DirChange) == DirChange.diverged

    def test_get_bad_values(self):
        """Test that unknown representations raise errors"""
        with pytest.raises(KeyError):
            get_from_enum("refracted", DirChange)
        with pytest.raises(ValueError):
            get_from_enum(42, DirChange)



class Layer:
    def __init__(self, bottom, top):
        self.bottom = bottom
        self.top = top

    @lazy_property
    def thickness(self):
        return self.top - self.bottom


class Test_lazy_property:
    """Tests for lazy_property decorator"""
    def test_is_property(self):
        """Test that a lazy property works as a property"""
        layer = Layer(4.5, 5.5)
        assert layer.thickness == 1
        with pytest.raises(AttributeError):
            layer.thickness = 2

    def test_is_lazy(self):
        """Test that the lazy property is lazy and therefore not re-evaluated"""
        layer = Layer(4.5, 5.5)
        assert "_lazy_thickness" not in layer.__dict__
        assert layer.thickness is layer.thickness
        assert layer.thickness is layer._lazy_thickness

    def test_lazy_badness(self):
        """Test that lazy property is too strong and will not be re-evaluated
        if the class properties change"""
        layer = Layer(4.5, 5.5)
        assert layer.thickness == 1
        layer.top = 6.5
        assert layer.thickness == 1



class MutableLayer(LazyMutableClass):
    def __init__(self, bottom, top):
        self.bottom = bottom
        self.top = top
        super().__init__()

    @lazy_property
    def thickness(self):
        return self.top - self.bottom

class LabeledLayer(LazyMutableClass):
    def __init__(self, bottom, top, label):
        self.bottom = bottom
        self.top = top
        self.label = label
        super().__init__(static_attributes=['bottom', 'top'])

    @lazy_property
    def thickness(self):
        return self.top - self.bottom

class TestLazyMutableClass:
    """Tests for LazyMutableClass class"""
    def test_creation(self):
        """Test initialization of LazyMutableClass"""
        lazy1 = LazyMutableClass()
        assert lazy1._static_attrs == []
        lazy2 = MutableLayer(0, 1)
        assert lazy2._static_attrs == ['bottom', 'top']
        lazy3 = LabeledLayer(0, 1, "glass")
        assert lazy3._static_attrs == ['bottom', 'top']

    def test_lazy_property(self):
        """Test that a lazy property is truly lazy"""
        layer = LabeledLayer(0, 1, "glass")
        assert layer.thickness is layer._lazy_thickness
        assert layer.thickness is layer.thickness

    def test_lazy_reset(self):
        """Test that a lazy property is reset if one of the specified
        static_attrs changes"""
        layer = LabeledLayer(4.5, 5.5, "glass")
        assert layer.thickness == 1
        layer.label = "air"
        assert "_lazy_thickness" in layer.__dict__
        layer.top = 6.5
        assert "_lazy_thickness" not in layer.__dict__
        assert layer.thickness == 2
