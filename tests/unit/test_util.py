import pytest
import numpy as np
from scipy.special import j1

import aotelescope


class TestUtils:

    @pytest.mark.parametrize("N, centering, expected", [
        (4, 'pixel', [-2., -1., 0., 1.]),
        (4, 'interpixel', [-1.5, -0.5, 0.5, 1.5]),
        (5, 'pixel', [-2., -1., 0., 1., 2.]),
        (5, 'interpixel', [-2., -1., 0., 1., 2.]),
    ])
    def test_create_axis(cls, N, centering, expected):
        axis = aotelescope.util.create_axis(N, 1., centering=centering)
        assert np.allclose(axis, expected)

    def test_create_axis_step(cls):
        axis = aotelescope.util.create_axis(3, 0.5)
        assert np.allclose(axis, [-0.5, 0., 0.5])

    def test_radial_grid(cls):
        axis = np.array([-1., 0., 1.])
        RHO = aotelescope.util.radial_grid(axis)
        assert RHO.shape == (3, 3)
        assert RHO[1, 1] == 0
        assert RHO[0, 0] == pytest.approx(np.sqrt(2))
        assert RHO[1, 2] == pytest.approx(1)

    def test_sinc_at_zero(cls):
        assert aotelescope.util.sinc(0.) == pytest.approx(1.)
        out = aotelescope.util.sinc(np.array([0., np.pi, 2*np.pi]))
        assert np.allclose(out, [1., 0., 0.], atol=1e-15)

    def test_sinc_values(cls):
        x = np.array([-3.3, 0.1, 1.7, 12.])
        assert np.allclose(aotelescope.util.sinc(x), np.sin(x)/x)

    def test_jinc_at_zero(cls):
        assert aotelescope.util.jinc(0.) == 1.
        out = aotelescope.util.jinc(np.array([0., 0.]))
        assert np.array_equal(out, [1., 1.])

    def test_jinc_values(cls):
        x = np.array([-2.5, 1e-3, 3.8317, 10.])
        assert np.allclose(aotelescope.util.jinc(x), 2*j1(x)/x)
        assert isinstance(aotelescope.util.jinc(1.), float)
