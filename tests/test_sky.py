import math
import numpy as np
import pytest

from rsphysics.exceptions import DegenerateInput, PreconditionViolation
from rsphysics.atmosphere.sky import hosek_wilkie_anisotropic, hosek_wilkie_coefficients, hosek_wilkie_luminance


@pytest.fixture
def params():
    params = np.ones((9, 3))
    params[1] = (-0.5, 1.0, 1.0)  # B
    params[4] = (-2.0, 1.0, 1.0)  # E
    params[7] = (0.5, 1.0, 1.0)   # H
    return params


class TestSkyClass:

    @pytest.mark.parametrize("alpha", [0.0, 0.7, math.pi])
    def test_anisotropic(self, alpha):
        assert hosek_wilkie_anisotropic(0, alpha) == pytest.approx(1 + math.cos(alpha) ** 2)

    def test_coefficients(self, params):
        coeffs = hosek_wilkie_coefficients(params)
        assert coeffs.shape == (9,)
        assert coeffs[7] == pytest.approx(0.5)
        with pytest.raises(PreconditionViolation):
            hosek_wilkie_coefficients(np.ones((3, 9)))

    def test_luminance(self, params):
        zenith, azimuth = 0.4, 0.9
        chi = (1 + math.cos(azimuth) ** 2) / (1 + 0.25 - math.cos(azimuth)) ** 1.5
        expected = ((1 + math.exp(-0.5 / (math.cos(zenith) + 0.01)))
                    * (1 + math.exp(-2.0 * azimuth) + math.cos(azimuth) ** 2 + chi + math.sqrt(math.cos(zenith))))
        assert hosek_wilkie_luminance(zenith, azimuth, params) == pytest.approx(expected)

    def test_luminance_invalid(self, params):
        with pytest.raises(PreconditionViolation):
            hosek_wilkie_luminance(math.pi / 2, 0.0, params)
        with pytest.raises(PreconditionViolation):
            hosek_wilkie_luminance(0.2, 0.0, np.ones((9, 2)))

    def test_singular_anisotropic(self):
        with pytest.raises(DegenerateInput):
            hosek_wilkie_anisotropic(1.0, 0.0)

    def test_luminance_overflow(self, params):
        params[1] = (1000.0, 1.0, 1.0)
        with pytest.raises(DegenerateInput):
            hosek_wilkie_luminance(1.5, 0.0, params)
