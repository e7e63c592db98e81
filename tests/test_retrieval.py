import math
import numpy as np
import pytest

from rsphysics.exceptions import DegenerateInput, PreconditionViolation, PostconditionViolation
from rsphysics.retrieval.algorithm import surface_temp_tau, surface_temp, split_window_temperature, SplitWindow
from rsphysics.retrieval.coefficient import SplitWindowCoefficients


def forward(surface, tau, temp_a, theta):
    ''' brightness temperatures at nadir and at `theta`
    '''
    slant = tau / math.cos(theta)
    tb1 = surface * math.exp(-tau) + temp_a * (1 - math.exp(-tau))
    tb2 = surface * math.exp(-slant) + temp_a * (1 - math.exp(-slant))
    return tb1, tb2


class TestSurfaceTempClass:

    @pytest.mark.parametrize("surface, tau, temp_a, theta", [
        (300.0, 0.3, 260.0, 0.6),
        (240.0, 0.3, 270.0, 0.6),
        (290.0, 0.05, 220.0, 1.2),
    ])
    def test_round_trip(self, surface, tau, temp_a, theta):
        tb1, tb2 = forward(surface, tau, temp_a, theta)
        t, t_tau = surface_temp_tau(tb1, tb2, temp_a, theta)
        assert t == pytest.approx(surface, rel=1e-9)
        assert t_tau == pytest.approx(tau, rel=1e-9)
        assert surface_temp(tb1, tb2, temp_a, theta) == pytest.approx(surface, rel=1e-9)

    def test_same_side(self):
        tb1, tb2 = forward(280.0, 0.2, 300.0, 0.5)
        t, _ = surface_temp_tau(tb1, tb2, 300.0, 0.5)
        assert t == pytest.approx(280.0)
        with pytest.raises(PreconditionViolation):
            surface_temp_tau(300, 330, 320, 0.5)

    @pytest.mark.parametrize("theta", [0.01, 0.5])
    def test_negative_tau(self, theta):
        # slant view further from the atmosphere than nadir
        with pytest.raises(DegenerateInput):
            surface_temp_tau(300.0, 250.0, 320.0, theta)

    def test_transmittance_underflow(self):
        with pytest.raises(DegenerateInput):
            surface_temp_tau(300.0, 260.0000001, 260.0, 0.01)

    @pytest.mark.parametrize("theta", [0, 7, -0.5])
    def test_bad_angle(self, theta):
        with pytest.raises(PreconditionViolation):
            surface_temp_tau(300, 290, 260, theta)

    def test_bad_temperature(self):
        with pytest.raises(PreconditionViolation):
            surface_temp_tau(300, 290, 0, 0.5)
        with pytest.raises(PreconditionViolation):
            surface_temp_tau(float('nan'), 290, 260, 0.5)

    def test_degenerate(self):
        with pytest.raises(DegenerateInput):
            surface_temp_tau(300, 290, 300, 0.5)
        with pytest.raises(DegenerateInput):
            surface_temp_tau(300, 290, 260, 2 * math.pi - 1e-12)

    def test_negative_surface(self):
        with pytest.raises(PostconditionViolation):
            surface_temp_tau(100, 200, 300, 0.5)


class TestSplitWindowClass:

    def test_default(self):
        sw = SplitWindow()
        assert sw.coeffs == SplitWindowCoefficients(0.0, 0.5, 0.5)
        assert sw.compute(300, 310) == pytest.approx(305)

    def test_explicit(self):
        coeffs = SplitWindowCoefficients(1.0, 2.0, -1.0)
        assert split_window_temperature(300, 290, coeffs) == pytest.approx(311)
        ret = split_window_temperature(np.array([300, 280]), np.array([290, 285]), coeffs)
        np.testing.assert_allclose(ret, [311, 276])

    def test_coeffs_type(self):
        with pytest.raises(PreconditionViolation):
            split_window_temperature(300, 290, (1.0, 2.0, -1.0))

    def test_immutable(self):
        coeffs = SplitWindowCoefficients(1.0, 2.0, -1.0)
        with pytest.raises(AttributeError):
            coeffs.a0 = 3.0
