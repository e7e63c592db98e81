import numpy as np
import pytest

from rsphysics.exceptions import PreconditionViolation
from rsphysics.retrieval.algorithm import SplitWindow
from rsphysics.retrieval.coefficient import SplitWindowCoefficients, sw_coefficient


@pytest.fixture
def samples():
    rng = np.random.default_rng(0)
    tb1 = rng.uniform(260, 320, 200)
    tb2 = tb1 - rng.uniform(0.5, 4, 200)
    t0 = 1.5 + 2.0 * tb1 - 1.1 * tb2
    return t0, tb1, tb2


class TestCoefficientClass:

    def test_sw_coefficient(self, samples):
        model = sw_coefficient(*samples, label='synthetic')
        a0, a1, a2 = model['coeffs']
        assert isinstance(model['coeffs'], SplitWindowCoefficients)
        assert a0 == pytest.approx(1.5, abs=1e-6)
        assert a1 == pytest.approx(2.0, abs=1e-8)
        assert a2 == pytest.approx(-1.1, abs=1e-8)
        assert model['R2'] == pytest.approx(1.0)
        assert model['RMSE'] < 1e-6
        assert model['count'] == 200
        assert model['label'] == 'synthetic'

    def test_fit(self, samples):
        t0, tb1, tb2 = samples
        sw = SplitWindow.fit(t0, tb1, tb2)
        np.testing.assert_allclose(sw.compute(tb1, tb2), t0, rtol=1e-9)
        assert sw.R2 == pytest.approx(1.0)

    def test_bad_samples(self):
        with pytest.raises(PreconditionViolation):
            sw_coefficient([300, 301, 302], [290, 291], [289, 290, 291])
        with pytest.raises(PreconditionViolation):
            sw_coefficient([300, 301], [290, 291], [289, 290])
        with pytest.raises(PreconditionViolation):
            sw_coefficient([300, 301, np.nan], [290, 291, 292], [289, 290, 291])

    def test_from_config(self):
        assert SplitWindowCoefficients.from_config() == (0.0, 0.5, 0.5)
