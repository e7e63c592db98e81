import math
import numpy as np
import pytest

from rsphysics.constants import SIGMA, Z0, C_SPEED, H_PLANCK
from rsphysics.exceptions import PreconditionViolation
from rsphysics.utils.physics.thermal import (planck, inverse_planck, avg_spectral_radiance,
                                             earth_surface_temp, thermal_inertia, thermal_wave_speed,
                                             thermal_diffusivity, upward_heat_flux_weight, upward_heat_flux)
from rsphysics.utils.physics.em import (angular_frequency, em_wavelength, em_frequency, wave_number,
                                        photon_energy, flux_density, doppler_ratio, irradiance,
                                        spectral_radiance_f, spectral_radiance_lambda, bb_radiation)

# Landsat 8 TIRS band 10
K1 = 774.8853
K2 = 1321.0789


class TestUtilsClass:

	def test_planck(self):
		assert planck(10e-6, 300) / 1e6 == pytest.approx(9.924, rel=1e-3)

	def test_planck_shape(self):
		rad = planck([10e-6, 11e-6], [300, 310, 320])
		assert rad.shape == (3, 2)
		assert np.all(np.diff(rad[:, 0]) > 0)

	def test_inverse_planck(self):
		assert inverse_planck(10e-6, planck(10e-6, 300)) == pytest.approx(300, rel=1e-9)
		with pytest.raises(PreconditionViolation):
			inverse_planck(10e-6, 0)

	def test_planck_invalid(self):
		with pytest.raises(PreconditionViolation):
			planck(10e-6, 0)
		with pytest.raises(PreconditionViolation):
			planck(-10e-6, 300)

	def test_sensor_constants(self):
		radiance = avg_spectral_radiance(K1, K2, 300)
		assert earth_surface_temp(K1, K2, radiance) == pytest.approx(300, rel=1e-9)

	def test_thermal(self):
		assert thermal_inertia(2, 3, 6) == pytest.approx(6)
		assert thermal_diffusivity(2, 3, 6) == pytest.approx(1)
		assert thermal_wave_speed(1, 1, 1, 2) == pytest.approx(2)
		assert upward_heat_flux_weight(300, 1) == pytest.approx(4 * SIGMA * 300 ** 3)
		assert upward_heat_flux(290, 300, 1) < 0
		with pytest.raises(PreconditionViolation):
			thermal_inertia(0, 3, 6)


class TestEMClass:

	def test_wave(self):
		assert angular_frequency(1) == pytest.approx(2 * math.pi)
		assert em_wavelength(C_SPEED) == pytest.approx(1)
		assert em_frequency(C_SPEED) == pytest.approx(1)
		assert wave_number(2 * math.pi) == pytest.approx(1)
		assert photon_energy(1e15) == pytest.approx(H_PLANCK * 1e15)
		with pytest.raises(PreconditionViolation):
			em_frequency(0)

	def test_flux_density(self):
		assert flux_density(-2) == pytest.approx(4 / (2 * Z0))

	def test_doppler(self):
		assert doppler_ratio(0, 1.0) == pytest.approx(1)
		assert doppler_ratio(0.5 * C_SPEED, 1e-9) == pytest.approx(math.sqrt(3), rel=1e-6)
		with pytest.raises(PreconditionViolation):
			doppler_ratio(C_SPEED, 1.0)
		with pytest.raises(PreconditionViolation):
			doppler_ratio(10, 0)

	def test_irradiance(self):
		assert irradiance(lambda t, p: 1.0, vectorized=True) == pytest.approx(math.pi, rel=1e-2)
		assert irradiance(lambda t, p: 1.0, 0.05) == pytest.approx(
			irradiance(lambda t, p: 1.0, 0.05, vectorized=True), rel=1e-9)

	def test_blackbody(self):
		assert bb_radiation(300) == pytest.approx(SIGMA * 300 ** 4)
		assert spectral_radiance_lambda(300, 1e-3) > 0
		assert spectral_radiance_f(300, 1e9) > 0
		with pytest.raises(PreconditionViolation):
			bb_radiation(0)
