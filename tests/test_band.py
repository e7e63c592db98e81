import math
import numpy as np
import pytest

from rsphysics.exceptions import OutOfDomain, PreconditionViolation
from rsphysics.observer import band
from rsphysics.observer.band import (ASTER, MODIS, OCM2, BAND_TABLES, WavelengthRange,
                                     classify, aster, modis, ocm_2, get_range, diffraction_angle)


class TestBandClass:

    def test_table_sizes(self):
        assert len(ASTER.ranges) == 9
        assert len(MODIS.ranges) == 19
        assert len(OCM2.ranges) == 8
        for table in (ASTER, MODIS, OCM2):
            assert [r.index for r in table.ranges] == list(range(1, len(table.ranges) + 1))
            assert all(r.lower_bound < r.upper_bound for r in table.ranges)

    def test_range_immutable(self):
        r = get_range('aster', 2)
        assert r == WavelengthRange(2, 0.63e-6, 0.69e-6)
        assert r.bandwidth == pytest.approx(0.06e-6)
        with pytest.raises(AttributeError):
            r.index = 3

    def test_aster(self):
        assert aster(0.52e-6) == 1
        assert aster(0.6e-6) == 1
        assert aster(0.66e-6) == 2
        assert aster(0.8e-6) == 3
        assert aster(1.65e-6) == 4
        assert aster(2.165e-6) == 5
        assert aster(2.205e-6) == 6
        assert aster(2.26e-6) == 7
        assert aster(2.33e-6) == 8
        assert aster(2.4e-6) == 9

    def test_boundary_tie(self):
        # shared edges go to the lower index
        assert aster(2.185e-6) == 5
        assert aster(2.365e-6) == 8

    def test_modis(self):
        assert modis(6.45e-7) == 1
        assert modis(6.65e-7) == 1
        assert modis(6.71e-7) == 13
        assert modis(5.5e-7) == 4
        assert modis(4.1e-7) == 8
        assert modis(1.24e-6) == 5
        assert modis(9.1e-7) == 17
        assert modis(9.36e-7) == 18
        assert modis(9.5e-7) == 19
        assert modis(2.155e-6) == 7

    def test_ocm2(self):
        for r in OCM2.ranges:
            assert ocm_2((r.lower_bound + r.upper_bound) / 2) == r.index
        assert classify('ocm-2', 4.04e-7) == 1
        assert classify(BAND_TABLES['ocm_2'], 8.85e-7) == 8

    def test_first_match(self):
        for table in (ASTER, MODIS, OCM2):
            for wl in np.linspace(table.lower, table.upper, 2000):
                matches = [r.index for r in table.ranges if r.contains(wl)]
                if matches:
                    assert classify(table, wl) == matches[0]
                else:
                    with pytest.raises(OutOfDomain):
                        classify(table, wl)

    def test_out_of_domain(self):
        for name in ('aster', 'modis', 'ocm2'):
            with pytest.raises(OutOfDomain):
                classify(name, 5e-6)
        with pytest.raises(OutOfDomain):
            aster(0.5e-6)
        with pytest.raises(OutOfDomain):
            aster(0.61e-6)
        with pytest.raises(OutOfDomain):
            get_range('modis', 20)

    def test_invalid_wavelength(self):
        for wl in (-1e-6, 0.0, float('nan'), 'red'):
            with pytest.raises(PreconditionViolation):
                classify('aster', wl)
        with pytest.raises(PreconditionViolation):
            classify('landsat', 0.6e-6)

    def test_diffraction_angle(self):
        assert diffraction_angle(1, 5e-7, 1e-6) == pytest.approx(math.pi / 6)
        with pytest.raises(PreconditionViolation):
            diffraction_angle(1, 5e-7, 2.0)
        with pytest.raises(PreconditionViolation):
            diffraction_angle(3, 5e-7, 1e-6)

    def test_empty_band(self):
        with pytest.raises(ValueError, match='band 2 is empty'):
            band._table('broken', 4e-7, 9e-7, [(4e-7, 5e-7), (6e-7, 6e-7)])
