"""Unit test suite for the rasterized pupil masks in aotelescope.mask."""
import numpy as np
from math import isclose

from aotelescope.mask import (gen_annular_pupil, gen_piston, read_pupil_fits,
                              write_pupil_fits)


def test_piston_area():
    nPix = 100
    piston = gen_piston(nPix)
    assert piston.shape == (nPix, nPix)
    assert set(np.unique(piston)) <= {0., 1.}
    areaExpected = np.pi/4*nPix**2
    assert isclose(np.sum(piston), areaExpected, rel_tol=1e-2)


def test_piston_symmetry():
    for nPixDisk, nPixArray in [(10, 10), (11, 20), (30, 100), (31, 101)]:
        piston = gen_piston(nPixDisk, nPixArray)
        assert piston.shape == (nPixArray, nPixArray)
        assert np.array_equal(piston, piston[::-1, :])
        assert np.array_equal(piston, piston[:, ::-1])
        assert np.array_equal(piston, piston.T)


def test_piston_padded_has_empty_border():
    piston = gen_piston(20, 40)
    assert np.sum(piston[:10, :]) == 0
    assert np.sum(piston[-10:, :]) == 0
    assert np.sum(piston[:, :10]) == 0
    assert np.sum(piston[:, -10:]) == 0


def test_piston_zero_diameter():
    assert np.sum(gen_piston(0, 8)) == 0


def test_piston_translation():
    piston = gen_piston(20, 60)
    pistonOffset = gen_piston(20, 60, xOffset=5, yOffset=-7)
    pistonRecentered = np.roll(pistonOffset, (7, -5), axis=(0, 1))
    assert np.array_equal(piston, pistonRecentered)


def test_annular_pupil_area():
    resolution = 100
    ratio = 0.3
    pupil = gen_annular_pupil(resolution, ratio)
    fraction = np.count_nonzero(pupil)/pupil.size
    assert isclose(fraction, np.pi/4*(1 - ratio**2), rel_tol=0.02)


def test_annular_pupil_hole():
    resolution = 64
    ratio = 0.25
    pupil = gen_annular_pupil(resolution, ratio)
    hole = gen_piston(16, resolution)
    # the hole is exactly the removed disk
    assert np.array_equal(pupil, gen_piston(resolution) - hole)
    assert np.all(pupil[hole == 1] == 0)
    assert np.array_equal(pupil, pupil[::-1, ::-1])


def test_annular_pupil_unobstructed():
    assert np.array_equal(gen_annular_pupil(50, 0.), gen_piston(50))


def test_fits_roundtrip(tmp_path):
    pupil = gen_annular_pupil(32, 0.2)
    fn = tmp_path / 'pupil.fits'
    write_pupil_fits(fn, pupil)
    pupilRead = read_pupil_fits(fn)
    assert pupilRead.dtype == np.float64
    assert np.array_equal(pupil, pupilRead)
