import numpy as np
from crsgeom import angle_utils as au


def test_wrap_deg_basic():
    assert au.wrap_deg(179.0) == 179.0
    assert abs(au.wrap_deg(181.0) - (-179.0)) < 1e-9
    assert au.wrap_deg(180.0) == -180.0


def test_lon_delta_crosses_antimeridian():
    assert abs(au.lon_delta_deg(179.0, -179.0) - 2.0) < 1e-9
    assert abs(au.lon_delta_deg(-179.0, 179.0) + 2.0) < 1e-9
    assert abs(au.lon_delta_deg(10.0, 20.0) - 10.0) < 1e-9


def test_unwrap_longitudes_continuous():
    out = au.unwrap_longitudes([179.0, -179.0, -179.0, 179.0])
    assert np.allclose(out, [179.0, 181.0, 181.0, 179.0])


def test_unwrap_longitudes_reference():
    # first value is moved next to the reference before unwrapping
    out = au.unwrap_longitudes([179.0, -179.0], reference=-180.0)
    assert np.allclose(out, [-181.0, -179.0])
    assert au.unwrap_longitudes([]).shape == (0,)


def test_wrap_deg_broadcasting():
    d = au.wrap_deg(np.array([0.0, 190.0, -190.0, 540.0]))
    assert d.shape == (4,)
    assert np.allclose(d, [0.0, -170.0, 170.0, -180.0])
