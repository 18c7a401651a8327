import numpy
import pytest

pandas = pytest.importorskip("pandas")

import kdbush  # noqa: E402
import kdbush.pandas  # noqa: E402


@pytest.fixture
def frame():
    rng = numpy.random.RandomState(3)
    res = pandas.DataFrame({
        'lon': rng.uniform(0, 100, size=300),
        'lat': rng.uniform(0, 100, size=300),
        'attr': rng.choice(list('ABC'), size=300),
    })
    res.index = res.index + 1000
    res.index.name = 'station_id'
    return res


def test_range_rows(frame):
    findex = kdbush.pandas.FrameIndex(frame, x='lon', y='lat', node_size=8)
    res = findex.range(20, 30, 50, 70)
    mask = frame.lon.between(20, 50) & frame.lat.between(30, 70)
    pandas.testing.assert_frame_equal(res, frame[mask])


def test_within_rows(frame):
    findex = kdbush.pandas.index_frame(frame, x='lon', y='lat')
    res = findex.within(50, 50, 15, include_distance=True)
    dist = numpy.hypot(frame.lon - 50, frame.lat - 50)
    assert list(res.index) == list(frame.index[dist <= 15])
    numpy.testing.assert_allclose(res['distance_'], dist[dist <= 15])
    assert len(findex) == len(frame)


def test_missing_columns(frame):
    with pytest.raises(ValueError):
        kdbush.pandas.FrameIndex(frame)


def test_not_a_frame():
    with pytest.raises(ValueError):
        kdbush.pandas.index_frame([(0., 0.)])


def test_invalid_node_size(frame):
    with pytest.raises(kdbush.InvalidConfiguration):
        kdbush.pandas.FrameIndex(frame, x='lon', y='lat', node_size=0)
