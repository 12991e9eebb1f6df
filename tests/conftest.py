import pytest

def canonicalContour(points, ndigits=9):
    # Contour as tuple, independent of start vertex and orientation.
    pts = [(round(p[0],ndigits)+0., round(p[1],ndigits)+0.) for p in points]
    candidates = []
    for seq in (pts, pts[::-1]):
        i = seq.index(min(seq))
        candidates.append(tuple(seq[i:] + seq[:i]))
    return min(candidates)

def canonicalSet(polygons):
    return sorted(canonicalContour(p.points() if hasattr(p, 'points') else p) for p in polygons)

@pytest.fixture
def canonical():
    return canonicalSet

@pytest.fixture
def square():
    return [(0.,0.), (10.,0.), (10.,10.), (0.,10.)]

@pytest.fixture
def shiftedSquare():
    return [(5.,5.), (15.,5.), (15.,15.), (5.,15.)]

@pytest.fixture
def horizontalBar():
    return [(0.,4.), (10.,4.), (10.,6.), (0.,6.)]

@pytest.fixture
def verticalBar():
    return [(4.,0.), (6.,0.), (6.,10.), (4.,10.)]
