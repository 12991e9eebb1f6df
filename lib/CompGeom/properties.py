import numpy as np

def signedArea(points):
    # Signed area of the polygon given by the list of (x,y) points <points>
    # (shoelace formula). Positive for counter-clockwise order.
    if len(points) < 3:
        return 0.
    xy = np.array(points, dtype=np.float64)
    x, y = xy[:,0], xy[:,1]
    return 0.5 * float(np.sum(x * np.roll(y,-1) - np.roll(x,-1) * y))

def isClockwise(points):
    return signedArea(points) < 0.
