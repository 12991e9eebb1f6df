from mathutils import Vector

from defs.clipping import RayFarX
from lib.CompGeom.line import intersectEdges

# Node of the circular doubly linked list of a Polygon. Beside its
# coordinates, it holds the data required by the Greiner-Hormann
# clipping algorithm, see
#
# Günther Greiner, Kai Hormann, "Efficient Clipping of Arbitrary Polygons",
# ACM Transactions on Graphics 1998;17(2):71-83.
class Vertex():
    def __init__(self, x, y):
        self.x = float(x)       # coordinates of the vertex
        self.y = float(y)
        self.next = None        # next vertex of the polygon
        self.prev = None        # previous vertex of the polygon
        self.neighbour = None   # corresponding intersection vertex in the other polygon
        self.entry = True       # True if the traversal continues forward from here
        self.alpha = 0.0        # relative position of an intersection on its edge
        self.intersect = False  # True if the vertex is an intersection
        self.checked = False    # True if consumed by the boundary tracing

    def __getitem__(self, key):
        return (self.x, self.y)[key]

    def __repr__(self):
        return 'Vertex(%s,%s)' % (self.x, self.y)

    def copy(self):
        # New vertex at the same position. The clipping data is not copied.
        return Vertex(self.x, self.y)

    def point(self):
        return (self.x, self.y)

    def vector(self):
        return Vector((self.x, self.y)).freeze()

    def isInside(self, poly):
        """
        Test if the vertex lies inside the polygon <poly> (odd-even rule).

        A ray is emitted from the vertex to the right, up to x = RayFarX,
        and the crossings with the original edges of the polygon are
        counted. An odd number means the vertex lies inside.
        """
        infinity = (RayFarX, self.y)
        windingNumber = 0
        for q in poly.iter():
            if not q.intersect and intersectEdges(self, infinity, q, poly.next(q.next)):
                windingNumber += 1
        return windingNumber % 2 != 0

    def setChecked(self):
        # Retires the vertex and its neighbour together.
        self.checked = True
        if self.neighbour is not None:
            self.neighbour.checked = True
