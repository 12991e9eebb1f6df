#-----------------------------------------------------------------------------
# Boolean operations (union, intersection, difference) of two simple polygons
# by the algorithm described in:
#
# Günther Greiner, Kai Hormann, "Efficient Clipping of Arbitrary Polygons",
# ACM Transactions on Graphics 1998;17(2):71-83.
# http://www.inf.usi.ch/hormann/papers/Greiner.1998.ECO.pdf
#
# The polygons must be simple (no self-intersections, no holes). For other
# input the result is undefined, this is not checked.
#-----------------------------------------------------------------------------

import logging
logger = logging.getLogger("GreinerHormann.Polygon")

import numpy as np
from mathutils import Vector

from defs.clipping import OperationSeeds
from lib.CompGeom.line import intersectEdges
from lib.CompGeom.properties import signedArea, isClockwise
from .Vertex import Vertex

# Manages a circular doubly linked list of Vertex objects that represents a
# polygon. The list itself is the complete state of the polygon, <first> is
# its entry point.
class Polygon():
    def __init__(self):
        self.first = None

    @staticmethod
    def fromPointlist(points):
        # points: List of mathutils.Vector, tuples, lists or numpy rows of two
        # floats, or of objects with attributes x and y.
        poly = Polygon()
        for p in points:
            if isinstance(p, (Vector, tuple, list, np.ndarray)):
                poly.add(Vertex(p[0], p[1]))
            elif hasattr(p, 'x') and hasattr(p, 'y'):
                poly.add(Vertex(p.x, p.y))
            else:
                raise TypeError('Polygon: Unexpected input type.')
        return poly

    def __len__(self):
        return len(self.iter())

    def __iter__(self):
        return iter(self.iter())

    def add(self, vertex):
        # Add a vertex at the 'end' of the list (just before <first>).
        if self.first is None:
            self.first = vertex
            vertex.next = vertex
            vertex.prev = vertex
        else:
            nxt = self.first
            prv = nxt.prev
            nxt.prev = vertex
            vertex.next = nxt
            vertex.prev = prv
            prv.next = vertex

    def insert(self, vertex, start, end):
        """
        Inserts the vertex (an intersection) between the vertices <start>
        and <end>, which must be adjacent original vertices of the polygon.
        When there are already intersections between them, the vertex is
        sorted in by its alpha value.
        """
        curr = start
        while curr is not end and curr.alpha < vertex.alpha:
            curr = curr.next

        vertex.next = curr
        prv = curr.prev
        vertex.prev = prv
        prv.next = vertex
        curr.prev = vertex

    def remove(self, vertex):
        # Unlinks the vertex from the list.
        if vertex.next is vertex:
            self.first = None
        else:
            vertex.prev.next = vertex.next
            vertex.next.prev = vertex.prev
            if vertex is self.first:
                self.first = vertex.next
        vertex.next = vertex.prev = None

    def next(self, v):
        # Return the first original (non intersection) vertex, starting at <v>.
        c = v
        while c.intersect:
            c = c.next
        return c

    def iter(self):
        # Returns a list of the vertices in one circuit, starting at <first>.
        # The list is a snapshot, the linked list may be changed while it
        # is used.
        vertices = []
        if self.first is None:
            return vertices
        v = self.first
        while True:
            vertices.append(v)
            v = v.next
            if v is self.first:
                return vertices

    def firstIntersect(self):
        # Return the first unchecked intersection vertex, or None.
        for v in self.iter():
            if v.intersect and not v.checked:
                return v
        return None

    def unprocessed(self):
        # Check if unchecked intersections remain in the polygon.
        return self.firstIntersect() is not None

    def points(self):
        # Return the coordinates as list of tuples (x,y).
        return [v.point() for v in self.iter()]

    def vectors(self):
        # Return the coordinates as list of frozen mathutils.Vector.
        return [v.vector() for v in self.iter()]

    def copy(self):
        # New polygon with copies of the vertices (coordinates only).
        poly = Polygon()
        for v in self.iter():
            poly.add(v.copy())
        return poly

    def area(self):
        return abs(signedArea(self.points()))

    def isClockwise(self):
        return isClockwise(self.points())

    def union(self, clip):
        return self.clip(clip, *OperationSeeds['union'])

    def intersection(self, clip):
        return self.clip(clip, *OperationSeeds['intersection'])

    def difference(self, clip):
        return self.clip(clip, *OperationSeeds['difference'])

    def reversedDifference(self, clip):
        # clip - self
        return self.clip(clip, *OperationSeeds['reversed-diff'])

    def clip(self, clip, sEntry, cEntry):
        """
        Clips this polygon (the subject) with the polygon <clip>.

        clip:    The clip polygon.
        sEntry:  Direction of the traversal at entry points of the subject.
        cEntry:  Direction of the traversal at entry points of the clipper.
                 True is forward, False backward, exit points get the
                 opposite direction:

                        sEntry cEntry
                 A|B      b      b      union
                 A&B      f      f      intersection
                 A-B      b      f      difference
                 B-A      f      b      reversed difference

        return:  List of new instances of Polygon.

        Both polygons are changed by the intersection vertices inserted and
        have to be regarded as consumed afterwards.
        """
        # phase one - find intersections
        nrOfIntersections = 0
        for s in self.iter():
            if s.intersect:
                continue
            sNext = self.next(s.next)
            # the clip polygon changes with every insertion, scan it freshly
            for c in clip.iter():
                if c.intersect:
                    continue
                cNext = clip.next(c.next)
                iSect = intersectEdges(s, sNext, c, cNext)
                if iSect is None:
                    continue
                point, alphaS, alphaC = iSect

                iS = Vertex(*point)
                iS.alpha = alphaS
                iS.intersect = True
                iS.entry = False
                iC = Vertex(*point)
                iC.alpha = alphaC
                iC.intersect = True
                iC.entry = False
                iS.neighbour = iC
                iC.neighbour = iS

                self.insert(iS, s, sNext)
                clip.insert(iC, c, cNext)
                nrOfIntersections += 1

        logger.debug("Polygon.clip() %d intersections found", nrOfIntersections)

        if not nrOfIntersections:
            return self.clipDisjoint(clip, sEntry, cEntry)

        # phase two - identify entry/exit points
        sEntry ^= self.first.isInside(clip)
        for s in self.iter():
            if s.intersect:
                s.entry = sEntry
                sEntry = not sEntry

        cEntry ^= clip.first.isInside(self)
        for c in clip.iter():
            if c.intersect:
                c.entry = cEntry
                cEntry = not cEntry

        # phase three - construct the list of clipped polygons
        clippedList = []
        while self.unprocessed():
            current = self.firstIntersect()
            clipped = Polygon()
            clipped.add(current.copy())
            while True:
                current.setChecked()
                forward = current.entry
                while True:
                    current = current.next if forward else current.prev
                    clipped.add(current.copy())
                    if current.intersect:
                        break

                current = current.neighbour
                if current.checked:
                    break

            # the trace ends on the start point, which is not repeated
            last = clipped.first.prev
            if last is not clipped.first and last.point() == clipped.first.point():
                clipped.remove(last)
            clippedList.append(clipped)

        logger.debug("Polygon.clip() %d polygons traced", len(clippedList))
        return clippedList

    def clipDisjoint(self, clip, sEntry, cEntry):
        # Result of the clipping, when the boundaries of the polygons do not
        # cross. Either they are disjoint or one contains the other. A
        # polygon with a hole is not representable, when the subtracted
        # polygon lies inside the other, the difference returns the other
        # one unchanged.
        sInside = self.first.isInside(clip)
        cInside = clip.first.isInside(self)
        logger.debug("Polygon.clip() no intersections, subject inside: %s, clipper inside: %s",
                     sInside, cInside)

        if sEntry and cEntry:       # intersection
            if sInside:
                return [self.copy()]
            elif cInside:
                return [clip.copy()]
            else:
                return []
        elif not sEntry and not cEntry:     # union
            if sInside:
                return [clip.copy()]
            elif cInside:
                return [self.copy()]
            else:
                return [self.copy(), clip.copy()]
        elif cEntry:        # self - clip
            return [] if sInside else [self.copy()]
        else:               # clip - self
            return [] if cInside else [clip.copy()]
