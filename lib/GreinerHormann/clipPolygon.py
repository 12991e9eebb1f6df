import logging
logger = logging.getLogger("GreinerHormann.clipPolygon")

from defs.clipping import DefaultOperation, OperationSeeds
from .Polygon import Polygon

def clipPolygon(subject, clipper, operation=DefaultOperation):
    """
    Boolean operation of two simple polygons, given as point lists.

    subject:   List of points (tuples, mathutils.Vector, ...) of the subject
               polygon, without repeating the first point at the end.
    clipper:   List of points of the clip polygon, as for <subject>.
    operation: One of 'union', 'intersection', 'difference' (subject minus
               clipper) or 'reversed-diff' (clipper minus subject).
    return:    List of polygons, each a list of tuples (x,y). The first point
               is not repeated at the end.

    The polygons must not intersect themselves. For such input the result
    is undefined.
    """
    if operation not in OperationSeeds:
        raise ValueError('clipPolygon: Unsupported operation %r.' % (operation,))
    if len(subject) < 3 or len(clipper) < 3:
        raise ValueError('clipPolygon: A polygon requires at least three points.')

    subjectPoly = Polygon.fromPointlist(subject)
    clipperPoly = Polygon.fromPointlist(clipper)

    logger.debug("clipPolygon() %s of %d and %d vertices", operation, len(subject), len(clipper))
    if operation == 'reversed-diff':
        clipped = subjectPoly.reversedDifference(clipperPoly)
    elif operation == 'union':
        clipped = subjectPoly.union(clipperPoly)
    elif operation == 'intersection':
        clipped = subjectPoly.intersection(clipperPoly)
    else:
        clipped = subjectPoly.difference(clipperPoly)

    return [poly.points() for poly in clipped]
